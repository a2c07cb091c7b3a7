from .page import render_debug_page

__all__ = ["render_debug_page"]
