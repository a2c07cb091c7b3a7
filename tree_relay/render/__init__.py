from .text import format_updated, node_to_text, tree_to_text

__all__ = ["format_updated", "node_to_text", "tree_to_text"]
