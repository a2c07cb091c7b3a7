from .models import CONNECTED_WINDOW_MS, TreeState, now_ms, placeholder_tree

__all__ = ["CONNECTED_WINDOW_MS", "TreeState", "now_ms", "placeholder_tree"]
