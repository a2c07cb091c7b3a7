"""Plain-text rendering of a snapshot as a box-drawing directory tree."""

from __future__ import annotations

from datetime import datetime
from typing import Any

RULE = "=" * 37

BRANCH = "├── "
LAST_BRANCH = "└── "
PIPE = "│   "
SPACE = "    "


def _text(value: Any) -> str:
    return "" if value is None else str(value)


def format_updated(timestamp: Any) -> str:
    """Local time for a seconds-since-epoch value, e.g. ``1/1/1970, 12:16:40 AM``."""
    if isinstance(timestamp, str) or timestamp is None:
        return "Invalid Date"
    try:
        dt = datetime.fromtimestamp(float(timestamp))
    except (TypeError, ValueError, OverflowError, OSError):
        return "Invalid Date"
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


def _node_line(node: dict, prefix: str, is_last: bool) -> str:
    connector = LAST_BRANCH if is_last else BRANCH
    line = f"{prefix}{connector}{_text(node.get('name'))} [{_text(node.get('className'))}]"
    if node.get("lineCount"):
        line += f" ({node['lineCount']} lines)"
    # childCount comes from the plugin and may not match len(children)
    if node.get("childCount"):
        line += f" ({node['childCount']} children)"
    return line + "\n"


def node_to_text(node: Any, prefix: str = "", is_last: bool = True) -> str:
    """Depth-first rendering of ``node`` and its descendants.

    Walks an explicit stack, so tree depth is not bounded by the
    interpreter's recursion limit.
    """
    out = []
    stack = [(node, prefix, is_last)]
    while stack:
        current, current_prefix, current_last = stack.pop()
        if not isinstance(current, dict):
            current = {}
        out.append(_node_line(current, current_prefix, current_last))
        children = current.get("children")
        if isinstance(children, list) and children:
            child_prefix = current_prefix + (SPACE if current_last else PIPE)
            last = len(children) - 1
            for i in range(last, -1, -1):
                stack.append((children[i], child_prefix, i == last))
    return "".join(out)


def tree_to_text(tree: Any) -> str:
    if not isinstance(tree, dict):
        tree = {}
    out = [
        f"{RULE}\n",
        "  PROJECT DIRECTORY TREE\n",
        f"  Game: {tree.get('name') or 'Unknown'}\n",
        f"  Updated: {format_updated(tree.get('timestamp'))}\n",
        f"{RULE}\n\n",
    ]
    containers = tree.get("containers")
    if isinstance(containers, list):
        last = len(containers) - 1
        for i, container in enumerate(containers):
            out.append(node_to_text(container, "", i == last))
            out.append("\n")
    return "".join(out)
