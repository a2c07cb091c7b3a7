from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

CONNECTED_WINDOW_MS = 30_000


def now_ms() -> int:
    return int(time.time() * 1000)


def placeholder_tree() -> dict[str, Any]:
    return {"name": "Not connected", "timestamp": 0, "containers": []}


@dataclass
class TreeState:
    """The single snapshot held by the relay plus the time it last changed.

    The snapshot is whatever JSON value the plugin last sent; nothing here
    assumes it has the usual name/timestamp/containers shape.
    """

    tree: Any = field(default_factory=placeholder_tree)
    last_update: int = 0
    clock: Callable[[], int] = now_ms

    def replace(self, tree: Any) -> None:
        self.tree = tree
        self.last_update = self.clock()

    @property
    def name(self) -> Any:
        if isinstance(self.tree, dict):
            return self.tree.get("name")
        return None

    @property
    def container_count(self) -> int:
        containers = self.tree.get("containers") if isinstance(self.tree, dict) else None
        return len(containers) if isinstance(containers, list) else 0

    def status(self) -> dict[str, Any]:
        since = self.clock() - self.last_update
        return {
            "connected": since < CONNECTED_WINDOW_MS,
            "lastUpdate": self.last_update,
            "timeSinceUpdate": since,
            "gameName": self.name or "Unknown",
            "containerCount": self.container_count,
        }
