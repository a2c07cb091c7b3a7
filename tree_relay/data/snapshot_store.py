from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any

# child of the "tree-relay" logger, so it follows the configured LOG_LEVEL
log = logging.getLogger("tree-relay.store")


class SnapshotStore:
    """JSON file holding the last snapshot so a restart picks it back up."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        self._pending: set[asyncio.Future] = set()

    def load(self) -> Any | None:
        if not self.path.exists():
            return None
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log.error("failed to load tree from %s: %s", self.path, exc)
            return None
        log.info("loaded existing tree data from %s", self.path)
        return data

    def save(self, payload: Any) -> bool:
        # one temp file per write; concurrent saves must not share it
        tmp_name = None
        try:
            text = json.dumps(payload, indent=2, ensure_ascii=False)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=self.path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_name = tmp.name
                tmp.write(text)
            os.replace(tmp_name, self.path)
        except (OSError, TypeError, ValueError) as exc:
            log.error("failed to save tree to %s: %s", self.path, exc)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            return False
        return True

    def save_in_background(self, payload: Any) -> asyncio.Future:
        """Write on the loop's default executor; the caller need not await."""
        fut = asyncio.get_running_loop().run_in_executor(None, self.save, payload)
        self._pending.add(fut)
        fut.add_done_callback(self._pending.discard)
        return fut

    @property
    def pending(self) -> int:
        return len(self._pending)

    async def drain(self) -> None:
        if self._pending:
            await asyncio.gather(*list(self._pending))
