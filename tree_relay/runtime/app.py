from __future__ import annotations

import asyncio
import signal

from aiohttp import web

from tree_relay.config import Settings
from tree_relay.data import SnapshotStore
from tree_relay.domain import TreeState
from tree_relay.infra import get_logger
from tree_relay.server import create_app

BANNER = """
  Live Directory Tree Server running on http://localhost:{port}

  Endpoints:
    GET  /ping      - Health check
    POST /sync      - Receive tree from Roblox
    GET  /tree      - Get tree as JSON
    GET  /tree/text - Get tree as plain text
    GET  /status    - Connection status
    GET  /          - Debug web UI

  Waiting for Roblox Studio connection..."""


class App:
    """Owns the relay state, its store and the HTTP runner for one process."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self.log = get_logger("tree-relay", settings.log_level)
        self.store = SnapshotStore(settings.data_file)
        self.state = TreeState()
        self._stop = asyncio.Event()

    def load(self) -> None:
        tree = self.store.load()
        if tree is not None:
            self.state.tree = tree

    def stop(self) -> None:
        self._stop.set()

    def _install_signal_handlers(self) -> None:
        loop = asyncio.get_running_loop()
        for sig in (signal.SIGINT, signal.SIGTERM):
            try:
                loop.add_signal_handler(sig, self.stop)
            except (NotImplementedError, RuntimeError):
                # no loop signal support (Windows); Ctrl+C cancels run() instead
                pass

    async def run(self) -> None:
        self.load()
        app = create_app(self.state, self.store, port=self.settings.port, log=self.log)
        runner = web.AppRunner(app)
        await runner.setup()
        try:
            site = web.TCPSite(runner, self.settings.host, self.settings.port)
            await site.start()
            self.log.info(BANNER.format(port=self.settings.port))
            self._install_signal_handlers()
            await self._stop.wait()
        finally:
            await self.shutdown(runner)

    async def shutdown(self, runner: web.AppRunner) -> None:
        self.log.info("Shutting down server...")
        await self.store.drain()
        self.store.save(self.state.tree)
        await runner.cleanup()
        self.log.info("Server closed.")


def run_main(settings: Settings) -> None:
    try:
        asyncio.run(App(settings).run())
    except KeyboardInterrupt:
        pass
