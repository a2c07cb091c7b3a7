from __future__ import annotations

import json
import logging

from aiohttp import web

from tree_relay import __version__
from tree_relay.dashboard import render_debug_page
from tree_relay.data import SnapshotStore
from tree_relay.domain import TreeState, now_ms
from tree_relay.infra import get_logger
from tree_relay.render import tree_to_text

MAX_BODY_BYTES = 10 * 1024 * 1024
SERVER_NAME = "LiveDirectoryTree"

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


def _reject_constant(token: str):
    raise ValueError(f"{token} is not valid JSON")


def _error(message: str, status: int) -> web.Response:
    return web.json_response({"error": message}, status=status)


def _middleware(log: logging.Logger):
    @web.middleware
    async def relay_middleware(request: web.Request, handler) -> web.StreamResponse:
        if request.method == "OPTIONS":
            return web.Response(status=204, headers=CORS_HEADERS)
        try:
            resp = await handler(request)
        except (web.HTTPNotFound, web.HTTPMethodNotAllowed):
            resp = _error("Not found", 404)
        except web.HTTPException as exc:
            resp = _error(exc.text or exc.reason, exc.status)
        except Exception as exc:
            log.exception("error handling %s %s", request.method, request.path)
            resp = _error(str(exc), 500)
        resp.headers.update(CORS_HEADERS)
        return resp

    return relay_middleware


def create_app(
    state: TreeState,
    store: SnapshotStore,
    *,
    port: int | str = "",
    log: logging.Logger | None = None,
) -> web.Application:
    log = log or get_logger("tree-relay")

    async def handle_ping(_req: web.Request) -> web.Response:
        return web.json_response(
            {"status": "ok", "server": SERVER_NAME, "version": __version__, "timestamp": now_ms()}
        )

    async def handle_sync(req: web.Request) -> web.Response:
        raw = await req.read()
        try:
            data = json.loads(raw, parse_constant=_reject_constant)
        except ValueError as exc:
            return _error(f"Invalid JSON: {exc}", 400)
        state.replace(data)
        store.save_in_background(data)
        log.info("Received sync: %s (%d bytes)", state.name or "Game", len(raw))
        return web.json_response({"status": "ok", "received": True})

    async def handle_tree(_req: web.Request) -> web.Response:
        return web.json_response(state.tree)

    async def handle_tree_text(_req: web.Request) -> web.Response:
        return web.Response(text=tree_to_text(state.tree), content_type="text/plain")

    async def handle_status(_req: web.Request) -> web.Response:
        return web.json_response(state.status())

    async def handle_html(_req: web.Request) -> web.Response:
        return web.Response(text=render_debug_page(port), content_type="text/html")

    app = web.Application(client_max_size=MAX_BODY_BYTES, middlewares=[_middleware(log)])
    app.router.add_get("/ping", handle_ping, allow_head=False)
    app.router.add_post("/sync", handle_sync)
    app.router.add_get("/tree", handle_tree, allow_head=False)
    app.router.add_get("/tree/text", handle_tree_text, allow_head=False)
    app.router.add_get("/status", handle_status, allow_head=False)
    app.router.add_get("/", handle_html, allow_head=False)
    return app
