from __future__ import annotations

import argparse
import os
from dataclasses import dataclass

from dotenv import load_dotenv


DEFAULT_PORT = 21326
DEFAULT_DATA_FILE = "tree-data.json"
ENV_FILE = "~/.tree-relay.env"


def _env_int(name: str, default: int, min_value: int | None = None) -> int:
    raw = os.environ.get(name)
    if raw is None:
        value = default
    else:
        value = int(raw)
    if min_value is not None:
        value = max(min_value, value)
    return value


def _env_str(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    data_file: str
    log_level: str


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        prog="tree-relay",
        description="Relay Roblox Studio directory trees to editor clients",
    )
    ap.add_argument("port", nargs="?", type=int, default=None, help=f"listen port (default {DEFAULT_PORT})")
    return ap.parse_args(argv)


def load_settings(argv: list[str] | None = None) -> Settings:
    load_dotenv(os.path.expanduser(ENV_FILE))
    args = _parse_args(argv)
    port = args.port if args.port is not None else _env_int("TREE_RELAY_PORT", DEFAULT_PORT)
    return Settings(
        host=_env_str("TREE_RELAY_HOST", "0.0.0.0"),
        port=max(1, int(port)),
        data_file=_env_str("TREE_RELAY_DATA_FILE", DEFAULT_DATA_FILE),
        log_level=_env_str("LOG_LEVEL", "INFO").upper(),
    )
