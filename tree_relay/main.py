from __future__ import annotations

import sys

from tree_relay.config import load_settings
from tree_relay.runtime import run_main


def main(argv: list[str] | None = None) -> None:
    run_main(load_settings(sys.argv[1:] if argv is None else argv))


if __name__ == "__main__":
    main()
