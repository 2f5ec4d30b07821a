"""Entry point for the till console."""

from __future__ import annotations

import sys

from rich.console import Console

from till.config import resolve_server_id
from till.data import build_default_catalog
from till.errors import InputClosedError
from till.order import Order
from till.session import ERROR_STYLE, TillSession


def main() -> int:
    """Run one till session and return the process exit status."""
    console = Console(highlight=False)
    try:
        server_id = resolve_server_id()
    except ValueError as exc:
        console.print(str(exc), style=ERROR_STYLE, markup=False)
        return 2

    session = TillSession(build_default_catalog(), Order(server_id), console=console)
    try:
        session.run()
    except InputClosedError:
        console.print("Input closed. Exiting.", style=ERROR_STYLE, markup=False)
        return 1
    except KeyboardInterrupt:
        console.print()
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
