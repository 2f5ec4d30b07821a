"""Runtime configuration defaults for the till."""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path

TAX_RATE = Decimal("0.102")
CURRENCY_QUANTUM = Decimal("0.01")

# Largest accepted line quantity (unsigned 32-bit range).
MAX_QUANTITY = 4_294_967_295
MAX_TIP_AMOUNT = Decimal("1000000")

DEFAULT_SERVER_ID = 123
DEBUG_LOG_PATH = "/tmp/till-debug.log"

_SERVER_ID_ENV = "TILL_SERVER_ID"
_DEBUG_LOG_ENV = "TILL_DEBUG_LOG_PATH"


def resolve_server_id() -> int:
    """
    Resolve the server id for this till session.

    TILL_SERVER_ID wins when set; otherwise DEFAULT_SERVER_ID.
    """
    raw = os.environ.get(_SERVER_ID_ENV, "").strip()
    if not raw:
        return DEFAULT_SERVER_ID
    if not raw.isdigit():
        raise ValueError(f"{_SERVER_ID_ENV} must be a non-negative integer, got {raw!r}")
    return int(raw)


def resolve_debug_log_path() -> Path:
    """Resolve where debug lines are appended."""
    env_override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    return Path(env_override or DEBUG_LOG_PATH)
