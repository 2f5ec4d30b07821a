"""Domain models for the till."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal

from till.config import CURRENCY_QUANTUM


def round_money(amount: Decimal) -> Decimal:
    """Round a currency amount to whole cents, half away from zero."""
    return amount.quantize(CURRENCY_QUANTUM, rounding=ROUND_HALF_UP)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class LineItem:
    """One menu item bought at a fixed quantity and snapshotted unit price."""

    name: str
    quantity: int
    price: Decimal
    created_at: datetime = field(default_factory=_utc_now)

    @property
    def line_total(self) -> Decimal:
        return self.price * self.quantity
