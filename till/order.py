"""The in-progress order and its bill arithmetic."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from uuid import UUID, uuid4

from till.config import TAX_RATE
from till.models import LineItem, round_money
from till.rendering import render_receipt


class Order:
    """
    One order being rung up at the till.

    Subtotal is re-rounded to cents after every add/remove. Amount owed is
    only refreshed by compute_amount_owed(), so call it before showing a bill.
    """

    def __init__(self, server_id: int, tax_rate: Decimal = TAX_RATE) -> None:
        self.id: UUID = uuid4()
        self.server_id = server_id
        self.items: list[LineItem] = []
        self.subtotal = Decimal("0.00")
        self.tip = Decimal("0.00")
        self.amount_owed = Decimal("0.00")
        self._tax_rate = tax_rate

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    @property
    def is_empty(self) -> bool:
        return not self.items

    def add_item(self, name: str, quantity: int, price: Decimal) -> None:
        """Append a line item; bounds on quantity and price are the caller's job."""
        item = LineItem(name=name, quantity=quantity, price=price)
        subtotal = round_money(self.subtotal + item.line_total)
        self.items.append(item)
        self.subtotal = subtotal

    def remove_item(self, index: int) -> LineItem | None:
        """Drop the line at index. Out-of-range indexes leave the order untouched."""
        if not (0 <= index < len(self.items)):
            return None
        subtotal = round_money(self.subtotal - self.items[index].line_total)
        removed = self.items.pop(index)
        self.subtotal = subtotal
        return removed

    def set_tip(self, amount: Decimal) -> None:
        # Negative tips are accepted as-is.
        self.tip = amount

    def tax_amount(self) -> Decimal:
        return self.subtotal * self._tax_rate

    def compute_amount_owed(self) -> Decimal:
        self.amount_owed = round_money(self.subtotal + self.tax_amount() + self.tip)
        return self.amount_owed

    def line_totals(self) -> list[Decimal]:
        return [item.line_total for item in self.items]

    def render(self, now: datetime | None = None) -> str:
        return render_receipt(self, now=now)
