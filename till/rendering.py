"""Text rendering for the menu listing, removal list and receipt."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from till.data import MenuCatalog
from till.models import LineItem, round_money

if TYPE_CHECKING:
    from till.order import Order

RULE_TOP = "┌─────────────────────────────────────────────────────────────┐"
RULE_MID = "├─────────────────────────────────────────────────────────────┤"
RULE_COLUMNS = "├──────┼────────────┼──────────┼────────┼─────────────────────┤"
RULE_FOOT = "├──────┴────────────┴──────────┴────────┴─────────────────────┤"
RULE_BOTTOM = "└─────────────────────────────────────────────────────────────┘"

RECEIPT_DATE_FORMAT = "%Y-%m-%d"
RECEIPT_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def format_menu_listing(catalog: MenuCatalog) -> list[str]:
    """Lines printed at startup: heading, one row per item, blank line."""
    lines = ["Menu:", f"{'Item':<12} {'Price':<6}", "-" * 19]
    lines.extend(f"{name:<12} ${price:.2f}" for name, price in catalog.list())
    lines.append("")
    return lines


def format_removal_choices(items: list[LineItem]) -> list[str]:
    """Numbered (1-based) current lines shown before asking what to remove."""
    lines = ["Current Order:"]
    for number, item in enumerate(items, start=1):
        lines.append(f"{number}. {item.name} x {item.quantity} - ${item.price:.2f}")
    return lines


def format_line_item_row(number: int, item: LineItem) -> str:
    # Stored in UTC, shown in local time.
    stamp = item.created_at.astimezone().strftime(RECEIPT_TIMESTAMP_FORMAT)
    return f"│ {number:<4} │ {item.name:<10} │ {item.quantity:<8} │ ${item.price:<5.2f} │ {stamp} │"


def render_receipt(order: Order, now: datetime | None = None) -> str:
    """
    Render the boxed bill for an order.

    Shows the order's current amount_owed as-is, so callers refresh it with
    Order.compute_amount_owed() first.
    """
    order_date = (now or datetime.now()).astimezone().strftime(RECEIPT_DATE_FORMAT)
    tax = round_money(order.tax_amount())

    lines = [
        RULE_TOP,
        f"│ Order ID: {order.id}",
        f"│ Server ID: {order.server_id}",
        f"│ Order Date: {order_date}",
        RULE_MID,
        "│ Order Details:                                              │",
        RULE_MID,
        "│ No.  │ Item       │ Quantity │ Price  │ Date                │",
        RULE_COLUMNS,
    ]
    lines.extend(format_line_item_row(number, item) for number, item in enumerate(order.items, start=1))
    lines.extend(
        [
            RULE_FOOT,
            f"│ Order Total: ${order.subtotal:<8.2f}                                      │",
            f"│ Taxes: ${tax:<8.2f}                                            │",
            f"│ Tip: ${round_money(order.tip):<8.2f}                                              │",
            f"│ Amount Owed: ${order.amount_owed:<8.2f}                                      │",
            RULE_BOTTOM,
        ]
    )
    return "\n".join(lines)
