"""Interactive till loop."""

from __future__ import annotations

import re
import sys
from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Callable, TextIO

from rich.console import Console

from till.config import MAX_QUANTITY, MAX_TIP_AMOUNT, resolve_debug_log_path
from till.data import MenuCatalog
from till.errors import (
    EmptyOrderForDisplay,
    EmptyOrderForRemoval,
    EmptyOrderForTip,
    InputClosedError,
    InvalidItemNumber,
    InvalidMenuSelection,
    InvalidQuantity,
    InvalidTipAmount,
    ItemNotInOrder,
    TillError,
    UnknownItem,
)
from till.models import round_money
from till.order import Order
from till.rendering import format_menu_listing, format_removal_choices

_UNSIGNED_INT = re.compile(r"\+?[0-9]+")

MENU_OPTIONS = (
    "User Selection Options:",
    "1. Add item to order",
    "2. Remove item from order",
    "3. Add tip",
    "4. Display order",
    "5. Exit",
)

ERROR_STYLE = "bold red"
OK_STYLE = "green"


def parse_unsigned(text: str) -> int | None:
    """Parse a whole non-negative number; None when the text is not one."""
    text = text.strip()
    if not _UNSIGNED_INT.fullmatch(text):
        return None
    return int(text)


def parse_quantity(text: str) -> int:
    quantity = parse_unsigned(text)
    if quantity is None or not 1 <= quantity <= MAX_QUANTITY:
        raise InvalidQuantity()
    return quantity


def parse_item_number(text: str) -> int:
    number = parse_unsigned(text)
    if number is None:
        raise InvalidItemNumber()
    return number


def parse_tip(text: str) -> Decimal:
    try:
        amount = Decimal(text.strip())
    except InvalidOperation:
        raise InvalidTipAmount() from None
    if not amount.is_finite() or abs(amount) > MAX_TIP_AMOUNT:
        raise InvalidTipAmount()
    return round_money(amount)


class TillSession:
    """Reads menu choices and applies them to a single order until exit."""

    def __init__(
        self,
        catalog: MenuCatalog,
        order: Order,
        console: Console | None = None,
        stdin: TextIO | None = None,
        debug_log_path: Path | None = None,
    ) -> None:
        self.catalog = catalog
        self.order = order
        self.console = console or Console(highlight=False)
        self.stdin = stdin or sys.stdin
        self._debug_log_path = debug_log_path or resolve_debug_log_path()
        self._handlers: dict[int, Callable[[], None]] = {
            1: self.add_item,
            2: self.remove_item,
            3: self.add_tip,
            4: self.display_order,
        }
        self._log_debug(f"session_init order_id={order.id} server_id={order.server_id}")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except OSError:
            # A broken debug log must not stop the till.
            return

    def say(self, text: str, style: str | None = None) -> None:
        self.console.print(text, style=style, markup=False, highlight=False, emoji=False, soft_wrap=True)

    def ask(self, prompt: str) -> str:
        self.console.print(prompt, end="", markup=False, highlight=False, emoji=False, soft_wrap=True)
        line = self.stdin.readline()
        if not line:
            raise InputClosedError(prompt.strip())
        return line.strip()

    def show_menu(self) -> None:
        for line in format_menu_listing(self.catalog):
            self.say(line)

    def run(self) -> None:
        """Show the menu and loop until option 5 is chosen."""
        self.show_menu()
        while True:
            for line in MENU_OPTIONS:
                self.say(line)
            raw = self.ask("Enter your choice: ")
            try:
                if not self.dispatch(raw):
                    break
            except TillError as exc:
                self._log_debug(f"rejected error={type(exc).__name__} input={raw!r}")
                self.say(exc.message, style=ERROR_STYLE)

    def dispatch(self, raw_choice: str) -> bool:
        """Run one top-level choice. Returns False when the till should stop."""
        choice = parse_unsigned(raw_choice)
        self._log_debug(f"dispatch choice={choice!r}")
        if choice == 5:
            self.say("Exiting...")
            self._log_debug(f"exit order_id={self.order.id}")
            return False
        handler = self._handlers.get(choice) if choice is not None else None
        if handler is None:
            raise InvalidMenuSelection()
        handler()
        return True

    def add_item(self) -> None:
        name = self.ask("Enter item name: ")
        price = self.catalog.lookup(name)
        if price is None:
            raise UnknownItem()
        quantity = parse_quantity(self.ask("Enter quantity: "))
        self.order.add_item(name, quantity, price)
        self._log_debug(f"item_added name={name!r} qty={quantity} subtotal={self.order.subtotal}")
        self.say("Item added to order.", style=OK_STYLE)

    def remove_item(self) -> None:
        if self.order.is_empty:
            raise EmptyOrderForRemoval()
        for line in format_removal_choices(self.order.items):
            self.say(line)
        number = parse_item_number(self.ask("Enter the item number to remove: "))
        removed = self.order.remove_item(number - 1)
        if removed is None:
            raise ItemNotInOrder()
        self._log_debug(f"item_removed name={removed.name!r} subtotal={self.order.subtotal}")
        self.say("Item removed from order.", style=OK_STYLE)

    def add_tip(self) -> None:
        if self.order.subtotal <= 0:
            raise EmptyOrderForTip()
        amount = parse_tip(self.ask("Enter tip amount: $"))
        self.order.set_tip(amount)
        self._log_debug(f"tip_set amount={amount}")
        self.say("Tip added to order.", style=OK_STYLE)

    def display_order(self) -> None:
        if self.order.is_empty:
            raise EmptyOrderForDisplay()
        self.order.compute_amount_owed()
        self._log_debug(f"display amount_owed={self.order.amount_owed}")
        self.say(self.order.render())
