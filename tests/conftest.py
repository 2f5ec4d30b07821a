from __future__ import annotations

import io
from decimal import Decimal

import pytest
from rich.console import Console

from till.data import MenuCatalog, build_default_catalog
from till.order import Order
from till.session import TillSession


@pytest.fixture
def catalog() -> MenuCatalog:
    return build_default_catalog()


@pytest.fixture
def order() -> Order:
    return Order(123)


@pytest.fixture
def burger_order(order: Order) -> Order:
    order.add_item("Burger", 2, Decimal("9.99"))
    return order


class ScriptedTill:
    """A TillSession fed from canned input lines, capturing plain output."""

    def __init__(self, catalog: MenuCatalog, order: Order, lines: list[str], log_path) -> None:
        self.out = io.StringIO()
        console = Console(file=self.out, width=200, color_system=None, highlight=False)
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        self.session = TillSession(catalog, order, console=console, stdin=stdin, debug_log_path=log_path)

    @property
    def output(self) -> str:
        return self.out.getvalue()

    @property
    def output_lines(self) -> list[str]:
        return [line.rstrip() for line in self.output.splitlines()]


@pytest.fixture
def scripted_till(catalog, order, tmp_path):
    def _make(*lines: str) -> ScriptedTill:
        return ScriptedTill(catalog, order, list(lines), tmp_path / "till-debug.log")

    return _make
