"""Static menu catalog."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from decimal import Decimal
from types import MappingProxyType

from till.constant import MENU_PRICES
from till.models import round_money


class MenuCatalog:
    """Read-only mapping of item name to unit price, fixed at startup."""

    def __init__(self, prices: Mapping[str, Decimal]) -> None:
        for name, price in prices.items():
            if price < 0:
                raise ValueError(f"price for {name!r} must not be negative")
        self._prices: Mapping[str, Decimal] = MappingProxyType(dict(prices))

    @classmethod
    def from_price_table(cls, table: Mapping[str, str]) -> MenuCatalog:
        """Build a catalog from name -> decimal price text."""
        return cls({name: round_money(Decimal(text)) for name, text in table.items()})

    def lookup(self, name: str) -> Decimal | None:
        """Exact, case-sensitive price lookup; None when the item is not sold."""
        return self._prices.get(name)

    def list(self) -> list[tuple[str, Decimal]]:
        return list(self._prices.items())

    def __contains__(self, name: object) -> bool:
        return name in self._prices

    def __iter__(self) -> Iterator[str]:
        return iter(self._prices)

    def __len__(self) -> int:
        return len(self._prices)


def build_default_catalog() -> MenuCatalog:
    """Catalog used by the till at startup."""
    return MenuCatalog.from_price_table(MENU_PRICES)
