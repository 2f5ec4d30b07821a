"""Editable static menu configuration."""

from __future__ import annotations

# Prices are kept as text so they convert to Decimal without float error.
MENU_PRICES: dict[str, str] = {
    "Burger": "9.99",
    "Pizza": "12.99",
    "Salad": "7.99",
    "Fries": "3.99",
    "Spaghetti": "10.99",
    "Lasagna": "11.99",
    "Ravioli": "9.99",
    "Tiramisu": "6.99",
    "Coke": "1.99",
    "Coffee": "2.49",
    "Combo Meal": "15.99",
    "Kids Meal": "8.99",
}
