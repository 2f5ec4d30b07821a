"""Till errors and their user-facing messages."""

from __future__ import annotations


class errmsg:
    """Messages shown at the till when input is rejected."""

    INVALID_CHOICE = "Invalid choice. Please try again."
    INVALID_ITEM = "Invalid item. Please try again."
    INVALID_QUANTITY = "Invalid quantity. Please try again."
    INVALID_ITEM_NUMBER = "Invalid item number. Please try again."
    INVALID_TIP = "Invalid tip amount. Please try again."
    ORDER_EMPTY = "Order is empty."
    NO_ITEMS_FOR_TIP = "No items in the order. Cannot add tip."
    ITEM_NOT_IN_ORDER = "No item with that number."


class TillError(Exception):
    """A rejected command; the order is left untouched."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message


class InvalidMenuSelection(TillError):
    message = errmsg.INVALID_CHOICE


class UnknownItem(TillError):
    message = errmsg.INVALID_ITEM


class InvalidQuantity(TillError):
    message = errmsg.INVALID_QUANTITY


class InvalidItemNumber(TillError):
    message = errmsg.INVALID_ITEM_NUMBER


class ItemNotInOrder(TillError):
    message = errmsg.ITEM_NOT_IN_ORDER


class InvalidTipAmount(TillError):
    message = errmsg.INVALID_TIP


class EmptyOrderForTip(TillError):
    message = errmsg.NO_ITEMS_FOR_TIP


class EmptyOrderForDisplay(TillError):
    message = errmsg.ORDER_EMPTY


class EmptyOrderForRemoval(TillError):
    message = errmsg.ORDER_EMPTY


class InputClosedError(Exception):
    """Standard input ended while the till was waiting for a line."""
