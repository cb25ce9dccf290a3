"""Domain entities and errors of the inventory."""

from __future__ import annotations

from dataclasses import dataclass


class InventoryError(Exception):
    """Base class for every error the inventory raises."""

    default_message = "inventory error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class NotEnoughReservedError(InventoryError):
    """Fewer units are reserved than a cancellation asks to release."""

    default_message = "not enough reserved stock"


class NotEnoughStockError(InventoryError):
    """Fewer units are available than a reservation asks for."""

    default_message = "not enough available stock"


class ItemNotFoundError(InventoryError):
    """No inventory record exists for the requested product."""

    default_message = "item not found"


@dataclass(frozen=True)
class Item:
    """Stock levels of one product."""

    product_id: int
    total_quantity: int
    reserved_quantity: int
    available_quantity: int