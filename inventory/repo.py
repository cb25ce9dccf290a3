"""SQL storage for inventory records."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy import text
from sqlalchemy.engine import Connection
from sqlalchemy.exc import SQLAlchemyError

from inventory.entity import (
    InventoryError,
    Item,
    ItemNotFoundError,
    NotEnoughReservedError,
    NotEnoughStockError,
)
from inventory.postgres import Database

_GET_ITEM = text(
    """
    SELECT product_id, total_quantity, reserved_quantity, available_quantity
    FROM inventory
    WHERE product_id = :product_id
    """
)

_RESERVE_ITEM = text(
    """
    UPDATE inventory
    SET reserved_quantity = reserved_quantity + :quantity,
        available_quantity = available_quantity - :quantity
    WHERE product_id = :product_id
      AND available_quantity >= :quantity
    """
)

_CANCEL_RESERVATION = text(
    """
    UPDATE inventory
    SET reserved_quantity = reserved_quantity - :quantity,
        available_quantity = available_quantity + :quantity
    WHERE product_id = :product_id
      AND reserved_quantity >= :quantity
    """
)


class Queries:
    """Inventory queries run over one connection."""

    def __init__(self, connection: Connection) -> None:
        self._conn = connection

    def get_item_by_product_id(self, product_id: int) -> Item:
        try:
            row = self._conn.execute(_GET_ITEM, {"product_id": product_id}).one_or_none()
        except SQLAlchemyError as exc:
            raise InventoryError(f"get item by productID storage err: {exc}") from exc
        if row is None:
            raise ItemNotFoundError()
        return Item(**row._mapping)

    def reserve_item(self, product_id: int, quantity: int) -> None:
        try:
            result = self._conn.execute(
                _RESERVE_ITEM, {"product_id": product_id, "quantity": quantity}
            )
        except SQLAlchemyError as exc:
            raise InventoryError(f"reserve item storage err: {exc}") from exc
        if result.rowcount == 0:
            raise NotEnoughStockError()

    def cancel_reservation(self, product_id: int, quantity: int) -> None:
        try:
            result = self._conn.execute(
                _CANCEL_RESERVATION, {"product_id": product_id, "quantity": quantity}
            )
        except SQLAlchemyError as exc:
            raise InventoryError(f"cancel reservation storage err: {exc}") from exc
        if result.rowcount == 0:
            raise NotEnoughReservedError()


class Storage:
    """Opens transactions over the inventory table."""

    def __init__(self, database: Database) -> None:
        self._database = database

    @contextmanager
    def transaction(self) -> Iterator[Queries]:
        """Yield queries bound to a transaction that commits on success."""
        with self._database.transaction() as conn:
            yield Queries(conn)