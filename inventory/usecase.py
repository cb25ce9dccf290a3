"""Reservation use cases and the repository contract they rely on."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from typing import Protocol

from inventory.entity import Item, NotEnoughReservedError, NotEnoughStockError


class TxRepo(Protocol):
    """Inventory operations available inside a transaction."""

    def get_item_by_product_id(self, product_id: int) -> Item:
        """Return the stock levels of a product."""
        ...

    def reserve_item(self, product_id: int, quantity: int) -> None:
        """Move units from available to reserved."""
        ...

    def cancel_reservation(self, product_id: int, quantity: int) -> None:
        """Move units from reserved back to available."""
        ...


class RepoTransactor(Protocol):
    """Something that opens transactions over the inventory."""

    def transaction(self) -> AbstractContextManager[TxRepo]:
        """Open a transaction; it commits on success and rolls back on error."""
        ...


@dataclass(frozen=True)
class ReserveItemDTO:
    product_id: int
    quantity: int


@dataclass(frozen=True)
class CancelReservationItemDTO:
    product_id: int
    quantity: int


class ReserveItemUseCase:
    """Reserves units of a product if enough are available."""

    def __init__(self, transactor: RepoTransactor) -> None:
        self._transactor = transactor

    def reserve_item(self, dto: ReserveItemDTO) -> None:
        with self._transactor.transaction() as tx:
            item = tx.get_item_by_product_id(dto.product_id)
            if item.available_quantity < dto.quantity:
                raise NotEnoughStockError()
            tx.reserve_item(dto.product_id, dto.quantity)


class CancelReservationItemUseCase:
    """Releases reserved units of a product back to available stock."""

    def __init__(self, transactor: RepoTransactor) -> None:
        self._transactor = transactor

    def cancel_reservation(self, dto: CancelReservationItemDTO) -> None:
        with self._transactor.transaction() as tx:
            item = tx.get_item_by_product_id(dto.product_id)
            if item.reserved_quantity < dto.quantity:
                raise NotEnoughReservedError()
            tx.cancel_reservation(dto.product_id, dto.quantity)