import dataclasses

import pytest

from inventory.entity import (
    InventoryError,
    Item,
    ItemNotFoundError,
    NotEnoughReservedError,
    NotEnoughStockError,
)


@pytest.mark.parametrize(
    ("error_class", "message"),
    [
        (NotEnoughReservedError, "not enough reserved stock"),
        (NotEnoughStockError, "not enough available stock"),
        (ItemNotFoundError, "item not found"),
    ],
)
def test_default_messages(error_class, message):
    assert str(error_class()) == message


@pytest.mark.parametrize(
    ("error_class", "message"),
    [
        (NotEnoughReservedError, "not enough reserved stock"),
        (NotEnoughStockError, "not enough available stock"),
        (ItemNotFoundError, "item not found"),
    ],
)
def test_errors_share_base(error_class, message):
    error = error_class()
    assert isinstance(error, InventoryError)
    assert str(error) == message
    others = {NotEnoughReservedError, NotEnoughStockError, ItemNotFoundError} - {error_class}
    assert not any(isinstance(error, other) for other in others)


def test_custom_message_kept():
    assert str(InventoryError("storage failed")) == "storage failed"


def test_item_fields_and_equality():
    item = Item(product_id=3, total_quantity=10, reserved_quantity=4, available_quantity=6)
    assert item.product_id == 3
    assert item == Item(3, 10, 4, 6)


def test_item_is_immutable():
    item = Item(1, 5, 0, 5)
    with pytest.raises(dataclasses.FrozenInstanceError):
        item.available_quantity = 0
    assert item.available_quantity == 5
    assert item == Item(1, 5, 0, 5)