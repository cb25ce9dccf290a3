import pytest
from sqlalchemy import create_engine, text

from inventory.entity import (
    InventoryError,
    Item,
    ItemNotFoundError,
    NotEnoughReservedError,
    NotEnoughStockError,
)
from inventory.postgres import Database
from inventory.repo import Storage
from inventory.usecase import (
    CancelReservationItemDTO,
    CancelReservationItemUseCase,
    ReserveItemDTO,
    ReserveItemUseCase,
)


@pytest.fixture
def database(tmp_path):
    db = Database(create_engine(f"sqlite:///{tmp_path / 'inventory.db'}"))
    with db.transaction() as conn:
        conn.execute(
            text(
                "CREATE TABLE inventory ("
                "product_id INTEGER PRIMARY KEY, total_quantity INTEGER, "
                "reserved_quantity INTEGER, available_quantity INTEGER)"
            )
        )
        conn.execute(text("INSERT INTO inventory VALUES (1, 10, 2, 8)"))
    yield db
    db.close()


@pytest.fixture
def storage(database):
    return Storage(database)


def read_item(storage, product_id=1):
    with storage.transaction() as tx:
        return tx.get_item_by_product_id(product_id)


def test_get_item(storage):
    assert read_item(storage) == Item(1, 10, 2, 8)


def test_get_missing_item(storage):
    with pytest.raises(ItemNotFoundError):
        read_item(storage, 99)


def test_reserve_item_updates_counts(storage):
    with storage.transaction() as tx:
        tx.reserve_item(1, 3)
    item = read_item(storage)
    assert item.reserved_quantity == 5
    assert item.reserved_quantity + item.available_quantity == item.total_quantity


def test_reserve_item_insufficient(storage):
    with pytest.raises(NotEnoughStockError):
        with storage.transaction() as tx:
            tx.reserve_item(1, 9)
    assert read_item(storage) == Item(1, 10, 2, 8)


def test_cancel_reservation_insufficient(storage):
    with pytest.raises(NotEnoughReservedError):
        with storage.transaction() as tx:
            tx.cancel_reservation(1, 3)
    assert read_item(storage) == Item(1, 10, 2, 8)


def test_transaction_rolls_back_earlier_changes(storage):
    with pytest.raises(NotEnoughStockError):
        with storage.transaction() as tx:
            tx.reserve_item(1, 8)
            tx.reserve_item(1, 1)
    assert read_item(storage) == Item(1, 10, 2, 8)


def test_storage_error_is_wrapped(storage, database):
    with database.transaction() as conn:
        conn.execute(text("DROP TABLE inventory"))
    with pytest.raises(InventoryError, match="^get item by productID storage err"):
        read_item(storage)


def test_use_cases_round_trip(storage):
    ReserveItemUseCase(storage).reserve_item(ReserveItemDTO(1, 8))
    assert read_item(storage).available_quantity == 0
    CancelReservationItemUseCase(storage).cancel_reservation(CancelReservationItemDTO(1, 8))
    assert read_item(storage) == Item(1, 10, 2, 8)


def test_use_case_rejects_overreservation(storage):
    with pytest.raises(NotEnoughStockError):
        ReserveItemUseCase(storage).reserve_item(ReserveItemDTO(1, 11))
    assert read_item(storage) == Item(1, 10, 2, 8)