# inventory

Stock reservation logic for an order-processing saga. Each product has a
total, a reserved and an available quantity. Reserving moves units from
available to reserved; compensating a reservation moves them back. Both
steps run inside a database transaction and refuse to go below zero.

## Installation

```
pip install .
```

The package talks to PostgreSQL through SQLAlchemy. SQLAlchemy's default
PostgreSQL driver (psycopg2) is not installed with the package and has to be
installed separately.

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `inventory.entity`: the frozen `Item` record (`product_id`,
  `total_quantity`, `reserved_quantity`, `available_quantity`) and the errors
  `InventoryError`, with its subclasses `NotEnoughStockError`,
  `NotEnoughReservedError` and `ItemNotFoundError`.
- `inventory.usecase`: `ReserveItemUseCase.reserve_item()` and
  `CancelReservationItemUseCase.cancel_reservation()`, taking
  `ReserveItemDTO` and `CancelReservationItemDTO`. Each reads the item in a
  transaction, raises `NotEnoughStockError` or `NotEnoughReservedError` when
  the quantity is too large, and otherwise applies the change. They work
  against any `RepoTransactor` whose `transaction()` context manager yields a
  `TxRepo`.
- `inventory.postgres`: `Config` holds `db_name`, `host_port`, `username` and
  `password`, and `url()` builds the connection URL (SSL disabled, time zone
  UTC). `Database.from_config()` creates the engine and checks it with
  `ping()`; `transaction()` yields a connection, commits when the block ends
  normally and rolls back and re-raises when it fails; `close()` releases the
  pool.
- `inventory.repo`: `Queries` runs the SQL against the `inventory` table;
  a missing product raises `ItemNotFoundError`, an update that matches no row
  raises `NotEnoughStockError` or `NotEnoughReservedError`, and database
  failures are raised as `InventoryError`. `Storage` wraps a `Database` and
  its `transaction()` yields `Queries`, so it serves as a `RepoTransactor`.
- `inventory.api`: the messages `ReserveItemRequest`, `ReserveItemResponse`,
  `CompensateItemRequest` and `CompensateItemResponse`, and `ResponseStatus`
  (`SUCCESS`, `INSUFFICIENT_QUANTITY`, `INTERNAL_ERROR`). On the requests,
  `validate()` raises the first `ValidationError` (product id and quantity must
  be greater than 0) and `validate_all()` raises a `MultiValidationError`
  holding every violation. Responses have no rules.
- `inventory.server`: `InventoryServer`, built from `Dependencies`, with
  `reserve_item()` and `compensate_item()`. On success they return a response
  with status `SUCCESS`; on failure they raise `ServiceError`, whose
  `response` and `status` report `INSUFFICIENT_QUANTITY` for a shortage and
  `INTERNAL_ERROR` for anything else, and whose `cause` is the original error.
  The server does not validate requests itself; call `validate()` first.

## Example

```python
from inventory.api import ReserveItemRequest
from inventory.postgres import Config, Database
from inventory.repo import Storage
from inventory.server import Dependencies, InventoryServer, ServiceError
from inventory.usecase import CancelReservationItemUseCase, ReserveItemUseCase

password = "password"
db = Database.from_config(Config(
    db_name="inventory",
    host_port="localhost:5432",
    username="user",
    password=password,
))

storage = Storage(db)
server = InventoryServer(Dependencies(
    ReserveItemUseCase(storage),
    CancelReservationItemUseCase(storage),
))

request = ReserveItemRequest(product_id=1, quantity=2)
request.validate()
try:
    response = server.reserve_item(request)
    print(response.status)
except ServiceError as err:
    print(err.status, err.cause)
finally:
    db.close()
```

## What the package does not do

- It has no command and does not listen on the network: `InventoryServer` is
  a plain object whose methods are called directly.
- It does not create or migrate the `inventory` table; a table with the
  columns `product_id`, `total_quantity`, `reserved_quantity` and
  `available_quantity` must already exist.
- It does not read configuration from files or the environment; `Config` is
  built by the caller.