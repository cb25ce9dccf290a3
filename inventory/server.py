"""Inventory service handlers mapping use-case outcomes to response statuses."""

from __future__ import annotations

from dataclasses import dataclass

from inventory.api import (
    CompensateItemRequest,
    CompensateItemResponse,
    ReserveItemRequest,
    ReserveItemResponse,
    ResponseStatus,
)
from inventory.entity import NotEnoughReservedError, NotEnoughStockError
from inventory.usecase import (
    CancelReservationItemDTO,
    CancelReservationItemUseCase,
    ReserveItemDTO,
    ReserveItemUseCase,
)


@dataclass(frozen=True)
class Dependencies:
    """Use cases the server delegates to."""

    reserve_item_use_case: ReserveItemUseCase
    cancel_reservation_item_use_case: CancelReservationItemUseCase


class ServiceError(Exception):
    """A failed call; carries the response that reports its status."""

    def __init__(
        self, response: ReserveItemResponse | CompensateItemResponse, cause: BaseException
    ) -> None:
        super().__init__(str(cause))
        self.response = response
        self.cause = cause

    @property
    def status(self) -> ResponseStatus:
        return self.response.status


class InventoryServer:
    """Handles reservation and compensation requests."""

    def __init__(self, dependencies: Dependencies) -> None:
        self._deps = dependencies

    def reserve_item(self, request: ReserveItemRequest) -> ReserveItemResponse:
        try:
            self._deps.reserve_item_use_case.reserve_item(
                ReserveItemDTO(product_id=request.product_id, quantity=int(request.quantity))
            )
        except NotEnoughStockError as exc:
            raise ServiceError(
                ReserveItemResponse(ResponseStatus.INSUFFICIENT_QUANTITY), exc
            ) from exc
        except Exception as exc:
            raise ServiceError(ReserveItemResponse(ResponseStatus.INTERNAL_ERROR), exc) from exc
        return ReserveItemResponse(ResponseStatus.SUCCESS)

    def compensate_item(self, request: CompensateItemRequest) -> CompensateItemResponse:
        try:
            self._deps.cancel_reservation_item_use_case.cancel_reservation(
                CancelReservationItemDTO(
                    product_id=request.product_id, quantity=int(request.quantity)
                )
            )
        except NotEnoughReservedError as exc:
            raise ServiceError(
                CompensateItemResponse(ResponseStatus.INSUFFICIENT_QUANTITY), exc
            ) from exc
        except Exception as exc:
            raise ServiceError(
                CompensateItemResponse(ResponseStatus.INTERNAL_ERROR), exc
            ) from exc
        return CompensateItemResponse(ResponseStatus.SUCCESS)