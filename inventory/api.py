"""Request and response messages of the inventory service, with their validation rules."""

from __future__ import annotations

import enum
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


class ResponseStatus(enum.Enum):
    """Outcome reported back to the caller of an inventory operation."""

    SUCCESS = "SUCCESS"
    INSUFFICIENT_QUANTITY = "INSUFFICIENT_QUANTITY"
    INTERNAL_ERROR = "INTERNAL_ERROR"


class ValidationError(ValueError):
    """A single rule violated by a field of a message."""

    def __init__(
        self,
        message_name: str,
        field: str,
        reason: str,
        cause: BaseException | None = None,
        key: bool = False,
    ) -> None:
        self.message_name = message_name
        self.field = field
        self.reason = reason
        self.cause = cause
        self.key = key
        super().__init__(str(self))

    def error_name(self) -> str:
        return f"{self.message_name}ValidationError"

    def __str__(self) -> str:
        cause = f" | caused by: {self.cause}" if self.cause is not None else ""
        key = "key for " if self.key else ""
        return f"invalid {key}{self.message_name}.{self.field}: {self.reason}{cause}"


class MultiValidationError(ValueError):
    """Every rule violated by a message, in field order."""

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors = list(errors)
        super().__init__(str(self))

    def all_errors(self) -> list[ValidationError]:
        return list(self.errors)

    def __str__(self) -> str:
        return "; ".join(str(err) for err in self.errors)


_POSITIVE = "value must be greater than 0"


def _positive_fields(
    message_name: str, fields: list[tuple[str, int]]
) -> Iterator[ValidationError]:
    for name, value in fields:
        if value <= 0:
            yield ValidationError(message_name, name, _POSITIVE)


def _raise_first(violations: Iterable[ValidationError]) -> None:
    first = next(iter(violations), None)
    if first is not None:
        raise first


def _raise_all(violations: Iterable[ValidationError]) -> None:
    errors = list(violations)
    if errors:
        raise MultiValidationError(errors)


@dataclass
class ReserveItemRequest:
    product_id: int = 0
    quantity: int = 0

    def _violations(self) -> Iterator[ValidationError]:
        return _positive_fields(
            "ReserveItemRequest",
            [("ProductId", self.product_id), ("Quantity", self.quantity)],
        )

    def validate(self) -> None:
        """Raise the first violated rule, if any."""
        _raise_first(self._violations())

    def validate_all(self) -> None:
        """Raise every violated rule together, if any."""
        _raise_all(self._violations())


@dataclass
class ReserveItemResponse:
    status: ResponseStatus = ResponseStatus.SUCCESS

    def _violations(self) -> Iterator[ValidationError]:
        return _positive_fields("ReserveItemResponse", [])

    def validate(self) -> None:
        """No rules apply to a response; nothing is raised."""
        _raise_first(self._violations())

    def validate_all(self) -> None:
        """No rules apply to a response; nothing is raised."""
        _raise_all(self._violations())


@dataclass
class CompensateItemRequest:
    product_id: int = 0
    quantity: int = 0

    def _violations(self) -> Iterator[ValidationError]:
        return _positive_fields(
            "CompensateItemRequest",
            [("ProductId", self.product_id), ("Quantity", self.quantity)],
        )

    def validate(self) -> None:
        """Raise the first violated rule, if any."""
        _raise_first(self._violations())

    def validate_all(self) -> None:
        """Raise every violated rule together, if any."""
        _raise_all(self._violations())


@dataclass
class CompensateItemResponse:
    status: ResponseStatus = ResponseStatus.SUCCESS

    def _violations(self) -> Iterator[ValidationError]:
        return _positive_fields("CompensateItemResponse", [])

    def validate(self) -> None:
        """No rules apply to a response; nothing is raised."""
        _raise_first(self._violations())

    def validate_all(self) -> None:
        """No rules apply to a response; nothing is raised."""
        _raise_all(self._violations())