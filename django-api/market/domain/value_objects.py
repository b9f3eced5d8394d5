"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Self

from market.domain.errors import InsufficientFundsError, InvalidAmountError
from market.domain.result import Err, Ok, Result


@dataclass(frozen=True)
class UserId:
    """Unique identifier for a User."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VenueId:
    """Unique identifier for a Venue."""

    value: str

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, order=True)
class Amount:
    """Non-negative monetary amount.

    Arithmetic never mutates; every operation returns a new Amount.
    """

    value: Decimal

    def __post_init__(self) -> None:
        value = _to_decimal(self.value)
        if value is None or not value.is_finite() or value < 0:
            raise InvalidAmountError(self.value)
        object.__setattr__(self, "value", value)

    @classmethod
    def create(cls, value: Decimal | int | str) -> Result["Amount", InvalidAmountError]:
        try:
            return Ok(cls(value))
        except InvalidAmountError as error:
            return Err(error)

    @classmethod
    def zero(cls) -> Self:
        return cls(Decimal(0))

    def add(self, other: "Amount") -> "Amount":
        return Amount(self.value + other.value)

    def subtract(self, other: "Amount") -> Result["Amount", InsufficientFundsError]:
        """Return the difference, or Err if it would go below zero."""
        if self.value < other.value:
            return Err(InsufficientFundsError())
        return Ok(Amount(self.value - other.value))

    def compare(self, other: "Amount") -> int:
        if self.value < other.value:
            return -1
        if self.value > other.value:
            return 1
        return 0

    def __str__(self) -> str:
        if self.value == self.value.to_integral_value():
            return str(int(self.value))
        return f"{self.value.normalize():f}"


def _to_decimal(value: object) -> Decimal | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, str)):
        try:
            return Decimal(value)
        except InvalidOperation:
            return None
    if isinstance(value, float):
        return Decimal(str(value))
    return None
