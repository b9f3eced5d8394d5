"""Domain error codes for the market module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    VENUE_NOT_FOUND = "VENUE_NOT_FOUND"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    VENUE_ALREADY_OWNED = "VENUE_ALREADY_OWNED"
    INVALID_AMOUNT = "INVALID_AMOUNT"
    INVALID_VENUE_NAME = "INVALID_VENUE_NAME"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NotFoundError(DomainError):
    """Base class for errors about a referenced entity that does not exist."""


class VenueNotFoundError(NotFoundError):
    """Raised when a venue is not found."""

    def __init__(self, venue_id: object) -> None:
        super().__init__(
            code=ErrorCode.VENUE_NOT_FOUND,
            message="Venue not found",
        )
        self.venue_id = venue_id


class UserNotFoundError(NotFoundError):
    """Raised when a user (or its balance) is not found."""

    def __init__(self, user_id: object) -> None:
        super().__init__(
            code=ErrorCode.USER_NOT_FOUND,
            message="User not found",
        )
        self.user_id = user_id


class InsufficientFundsError(DomainError):
    """Raised when a subtraction would take an amount below zero."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INSUFFICIENT_FUNDS,
            message="Insufficient funds",
        )


class VenueAlreadyOwnedError(DomainError):
    """Raised when a user tries to buy a venue they already own."""

    def __init__(self, venue_id: object, user_id: object) -> None:
        super().__init__(
            code=ErrorCode.VENUE_ALREADY_OWNED,
            message=f"{user_id} already owns this venue",
        )
        self.venue_id = venue_id
        self.user_id = user_id


class InvalidAmountError(DomainError, ValueError):
    """Raised when an amount is negative or not a number."""

    def __init__(self, value: object) -> None:
        super().__init__(
            code=ErrorCode.INVALID_AMOUNT,
            message="Amount must be a non-negative number",
        )
        self.value = value


class InvalidVenueNameError(DomainError, ValueError):
    """Raised when a venue name is empty."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_VENUE_NAME,
            message="Venue name cannot be empty",
        )
