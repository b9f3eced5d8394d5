"""Domain models representing the market state.

These are pure domain objects with no API input rules.
Every model is immutable; state changes produce new instances.
"""

from dataclasses import dataclass, replace

from market.domain.errors import InsufficientFundsError, InvalidVenueNameError
from market.domain.result import Result
from market.domain.value_objects import Amount, UserId, VenueId


@dataclass(frozen=True)
class User:
    """Domain representation of a User profile."""

    id: UserId
    name: str


@dataclass(frozen=True)
class UserBalance:
    """Money held by a user."""

    id: UserId
    balance: Amount

    def debit(self, amount: Amount) -> Result["UserBalance", InsufficientFundsError]:
        return self.balance.subtract(amount).map(lambda left: replace(self, balance=left))

    def deposit(self, amount: Amount) -> "UserBalance":
        return replace(self, balance=self.balance.add(amount))


@dataclass(frozen=True)
class UserAccount:
    """Read model combining a user's profile with their balance."""

    id: UserId
    name: str
    budget: Amount


@dataclass(frozen=True)
class Venue:
    """Domain representation of a Venue."""

    id: VenueId
    name: str
    price: Amount
    owner: UserId | None = None

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidVenueNameError()

    def with_owner(self, owner: UserId) -> "Venue":
        return replace(self, owner=owner)

    def with_details(self, name: str, price: Amount) -> "Venue":
        """Replace name and price; ownership is kept."""
        return replace(self, name=name, price=price)


@dataclass(frozen=True)
class Bought:
    """Outcome of a successful purchase."""

    venue_name: str
    buyer_id: UserId
    price: Amount
    previous_owner: UserId | None = None

    @property
    def message(self) -> str:
        return f"{self.venue_name} was bought by {self.buyer_id} for {self.price}"


@dataclass(frozen=True)
class InsufficientFunds:
    """Outcome of a purchase the buyer cannot afford."""

    buyer_id: UserId
    venue_name: str

    @property
    def message(self) -> str:
        return f"{self.buyer_id} can't afford {self.venue_name}"


PurchaseOutcome = Bought | InsufficientFunds
