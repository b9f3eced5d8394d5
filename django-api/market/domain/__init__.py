from market.domain.models import (
    Bought,
    InsufficientFunds,
    PurchaseOutcome,
    User,
    UserAccount,
    UserBalance,
    Venue,
)
from market.domain.result import Err, Ok, Result
from market.domain.value_objects import Amount, UserId, VenueId

__all__ = [
    "User",
    "UserAccount",
    "UserBalance",
    "Venue",
    "Bought",
    "InsufficientFunds",
    "PurchaseOutcome",
    "UserId",
    "VenueId",
    "Amount",
    "Ok",
    "Err",
    "Result",
]
