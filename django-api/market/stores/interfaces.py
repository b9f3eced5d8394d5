"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from market.domain import User, UserBalance, UserId, Venue, VenueId

K = TypeVar("K")
V = TypeVar("V")


class Store(ABC, Generic[K, V]):
    """Interface for keyed entity persistence operations."""

    @abstractmethod
    def find_all(self) -> list[V]:
        """Return all entities."""
        ...

    @abstractmethod
    def find_by_id(self, entity_id: K) -> V | None:
        """Return an entity by ID, or None if not found."""
        ...

    @abstractmethod
    def save(self, entity: V) -> V:
        """Insert or replace an entity by its ID and return it."""
        ...

    @abstractmethod
    def delete_by_id(self, entity_id: K) -> K | None:
        """Delete an entity, returning its ID if something was deleted."""
        ...


class UserStore(Store[UserId, User]):
    """Interface for user profile persistence."""


class UserBalanceStore(Store[UserId, UserBalance]):
    """Interface for user balance persistence."""


class VenueStore(Store[VenueId, Venue]):
    """Interface for venue persistence."""
