"""In-memory implementations of the stores.

State lives for the lifetime of the process only. Each store guards its
own dict with a lock so single operations are atomic; multi-entity
consistency is the services' job (see ``market.stores.locks``).
"""

import threading
from typing import TypeVar

from market.domain import User, UserBalance, UserId, Venue, VenueId
from market.stores.interfaces import Store, UserBalanceStore, UserStore, VenueStore

K = TypeVar("K")
V = TypeVar("V")


class InMemoryStore(Store[K, V]):
    """Dict-backed store keyed by the entity's ``id`` attribute."""

    def __init__(self) -> None:
        self._items: dict[K, V] = {}
        self._lock = threading.Lock()

    def find_all(self) -> list[V]:
        with self._lock:
            return list(self._items.values())

    def find_by_id(self, entity_id: K) -> V | None:
        with self._lock:
            return self._items.get(entity_id)

    def save(self, entity: V) -> V:
        with self._lock:
            self._items[entity.id] = entity
        return entity

    def delete_by_id(self, entity_id: K) -> K | None:
        with self._lock:
            removed = self._items.pop(entity_id, None)
        return None if removed is None else entity_id

    def clear(self) -> None:
        with self._lock:
            self._items.clear()


class InMemoryUserStore(InMemoryStore[UserId, User], UserStore):
    """Process-local user profile store."""


class InMemoryUserBalanceStore(InMemoryStore[UserId, UserBalance], UserBalanceStore):
    """Process-local user balance store."""


class InMemoryVenueStore(InMemoryStore[VenueId, Venue], VenueStore):
    """Process-local venue store."""
