"""Service wiring.

One set of in-memory stores and locks per process, shared by every
service. Views obtain services through the getters below.
"""

import threading
from dataclasses import dataclass

from django.conf import settings

from market.services.purchase_service import PurchaseService
from market.services.user_service import UserService
from market.services.venue_service import VenueService
from market.stores import (
    InMemoryUserBalanceStore,
    InMemoryUserStore,
    InMemoryVenueStore,
    KeyedLocks,
)


@dataclass(frozen=True)
class Services:
    venues: VenueService
    users: UserService
    purchases: PurchaseService


_services: Services | None = None
_services_lock = threading.Lock()


def get_services() -> Services:
    """Return the process-wide services, building them on first use.

    Concurrent first calls all receive the same instance.
    """
    global _services
    if _services is None:
        with _services_lock:
            if _services is None:
                _services = _build_services()
    return _services


def _build_services() -> Services:
    stripes = settings.MARKET_LOCK_STRIPES
    venue_store = InMemoryVenueStore()
    user_store = InMemoryUserStore()
    balance_store = InMemoryUserBalanceStore()
    venue_locks = KeyedLocks(stripes)
    user_locks = KeyedLocks(stripes)
    return Services(
        venues=VenueService(venue_store, venue_locks),
        users=UserService(user_store, balance_store, user_locks),
        purchases=PurchaseService(venue_store, balance_store, venue_locks, user_locks),
    )


def reset_services() -> None:
    """Drop all in-memory state; the next get_services() starts empty."""
    global _services
    with _services_lock:
        _services = None


__all__ = [
    "PurchaseService",
    "Services",
    "UserService",
    "VenueService",
    "get_services",
    "reset_services",
]
