from market.stores.interfaces import Store, UserBalanceStore, UserStore, VenueStore
from market.stores.locks import KeyedLocks
from market.stores.memory import (
    InMemoryUserBalanceStore,
    InMemoryUserStore,
    InMemoryVenueStore,
)

__all__ = [
    "Store",
    "UserStore",
    "UserBalanceStore",
    "VenueStore",
    "KeyedLocks",
    "InMemoryUserStore",
    "InMemoryUserBalanceStore",
    "InMemoryVenueStore",
]
