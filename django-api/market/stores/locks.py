"""Striped per-key locks.

A fixed pool of locks is shared by all keys; a key always maps to the
same stripe. Holding several keys acquires their stripes in ascending
index order, once each, so two holders can never wait on each other.
"""

import threading
from collections.abc import Hashable, Iterator
from contextlib import ExitStack, contextmanager


class KeyedLocks:
    """Exclusive access to entities keyed by ID, without a global lock."""

    def __init__(self, stripes: int = 64) -> None:
        if stripes < 1:
            raise ValueError("stripes must be at least 1")
        self._locks = tuple(threading.Lock() for _ in range(stripes))

    def _stripe(self, key: Hashable) -> int:
        return hash(key) % len(self._locks)

    @contextmanager
    def hold(self, *keys: Hashable) -> Iterator[None]:
        """Hold the locks of all given keys for the duration of the block."""
        stripes = sorted({self._stripe(key) for key in keys})
        with ExitStack() as stack:
            for index in stripes:
                stack.enter_context(self._locks[index])
            yield
