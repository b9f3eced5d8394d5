"""Venue service - catalog operations on venues.

Writes run under the same per-venue lock as purchases, so a replace can
never interleave with a purchase of the same venue.
"""

import logging

from market.domain import Amount, Venue, VenueId
from market.domain.errors import VenueNotFoundError
from market.stores.interfaces import VenueStore
from market.stores.locks import KeyedLocks

logger = logging.getLogger(__name__)


class VenueService:
    """Service for venue CRUD operations."""

    def __init__(self, store: VenueStore, locks: KeyedLocks) -> None:
        self._store = store
        self._locks = locks

    def list_venues(self) -> list[Venue]:
        """Return all venues."""
        return self._store.find_all()

    def get_venue(self, venue_id: VenueId) -> Venue:
        """Return a venue by ID.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        venue = self._store.find_by_id(venue_id)
        if venue is None:
            raise VenueNotFoundError(venue_id)
        return venue

    def put_venue(self, venue_id: VenueId, name: str, price: Amount) -> VenueId:
        """Insert a venue, or replace the name and price of an existing one.

        Replacing keeps the current owner.

        Raises:
            InvalidVenueNameError: If the name is empty.
        """
        with self._locks.hold(venue_id):
            existing = self._store.find_by_id(venue_id)
            if existing is None:
                venue = Venue(id=venue_id, name=name, price=price)
                logger.info("Venue %s created", venue_id)
            else:
                venue = existing.with_details(name=name, price=price)
                logger.info("Venue %s replaced", venue_id)
            self._store.save(venue)
        return venue_id

    def delete_venue(self, venue_id: VenueId) -> VenueId:
        """Delete a venue and return its ID.

        Raises:
            VenueNotFoundError: If the venue does not exist.
        """
        with self._locks.hold(venue_id):
            deleted = self._store.delete_by_id(venue_id)
        if deleted is None:
            raise VenueNotFoundError(venue_id)
        logger.info("Venue %s deleted", venue_id)
        return deleted
