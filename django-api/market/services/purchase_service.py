"""Purchase service - the buy-venue transaction.

A purchase reads one venue and one or two user balances, decides the
outcome, then writes every changed entity as a single unit:

- The venue lock is taken first, then the buyer and seller locks, so two
  purchases of the same venue are serialized and see each other's result.
- Purchases touching disjoint venues and users run in parallel.
- Writes are applied in order; if one fails, the ones already applied are
  restored before the error propagates.

Business failures are returned as ``Err``; the caller maps them.
"""

import logging

from market.domain import (
    Bought,
    Err,
    InsufficientFunds,
    Ok,
    PurchaseOutcome,
    Result,
    UserId,
    Venue,
    VenueId,
)
from market.domain.errors import (
    DomainError,
    UserNotFoundError,
    VenueAlreadyOwnedError,
    VenueNotFoundError,
)
from market.stores.interfaces import Store, UserBalanceStore, VenueStore
from market.stores.locks import KeyedLocks

logger = logging.getLogger(__name__)


class PurchaseService:
    """Service for buying venues."""

    def __init__(
        self,
        venues: VenueStore,
        balances: UserBalanceStore,
        venue_locks: KeyedLocks,
        user_locks: KeyedLocks,
    ) -> None:
        self._venues = venues
        self._balances = balances
        self._venue_locks = venue_locks
        self._user_locks = user_locks

    def buy(self, venue_id: VenueId, buyer_id: UserId) -> Result[PurchaseOutcome, DomainError]:
        """Transfer a venue to the buyer, paying its price to the previous owner."""
        with self._venue_locks.hold(venue_id):
            venue = self._venues.find_by_id(venue_id)
            if venue is None:
                return Err(VenueNotFoundError(venue_id))

            previous_owner = venue.owner
            user_ids = [buyer_id] if previous_owner is None else [buyer_id, previous_owner]
            with self._user_locks.hold(*user_ids):
                return self._buy_locked(venue, buyer_id)

    def _buy_locked(self, venue: Venue, buyer_id: UserId) -> Result[PurchaseOutcome, DomainError]:
        buyer = self._balances.find_by_id(buyer_id)
        if buyer is None:
            return Err(UserNotFoundError(buyer_id))
        if venue.owner == buyer_id:
            return Err(VenueAlreadyOwnedError(venue.id, buyer_id))

        price = venue.price
        debited = buyer.debit(price)
        if not debited.is_ok():
            logger.warning("%s can't afford venue %s priced %s", buyer_id, venue.id, price)
            return Ok(InsufficientFunds(buyer_id=buyer_id, venue_name=venue.name))

        seller = None
        previous_owner = venue.owner
        if previous_owner is not None:
            seller = self._balances.find_by_id(previous_owner)
            if seller is None:
                logger.warning(
                    "Owner %s of venue %s no longer exists; selling as unowned",
                    previous_owner,
                    venue.id,
                )
                previous_owner = None

        writes: list[tuple[Store, object]] = [(self._balances, debited.unwrap())]
        if seller is not None:
            writes.append((self._balances, seller.deposit(price)))
        writes.append((self._venues, venue.with_owner(buyer_id)))
        self._apply(writes)

        logger.info("Venue %s bought by %s for %s", venue.id, buyer_id, price)
        return Ok(
            Bought(
                venue_name=venue.name,
                buyer_id=buyer_id,
                price=price,
                previous_owner=previous_owner,
            )
        )

    def _apply(self, writes: list[tuple[Store, object]]) -> None:
        """Save every entity, or restore the saved ones and re-raise.

        An entity that did not exist before is deleted again. A restore
        that fails is logged and the remaining restores still run; the
        original write error is the one raised.
        """
        applied: list[tuple[Store, object, object | None]] = []
        try:
            for store, entity in writes:
                before = store.find_by_id(entity.id)
                store.save(entity)
                applied.append((store, entity, before))
        except Exception:
            logger.exception("Purchase write failed; rolling back %d write(s)", len(applied))
            for store, entity, before in reversed(applied):
                try:
                    if before is None:
                        store.delete_by_id(entity.id)
                    else:
                        store.save(before)
                except Exception:
                    logger.exception("Rollback of %s failed", entity.id)
            raise
