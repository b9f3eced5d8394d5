"""User service - user profiles and their balances.

A user is stored as a profile plus a balance under the same ID. Both are
written under the user's lock so purchases never see one without the other.
"""

import logging
import uuid

from market.domain import Amount, User, UserAccount, UserBalance, UserId
from market.domain.errors import UserNotFoundError
from market.stores.interfaces import UserBalanceStore, UserStore
from market.stores.locks import KeyedLocks

logger = logging.getLogger(__name__)


class UserService:
    """Service for user CRUD operations."""

    def __init__(
        self,
        users: UserStore,
        balances: UserBalanceStore,
        locks: KeyedLocks,
    ) -> None:
        self._users = users
        self._balances = balances
        self._locks = locks

    def list_users(self) -> list[UserAccount]:
        accounts = []
        for user in self._users.find_all():
            balance = self._balances.find_by_id(user.id)
            if balance is not None:
                accounts.append(_account(user, balance))
        return accounts

    def get_user(self, user_id: UserId) -> UserAccount:
        """Return a user with their current budget.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        user = self._users.find_by_id(user_id)
        balance = self._balances.find_by_id(user_id)
        if user is None or balance is None:
            raise UserNotFoundError(user_id)
        return _account(user, balance)

    def create_user(self, name: str, budget: Amount) -> UserAccount:
        """Create a user with a freshly generated ID."""
        user_id = UserId(str(uuid.uuid4()))
        with self._locks.hold(user_id):
            user = self._users.save(User(id=user_id, name=name))
            balance = self._balances.save(UserBalance(id=user_id, balance=budget))
        logger.info("User %s created", user_id)
        return _account(user, balance)

    def replace_user(self, user_id: UserId, name: str, budget: Amount) -> UserAccount:
        """Replace the name and budget of an existing user.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        with self._locks.hold(user_id):
            if self._users.find_by_id(user_id) is None:
                raise UserNotFoundError(user_id)
            user = self._users.save(User(id=user_id, name=name))
            balance = self._balances.save(UserBalance(id=user_id, balance=budget))
        logger.info("User %s replaced", user_id)
        return _account(user, balance)

    def delete_user(self, user_id: UserId) -> UserId:
        """Delete a user and their balance.

        Raises:
            UserNotFoundError: If the user does not exist.
        """
        with self._locks.hold(user_id):
            deleted = self._users.delete_by_id(user_id)
            self._balances.delete_by_id(user_id)
        if deleted is None:
            raise UserNotFoundError(user_id)
        logger.info("User %s deleted", user_id)
        return deleted


def _account(user: User, balance: UserBalance) -> UserAccount:
    return UserAccount(id=user.id, name=user.name, budget=balance.balance)
