"""User service with an in-memory implementation."""

import logging
import threading
from abc import ABC, abstractmethod

from common.exceptions import UserNotFoundError
from common.models.user import User

logger = logging.getLogger(__name__)


class UserService(ABC):
    """Abstract interface for user service."""

    @abstractmethod
    def list_users(self) -> list[User]:
        """List all users in insertion order."""
        pass

    @abstractmethod
    def get_user(self, user_id: int) -> User:
        """Get a user by ID.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        pass

    @abstractmethod
    def add_user(self, user: User) -> User:
        """Add a user, assigning it a new ID.

        Any ID present on ``user`` is ignored.

        Returns:
            The stored user, including the assigned ID
        """
        pass

    @abstractmethod
    def update_user(self, user_id: int, user: User) -> User:
        """Overwrite name and email of an existing user.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        pass

    @abstractmethod
    def delete_user(self, user_id: int) -> None:
        """Delete a user.

        Raises:
            UserNotFoundError: If no user has this ID
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of stored users."""
        pass


class InMemoryUserService(UserService):
    """In-memory implementation of UserService.

    Records live for the lifetime of the instance. IDs start at 1 and are
    never reused, even after a delete or ``clear()``. All access goes through
    a single lock, so one instance can be shared between request threads.
    """

    def __init__(self) -> None:
        self._users: list[User] = []
        self._last_id = 0
        self._lock = threading.Lock()

    def _find_index(self, user_id: int) -> int:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        raise UserNotFoundError(user_id)

    def list_users(self) -> list[User]:
        """List all users."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get_user(self, user_id: int) -> User:
        """Get a user by ID."""
        with self._lock:
            return self._users[self._find_index(user_id)].model_copy()

    def add_user(self, user: User) -> User:
        """Add a user."""
        with self._lock:
            self._last_id += 1
            stored = User(id=self._last_id, name=user.name, email=user.email)
            self._users.append(stored)
        logger.info("Created user %s", stored.id)
        return stored.model_copy()

    def update_user(self, user_id: int, user: User) -> User:
        """Update a user."""
        with self._lock:
            index = self._find_index(user_id)
            current = self._users[index].model_copy(update={"name": user.name, "email": user.email})
            self._users[index] = current
        logger.info("Updated user %s", user_id)
        return current.model_copy()

    def delete_user(self, user_id: int) -> None:
        """Delete a user."""
        with self._lock:
            del self._users[self._find_index(user_id)]
        logger.info("Deleted user %s", user_id)

    def count(self) -> int:
        with self._lock:
            return len(self._users)

    def clear(self) -> None:
        """Remove all users. The ID counter keeps running."""
        with self._lock:
            self._users.clear()
