# =============================================================================
# core/services/user_store.py - In-Memory User Store
# =============================================================================
# Holds every user for the lifetime of one application instance.
# Nothing is persisted: a restart starts from an empty store and id 1.
#
# Thread safety:
#   One lock guards both the map and the id counter. Every public method
#   does its whole read-modify-write under that lock, so:
#   - two concurrent creates can never receive the same id
#   - a replace can never resurrect a user deleted in between
#   Concurrent replaces of the same id are last-write-wins.
# =============================================================================

import logging
import threading

from core.models.user import User, UserPayload

logger = logging.getLogger(__name__)


class UserStore:
    """
    Thread-safe map of user id -> User with a monotonic id counter.

    The counter is only ever incremented, so ids are never reused,
    even after the user holding them is deleted.

    One instance is created per application (see app.main.create_app)
    and handed to route handlers through dependency injection.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._last_id = 0
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def __contains__(self, user_id: object) -> bool:
        with self._lock:
            return user_id in self._users

    def list_users(self) -> list[User]:
        """Return a snapshot of all stored users."""
        with self._lock:
            return list(self._users.values())

    def get_user(self, user_id: int) -> User | None:
        """Return the user with this id, or None if there is none."""
        with self._lock:
            return self._users.get(user_id)

    def create_user(self, payload: UserPayload) -> User:
        """
        Store a new user under the next id.

        The counter is pre-incremented, so the first user gets id 1.
        Any id carried by the payload is ignored.

        Args:
            payload: A body that has already passed validation

        Returns:
            The stored user, including its assigned id
        """
        with self._lock:
            self._last_id += 1
            user = User.from_payload(self._last_id, payload)
            self._users[user.id] = user

        logger.debug(f"Created user: {user.id}")
        return user

    def replace_user(self, user_id: int, payload: UserPayload) -> User | None:
        """
        Replace every field of an existing user.

        The stored id always comes from `user_id`, never from the payload.

        Returns:
            The updated user, or None if no user has this id
        """
        with self._lock:
            if user_id not in self._users:
                return None
            user = User.from_payload(user_id, payload)
            self._users[user_id] = user

        logger.debug(f"Replaced user: {user_id}")
        return user

    def delete_user(self, user_id: int) -> User | None:
        """Remove and return the user with this id, or None if absent."""
        with self._lock:
            user = self._users.pop(user_id, None)

        if user is not None:
            logger.debug(f"Deleted user: {user_id}")
        return user
