"""In-memory user store.

Holds the ordered collection of user records for the lifetime of the
process. Every operation runs under a single lock, so id assignment and
mutation are atomic per call. Callers always receive copies; the stored
records are never handed out.
"""

import logging
import threading
from collections.abc import Iterable

from users_service.core.models import User
from users_service.exceptions import UserNotFoundError

logger = logging.getLogger(__name__)

SEED_USERS: tuple[User, ...] = (
    User(id=1, name="Alice", email="alice@example.com"),
    User(id=2, name="Bob", email="bob@example.com"),
)


class UserStore:
    """Ordered, lock-guarded collection of ``User`` records.

    Args:
        seed: Initial records, copied in order. Defaults to Alice and Bob.

    Example:
        store = UserStore()
        carol = store.create("Carol", "carol@x.com")
        assert carol.id == 3
    """

    def __init__(self, seed: Iterable[User] = SEED_USERS) -> None:
        self._lock = threading.Lock()
        self._users: list[User] = [user.model_copy() for user in seed]

    def __len__(self) -> int:
        with self._lock:
            return len(self._users)

    def list_users(self) -> list[User]:
        """Return every record in insertion order."""
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get(self, user_id: int) -> User:
        """Return the record with the given id.

        Raises:
            UserNotFoundError: If no record has that id.
        """
        with self._lock:
            return self._find(user_id).model_copy()

    def create(self, name: str | None, email: str | None) -> User:
        """Append a new record and return it.

        The new id is one more than the largest id currently stored, or 1
        when the store is empty. Ids freed by deletion of the highest
        record can therefore be handed out again.
        """
        with self._lock:
            next_id = max((user.id for user in self._users), default=0) + 1
            user = User(id=next_id, name=name, email=email)
            self._users.append(user)
            logger.debug("Created user", extra={"user_id": next_id})
            return user.model_copy()

    def update(self, user_id: int, name: str | None, email: str | None) -> User:
        """Replace name and email of an existing record; the id is kept.

        Raises:
            UserNotFoundError: If no record has that id.
        """
        with self._lock:
            user = self._find(user_id)
            user.name = name
            user.email = email
            logger.debug("Updated user", extra={"user_id": user_id})
            return user.model_copy()

    def delete(self, user_id: int) -> None:
        """Remove the record with the given id.

        Raises:
            UserNotFoundError: If no record has that id.
        """
        with self._lock:
            self._users.remove(self._find(user_id))
            logger.debug("Deleted user", extra={"user_id": user_id})

    def _find(self, user_id: int) -> User:
        # Caller must hold the lock
        for user in self._users:
            if user.id == user_id:
                return user
        raise UserNotFoundError(user_id)
