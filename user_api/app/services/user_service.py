"""
Service layer for users.

``UserService`` owns the in‑memory user collection.  Records keep
their insertion order; updates rewrite names in place and deletes drop
matching records.  Every operation runs as one pass over the list while
holding the service lock, so a scan never observes another operation's
half‑applied mutation.

Ids are creation timestamps in milliseconds.  ``MillisecondIdGenerator``
bumps the value past the previous id when two users are created within
the same millisecond (or the clock steps backwards), which keeps ids
unique and increasing.
"""

from __future__ import annotations

import logging
import threading
import time
from typing import Callable, List, Optional

from user_api.app.core.errors import InvalidInputError, UserNotFoundError
from user_api.app.schemas.user import UserRead

logger = logging.getLogger(__name__)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class MillisecondIdGenerator:
    """Produce unique, increasing ids based on the wall clock."""

    def __init__(self, clock: Callable[[], int] = _now_ms) -> None:
        self._clock = clock
        self._last = 0

    def __call__(self) -> int:
        candidate = max(self._clock(), self._last + 1)
        self._last = candidate
        return candidate


class UserService:
    """In‑memory store of ``UserRead`` records."""

    def __init__(
        self,
        id_generator: Optional[Callable[[], int]] = None,
        strict_updates: bool = False,
    ) -> None:
        self._users: List[UserRead] = []
        self._lock = threading.Lock()
        self._next_id = id_generator or MillisecondIdGenerator()
        self.strict_updates = strict_updates

    def __len__(self) -> int:
        return len(self._users)

    @staticmethod
    def _check_name(name: str) -> None:
        if not name:
            logger.warning("Rejected empty user name")
            raise InvalidInputError("Invalid name")

    def list_users(self) -> List[UserRead]:
        """Return copies of every user in insertion order.

        Callers cannot rename a stored user by mutating the result.
        """
        with self._lock:
            return [user.model_copy() for user in self._users]

    def create_user(self, name: str) -> UserRead:
        """Append a new user and return it.

        Raises ``InvalidInputError`` if ``name`` is empty; the
        collection is left untouched in that case.
        """
        self._check_name(name)
        with self._lock:
            user = UserRead(id=self._next_id(), name=name)
            self._users.append(user)
        logger.info("Created user %s", user.id)
        return user.model_copy()

    def update_user(self, user_id: int, name: str) -> UserRead:
        """Rename every user whose id is ``user_id``.

        The id is not looked up before the name is validated.  When no
        user matches, the call still succeeds and echoes ``user_id`` and
        ``name`` back, unless the service runs with ``strict_updates``,
        in which case ``UserNotFoundError`` is raised.
        """
        self._check_name(name)
        with self._lock:
            matched = 0
            for user in self._users:
                if user.id == user_id:
                    user.name = name
                    matched += 1
        if matched:
            logger.info("Updated user %s", user_id)
        elif self.strict_updates:
            raise UserNotFoundError("User not found")
        else:
            logger.info("Update of unknown user %s ignored", user_id)
        return UserRead(id=user_id, name=name)

    def delete_user(self, user_id: int) -> int:
        """Remove every user whose id is ``user_id``.

        Returns the number of removed records; deleting an unknown id
        is not an error.
        """
        with self._lock:
            before = len(self._users)
            self._users = [user for user in self._users if user.id != user_id]
            removed = before - len(self._users)
        if removed:
            logger.info("Deleted user %s", user_id)
        return removed

