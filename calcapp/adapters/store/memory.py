"""In-memory result store and user repository.

Zero-config adapters that keep state for the lifetime of the process.
"""

import logging
from collections.abc import Iterable
from dataclasses import replace

from calcapp.core.models import User
from calcapp.core.ports import ResultStorePort, UserRepositoryPort

logger = logging.getLogger(__name__)


class InMemoryResultStore(ResultStorePort):
    """Keeps saved results in a list, in save order."""

    def __init__(self):
        self._results: list[int] = []

    def save(self, value: int) -> None:
        self._results.append(value)

    @property
    def results(self) -> list[int]:
        """Saved results, oldest first (a copy)."""
        return list(self._results)


class InMemoryUserRepository(UserRepositoryPort):
    """Dict-backed user repository.

    Ids are assigned as one more than the largest id ever stored, so
    ids are never reused. Stored users are copies of what was saved.
    """

    def __init__(self, users: Iterable[User] = ()):
        """Initialize with optional seed users.

        Args:
            users: Users to preload. Each must already have an id.

        Raises:
            ValueError: If a seed user has no id or ids collide.
        """
        self._users: dict[int, User] = {}
        self._last_id = 0
        for user in users:
            if user.id is None:
                raise ValueError("seed users must have an id")
            if user.id in self._users:
                raise ValueError(f"duplicate user id: {user.id}")
            self._users[user.id] = replace(user)
            self._last_id = max(self._last_id, user.id)

    async def get_by_id(self, user_id: int) -> User | None:
        user = self._users.get(user_id)
        if user is None:
            return None
        return replace(user)

    async def save(self, user: User) -> bool:
        """Insert a new user, or update one whose id is already stored."""
        if user.id is None:
            self._last_id += 1
            user.id = self._last_id
        else:
            self._last_id = max(self._last_id, user.id)

        self._users[user.id] = replace(user)
        logger.debug(f"Saved user {user.id}")
        return True

    def __len__(self) -> int:
        return len(self._users)
