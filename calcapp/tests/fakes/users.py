"""Fake and stub UserRepositoryPort implementations for testing.

Stubs return predefined data without tracking interactions. Fakes are
working, simplified implementations that keep real state in memory.
"""

from dataclasses import replace

from calcapp.core.models import User
from calcapp.core.ports import UserRepositoryPort


class StubUserRepository(UserRepositoryPort):
    """Canned responses: id 1 is Alice, every other id is missing.

    Every save reports success and nothing is stored.
    """

    async def get_by_id(self, user_id: int) -> User | None:
        if user_id == 1:
            return User(id=1, name="Alice")
        return None

    async def save(self, user: User) -> bool:
        return True


class FakeUserRepository(UserRepositoryPort):
    """In-memory user repository seeded with Alice (1) and Bob (2).

    New users get ``len(users) + 1`` as their id. Tracks calls for
    test assertions.
    """

    def __init__(self, users: list[User] | None = None):
        """Initialize with the default seed users unless others are given."""
        if users is None:
            users = [User(id=1, name="Alice"), User(id=2, name="Bob")]
        self.users: list[User] = [replace(u) for u in users]
        self.get_by_id_calls: list[int] = []
        self.saved_users: list[User] = []
        self.save_result: bool = True

    async def get_by_id(self, user_id: int) -> User | None:
        """Get a user by id.

        Returns the user if found, None otherwise.
        """
        self.get_by_id_calls.append(user_id)
        for user in self.users:
            if user.id == user_id:
                return user
        return None

    async def save(self, user: User) -> bool:
        """Assign the next id and store the user.

        Returns ``save_result`` without storing when it is False.
        """
        if not self.save_result:
            return False

        user.id = len(self.users) + 1
        self.users.append(user)
        self.saved_users.append(user)
        return True

    def reset(self) -> None:
        """Reset call tracking and restore the default seed users."""
        self.users = [User(id=1, name="Alice"), User(id=2, name="Bob")]
        self.get_by_id_calls.clear()
        self.saved_users.clear()
        self.save_result = True
