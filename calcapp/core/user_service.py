"""Greeting lookup and user creation for calcapp."""

from .models import User
from .ports import UserRepositoryPort, UserServicePort

USER_NOT_FOUND = "User not found"


class UserService(UserServicePort):
    """Looks up users to greet them and creates new users.

    Each operation awaits the repository exactly once. A missing user
    is a normal outcome mapped to USER_NOT_FOUND, not an exception.
    """

    def __init__(self, repository: UserRepositoryPort):
        self._repository = repository

    @property
    def repository(self) -> UserRepositoryPort:
        return self._repository

    async def get_greeting(self, user_id: int) -> str:
        """Return "Hello, {name}!" or USER_NOT_FOUND.

        An unset name renders as an empty string.
        """
        user = await self._repository.get_by_id(user_id)
        if user is None:
            return USER_NOT_FOUND
        return f"Hello, {user.name or ''}!"

    async def create_user(self, name: str) -> bool:
        """Save a new user and pass the repository's result through.

        The user is built without an id; the repository assigns it.
        """
        user = User(name=name)
        return await self._repository.save(user)
