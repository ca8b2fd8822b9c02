"""Port interfaces for calcapp.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - LoggerPort: Emit diagnostic messages
   - ResultStorePort: Persist computed results
   - UserRepositoryPort: Look up and persist users

2. **Driving Ports** (adapters/external systems call into core)
   - CalculatorPort: Arithmetic operations
   - UserServicePort: Greeting lookup and user creation
"""

from abc import ABC, abstractmethod

from .models import User


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class LoggerPort(ABC):
    """Port for emitting diagnostic messages.

    Fire-and-forget: the core never inspects a return value.
    """

    @abstractmethod
    def log(self, message: str) -> None:
        """Record a diagnostic message.

        Args:
            message: Human-readable diagnostic text.
        """


class ResultStorePort(ABC):
    """Port for persisting computation results.

    Adapters decide how to signal storage failures. The core
    propagates whatever the adapter raises without interpretation.
    """

    @abstractmethod
    def save(self, value: int) -> None:
        """Persist a computed result.

        Args:
            value: The integer result of a successful computation.

        Raises:
            Exception: If the backing store is unavailable.
        """


class UserRepositoryPort(ABC):
    """Port for looking up and persisting users.

    Adapters own the id -> User mapping and the id assignment policy.
    The core only reads through get_by_id() and writes through save().
    """

    @abstractmethod
    async def get_by_id(self, user_id: int) -> User | None:
        """Retrieve a user by id.

        Args:
            user_id: Id of the user.

        Returns:
            The User with that id, or None if no such user exists.

        Raises:
            Exception: If the backing store is unavailable.
        """

    @abstractmethod
    async def save(self, user: User) -> bool:
        """Persist a user, assigning its id.

        Args:
            user: User to persist. Its id is set by the repository.

        Returns:
            True if the user was saved, False otherwise.

        Raises:
            Exception: If the backing store is unavailable.
        """


# ============================================================================
# DRIVING PORTS (Adapters/external systems call into core)
# ============================================================================


class CalculatorPort(ABC):
    """Port for arithmetic operations.

    Implementations live in the core (calculator.py). The CLI adapter
    calls these methods.
    """

    @abstractmethod
    def add(self, a: int, b: int) -> int:
        """Return a + b."""

    @abstractmethod
    def divide(self, a: int, b: int) -> int:
        """Return a / b truncated toward zero.

        Raises:
            ZeroDivisionError: If b is zero.
        """


class UserServicePort(ABC):
    """Port for greeting lookup and user creation.

    Implementations live in the core (user_service.py).
    """

    @abstractmethod
    async def get_greeting(self, user_id: int) -> str:
        """Return a greeting for the user, or "User not found"."""

    @abstractmethod
    async def create_user(self, name: str) -> bool:
        """Create a user with the given name.

        Returns:
            The repository's success flag.
        """
