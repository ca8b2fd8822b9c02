"""Domain models for calcapp.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass


@dataclass
class User:
    """A user record.

    The id is assigned by the repository when the user is saved.
    A user built by the service before saving has ``id=None``.
    """

    id: int | None = None
    name: str | None = None

    def __post_init__(self) -> None:
        """Validate user invariants on creation."""
        if self.id is not None and self.id <= 0:
            raise ValueError(f"id must be positive, got {self.id}")
