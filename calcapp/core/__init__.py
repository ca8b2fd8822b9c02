"""Core domain logic for calcapp.

This package contains zero external dependencies and represents
the pure business logic of the application. All adapters and
external integrations are handled by the adapters package.
"""

from .models import User

__all__ = [
    "User",
]
