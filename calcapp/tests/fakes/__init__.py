"""Fake/stub implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- RecordingLogger: Captured diagnostic messages for assertion
- FakeResultStore: Captured saved results for assertion
- FakeUserRepository: Working in-memory repository seeded with Alice and Bob
- StubUserRepository: Canned responses, no state
"""

from .logger import RecordingLogger
from .store import FakeResultStore
from .users import FakeUserRepository, StubUserRepository

__all__ = [
    "FakeResultStore",
    "FakeUserRepository",
    "RecordingLogger",
    "StubUserRepository",
]
