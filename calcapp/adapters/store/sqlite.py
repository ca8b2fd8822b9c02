"""SQLite result store and user repository adapters.

SQLiteResultStore implements the synchronous ResultStorePort with the
sqlite3 module. SQLiteUserRepository implements UserRepositoryPort with
aiosqlite for async access. Both accept ":memory:" for a throwaway
database that lives as long as the adapter's connection.
"""

import asyncio
import logging
import sqlite3
from pathlib import Path
from typing import Any

import aiosqlite

from calcapp.core.models import User
from calcapp.core.ports import ResultStorePort, UserRepositoryPort

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


def _prepare_path(db_path: str) -> str:
    """Create the parent directory of a file-backed database."""
    if db_path != MEMORY_DB:
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)
    return db_path


class SQLiteResultStore(ResultStorePort):
    """SQLite-backed result store.

    Results are kept in a ``results`` table in insertion order.
    Each save commits on the caller's thread, which blocks an event loop
    for the duration of the write; ResultStorePort is synchronous.
    """

    def __init__(self, db_path: str = MEMORY_DB):
        """Initialize the store.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
        """
        self.db_path = _prepare_path(db_path)
        self._conn: sqlite3.Connection | None = None

    def _connection(self) -> sqlite3.Connection:
        """Open the connection and create the schema on first use."""
        if self._conn is None:
            conn = sqlite3.connect(self.db_path)
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS results (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    value INTEGER NOT NULL
                )
                """
            )
            conn.commit()
            self._conn = conn
        return self._conn

    def save(self, value: int) -> None:
        conn = self._connection()
        conn.execute("INSERT INTO results (value) VALUES (?)", (value,))
        conn.commit()

    def fetch_all(self) -> list[int]:
        """Return every saved result, oldest first."""
        cursor = self._connection().execute(
            "SELECT value FROM results ORDER BY id"
        )
        return [row[0] for row in cursor.fetchall()]

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None


class SQLiteUserRepository(UserRepositoryPort):
    """SQLite-backed user repository with async access.

    Ids come from the ``users`` table's AUTOINCREMENT column, so deleted
    ids are never reused. A single connection is shared and guarded by
    a lock.
    """

    def __init__(self, db_path: str = MEMORY_DB):
        """Initialize the repository.

        Args:
            db_path: Path to SQLite database file, or ":memory:".
        """
        self.db_path = _prepare_path(db_path)
        self._conn: aiosqlite.Connection | None = None
        self._lock = asyncio.Lock()
        self._schema_initialized = False

    async def _get_connection(self) -> aiosqlite.Connection:
        """Open the connection on first use.

        Callers must hold the lock.
        """
        if self._conn is None:
            self._conn = await aiosqlite.connect(self.db_path)
        return self._conn

    async def _init_schema(self) -> None:
        """Initialize database schema on first use.

        Only runs once per instance. Subsequent calls are no-ops.
        """
        async with self._lock:
            if self._schema_initialized:
                return

            conn = await self._get_connection()
            await conn.execute(
                """
                CREATE TABLE IF NOT EXISTS users (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    name TEXT
                )
                """
            )
            await conn.commit()
            self._schema_initialized = True

    async def get_by_id(self, user_id: int) -> User | None:
        """Look up a user by id."""
        await self._init_schema()

        async with self._lock:
            conn = await self._get_connection()
            cursor = await conn.execute(
                "SELECT id, name FROM users WHERE id = ?", (user_id,)
            )
            row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_user(row)

    async def save(self, user: User) -> bool:
        """Insert a new user, or update one that already has an id.

        The new id is written back onto ``user``.
        """
        await self._init_schema()

        async with self._lock:
            conn = await self._get_connection()
            if user.id is None:
                cursor = await conn.execute(
                    "INSERT INTO users (name) VALUES (?)", (user.name,)
                )
                user.id = cursor.lastrowid
            else:
                await conn.execute(
                    "INSERT OR REPLACE INTO users (id, name) VALUES (?, ?)",
                    (user.id, user.name),
                )
            await conn.commit()

        logger.debug(f"Saved user {user.id}")
        return True

    async def count(self) -> int:
        """Number of stored users."""
        await self._init_schema()

        async with self._lock:
            conn = await self._get_connection()
            cursor = await conn.execute("SELECT COUNT(*) FROM users")
            row = await cursor.fetchone()
        return row[0]

    async def close(self) -> None:
        async with self._lock:
            if self._conn is not None:
                await self._conn.close()
                self._conn = None
                self._schema_initialized = False

    @staticmethod
    def _row_to_user(row: tuple[Any, ...]) -> User:
        """Convert a database row to a User.

        Raises:
            ValueError: If the row is malformed.
        """
        if len(row) != 2:
            raise ValueError(f"Invalid row length: expected 2, got {len(row)}")

        user_id, name = row
        if not isinstance(user_id, int):
            raise ValueError(f"Invalid user id: {user_id!r}")
        return User(id=user_id, name=name)
