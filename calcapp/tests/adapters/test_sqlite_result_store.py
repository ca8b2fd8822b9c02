"""Integration tests for the SQLite result store.

CalculatorDbFixture is shared by every test in TestCalculatorWithSQLiteStore
through a class-scoped fixture, so the in-memory database is created once
and accumulates results across those tests.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from calcapp.adapters.store.sqlite import SQLiteResultStore
from calcapp.core.calculator import Calculator
from calcapp.core.ports import LoggerPort


class CalculatorDbFixture:
    """A calculator backed by an in-memory SQLite result store."""

    def __init__(self):
        self.mock_logger = MagicMock(spec=LoggerPort)
        self.store = SQLiteResultStore(":memory:")
        self.calculator = Calculator(self.mock_logger, self.store)

    def close(self) -> None:
        self.store.close()


@pytest.fixture(scope="class")
def db_fixture():
    """Create one CalculatorDbFixture per test class."""
    fixture = CalculatorDbFixture()
    yield fixture
    fixture.close()


class TestCalculatorWithSQLiteStore:
    """Tests share one database; each asserts on the results it added."""

    def test_add_saves_result(self, db_fixture: CalculatorDbFixture) -> None:
        """Test that add stores the sum in the database."""
        db_fixture.mock_logger.reset_mock()
        before = db_fixture.store.fetch_all()

        result = db_fixture.calculator.add(2, 3)

        assert result == 5
        db_fixture.mock_logger.log.assert_called_once_with("Adding 2 and 3")
        assert db_fixture.store.fetch_all() == before + [5]

    def test_divide_saves_result(self, db_fixture: CalculatorDbFixture) -> None:
        """Test that divide stores the quotient in the database."""
        before = db_fixture.store.fetch_all()

        assert db_fixture.calculator.divide(-7, 2) == -3
        assert db_fixture.store.fetch_all() == before + [-3]

    def test_divide_by_zero_saves_nothing(
        self, db_fixture: CalculatorDbFixture
    ) -> None:
        """Test that a failed division leaves the database untouched."""
        before = db_fixture.store.fetch_all()

        with pytest.raises(ZeroDivisionError):
            db_fixture.calculator.divide(1, 0)

        assert db_fixture.store.fetch_all() == before

    def test_fixture_is_shared(self, db_fixture: CalculatorDbFixture) -> None:
        """Test that results from earlier tests in this class are visible."""
        assert len(db_fixture.store.fetch_all()) >= 1


class TestSQLiteResultStore:
    def test_fetch_all_empty(self) -> None:
        store = SQLiteResultStore()
        try:
            assert store.fetch_all() == []
        finally:
            store.close()

    def test_results_in_insertion_order(self) -> None:
        store = SQLiteResultStore()
        try:
            for value in (3, -1, 0, 3):
                store.save(value)
            assert store.fetch_all() == [3, -1, 0, 3]
        finally:
            store.close()

    def test_file_database_persists_across_instances(self, tmp_path: Path) -> None:
        """Test that a file-backed store keeps results after reopening."""
        db_path = str(tmp_path / "nested" / "results.db")

        store = SQLiteResultStore(db_path)
        store.save(42)
        store.close()

        reopened = SQLiteResultStore(db_path)
        try:
            assert reopened.fetch_all() == [42]
        finally:
            reopened.close()

    def test_close_is_idempotent(self) -> None:
        store = SQLiteResultStore()
        store.save(1)
        store.close()
        store.close()
