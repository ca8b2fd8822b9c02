"""Arithmetic orchestration for calcapp.

The calculator logs every operation through a LoggerPort and,
when a ResultStorePort is attached, persists each successful result.
"""

from .ports import CalculatorPort, LoggerPort, ResultStorePort


class Calculator(CalculatorPort):
    """Adds and divides integers.

    Uses ports but contains no adapter-specific logic. The store is
    optional: a calculator built with only a logger never persists.
    """

    def __init__(
        self,
        logger: LoggerPort,
        store: ResultStorePort | None = None,
    ):
        self._logger = logger
        self._store = store

    @property
    def logger(self) -> LoggerPort:
        return self._logger

    @property
    def store(self) -> ResultStorePort | None:
        return self._store

    def add(self, a: int, b: int) -> int:
        """Log, add, then persist the sum."""
        self._logger.log(f"Adding {a} and {b}")
        result = a + b
        self._persist(result)
        return result

    def divide(self, a: int, b: int) -> int:
        """Log, divide truncating toward zero, then persist the quotient.

        Raises:
            ZeroDivisionError: If b is zero. Logged first, never persisted.
        """
        if b == 0:
            self._logger.log("Attempted division by zero")
            raise ZeroDivisionError("division by zero")

        self._logger.log(f"Dividing {a} by {b}")
        result = _truncating_div(a, b)
        self._persist(result)
        return result

    def _persist(self, value: int) -> None:
        if self._store is not None:
            self._store.save(value)


def _truncating_div(a: int, b: int) -> int:
    # Python's // floors; integer division here rounds toward zero.
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient
