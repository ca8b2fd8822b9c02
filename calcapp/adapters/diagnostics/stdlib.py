"""Stdlib logging adapter.

Implements LoggerPort by forwarding diagnostic messages to a
``logging.Logger``, so calculator events flow through whatever handlers
the composition root configured.
"""

import logging

from calcapp.core.ports import LoggerPort

DEFAULT_LOGGER_NAME = "calcapp.calculator"


class StdlibLoggerAdapter(LoggerPort):
    """Forwards each message to a stdlib logger at a fixed level."""

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.INFO,
    ):
        """Initialize the adapter.

        Args:
            logger: Logger to forward to. Defaults to the
                "calcapp.calculator" logger.
            level: Level every message is emitted at.
        """
        self.logger = logger or logging.getLogger(DEFAULT_LOGGER_NAME)
        self.level = level

    def log(self, message: str) -> None:
        self.logger.log(self.level, message)


class NullLoggerAdapter(LoggerPort):
    """Discards every message."""

    def log(self, message: str) -> None:
        return None
