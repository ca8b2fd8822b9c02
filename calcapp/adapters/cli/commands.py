"""CLI command implementations for calcapp.

This adapter maps CLI commands (add, divide, greet, create) to the
CalculatorPort and UserServicePort driving ports. It handles
CLI-specific formatting and error reporting.
"""

import logging
from typing import Any

from calcapp.core.ports import CalculatorPort, UserServicePort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to the driving ports.

    Every command returns a JSON-serializable dictionary with a
    "status" of "success" or "error".
    """

    def __init__(self, calculator: CalculatorPort, users: UserServicePort):
        """Initialize the CLI command handler.

        Args:
            calculator: CalculatorPort implementation for arithmetic.
            users: UserServicePort implementation for user commands.
        """
        self.calculator = calculator
        self.users = users

    def add(self, a: int, b: int) -> dict[str, Any]:
        """Add two integers via CLI."""
        return {
            "status": "success",
            "operation": "add",
            "result": self.calculator.add(a, b),
        }

    def divide(self, a: int, b: int) -> dict[str, Any]:
        """Divide two integers via CLI.

        Division by zero is reported as an error result rather than raised.
        """
        try:
            result = self.calculator.divide(a, b)
        except ZeroDivisionError as e:
            logger.error(f"Failed to divide {a} by {b}: {e}")
            return {
                "status": "error",
                "operation": "divide",
                "message": str(e),
            }

        return {
            "status": "success",
            "operation": "divide",
            "result": result,
        }

    async def greet(self, user_id: int) -> dict[str, Any]:
        """Look up the greeting for a user via CLI.

        A missing user still succeeds; the greeting carries the
        "User not found" message.
        """
        greeting = await self.users.get_greeting(user_id)
        return {
            "status": "success",
            "operation": "greet",
            "user_id": user_id,
            "greeting": greeting,
        }

    async def create_user(self, name: str) -> dict[str, Any]:
        """Create a user via CLI."""
        if not name or not name.strip():
            return {
                "status": "error",
                "operation": "create",
                "message": "name must be a non-empty string",
            }

        saved = await self.users.create_user(name)
        if not saved:
            logger.error(f"Repository refused to save user {name!r}")
            return {
                "status": "error",
                "operation": "create",
                "name": name,
                "message": f"User {name} was not saved",
            }

        return {
            "status": "success",
            "operation": "create",
            "name": name,
            "message": f"User {name} created",
        }
