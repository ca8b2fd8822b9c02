"""Composition root for calcapp.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Interactive CLI loop
"""

import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import Any

from calcapp.adapters.cli.commands import CLICommandHandler
from calcapp.adapters.diagnostics.stdlib import StdlibLoggerAdapter
from calcapp.adapters.store.memory import InMemoryResultStore, InMemoryUserRepository
from calcapp.adapters.store.sqlite import SQLiteResultStore, SQLiteUserRepository
from calcapp.config import Settings, load_settings
from calcapp.core.calculator import Calculator
from calcapp.core.models import User
from calcapp.core.ports import ResultStorePort, UserRepositoryPort
from calcapp.core.user_service import UserService


@dataclass
class Services:
    """Wired core services plus the adapters that need closing."""

    calculator: Calculator
    user_service: UserService
    result_store: ResultStorePort | None
    user_repository: UserRepositoryPort

    async def close(self) -> None:
        if isinstance(self.result_store, SQLiteResultStore):
            self.result_store.close()
        if isinstance(self.user_repository, SQLiteUserRepository):
            await self.user_repository.close()


async def build_services(settings: Settings) -> Services:
    """Instantiate adapters from settings and inject them into the core.

    The user repository is seeded with settings.seed_users only when it
    is empty, so a SQLite file keeps its users across runs.
    """
    logger = logging.getLogger(__name__)

    result_store: ResultStorePort | None = None
    user_repository: UserRepositoryPort

    if settings.store_backend == "memory":
        if settings.result_store_enabled:
            result_store = InMemoryResultStore()
        user_repository = InMemoryUserRepository(
            User(id=i, name=name) for i, name in enumerate(settings.seed_users, 1)
        )
        logger.info("Store adapters: in-memory")
    elif settings.store_backend == "sqlite":
        if settings.result_store_enabled:
            result_store = SQLiteResultStore(db_path=settings.store_sqlite_path)
        sqlite_users = SQLiteUserRepository(db_path=settings.store_sqlite_path)
        try:
            if await sqlite_users.count() == 0:
                for name in settings.seed_users:
                    await sqlite_users.save(User(name=name))
        except Exception:
            logger.error("Failed to seed SQLite user repository", exc_info=True)
            await sqlite_users.close()
            if isinstance(result_store, SQLiteResultStore):
                result_store.close()
            raise
        user_repository = sqlite_users
        logger.info(f"Store adapters: SQLite at {settings.store_sqlite_path}")
    else:
        raise ValueError(f"Unknown store backend: {settings.store_backend}")

    level = logging.DEBUG if settings.debug else logging.INFO
    calculator = Calculator(StdlibLoggerAdapter(level=level), result_store)
    user_service = UserService(user_repository)

    return Services(
        calculator=calculator,
        user_service=user_service,
        result_store=result_store,
        user_repository=user_repository,
    )


async def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for calculator and user commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read command from stdin in a thread to avoid blocking
            command_line = await loop.run_in_executor(None, input, "calcapp> ")
            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = await _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _require(args: dict[str, Any], *names: str) -> None:
    for name in names:
        if name not in args:
            raise ValueError(f"Missing required parameter: {name}")


def _int_arg(args: dict[str, Any], name: str) -> int:
    _require(args, name)
    value = args[name]
    # bool is an int subclass; JSON true/false is not an operand.
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    return value


def _str_arg(args: dict[str, Any], name: str) -> str:
    _require(args, name)
    value = args[name]
    if not isinstance(value, str):
        raise ValueError(f"{name} must be a string")
    return value


async def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized, or arguments are missing
            or of the wrong type.
    """
    if command == "add":
        return cli_handler.add(_int_arg(args, "a"), _int_arg(args, "b"))

    elif command == "divide":
        return cli_handler.divide(_int_arg(args, "a"), _int_arg(args, "b"))

    elif command == "greet":
        return await cli_handler.greet(_int_arg(args, "user_id"))

    elif command == "create":
        return await cli_handler.create_user(_str_arg(args, "name"))

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  add
    Add two integers.
    Required: a, b

    Example: add {"a": 2, "b": 3}

  divide
    Divide two integers, truncating toward zero.
    Required: a, b

    Example: divide {"a": 10, "b": 2}

  greet
    Greet a user by id.
    Required: user_id

    Example: greet {"user_id": 1}

  create
    Create a user.
    Required: name

    Example: create {"name": "Charlie"}

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and inject them into core services
    4. Run the interactive CLI
    5. Close adapters on exit
    """
    settings = load_settings()

    level = "DEBUG" if settings.debug else settings.log_level
    configure_logging(level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading calcapp...")

    services = await build_services(settings)
    try:
        cli_handler = CLICommandHandler(services.calculator, services.user_service)
        await _run_cli_interactive(cli_handler)
    finally:
        await services.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
