"""External adapters for calcapp.

This package contains all external dependencies (stdlib logging, SQLite,
aiosqlite, the command line) and provides implementations of the core
port interfaces.

Adapter Organization:

- diagnostics/: Adapters for diagnostic messages (stdlib logging, no-op)
- store/: Adapters for result and user persistence (in-memory, SQLite)
- cli/: Command-line command handler
"""
