"""Test suite for calcapp.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes, stubs and mocks for ports

2. adapters/: Integration tests for adapter implementations
   - Tests against real SQLite databases and the logging module

3. fakes/: Port implementations for testing
   - In-memory implementations of LoggerPort, ResultStorePort, etc.
   - Used by core unit tests
"""
