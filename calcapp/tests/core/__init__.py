"""Unit tests for core domain logic.

These tests exercise core business logic without external dependencies.
All external ports are replaced with fakes from tests/fakes/, stubs, or
unittest.mock doubles.
"""
