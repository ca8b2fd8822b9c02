"""Integration tests for adapters.

Tests verify that adapters correctly implement port interfaces.
"""
