"""Diagnostic logging adapters.

Implementations:
- StdlibLoggerAdapter (forwards to the logging module)
- NullLoggerAdapter (discards messages)
"""
