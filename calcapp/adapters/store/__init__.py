"""Result store and user repository adapters.

Implementations support multiple backends:
- In-memory (zero-config, process lifetime)
- SQLite (single-file or :memory: database)
"""
