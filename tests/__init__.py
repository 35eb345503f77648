"""Test suite for the escape-room back office.

Test structure follows the test pyramid:
- unit/: Unit tests - Domain entities, validators and command handlers in isolation
- integration/: Integration tests - Repositories against an in-memory SQLite database

Integration tests need no external services; the async engine runs on aiosqlite.
"""
