"""Shared test fixtures for all test categories.

Database-backed fixtures live in `tests/fixtures/` and are loaded as plugins
so every category (unit, db, intg) sees the same definitions.
"""

pytest_plugins = [
    "tests.fixtures.postgres",
    "tests.fixtures.app",
]
