"""Root conftest: shared test configuration."""

import os

# Tests never touch a real Postgres instance
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
