"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach a real database
os.environ.setdefault(
    "DATABASE_URI",
    "sqlite+aiosqlite:///test.db",
)
