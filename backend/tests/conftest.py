"""Root conftest — shared test configuration."""

import os

# Settings are read when translation_api.main is imported
os.environ.setdefault(
    "DATABASE_URL",
    "sqlite+aiosqlite:///test.db",
)
os.environ.setdefault("SESSION_SECRET_KEY", "test-session-secret")
os.environ.setdefault("LOG_FORMAT", "text")
