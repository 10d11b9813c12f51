"""Root conftest — shared test configuration."""

import os

# Never point tests at a real store or a developer .env
os.environ.setdefault("ENV", "test")
os.environ.setdefault("DB_URI", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("DB_COLLECTION", "instances")
os.environ.setdefault("LOG_FORMAT", "text")
