"""
Shared test fixtures.

Environment variables are set before any application module is imported so
the cached settings never point at real services.
"""

import os

os.environ["PYTHON_ENV"] = "test"
os.environ["RESEND_API_KEY"] = ""
os.environ["ADMIN_EMAIL"] = "admin@foundation.test"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402


@pytest.fixture
def mock_db():
    """Create a mock database session."""
    db = AsyncMock()
    db.commit = AsyncMock()
    db.refresh = AsyncMock()
    db.rollback = AsyncMock()
    db.get = AsyncMock()
    db.execute = AsyncMock()
    db.add = MagicMock()
    return db


@pytest.fixture
def background_tasks():
    """Stand-in for FastAPI BackgroundTasks that records queued work."""
    tasks = MagicMock()
    tasks.add_task = MagicMock()
    return tasks
