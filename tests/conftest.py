# tests/conftest.py
"""
Pytest configuration and fixtures for the MeetingBot test suite.

Provides:
- A per-test SQLite store in tmp_path (schema initialized)
- An in-memory cache and a container wired with both
- FastAPI test client plus bearer-token headers
- Factories for meetings and tasks

Tests never touch Redis or Supabase; the cache runs in memory mode and the
store is a throwaway SQLite file.
"""

import asyncio
import os
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Generator, List, Optional

import pytest
from fastapi.testclient import TestClient

# Set test environment before imports
os.environ["MEETINGBOT_ENV"] = "test"
os.environ["JWT_SECRET"] = "test-secret"

from meetingbot.adapters.database.sqlite import SQLiteStoreAdapter
from meetingbot.auth import generate_token
from meetingbot.config import AppConfig
from meetingbot.core.container import Container
from meetingbot.core.models import Meeting, Task, TaskStatus
from meetingbot.infrastructure.cache import CacheManager
from meetingbot.main import create_app
from meetingbot.repositories import MeetingRepository, TaskRepository

TEST_SECRET = "test-secret"
USER_ID = "user-1"
OTHER_USER_ID = "user-2"

# Fixed "current time" for engine and summarizer tests (a Wednesday)
NOW = datetime(2024, 3, 13, 12, 0, tzinfo=timezone.utc)


# ============== Store & Cache Fixtures ==============

@pytest.fixture(scope="function")
def test_config(tmp_path) -> AppConfig:
    """Configuration pointing at a throwaway SQLite file."""
    return AppConfig(
        environment="test",
        database_type="sqlite",
        database_uri=str(tmp_path / "meetingbot-test.db"),
        jwt_secret=TEST_SECRET,
        log_level="WARNING",
    )


@pytest.fixture(scope="function")
def store(test_config) -> SQLiteStoreAdapter:
    """SQLite store with the schema already created."""
    adapter = SQLiteStoreAdapter(test_config.database_uri)
    asyncio.run(adapter.init())
    return adapter


@pytest.fixture(scope="function")
def cache() -> CacheManager:
    """Enabled cache in memory mode (no Redis URL)."""
    return CacheManager()


@pytest.fixture
def meeting_repo(store) -> MeetingRepository:
    return MeetingRepository(store)


@pytest.fixture
def task_repo(store) -> TaskRepository:
    return TaskRepository(store)


# ============== FastAPI Client Fixtures ==============

@pytest.fixture(scope="function")
def container(test_config, store, cache) -> Container:
    return Container(test_config, store=store, cache=cache)


@pytest.fixture(scope="function")
def app(container):
    return create_app(container=container)


@pytest.fixture(scope="function")
def client(app) -> Generator[TestClient, None, None]:
    """FastAPI test client; entering it runs the startup/shutdown lifespan."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_headers() -> Callable[[str], Dict[str, str]]:
    """Build Authorization headers for any user id."""
    def _headers(user_id: str = USER_ID) -> Dict[str, str]:
        return {"Authorization": f"Bearer {generate_token(user_id, TEST_SECRET)}"}
    return _headers


@pytest.fixture
def auth_headers(make_headers) -> Dict[str, str]:
    return make_headers(USER_ID)


@pytest.fixture
def other_headers(make_headers) -> Dict[str, str]:
    return make_headers(OTHER_USER_ID)


# ============== Sample Data Factories ==============

@pytest.fixture
def meeting_factory() -> Callable[..., Meeting]:
    """Factory for unsaved Meeting entities."""
    def _create_meeting(
        title: str = "Weekly Sync",
        date: datetime = datetime(2024, 1, 15, 10, 0, tzinfo=timezone.utc),
        participants: Optional[List[str]] = None,
        user_id: str = USER_ID,
        duration: Optional[int] = None,
    ) -> Meeting:
        meeting = Meeting(
            user_id=user_id,
            title=title,
            date=date,
            participants=participants or ["Alice", "Bob"],
        )
        if duration is not None:
            meeting.end_date = date + timedelta(minutes=duration)
            meeting.duration = duration
        return meeting
    return _create_meeting


@pytest.fixture
def task_factory() -> Callable[..., Task]:
    """Factory for unsaved Task entities."""
    def _create_task(
        title: str = "Follow up",
        due_date: datetime = NOW - timedelta(days=1),
        status: TaskStatus = TaskStatus.PENDING,
        user_id: str = USER_ID,
        meeting_id: Optional[str] = None,
    ) -> Task:
        return Task(
            user_id=user_id,
            title=title,
            due_date=due_date,
            status=status,
            meeting_id=meeting_id,
            description="Test task",
        )
    return _create_task


@pytest.fixture
def meeting_payload() -> Callable[..., Dict[str, Any]]:
    """Factory for POST /api/meetings bodies."""
    def _payload(
        title: str = "Standup",
        date: str = "2024-01-15T10:00:00.000Z",
        participants: Optional[List[str]] = None,
    ) -> Dict[str, Any]:
        return {
            "title": title,
            "date": date,
            "participants": participants if participants is not None else ["Alice", "Bob"],
        }
    return _payload


# ============== Assertion Helpers ==============

@pytest.fixture
def assert_response_success():
    """Helper to assert successful API responses."""
    def _assert(response, status_code: int = 200):
        assert response.status_code == status_code, f"Expected {status_code}, got {response.status_code}: {response.text}"
        return response.json()
    return _assert


@pytest.fixture
def now() -> datetime:
    """The fixed clock value used by engine and summarizer fixtures."""
    return NOW
