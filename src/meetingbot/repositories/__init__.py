# src/meetingbot/repositories/__init__.py
"""
Repository layer - owner-scoped data access over a StoreProtocol.

Every query a repository issues on behalf of a user carries that user's id,
so callers never see another user's records.
"""

from .base import Page, OwnerScopedRepository
from .meetings import MeetingRepository
from .tasks import TaskRepository

__all__ = [
    "Page",
    "OwnerScopedRepository",
    "MeetingRepository",
    "TaskRepository",
]
