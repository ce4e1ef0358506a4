# src/meetingbot/services/__init__.py
"""
Service layer - business logic over repositories, cache and summarizer.

Services receive their collaborators through the constructor; the
``core.container.Container`` wires them for the app.
"""

from .summarizer import MockSummarizer
from .meeting_service import MeetingService
from .stats_engine import StatsEngine
from .task_service import TaskService

__all__ = [
    "MockSummarizer",
    "MeetingService",
    "StatsEngine",
    "TaskService",
]
