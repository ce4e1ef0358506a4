# src/meetingbot/core/__init__.py
"""
Core domain layer - entities, ports and the dependency container.

Following Ports and Adapters (Hexagonal Architecture):
- Ports are the interfaces the domain uses to reach storage and cache
- Adapters (``meetingbot.adapters``, ``meetingbot.infrastructure``) implement them
"""

from .models import Meeting, Task, TaskStatus
from .ports import StoreProtocol, CacheProtocol, SummarizerProtocol

__all__ = [
    "Meeting",
    "Task",
    "TaskStatus",
    "StoreProtocol",
    "CacheProtocol",
    "SummarizerProtocol",
]
