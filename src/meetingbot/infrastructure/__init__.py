# src/meetingbot/infrastructure/__init__.py
"""
Infrastructure components for MeetingBot.

Components:
- cache: Redis caching layer with in-memory fallback and a disabled mode
"""

from .cache import CacheManager, CacheEntry

__all__ = [
    "CacheManager",
    "CacheEntry",
]
