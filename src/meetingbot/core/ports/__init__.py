# src/meetingbot/core/ports/__init__.py
"""
Port Interfaces for Dependency Inversion

Protocol-based interfaces that adapters must implement.
Using Protocols (structural subtyping) instead of ABC for:
- No inheritance required - just implement the methods
- Easier mocking in tests
"""

from .protocols import (
    MEETINGS,
    TASKS,
    StoreProtocol,
    CacheProtocol,
    SummarizerProtocol,
)

__all__ = [
    "MEETINGS",
    "TASKS",
    "StoreProtocol",
    "CacheProtocol",
    "SummarizerProtocol",
]
