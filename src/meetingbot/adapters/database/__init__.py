# src/meetingbot/adapters/database/__init__.py
"""
Database adapters package.

Contains concrete implementations of StoreProtocol for different backends.
The Supabase adapter is imported lazily by the container so the supabase
client is only required when that backend is selected.
"""

from .sqlite import SQLiteStoreAdapter

__all__ = [
    "SQLiteStoreAdapter",
]
