# src/meetingbot/adapters/__init__.py
"""
Adapters package - concrete implementations of port interfaces.

- database/sqlite.py - SQLite store adapter (local development, tests)
- database/supabase.py - Supabase store adapter (production)
"""

from .database.sqlite import SQLiteStoreAdapter

__all__ = [
    "SQLiteStoreAdapter",
]
