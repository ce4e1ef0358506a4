# src/meetingbot/domains/dashboard/__init__.py
"""
Dashboard Domain

Per-user rollup: meeting total, task status summary, upcoming meetings and
overdue tasks.
"""

from .api import router

__all__ = ["router"]
