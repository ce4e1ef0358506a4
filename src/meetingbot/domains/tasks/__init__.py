# src/meetingbot/domains/tasks/__init__.py
"""Tasks Domain"""

from .api import router

__all__ = ["router"]
