# src/meetingbot/domains/meetings/__init__.py
"""Meetings Domain"""

from .api import router

__all__ = ["router"]
