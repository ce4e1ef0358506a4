# src/meetingbot/__init__.py
"""
MeetingBot - meeting management API.

Meetings and derived tasks per user, transcript summarization with task
fan-out, and cached meeting/dashboard statistics.
"""

__version__ = "0.1.0"
