# src/meetingbot/scripts/__init__.py
"""Command-line helpers."""
