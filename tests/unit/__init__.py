# tests/unit/__init__.py
"""
Unit tests for MeetingBot.

Unit tests exercise services, repositories and adapters directly, without
going through the HTTP layer.
"""
