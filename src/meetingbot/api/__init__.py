# src/meetingbot/api/__init__.py
"""
Shared API pieces: request models, dependencies and error handlers.

Routers live with their domain under ``meetingbot.domains``.
"""
