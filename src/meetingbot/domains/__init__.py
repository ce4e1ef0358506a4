# src/meetingbot/domains/__init__.py
"""
Domain routers.

- meetings: CRUD, transcript, summarize, statistics
- tasks: task listing
- dashboard: dashboard rollup
"""
