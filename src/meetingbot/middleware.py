# src/meetingbot/middleware.py
"""Request logging middleware."""

import logging
import time

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every incoming request and the status it was answered with."""
    
    async def dispatch(self, request: Request, call_next):
        started = time.perf_counter()
        logger.info(f"Incoming request: {request.method} {request.url.path} "
                    f"query={dict(request.query_params)}")
        
        response = await call_next(request)
        
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.debug(f"Outgoing response: {request.method} {request.url.path} "
                     f"status={response.status_code} ({elapsed_ms:.1f}ms)")
        return response
