# src/meetingbot/api/errors.py
"""Exception handlers mapping domain errors onto JSON responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from ..errors import MeetingBotError

logger = logging.getLogger(__name__)


def format_validation_errors(exc: RequestValidationError) -> list:
    """One readable message per offending field, e.g. '"title" field required'."""
    messages = []
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path")]
        field = ".".join(location) or "request"
        messages.append(f'"{field}" {error.get("msg", "is invalid")}')
    return messages


async def meetingbot_error_handler(request: Request, exc: MeetingBotError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return exc.to_response()


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"errors": format_validation_errors(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MeetingBotError, meetingbot_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
