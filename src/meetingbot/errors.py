# src/meetingbot/errors.py
"""
Error taxonomy for MeetingBot.

Services raise these domain exceptions; the API layer turns them into JSON
responses through the handlers registered in ``main.create_app``:

- AuthenticationError -> 401 {"message": ...}
- ValidationError     -> 400 {"errors": [...]}
- NotFoundError       -> 404 {"message": ...}
- InternalError       -> 500 {"message": ...}
"""

from enum import Enum
from typing import Dict, List, Optional

from fastapi.responses import JSONResponse


class ErrorCode(str, Enum):
    """Error categories with a fixed HTTP status each."""
    AUTH_REQUIRED = "AUTH_REQUIRED"
    AUTH_INVALID = "AUTH_INVALID"
    VALIDATION_ERROR = "VALIDATION_ERROR"
    NOT_FOUND = "NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"


ERROR_CODE_TO_HTTP_STATUS: Dict[ErrorCode, int] = {
    ErrorCode.AUTH_REQUIRED: 401,
    ErrorCode.AUTH_INVALID: 401,
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.NOT_FOUND: 404,
    ErrorCode.INTERNAL_ERROR: 500,
}


class MeetingBotError(Exception):
    """Base class for all errors that map onto an HTTP response."""
    
    error_code: ErrorCode = ErrorCode.INTERNAL_ERROR
    
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
    
    @property
    def status_code(self) -> int:
        return ERROR_CODE_TO_HTTP_STATUS.get(self.error_code, 500)
    
    def to_content(self) -> Dict[str, object]:
        return {"message": self.message}
    
    def to_response(self) -> JSONResponse:
        """Convert to JSONResponse for exception handlers."""
        return JSONResponse(status_code=self.status_code, content=self.to_content())


class AuthenticationError(MeetingBotError):
    error_code = ErrorCode.AUTH_REQUIRED
    
    def __init__(self, message: str = "Authentication required", invalid: bool = False):
        super().__init__(message)
        if invalid:
            self.error_code = ErrorCode.AUTH_INVALID


class ValidationError(MeetingBotError):
    """Malformed input. Carries one message per offending field."""
    
    error_code = ErrorCode.VALIDATION_ERROR
    
    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.errors = errors or [message]
    
    def to_content(self) -> Dict[str, object]:
        return {"errors": self.errors}


class NotFoundError(MeetingBotError):
    error_code = ErrorCode.NOT_FOUND


class InternalError(MeetingBotError):
    error_code = ErrorCode.INTERNAL_ERROR
    
    def __init__(self, message: str = "Internal Server Error"):
        super().__init__(message)
