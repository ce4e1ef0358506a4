# src/meetingbot/auth.py
"""Bearer-token authentication for MeetingBot."""

import logging
from datetime import timedelta
from typing import Optional

import jwt
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from .config import parse_duration
from .core.dates import utcnow
from .errors import AuthenticationError

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"

# Only these prefixes require a token
PROTECTED_PREFIXES = ("/api/",)


def generate_token(user_id: str, secret: str, expires_in: str = "1h") -> str:
    """Sign a JWT whose ``sub`` claim is the user id."""
    now = utcnow()
    payload = {
        "sub": user_id,
        "iat": now,
        "exp": now + timedelta(seconds=parse_duration(expires_in)),
    }
    return jwt.encode(payload, secret, algorithm=ALGORITHM)


def verify_token(token: str, secret: str) -> str:
    """
    Verify a JWT and return its subject.
    
    Raises:
        AuthenticationError: bad signature, expired, or no subject
    """
    try:
        payload = jwt.decode(token, secret, algorithms=[ALGORITHM])
    except jwt.PyJWTError as e:
        logger.info(f"Rejected token: {e}")
        raise AuthenticationError("Invalid token", invalid=True)
    
    subject = payload.get("sub")
    if not subject:
        raise AuthenticationError("Invalid token", invalid=True)
    return str(subject)


def extract_bearer(header: Optional[str]) -> str:
    if not header or not header.startswith("Bearer "):
        raise AuthenticationError("Authentication required")
    token = header[len("Bearer "):].strip()
    if not token:
        raise AuthenticationError("Authentication required")
    return token


class AuthMiddleware(BaseHTTPMiddleware):
    """Middleware to check the bearer token on protected routes."""
    
    def __init__(self, app, secret: str):
        super().__init__(app)
        self._secret = secret
    
    async def dispatch(self, request: Request, call_next):
        path = request.url.path
        
        if not path.startswith(PROTECTED_PREFIXES):
            return await call_next(request)
        
        try:
            token = extract_bearer(request.headers.get("Authorization"))
            request.state.user_id = verify_token(token, self._secret)
        except AuthenticationError as e:
            return e.to_response()
        
        return await call_next(request)


def current_user_id(request: Request) -> str:
    """FastAPI dependency: the user id resolved by AuthMiddleware."""
    user_id = getattr(request.state, "user_id", None)
    if not user_id:
        raise AuthenticationError("Authentication required")
    return user_id
