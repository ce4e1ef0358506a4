# tests/unit/test_auth.py
"""
Unit tests for bearer-token authentication.
"""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from meetingbot.auth import ALGORITHM, extract_bearer, generate_token, verify_token
from meetingbot.errors import AuthenticationError

SECRET = "unit-secret"


class TestTokens:
    """Tests for generate_token / verify_token."""

    def test_round_trip(self):
        token = generate_token("user-42", SECRET)

        assert verify_token(token, SECRET) == "user-42"

    def test_expiry_honours_duration(self):
        token = generate_token("user-42", SECRET, expires_in="2h")
        payload = jwt.decode(token, SECRET, algorithms=[ALGORITHM])

        assert payload["exp"] - payload["iat"] == 7200

    def test_wrong_secret_is_invalid(self):
        token = generate_token("user-42", SECRET)

        with pytest.raises(AuthenticationError) as exc:
            verify_token(token, "another-secret")

        assert exc.value.status_code == 401
        assert exc.value.to_content() == {"message": "Invalid token"}

    def test_expired_token_is_invalid(self):
        past = datetime.now(timezone.utc) - timedelta(hours=2)
        token = jwt.encode({"sub": "user-42", "iat": past, "exp": past + timedelta(minutes=1)}, SECRET, algorithm=ALGORITHM)

        with pytest.raises(AuthenticationError):
            verify_token(token, SECRET)

    def test_missing_subject_is_invalid(self):
        token = jwt.encode({"foo": "bar"}, SECRET, algorithm=ALGORITHM)

        with pytest.raises(AuthenticationError):
            verify_token(token, SECRET)

    def test_bad_duration_rejected(self):
        with pytest.raises(ValueError):
            generate_token("user-42", SECRET, expires_in="soon")


class TestExtractBearer:
    """Tests for Authorization header parsing."""

    @pytest.mark.parametrize("header", [None, "", "Basic abc", "Bearer ", "bearer abc"])
    def test_missing_or_malformed(self, header):
        with pytest.raises(AuthenticationError) as exc:
            extract_bearer(header)

        assert exc.value.message == "Authentication required"

    def test_returns_token(self):
        assert extract_bearer("Bearer abc.def.ghi") == "abc.def.ghi"
