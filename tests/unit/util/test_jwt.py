"""Unit tests for session token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
import pytest

from thirdlogin.config import AuthSettings
from thirdlogin.util.jwt import JWTError, create_token, verify_token


@pytest.fixture
def auth_settings() -> AuthSettings:
    return AuthSettings(jwt_secret="test-secret", jwt_expiry_days=30)


class TestTokens:
    """Tests for create_token and verify_token."""

    def test_round_trip(self, auth_settings):
        token, expires_at = create_token("u-1", "Octocat", 1, auth_settings)

        payload = verify_token(token, auth_settings)

        assert payload.uid == "u-1"
        assert payload.name == "Octocat"
        assert payload.device_flag == 1
        assert expires_at - datetime.now(timezone.utc) > timedelta(days=29)

    def test_wrong_secret_rejected(self, auth_settings):
        token, _ = create_token("u-1", "Octocat", 0, auth_settings)

        with pytest.raises(JWTError, match="Invalid"):
            verify_token(token, AuthSettings(jwt_secret="other-secret"))

    def test_expired_rejected(self, auth_settings):
        token = jwt.encode(
            {
                "uid": "u-1",
                "name": "Octocat",
                "device_flag": 0,
                "exp": datetime.now(timezone.utc) - timedelta(seconds=1),
            },
            "test-secret",
            algorithm="HS256",
        )

        with pytest.raises(JWTError, match="expired"):
            verify_token(token, auth_settings)
