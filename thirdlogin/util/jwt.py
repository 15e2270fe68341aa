"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from thirdlogin.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload."""

    uid: str
    name: str
    device_flag: int
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    uid: str, name: str, device_flag: int, settings: AuthSettings
) -> tuple[str, datetime]:
    """Create a session token for an account.

    Args:
        uid: Account ID
        name: Account display name
        device_flag: Device the session is issued for
        settings: Authentication settings

    Returns:
        Encoded JWT token and its expiry
    """
    expiry = datetime.now(timezone.utc) + timedelta(days=settings.jwt_expiry_days)

    payload = {
        "uid": uid,
        "name": name,
        "device_flag": device_flag,
        "exp": expiry,
    }

    token = jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)

    return token, expiry


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a session token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
