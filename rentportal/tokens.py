"""
Signed, stateless JWTs for API authentication.

Access and refresh tokens carry only the user id (``sub``) plus ``iat`` and
``exp``. They are signed with different secrets, so a refresh token is never
accepted as an access token and vice versa. There is no server-side store:
logging out means the client discards its tokens.
"""
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app

ACCESS = "access"
REFRESH = "refresh"

_SECRET_KEYS = {
    ACCESS: "JWT_SECRET_KEY",
    REFRESH: "JWT_REFRESH_SECRET_KEY",
}
_LIFETIMES = {
    ACCESS: "JWT_ACCESS_TOKEN_EXPIRES",
    REFRESH: "JWT_REFRESH_TOKEN_EXPIRES",
}


class InvalidTokenError(Exception):
    """Token is malformed, expired, or signed with the wrong key."""


def _encode(user_id, kind: str, expires_delta: timedelta = None) -> str:
    config = current_app.config
    now = datetime.now(timezone.utc)
    payload = {
        "sub": str(user_id),
        "iat": now,
        "exp": now + (expires_delta if expires_delta is not None else config[_LIFETIMES[kind]]),
    }
    return jwt.encode(payload, config[_SECRET_KEYS[kind]], algorithm=config["JWT_ALGORITHM"])


def create_access_token(user_id, expires_delta: timedelta = None) -> str:
    return _encode(user_id, ACCESS, expires_delta)


def create_refresh_token(user_id, expires_delta: timedelta = None) -> str:
    return _encode(user_id, REFRESH, expires_delta)


def decode_token(token: str, kind: str = ACCESS) -> int:
    """Verify ``token`` and return the user id it was issued for."""
    config = current_app.config
    try:
        payload = jwt.decode(
            token,
            config[_SECRET_KEYS[kind]],
            algorithms=[config["JWT_ALGORITHM"]],
            options={"require": ["sub", "exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise InvalidTokenError("Token has expired") from e
    except jwt.PyJWTError as e:
        raise InvalidTokenError("Invalid token") from e

    try:
        return int(payload["sub"])
    except (TypeError, ValueError) as e:
        raise InvalidTokenError("Invalid token subject") from e
