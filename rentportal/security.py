# rentportal/security.py
import logging
from functools import wraps

from flask import g, request

from .errors import ForbiddenError, UnauthorizedError
from .extensions import db
from .models import Role, User
from .tokens import ACCESS, InvalidTokenError, decode_token

logger = logging.getLogger(__name__)


def _bearer_token():
    header = request.headers.get("Authorization", "")
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def load_current_user() -> User:
    """Verify the bearer token and attach the user to ``g.current_user``."""
    token = _bearer_token()
    if not token:
        raise UnauthorizedError("Not authorized, no token")
    try:
        user_id = decode_token(token, ACCESS)
    except InvalidTokenError as e:
        raise UnauthorizedError("Not authorized, token failed") from e

    user = db.session.get(User, user_id)
    if user is None or not user.is_active:
        logger.warning("Token presented for missing or inactive user %s", user_id)
        raise UnauthorizedError("Not authorized, user not found or inactive")
    g.current_user = user
    return user


def authenticate(fn):
    """Usage: @authenticate"""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        load_current_user()
        return fn(*args, **kwargs)
    return wrapper


def roles_required(*allowed):
    """Usage: @roles_required(Role.LANDLORD)"""
    for role in allowed:
        if not isinstance(role, Role):
            raise TypeError(f"roles_required expects Role members, got {role!r}")
    allowed = frozenset(allowed)

    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            user = load_current_user()
            if user.role not in allowed:
                logger.info("User %s with role %s denied access to %s", user.id, user.role.value, request.path)
                raise ForbiddenError(f"User role {user.role.value} is not authorized to access this route")
            return fn(*args, **kwargs)
        return wrapper
    return deco
