# rentportal/routes/auth.py
import logging

from flask import Blueprint, current_app, g

from ..extensions import db
from ..models import Role
from ..security import authenticate
from ..services.auth_service import AuthService
from ..utils.responses import envelope
from ..validation import email, one_of, string, validate_body, validate_query

logger = logging.getLogger(__name__)

bp = Blueprint("auth", __name__)


def _service() -> AuthService:
    return AuthService(db.session, password_rounds=current_app.config.get("PASSWORD_HASH_ROUNDS"))


def _issued(result):
    return {"user": result.user.serialize(), "token": result.token, "refreshToken": result.refresh_token}


@bp.post("/auth/register")
@validate_body(
    email=email(),
    password=string(min_length=6, max_length=128, strip=False),
    firstName=string(max_length=100),
    lastName=string(max_length=100),
    phone=string(max_length=30, required=False),
    role=one_of(Role),
)
def register():
    data = g.validated
    result = _service().register(
        email=data["email"],
        password=data["password"],
        first_name=data["firstName"],
        last_name=data["lastName"],
        phone=data["phone"],
        role=data["role"],
    )
    return envelope(_issued(result), "User registered successfully", 201)


@bp.post("/auth/login")
@validate_body(email=email(), password=string(max_length=128, strip=False))
def login():
    data = g.validated
    result = _service().login(data["email"], data["password"])
    return envelope(_issued(result), "Login successful")


@bp.post("/auth/refresh")
@validate_body(refreshToken=string(max_length=4096))
def refresh():
    token = _service().refresh_access_token(g.validated["refreshToken"])
    return envelope({"token": token}, "Token refreshed successfully")


@bp.post("/auth/logout")
@authenticate
def logout():
    # Tokens are stateless; the client discards them.
    logger.info("User %s logged out", g.current_user.id)
    return envelope(message="Logged out successfully")


@bp.get("/auth/me")
@authenticate
def me():
    return envelope(g.current_user.serialize(), "User retrieved successfully")


@bp.get("/auth/check-email")
@validate_query(email=email())
def check_email():
    address = g.validated["email"]
    available = _service().is_email_available(address)
    return envelope({
        "email": address,
        "available": available,
        "message": "Email is available" if available else "Email is already registered or used in an application",
    })
