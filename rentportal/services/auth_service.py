"""User registration, login and token refresh."""
import logging
from typing import NamedTuple, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from ..errors import ConflictError, NotFoundError, UnauthorizedError
from ..models import ProspectiveTenantApplication, Role, User
from ..tokens import REFRESH, InvalidTokenError, create_access_token, create_refresh_token, decode_token
from ..validation import normalize_email

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class AuthResult(NamedTuple):
    user: User
    token: str
    refresh_token: str


class AuthService:
    def __init__(self, session, password_rounds: Optional[int] = None):
        self.session = session
        self.password_rounds = password_rounds

    def _find_user(self, email: str) -> Optional[User]:
        return self.session.execute(
            select(User).where(User.email == normalize_email(email))
        ).scalar_one_or_none()

    def _issue(self, user: User) -> AuthResult:
        return AuthResult(user, create_access_token(user.id), create_refresh_token(user.id))

    def register(self, email: str, password: str, first_name: str, last_name: str,
                 role: Role, phone: Optional[str] = None) -> AuthResult:
        email = normalize_email(email)
        if self._find_user(email) is not None:
            raise ConflictError("User already exists with this email")

        user = User(email=email, first_name=first_name, last_name=last_name, phone=phone, role=role)
        user.set_password(password, rounds=self.password_rounds)
        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            # Lost a race with a concurrent registration for the same email
            self.session.rollback()
            raise ConflictError("User already exists with this email")

        logger.info("Registered user %s with role %s", user.id, user.role.value)
        return self._issue(user)

    def login(self, email: str, password: str) -> AuthResult:
        user = self._find_user(email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise UnauthorizedError(INVALID_CREDENTIALS)
        if not user.is_active:
            logger.info("Login failed: user %s is deactivated", user.id)
            raise UnauthorizedError("Account is deactivated")
        if not user.check_password(password):
            logger.info("Login failed: wrong password for user %s", user.id)
            raise UnauthorizedError(INVALID_CREDENTIALS)
        return self._issue(user)

    def refresh_access_token(self, refresh_token: str) -> str:
        try:
            user_id = decode_token(refresh_token, REFRESH)
        except InvalidTokenError as e:
            logger.info("Refresh rejected: %s", e)
            raise UnauthorizedError("Invalid refresh token") from e

        user = self.session.get(User, user_id)
        if user is None or not user.is_active:
            logger.info("Refresh rejected: user %s missing or inactive", user_id)
            raise UnauthorizedError("Invalid refresh token")
        return create_access_token(user.id)

    def is_email_available(self, email: str) -> bool:
        email = normalize_email(email)
        if self._find_user(email) is not None:
            return False
        application_id = self.session.execute(
            select(ProspectiveTenantApplication.id).where(ProspectiveTenantApplication.applicant_email == email)
        ).scalar_one_or_none()
        return application_id is None

    def deactivate(self, email: str) -> User:
        user = self._find_user(email)
        if user is None:
            raise NotFoundError("User not found")
        user.is_active = False
        self.session.commit()
        logger.info("Deactivated user %s", user.id)
        return user
