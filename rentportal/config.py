import os
import re
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()

_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$")
_UNITS = {"": "seconds", "s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


def parse_duration(value, default: timedelta) -> timedelta:
    """Parse "7d", "12h", "30m", "45s" or a plain number of seconds."""
    if value is None or str(value).strip() == "":
        return default
    if isinstance(value, timedelta):
        return value
    match = _DURATION_RE.match(str(value).lower())
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_UNITS[unit]: int(amount)})


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY", "dev-secret")

    # None means "sqlite file in the instance folder", resolved by create_app
    SQLALCHEMY_DATABASE_URI = os.environ.get("DATABASE_URL")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Access and refresh tokens are signed with different keys
    JWT_SECRET_KEY = os.environ.get("JWT_SECRET_KEY", "dev-jwt-secret")
    JWT_REFRESH_SECRET_KEY = os.environ.get("JWT_REFRESH_SECRET_KEY", "dev-jwt-refresh-secret")
    JWT_ALGORITHM = os.environ.get("JWT_ALGORITHM", "HS256")
    JWT_ACCESS_TOKEN_EXPIRES = parse_duration(os.environ.get("JWT_ACCESS_TOKEN_EXPIRES"), timedelta(days=7))
    JWT_REFRESH_TOKEN_EXPIRES = parse_duration(os.environ.get("JWT_REFRESH_TOKEN_EXPIRES"), timedelta(days=30))

    PASSWORD_HASH_ROUNDS = int(os.environ.get("PASSWORD_HASH_ROUNDS", 29000))

    API_PREFIX = os.environ.get("API_PREFIX", "/api")
    CORS_ALLOWED_ORIGINS = os.environ.get("CORS_ALLOWED_ORIGINS", "")
    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    JWT_SECRET_KEY = "test-access-secret"
    JWT_REFRESH_SECRET_KEY = "test-refresh-secret"
    PASSWORD_HASH_ROUNDS = 1000
    LOG_LEVEL = "WARNING"


class ProductionConfig(Config):
    @classmethod
    def validate(cls) -> None:
        for name in ("SECRET_KEY", "JWT_SECRET_KEY", "JWT_REFRESH_SECRET_KEY", "DATABASE_URL"):
            if not os.environ.get(name):
                raise ValueError(f"{name} environment variable must be set")
        if cls.JWT_SECRET_KEY == cls.JWT_REFRESH_SECRET_KEY:
            raise ValueError("JWT_SECRET_KEY and JWT_REFRESH_SECRET_KEY must differ")
