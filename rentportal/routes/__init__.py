from .applications import bp as applications_bp
from .auth import bp as auth_bp

__all__ = ["applications_bp", "auth_bp"]
