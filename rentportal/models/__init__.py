from .application import ProspectiveTenantApplication
from .enums import AccommodationType, ApplicationStatus, EmploymentStatus, Role
from .user import User

__all__ = [
    "AccommodationType",
    "ApplicationStatus",
    "EmploymentStatus",
    "ProspectiveTenantApplication",
    "Role",
    "User",
]
