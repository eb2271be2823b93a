import enum


class Role(str, enum.Enum):
    LANDLORD = "LANDLORD"
    TENANT = "TENANT"


class EmploymentStatus(str, enum.Enum):
    EMPLOYED = "EMPLOYED"
    SELF_EMPLOYED = "SELF_EMPLOYED"
    UNEMPLOYED = "UNEMPLOYED"
    STUDENT = "STUDENT"
    RETIRED = "RETIRED"


class AccommodationType(str, enum.Enum):
    STUDIO = "STUDIO"
    ONE_BEDROOM = "ONE_BEDROOM"
    TWO_BEDROOM = "TWO_BEDROOM"
    THREE_BEDROOM = "THREE_BEDROOM"
    MINI_FLAT = "MINI_FLAT"
    SELF_CONTAINED = "SELF_CONTAINED"
    DUPLEX = "DUPLEX"


class ApplicationStatus(str, enum.Enum):
    PENDING = "PENDING"
    UNDER_REVIEW = "UNDER_REVIEW"
    APPROVED = "APPROVED"
    REJECTED = "REJECTED"
    # No transition leads here yet; kept so stored rows stay readable.
    WITHDRAWN = "WITHDRAWN"

    def can_move_to(self, target: "ApplicationStatus") -> bool:
        return target in _TRANSITIONS[self]


# Statuses a landlord review may set from each current status
_TRANSITIONS = {
    ApplicationStatus.PENDING: {
        ApplicationStatus.UNDER_REVIEW,
        ApplicationStatus.APPROVED,
        ApplicationStatus.REJECTED,
    },
    ApplicationStatus.UNDER_REVIEW: {
        ApplicationStatus.UNDER_REVIEW,
        ApplicationStatus.APPROVED,
        ApplicationStatus.REJECTED,
    },
    ApplicationStatus.APPROVED: set(),
    ApplicationStatus.REJECTED: set(),
    ApplicationStatus.WITHDRAWN: set(),
}

REVIEW_STATUSES = (
    ApplicationStatus.APPROVED,
    ApplicationStatus.REJECTED,
    ApplicationStatus.UNDER_REVIEW,
)
