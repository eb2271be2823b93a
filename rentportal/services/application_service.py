"""Prospective tenant application lifecycle."""
import logging
import math
from datetime import datetime
from typing import List, NamedTuple, Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from ..errors import ConflictError, NotFoundError, ValidationError
from ..models import ApplicationStatus, ProspectiveTenantApplication, User
from ..models.enums import REVIEW_STATUSES
from ..utils.notifications import LoggingNotifier, notify
from ..validation import normalize_email

logger = logging.getLogger(__name__)

DUPLICATE_APPLICATION = "An application already exists for this email address"
# Largest value the integer primary key column can hold
MAX_ID = 2**31 - 1

# Columns an applicant may supply on submission
SUBMITTED_FIELDS = (
    "applicant_email",
    "applicant_name",
    "phone_number",
    "date_of_birth",
    "employment_status",
    "employer_name",
    "family_size",
    "desired_accommodation_type",
    "previous_address",
    "reason_for_leaving",
    "yearly_rent_capacity",
)


class Page(NamedTuple):
    items: List[ProspectiveTenantApplication]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)

    def pagination(self):
        return {"page": self.page, "limit": self.limit, "total": self.total, "totalPages": self.total_pages}


class ApplicationService:
    def __init__(self, session, notifier=None):
        self.session = session
        self.notifier = notifier or LoggingNotifier()

    def submit(self, data: dict) -> ProspectiveTenantApplication:
        fields = {key: data.get(key) for key in SUBMITTED_FIELDS}
        fields["applicant_email"] = normalize_email(fields["applicant_email"])

        if self._find_by_email(fields["applicant_email"]) is not None:
            raise ConflictError(DUPLICATE_APPLICATION)

        application = ProspectiveTenantApplication(application_status=ApplicationStatus.PENDING, **fields)
        self.session.add(application)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise ConflictError(DUPLICATE_APPLICATION)

        logger.info("Application %s submitted", application.id)
        notify(self.notifier, "application_submitted", application)
        return application

    def list_applications(self, status: Optional[ApplicationStatus] = None, page: int = 1, limit: int = 10) -> Page:
        if page < 1 or limit < 1:
            raise ValidationError("page and limit must be positive integers")

        query = select(ProspectiveTenantApplication)
        count = select(func.count()).select_from(ProspectiveTenantApplication)
        if status is not None:
            query = query.where(ProspectiveTenantApplication.application_status == status)
            count = count.where(ProspectiveTenantApplication.application_status == status)

        total = self.session.execute(count).scalar_one()
        offset = (page - 1) * limit
        if offset >= total:
            return Page([], page, limit, total)

        query = (
            query.order_by(ProspectiveTenantApplication.submitted_at.desc(), ProspectiveTenantApplication.id.desc())
            .offset(offset)
            .limit(limit)
        )
        items = list(self.session.execute(query).scalars().unique())
        return Page(items, page, limit, total)

    def get(self, application_id: int) -> ProspectiveTenantApplication:
        if not 0 < application_id <= MAX_ID:
            raise NotFoundError("Application not found")
        application = self.session.get(ProspectiveTenantApplication, application_id)
        if application is None:
            raise NotFoundError("Application not found")
        return application

    def review(self, application_id: int, status: ApplicationStatus, reviewer: User,
               notes: Optional[str] = None) -> ProspectiveTenantApplication:
        if status not in REVIEW_STATUSES:
            raise ValidationError(f"Cannot set application status to {status.value} by review")

        application = self.get(application_id)
        current = application.application_status
        if not current.can_move_to(status):
            raise ConflictError(f"Application is already {current.value.lower()} and cannot be reviewed again")

        application.application_status = status
        if notes is not None:
            application.review_notes = notes
        application.reviewed_by = reviewer.id
        application.reviewed_at = datetime.utcnow()
        self.session.commit()

        logger.info("Application %s moved %s -> %s by user %s", application.id, current.value, status.value, reviewer.id)
        if status is ApplicationStatus.APPROVED:
            notify(self.notifier, "application_approved", application)
        elif status is ApplicationStatus.REJECTED:
            notify(self.notifier, "application_rejected", application)
        return application

    def status_for_email(self, email: str) -> ProspectiveTenantApplication:
        application = self._find_by_email(normalize_email(email))
        if application is None:
            raise NotFoundError("No application found for this email address")
        return application

    def _find_by_email(self, email: str) -> Optional[ProspectiveTenantApplication]:
        return self.session.execute(
            select(ProspectiveTenantApplication).where(ProspectiveTenantApplication.applicant_email == email)
        ).scalar_one_or_none()
