# rentportal/routes/applications.py
from flask import Blueprint, current_app, g

from ..extensions import db
from ..models import AccommodationType, ApplicationStatus, EmploymentStatus, Role
from ..models.enums import REVIEW_STATUSES
from ..security import roles_required
from ..services.application_service import ApplicationService
from ..utils.responses import envelope
from ..validation import email, integer, iso_date, number, one_of, string, validate_body, validate_query

bp = Blueprint("applications", __name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
# Bounded by the columns: 32-bit integers and Numeric(12, 2)
MAX_PAGE = 2**31 - 1
MAX_FAMILY_SIZE = 100
MAX_RENT_CAPACITY = 9_999_999_999.99

# JSON field -> model column
_SUBMISSION_COLUMNS = {
    "applicantEmail": "applicant_email",
    "applicantName": "applicant_name",
    "phoneNumber": "phone_number",
    "dateOfBirth": "date_of_birth",
    "employmentStatus": "employment_status",
    "employerName": "employer_name",
    "familySize": "family_size",
    "desiredAccommodationType": "desired_accommodation_type",
    "previousAddress": "previous_address",
    "reasonForLeaving": "reason_for_leaving",
    "yearlyRentCapacity": "yearly_rent_capacity",
}


def _service() -> ApplicationService:
    return ApplicationService(db.session, notifier=current_app.extensions.get("notifier"))


@bp.post("/applications")
@validate_body(
    applicantEmail=email(),
    applicantName=string(max_length=200),
    phoneNumber=string(max_length=30),
    dateOfBirth=iso_date(past_only=True),
    employmentStatus=one_of(EmploymentStatus),
    employerName=string(max_length=200, required=False),
    familySize=integer(min_value=1, max_value=MAX_FAMILY_SIZE),
    desiredAccommodationType=one_of(AccommodationType),
    previousAddress=string(max_length=512),
    reasonForLeaving=string(max_length=2000),
    yearlyRentCapacity=number(min_value=0, max_value=MAX_RENT_CAPACITY),
)
def submit_application():
    data = {column: g.validated[field] for field, column in _SUBMISSION_COLUMNS.items()}
    application = _service().submit(data)
    return envelope(application.serialize(), "Application submitted successfully", 201)


@bp.get("/applications/status")
@validate_query(email=email())
def application_status():
    application = _service().status_for_email(g.validated["email"])
    return envelope(application.status_view(), "Application status retrieved successfully")


@bp.get("/applications")
@roles_required(Role.LANDLORD)
@validate_query(
    status=one_of(ApplicationStatus, required=False),
    page=integer(min_value=1, max_value=MAX_PAGE, required=False, default=1),
    limit=integer(min_value=1, max_value=MAX_PAGE_SIZE, required=False, default=DEFAULT_PAGE_SIZE),
)
def list_applications():
    query = g.validated
    page = _service().list_applications(query["status"], query["page"], query["limit"])
    return envelope(
        [a.serialize() for a in page.items],
        "Applications retrieved successfully",
        pagination=page.pagination(),
    )


@bp.get("/applications/<int:application_id>")
@roles_required(Role.LANDLORD)
def get_application(application_id):
    application = _service().get(application_id)
    return envelope(application.serialize(), "Application retrieved successfully")


@bp.put("/applications/<int:application_id>/review")
@roles_required(Role.LANDLORD)
@validate_body(
    applicationStatus=one_of(ApplicationStatus, choices=REVIEW_STATUSES),
    reviewNotes=string(max_length=2000, required=False),
)
def review_application(application_id):
    data = g.validated
    application = _service().review(
        application_id,
        data["applicationStatus"],
        reviewer=g.current_user,
        notes=data["reviewNotes"],
    )
    return envelope(
        application.serialize(),
        f"Application {data['applicationStatus'].value.lower()} successfully",
    )
