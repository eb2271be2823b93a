from datetime import datetime

from ..extensions import db
from .enums import AccommodationType, ApplicationStatus, EmploymentStatus


def _iso(value):
    return value.isoformat() if value else None


class ProspectiveTenantApplication(db.Model):
    __tablename__ = "prospective_tenant_applications"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)

    # Personal Information
    applicant_email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    applicant_name = db.Column(db.String(200), nullable=False)
    phone_number = db.Column(db.String(30), nullable=False)
    date_of_birth = db.Column(db.Date, nullable=False)

    # Employment Information
    employment_status = db.Column(db.Enum(EmploymentStatus, native_enum=False, length=20), nullable=False)
    employer_name = db.Column(db.String(200), nullable=True)

    # Housing Preferences
    family_size = db.Column(db.Integer, nullable=False)
    desired_accommodation_type = db.Column(
        db.Enum(AccommodationType, native_enum=False, length=20), nullable=False
    )

    # Previous Residence
    previous_address = db.Column(db.String(512), nullable=False)
    reason_for_leaving = db.Column(db.Text, nullable=False)

    # Financial Information
    yearly_rent_capacity = db.Column(db.Numeric(12, 2, asdecimal=False), nullable=False)

    # Review
    application_status = db.Column(
        db.Enum(ApplicationStatus, native_enum=False, length=20),
        nullable=False,
        default=ApplicationStatus.PENDING,
        index=True,
    )
    review_notes = db.Column(db.Text, nullable=True)
    reviewed_at = db.Column(db.DateTime, nullable=True)
    reviewed_by = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=True)

    submitted_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    landlord = db.relationship("User", lazy="joined")

    def serialize(self):
        return {
            "id": self.id,
            "applicantEmail": self.applicant_email,
            "applicantName": self.applicant_name,
            "phoneNumber": self.phone_number,
            "dateOfBirth": _iso(self.date_of_birth),
            "employmentStatus": self.employment_status.value,
            "employerName": self.employer_name,
            "familySize": self.family_size,
            "desiredAccommodationType": self.desired_accommodation_type.value,
            "previousAddress": self.previous_address,
            "reasonForLeaving": self.reason_for_leaving,
            "yearlyRentCapacity": float(self.yearly_rent_capacity),
            "applicationStatus": self.application_status.value,
            "reviewNotes": self.review_notes,
            "reviewedAt": _iso(self.reviewed_at),
            "reviewedBy": self.reviewed_by,
            "submittedAt": _iso(self.submitted_at),
            "updatedAt": _iso(self.updated_at),
            "landlord": self.landlord.summary() if self.landlord else None,
        }

    def status_view(self):
        """Public projection for applicants; no personal or financial detail."""
        return {
            "id": self.id,
            "applicantName": self.applicant_name,
            "applicationStatus": self.application_status.value,
            "submittedAt": _iso(self.submitted_at),
            "reviewedAt": _iso(self.reviewed_at),
            "reviewNotes": self.review_notes,
        }

    def __repr__(self):
        return f"<ProspectiveTenantApplication {self.id}: {self.applicant_email} {self.application_status}>"
