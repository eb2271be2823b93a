from datetime import date

from rentportal.models import AccommodationType, EmploymentStatus

PASSWORD = "s3cret-pass"


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


def application_payload(**overrides):
    payload = {
        "applicantEmail": "a@x.com",
        "applicantName": "Ada Applicant",
        "phoneNumber": "+1 555 010 0100",
        "dateOfBirth": "1990-04-12",
        "employmentStatus": "EMPLOYED",
        "employerName": "Acme Corp",
        "familySize": 3,
        "desiredAccommodationType": "TWO_BEDROOM",
        "previousAddress": "12 Old Street, Springfield",
        "reasonForLeaving": "Relocating closer to work",
        "yearlyRentCapacity": 18000,
    }
    payload.update(overrides)
    return payload


def application_fields(**overrides):
    fields = {
        "applicant_email": "a@x.com",
        "applicant_name": "Ada Applicant",
        "phone_number": "+1 555 010 0100",
        "date_of_birth": date(1990, 4, 12),
        "employment_status": EmploymentStatus.EMPLOYED,
        "employer_name": "Acme Corp",
        "family_size": 3,
        "desired_accommodation_type": AccommodationType.TWO_BEDROOM,
        "previous_address": "12 Old Street, Springfield",
        "reason_for_leaving": "Relocating closer to work",
        "yearly_rent_capacity": 18000.0,
    }
    fields.update(overrides)
    return fields
