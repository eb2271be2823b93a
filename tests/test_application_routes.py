from rentportal.models import ApplicationStatus

from helpers import application_payload, bearer

PRIVATE_FIELDS = ("previousAddress", "reasonForLeaving", "yearlyRentCapacity", "employerName")


def _submit(client, **overrides):
    return client.post("/api/applications", json=application_payload(**overrides))


def test_example_scenario(client, landlord):
    created = _submit(client, applicantEmail="a@x.com")
    assert created.status_code == 201
    application = created.get_json()["data"]
    assert application["applicationStatus"] == "PENDING"

    reviewed = client.put(
        f"/api/applications/{application['id']}/review",
        json={"applicationStatus": "APPROVED", "reviewNotes": "looks good"},
        headers=bearer(landlord.token),
    )
    assert reviewed.status_code == 200
    data = reviewed.get_json()["data"]
    assert data["applicationStatus"] == "APPROVED"
    assert data["reviewNotes"] == "looks good"
    assert data["reviewedBy"] == landlord.user.id
    assert data["landlord"]["email"] == "landlord@example.com"
    assert reviewed.get_json()["message"] == "Application approved successfully"

    status = client.get("/api/applications/status", query_string={"email": "a@x.com"})
    assert status.status_code == 200
    view = status.get_json()["data"]
    assert view["applicationStatus"] == "APPROVED"
    assert view["reviewNotes"] == "looks good"
    for field in PRIVATE_FIELDS:
        assert field not in view


def test_duplicate_submission_conflicts(client):
    assert _submit(client).status_code == 201
    resp = _submit(client, applicantEmail="A@X.com")
    assert resp.status_code == 409
    assert resp.get_json()["success"] is False


def test_submission_validation_never_reaches_store(client, landlord):
    resp = _submit(
        client,
        applicantEmail="not-an-email",
        familySize=0,
        employmentStatus="PIRATE",
        yearlyRentCapacity=-5,
        dateOfBirth="yesterday",
    )
    assert resp.status_code == 400
    fields = {e["field"] for e in resp.get_json()["errors"]}
    assert fields == {"applicantEmail", "familySize", "employmentStatus", "yearlyRentCapacity", "dateOfBirth"}

    listing = client.get("/api/applications", headers=bearer(landlord.token))
    assert listing.get_json()["pagination"]["total"] == 0


def test_employer_is_optional(client):
    payload = application_payload(employmentStatus="STUDENT")
    del payload["employerName"]
    resp = client.post("/api/applications", json=payload)
    assert resp.status_code == 201
    assert resp.get_json()["data"]["employerName"] is None


def test_status_lookup_unknown_email(client):
    resp = client.get("/api/applications/status", query_string={"email": "ghost@x.com"})
    assert resp.status_code == 404
    assert resp.get_json()["success"] is False


def test_status_lookup_requires_valid_email(client):
    assert client.get("/api/applications/status", query_string={"email": "ghost"}).status_code == 400


def test_landlord_routes_require_token(client):
    assert client.get("/api/applications").status_code == 401
    assert client.get("/api/applications/1").status_code == 401
    assert client.put("/api/applications/1/review", json={"applicationStatus": "APPROVED"}).status_code == 401


def test_tenant_is_forbidden_not_unauthorized(client, tenant):
    application_id = _submit(client).get_json()["data"]["id"]
    headers = bearer(tenant.token)

    assert client.get("/api/applications", headers=headers).status_code == 403
    assert client.get(f"/api/applications/{application_id}", headers=headers).status_code == 403
    resp = client.put(
        f"/api/applications/{application_id}/review",
        json={"applicationStatus": "APPROVED"},
        headers=headers,
    )
    assert resp.status_code == 403
    assert resp.get_json()["success"] is False


def test_get_by_id(client, landlord):
    application_id = _submit(client).get_json()["data"]["id"]

    resp = client.get(f"/api/applications/{application_id}", headers=bearer(landlord.token))
    assert resp.status_code == 200
    assert resp.get_json()["data"]["yearlyRentCapacity"] == 18000.0
    assert resp.get_json()["data"]["landlord"] is None

    missing = client.get("/api/applications/9999", headers=bearer(landlord.token))
    assert missing.status_code == 404


def test_review_validation_and_missing(client, landlord):
    application_id = _submit(client).get_json()["data"]["id"]
    headers = bearer(landlord.token)

    bad = client.put(f"/api/applications/{application_id}/review",
                     json={"applicationStatus": "WITHDRAWN"}, headers=headers)
    assert bad.status_code == 400

    missing = client.put("/api/applications/9999/review", json={"applicationStatus": "REJECTED"}, headers=headers)
    assert missing.status_code == 404


def test_review_of_terminal_application_conflicts(client, landlord):
    application_id = _submit(client).get_json()["data"]["id"]
    headers = bearer(landlord.token)
    url = f"/api/applications/{application_id}/review"

    assert client.put(url, json={"applicationStatus": "UNDER_REVIEW"}, headers=headers).status_code == 200
    assert client.put(url, json={"applicationStatus": "REJECTED"}, headers=headers).status_code == 200
    assert client.put(url, json={"applicationStatus": "APPROVED"}, headers=headers).status_code == 409


def test_list_pagination_block(client, landlord):
    for i in range(3):
        _submit(client, applicantEmail=f"p{i}@x.com")
    headers = bearer(landlord.token)

    first = client.get("/api/applications", query_string={"page": 1, "limit": 2}, headers=headers).get_json()
    assert len(first["data"]) == 2
    assert first["pagination"] == {"page": 1, "limit": 2, "total": 3, "totalPages": 2}

    beyond = client.get("/api/applications", query_string={"page": 5, "limit": 2}, headers=headers)
    assert beyond.status_code == 200
    assert beyond.get_json()["data"] == []
    assert beyond.get_json()["pagination"] == {"page": 5, "limit": 2, "total": 3, "totalPages": 2}


def test_list_defaults_and_status_filter(client, landlord, application_service):
    first_id = _submit(client, applicantEmail="f@x.com").get_json()["data"]["id"]
    _submit(client, applicantEmail="g@x.com")
    application_service.review(first_id, ApplicationStatus.UNDER_REVIEW, landlord.user)
    headers = bearer(landlord.token)

    all_apps = client.get("/api/applications", headers=headers).get_json()
    assert all_apps["pagination"] == {"page": 1, "limit": 10, "total": 2, "totalPages": 1}

    filtered = client.get("/api/applications", query_string={"status": "UNDER_REVIEW"}, headers=headers).get_json()
    assert [a["id"] for a in filtered["data"]] == [first_id]


def test_list_rejects_bad_query(client, landlord):
    headers = bearer(landlord.token)
    assert client.get("/api/applications", query_string={"status": "LOST"}, headers=headers).status_code == 400
    assert client.get("/api/applications", query_string={"page": 0}, headers=headers).status_code == 400
    assert client.get("/api/applications", query_string={"limit": "ten"}, headers=headers).status_code == 400
    assert client.get("/api/applications", query_string={"limit": 500}, headers=headers).status_code == 400


def test_huge_page_numbers(client, landlord):
    _submit(client)
    headers = bearer(landlord.token)

    last_allowed = client.get("/api/applications", query_string={"page": 2**31 - 1}, headers=headers)
    assert last_allowed.status_code == 200
    assert last_allowed.get_json()["data"] == []
    assert last_allowed.get_json()["pagination"]["total"] == 1

    for page in (2**31, 9223372036854775807, 10**20):
        resp = client.get("/api/applications", query_string={"page": page}, headers=headers)
        assert resp.status_code == 400


def test_huge_application_id_is_not_found(client, landlord):
    resp = client.get("/api/applications/100000000000000000000", headers=bearer(landlord.token))
    assert resp.status_code == 404


def test_numeric_fields_are_bounded(client):
    too_big_family = _submit(client, familySize=10**20)
    assert too_big_family.status_code == 400
    assert [e["field"] for e in too_big_family.get_json()["errors"]] == ["familySize"]

    too_rich = _submit(client, yearlyRentCapacity=1e11)
    assert too_rich.status_code == 400
    assert [e["field"] for e in too_rich.get_json()["errors"]] == ["yearlyRentCapacity"]

    assert _submit(client, familySize=100, yearlyRentCapacity=9_999_999_999.99).status_code == 201
