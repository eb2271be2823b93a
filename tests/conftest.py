"""
Shared fixtures: an app on in-memory SQLite, a test client, and helpers to
create users directly through the auth service.
"""

import pytest

from rentportal import create_app
from rentportal.config import TestingConfig
from rentportal.extensions import db as _db
from rentportal.models import Role
from rentportal.services.application_service import ApplicationService
from rentportal.services.auth_service import AuthService
from rentportal.utils.notifications import ApplicationNotifier

from helpers import PASSWORD


class RecordingNotifier(ApplicationNotifier):
    def __init__(self):
        self.events = []

    def application_submitted(self, application):
        self.events.append(("submitted", application.id))

    def application_approved(self, application):
        self.events.append(("approved", application.id))

    def application_rejected(self, application):
        self.events.append(("rejected", application.id))


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app(notifier):
    app = create_app(TestingConfig, notifier=notifier)
    with app.app_context():
        _db.create_all()
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def auth_service(app):
    return AuthService(_db.session, password_rounds=app.config["PASSWORD_HASH_ROUNDS"])


@pytest.fixture
def application_service(app, notifier):
    return ApplicationService(_db.session, notifier=notifier)


@pytest.fixture
def make_user(auth_service):
    def _make(email="landlord@example.com", role=Role.LANDLORD, password=PASSWORD, **kwargs):
        return auth_service.register(
            email=email,
            password=password,
            first_name=kwargs.pop("first_name", "Lena"),
            last_name=kwargs.pop("last_name", "Lord"),
            role=role,
            **kwargs,
        )
    return _make


@pytest.fixture
def landlord(make_user):
    return make_user()


@pytest.fixture
def tenant(make_user):
    return make_user(email="tenant@example.com", role=Role.TENANT, first_name="Tess", last_name="Tenant")

