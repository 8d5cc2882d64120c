"""Shared fixtures: app on in-memory SQLite, test client, and OtpService wired with fakes."""
import pytest

from app import create_app
from config import TestConfig
from models import db as _db
from services.otp_service import OtpService
from services.otp_store import OtpStore

START_MS = 1_700_000_000_000


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self, start_ms=START_MS):
        self.now = start_ms

    def __call__(self):
        return self.now

    def advance(self, ms):
        self.now += ms


class RecordingMailGateway:
    def __init__(self, enabled=True, error=None):
        self.enabled = enabled
        self.error = error
        self.sent = []

    def send_otp_email(self, email, otp):
        if self.error:
            raise self.error
        if not self.enabled:
            return False
        self.sent.append((email, otp))
        return True


@pytest.fixture
def app():
    app = create_app(TestConfig)
    with app.app_context():
        yield app
        _db.session.remove()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def identity(app):
    return app.extensions['identity_provider']


@pytest.fixture
def account(identity):
    return identity.create_account('a@b.com', 'oldpass1', display_name='Alice')


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def gateway():
    return RecordingMailGateway()


@pytest.fixture
def store(app):
    return OtpStore(_db)


@pytest.fixture
def service(identity, store, gateway, clock):
    return OtpService(identity, store, gateway, _db.session, clock=clock)
