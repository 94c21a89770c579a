import os

# Configure before any claimdesk module reads settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["EMAIL_BACKEND"] = "console"
os.environ.setdefault("NOTIFY_MAX_ATTEMPTS", "3")

import httpx  # noqa: E402
import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from claimdesk.main import app  # noqa: E402
from claimdesk.models.base import Base, SessionLocal, engine, init_db  # noqa: E402
from claimdesk.utils.notifications import NotificationDispatcher, get_notifier  # noqa: E402


class RecordingSender:
    """Stands in for send_email and remembers every message."""

    def __init__(self, fail_times: int = 0):
        self.sent = []
        self.calls = 0
        self.fail_times = fail_times

    def __call__(self, to_email: str, subject: str, body: str) -> bool:
        self.calls += 1
        if self.calls <= self.fail_times:
            raise ConnectionError("smtp relay unavailable")
        self.sent.append({"to": to_email, "subject": subject, "body": body})
        return True


@pytest.fixture(autouse=True)
def database():
    init_db()
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def sender():
    return RecordingSender()


@pytest.fixture
def client(sender):
    app.dependency_overrides[get_notifier] = lambda: NotificationDispatcher(sender=sender, enabled=True, max_attempts=3)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def api(sender):
    app.dependency_overrides[get_notifier] = lambda: NotificationDispatcher(sender=sender, enabled=True, max_attempts=1)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def claim_payload():
    return {
        "orderNumber": "A1",
        "email": "x@y.com",
        "name": "Jane Doe",
        "street": "Main Street 1",
        "postalCode": "12345",
        "city": "Springfield",
        "phoneNumber": "+1 555 0100",
        "brand": "Bosch",
        "problemDescription": "Dishwasher does not drain",
        "notificationAcknowledged": True,
    }
