"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached, so the environment must be ready before
# anything from the application is imported.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-that-is-long-enough-for-hs256"
os.environ["ENVIRONMENT"] = "test"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["AI_PROVIDER"] = "openai"
os.environ["AI_MODEL_NAME"] = "gpt-test"
os.environ["OPENAI_API_KEY"] = "sk-test"
os.environ["GRADER_USER_IDS"] = "[900]"
os.environ["STRIPE_WEBHOOK_SECRET"] = "whsec_test_secret"

from collections.abc import Generator  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from dependency_injector import providers  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from examelement import models  # noqa: E402
from examelement.core import container  # noqa: E402
from examelement.database import Base, get_db  # noqa: E402
from examelement.infrastructure.identity.auth.token_service import (  # noqa: E402
    create_access_token,
)
from examelement.main import app  # noqa: E402
from tests.fakes import FakeContentGenerator, FakePaymentGateway, FixedClock  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so every session sees the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

API = "/api/v1"
GRADER_ID = 900


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def fake_generator() -> Generator[FakeContentGenerator, None, None]:
    """Replace the AI generator with an in-memory one."""
    generator = FakeContentGenerator()
    container.content_generator.override(providers.Object(generator))
    yield generator
    container.content_generator.reset_override()


@pytest.fixture
def fake_payment_gateway() -> Generator[FakePaymentGateway, None, None]:
    """Replace Stripe with an in-memory gateway."""
    gateway = FakePaymentGateway()
    container.payment_gateway.override(providers.Object(gateway))
    yield gateway
    container.payment_gateway.reset_override()


@pytest.fixture
def fixed_clock() -> Generator[FixedClock, None, None]:
    """Freeze the server clock for quota and timestamp checks."""
    clock = FixedClock()
    container.clock.override(providers.Object(clock))
    yield clock
    container.clock.reset_override()


@pytest.fixture
def client(
    db_session: Session, fake_generator: FakeContentGenerator
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def create_test_user(
    db_session: Session,
    user_id: int,
    email: str,
    is_subscribed: bool = False,
    payment_customer_id: str | None = None,
) -> models.User:
    """Insert a user row."""
    user = models.User(
        id=user_id,
        email=email,
        is_subscribed=is_subscribed,
        payment_customer_id=payment_customer_id,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def auth_headers(user_id: int) -> dict[str, str]:
    """Bearer header for a user."""
    return {"Authorization": f"Bearer {create_access_token(user_id)}"}


def generate(
    client: TestClient,
    headers: dict[str, str],
    content_type: str,
    count: int = 4,
    subject: str = "Biology",
    topic: str = "Photosynthesis",
) -> Any:  # noqa: ANN401
    """POST a generation request and return the response."""
    return client.post(
        f"{API}/content/generate",
        json={"content_type": content_type, "subject": subject, "topic": topic, "count": count},
        headers=headers,
    )


@pytest.fixture
def free_user(db_session: Session) -> models.User:
    return create_test_user(db_session, 1, "free@test.com", payment_customer_id="cus_free")


@pytest.fixture
def premium_user(db_session: Session) -> models.User:
    return create_test_user(
        db_session, 2, "premium@test.com", is_subscribed=True, payment_customer_id="cus_premium"
    )


@pytest.fixture
def other_user(db_session: Session) -> models.User:
    return create_test_user(db_session, 3, "other@test.com")


@pytest.fixture
def grader_user(db_session: Session) -> models.User:
    return create_test_user(db_session, GRADER_ID, "grader@test.com")


@pytest.fixture
def free_headers(free_user: models.User) -> dict[str, str]:
    return auth_headers(free_user.id)


@pytest.fixture
def premium_headers(premium_user: models.User) -> dict[str, str]:
    return auth_headers(premium_user.id)


@pytest.fixture
def other_headers(other_user: models.User) -> dict[str, str]:
    return auth_headers(other_user.id)


@pytest.fixture
def grader_headers(grader_user: models.User) -> dict[str, str]:
    return auth_headers(grader_user.id)
