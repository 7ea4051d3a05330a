"""
Shared fixtures: in-memory SQLite database, mock email transport, a
temporary rate limiter store and an HTTP client wired to all three.
"""
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from leadcapture import models  # noqa: F401
from leadcapture.core.rate_limiter import RateLimiter, get_rate_limiter
from leadcapture.database import get_session
from leadcapture.main import app
from leadcapture.services.email_service import MockEmailService, get_email_service


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest.fixture
def email_service():
    return MockEmailService()


@pytest.fixture
def rate_limiter(tmp_path):
    return RateLimiter(max_requests=100, window=900, storage_path=str(tmp_path / "rate_limits.json"))


@pytest.fixture
async def client(engine, email_service, rate_limiter):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_session():
        async with Session() as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_email_service] = lambda: email_service
    app.dependency_overrides[get_rate_limiter] = lambda: rate_limiter

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def contact_payload():
    return {
        "name": "Jane Doe",
        "email": "jane@example.com",
        "phone": "+1 555 123 4567",
        "company": "Doe Ltd",
        "subject": "Website redesign",
        "message": "We would like a new website before our product launch.",
    }


@pytest.fixture
def consultation_payload():
    return {
        "name": "John Smith",
        "email": "john@acme.com",
        "phone": "+1 555 987 6543",
        "company": "Acme Corp",
        "industry": "Technology",
        "business_size": "500+",
        "current_challenges": "Support volume is growing faster than the team.",
        "interested_services": ["smart_chatbots", "email_marketing"],
        "budget": "100k_plus",
        "timeline": "asap",
    }


@pytest.fixture
def inquiry_payload():
    return {
        "name": "Maria Lopez",
        "email": "maria@shop.io",
        "service_type": "custom_ai_solution",
        "project_description": "Recommendation engine for our online catalogue.",
        "budget": "not_sure",
        "timeline": "flexible",
        "additional_services": ["seo"],
    }
