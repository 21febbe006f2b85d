"""Test configuration and fixtures."""

import os
import tempfile

# Settings are read on import, so the test environment goes first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("SESSION_SECRET", "test-session-secret-that-is-long-enough-for-hs256")
os.environ.setdefault("UPLOAD_DIR", tempfile.mkdtemp(prefix="mtp-uploads-"))

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from mtp_admin.core.config import settings
from mtp_admin.core.database import Base, get_db
from mtp_admin.models import *  # noqa: F403 - Import all models
from mtp_admin.routers.upload import get_upload_service
from mtp_admin.services.agent_service import AgentService
from mtp_admin.services.upload_service import UploadService
from mtp_admin.services.user_service import UserService

# Test database URL (in-memory SQLite for speed)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ADMIN_NAME = "Tariq Mehmood"
ADMIN_EMAIL = "tariq@mountaintravels.pk"
ADMIN_PASSWORD = "karakoram-2024"


@pytest_asyncio.fixture(scope="function")
async def test_engine():
    """Create a test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Drop tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def test_session(test_engine):
    """Create a test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture
def upload_root(tmp_path):
    """Directory uploads are written to during a test."""
    return tmp_path / "uploads"


@pytest_asyncio.fixture(scope="function")
async def test_app(test_session, upload_root):
    """Create the application with the test database and upload directory."""
    from mtp_admin.main import create_app

    app = create_app()

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_upload_service] = lambda: UploadService(
        root=str(upload_root), url_prefix="/uploads"
    )

    yield app

    # Clean up
    app.dependency_overrides.clear()


@pytest_asyncio.fixture(scope="function")
async def test_client(test_app):
    """Create an anonymous HTTP client."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def admin_credentials():
    return {
        "name": ADMIN_NAME,
        "email": ADMIN_EMAIL,
        "password": ADMIN_PASSWORD,
        "confirm_password": ADMIN_PASSWORD,
    }


@pytest_asyncio.fixture(scope="function")
async def session_token(test_app, admin_credentials):
    """Register an admin and return a signed session token for it."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.post("/api/auth/signup", json=admin_credentials)
        assert response.status_code == 201

        response = await client.post(
            "/api/auth/signin",
            json={"identifier": ADMIN_EMAIL, "password": ADMIN_PASSWORD},
        )
        assert response.status_code == 200
        return response.json()["data"]["token"]


@pytest_asyncio.fixture(scope="function")
async def auth_client(test_app, session_token):
    """Create an HTTP client carrying the admin session cookie."""
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        client.cookies.set(settings.session_cookie_name, session_token)
        yield client


@pytest_asyncio.fixture(scope="function")
async def customer(test_session):
    """A registered customer."""
    return await UserService(test_session).create({"name": "Ayesha Khan", "email": "ayesha@example.com"})


@pytest_asyncio.fixture(scope="function")
async def agent(test_session):
    """An active, available agent."""
    return await AgentService(test_session).create({
        "name": "Sara Iqbal",
        "email": "sara@mountaintravels.pk",
        "role": "Support Agent",
        "department": "Customer Support",
    })


@pytest.fixture
def sample_tour_data():
    """Sample tour data for testing."""
    return {
        "title": "K2 Base Camp Trek",
        "description": "Trek along the Baltoro Glacier to Concordia and K2 base camp.",
        "location": "Skardu",
        "price": 2450,
        "duration": 21,
        "category": "Trekking",
    }


@pytest.fixture
def sample_booking_data():
    """Sample booking data for testing."""
    return {
        "package_name": "K2 Base Camp Trek",
        "package_id": "5b0c5d3e-3f77-4c52-8a2e-1f0c8d1f7a10",
        "date": "2026-06-01T00:00:00Z",
        "end_date": "2026-06-21T00:00:00Z",
        "person": 2,
        "name": "Ayesha Khan",
        "email": "ayesha@example.com",
        "phone": "+92 300 1234567",
        "amount": 4900,
    }


@pytest.fixture
def sample_inquiry_data():
    """Sample inquiry data for testing."""
    return {
        "name": "Hamza Ali",
        "email": "hamza@example.com",
        "phone": "+92 321 7654321",
        "subject": "Group discount",
        "message": "Do you offer discounts for groups of eight?",
    }
