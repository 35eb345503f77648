"""Pytest configuration for async testing.

This configuration ensures:
1. Async tests run under pytest-asyncio (asyncio_mode = "auto")
2. Each integration test gets its own in-memory SQLite database
3. Entity builders produce valid defaults that tests override per case
"""

from datetime import time
from unittest.mock import Mock
from uuid import UUID

import pytest
import pytest_asyncio
from uuid_extensions import uuid7

from src.domain.entities import Admin, Office, Theme
from src.domain.enums import AdminRole
from src.domain.value_objects import Account

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# =============================================================================
# Entity Builders
# =============================================================================


def create_test_admin(**overrides) -> Admin:
    """Build a valid Admin, replacing any field given as keyword.

    Usage:
        admin = create_test_admin(login_id="other_mgr")
    """
    fields = {
        "id": uuid7(),
        "login_id": "gangnam_mgr",
        "password": "password123",
        "name": "Gangnam Manager",
        "role": AdminRole.OFFICE_MANAGER,
        "phone_number": "010-1234-5678",
    }
    fields.update(overrides)
    return Admin(**fields)


def create_test_office(**overrides) -> Office:
    """Build a valid Office with one account, replacing any given field."""
    fields = {
        "id": uuid7(),
        "name": "Gangnam",
        "accounts": {Account.of("KB Kookmin", "123-456-78910")},
        "welcome_message": "Welcome to Gangnam!",
    }
    fields.update(overrides)
    return Office(**fields)


def create_test_theme(office_id: UUID | None = None, **overrides) -> Theme:
    """Build a valid Theme for office_id, replacing any given field."""
    fields = {
        "id": uuid7(),
        "office_id": office_id if office_id is not None else uuid7(),
        "name": "The Haunted Library",
        "price": 25000,
        "open_time": time(10, 0),
        "discount_amount": 0,
        "is_available": True,
        "capacity": 4,
    }
    fields.update(overrides)
    return Theme(**fields)


# =============================================================================
# Markers
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_database():
    """Provide a fresh in-memory database with all tables created.

    The Database uses a StaticPool for SQLite URLs, so every session opened
    from it sees the same in-memory data. Nothing is shared between tests.

    Usage:
        async def test_something(test_database):
            async with test_database.get_session() as session:
                ...
    """
    from src.infrastructure.persistence.database import Database

    db = Database(database_url=TEST_DATABASE_URL)
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


@pytest_asyncio.fixture
async def db_session(test_database):
    """Provide a session that is rolled back after the test.

    Tests that expect an IntegrityError can keep using the fixture: the
    rollback at teardown clears the failed transaction.
    """
    async with test_database.async_session() as session:
        yield session
        await session.rollback()


# =============================================================================
# Reusable Mock Fixtures
# =============================================================================


@pytest.fixture
def mock_logger():
    """Provide a mock logger for testing.

    bind() returns the same mock, so handler-scoped loggers can be asserted
    on directly.

    Usage:
        def test_something(mock_logger):
            handler = RegisterAdminHandler(admin_repo=repo, logger=mock_logger)
            ...
            mock_logger.info.assert_called_once()
    """
    logger = Mock()
    logger.bind.return_value = logger
    logger.with_context.return_value = logger
    return logger
