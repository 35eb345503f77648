"""Integration tests for AdminRepository.

Tests cover:
- Save and retrieve admin (all fields round-trip)
- Find by login ID, existence check
- Update in place
- Duplicate login_id raises IntegrityError
- Delete

Architecture:
- Integration tests against a real in-memory SQLite database
- Each test gets a fresh database (tests/conftest.py)
"""

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.domain.enums import AdminRole
from src.infrastructure.persistence.repositories import AdminRepository
from tests.conftest import create_test_admin


@pytest.mark.integration
class TestAdminRepositorySave:
    """Test saving and loading admins."""

    async def test_save_and_find_by_id(self, db_session):
        """Test all fields survive a round-trip."""
        repo = AdminRepository(session=db_session)
        admin = create_test_admin()

        await repo.save(admin)
        found = await repo.find_by_id(admin.id)

        assert found is not None
        assert found == admin
        assert found.login_id == "gangnam_mgr"
        assert found.password == "password123"
        assert found.name == "Gangnam Manager"
        assert found.role is AdminRole.OFFICE_MANAGER
        assert found.phone_number == "010-1234-5678"
        assert found.created_at.tzinfo is not None

    async def test_find_missing_returns_none(self, db_session):
        """Test unknown ID returns None."""
        repo = AdminRepository(session=db_session)

        assert await repo.find_by_id(uuid7()) is None

    async def test_find_by_login_id_and_exists(self, db_session):
        """Test lookup and existence by login ID."""
        repo = AdminRepository(session=db_session)
        admin = create_test_admin(phone_number=None)
        await repo.save(admin)

        found = await repo.find_by_login_id("gangnam_mgr")

        assert found is not None
        assert found.id == admin.id
        assert found.phone_number is None
        assert await repo.exists_by_login_id("gangnam_mgr") is True
        assert await repo.exists_by_login_id("nobody") is False

    async def test_update_existing(self, db_session):
        """Test saving a changed admin updates the stored row."""
        repo = AdminRepository(session=db_session)
        admin = create_test_admin()
        await repo.save(admin)

        admin.change_role(AdminRole.SUPER_ADMIN)
        admin.change_phone_number("010-9876-5432")
        await repo.save(admin)
        found = await repo.find_by_id(admin.id)

        assert found.role is AdminRole.SUPER_ADMIN
        assert found.phone_number == "010-9876-5432"


@pytest.mark.integration
class TestAdminRepositoryConstraints:
    """Test storage-enforced rules."""

    async def test_duplicate_login_id_raises_integrity_error(self, db_session):
        """Test a second admin with the same login_id is rejected by storage."""
        repo = AdminRepository(session=db_session)
        await repo.save(create_test_admin(login_id="dup"))

        with pytest.raises(IntegrityError):
            await repo.save(create_test_admin(login_id="dup", name="Other"))


@pytest.mark.integration
class TestAdminRepositoryDelete:
    """Test deleting admins."""

    async def test_delete(self, db_session):
        """Test delete removes the admin and reports whether it existed."""
        repo = AdminRepository(session=db_session)
        admin = create_test_admin()
        await repo.save(admin)

        assert await repo.delete(admin.id) is True
        assert await repo.find_by_id(admin.id) is None
        assert await repo.delete(admin.id) is False
