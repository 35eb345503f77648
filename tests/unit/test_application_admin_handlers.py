"""Unit tests for RegisterAdminHandler and UpdateAdminHandler.

Tests cover:
- Successful registration returns the new admin ID and saves once
- Invalid fields rejected without saving
- Storage failures (duplicate login_id) propagate unchanged
- Update: not found, partial changes, first rejection aborts the save

Architecture:
- Unit tests for application handlers (mocked dependencies)
- AsyncMock repository, Mock logger
"""

from unittest.mock import AsyncMock
from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.application.commands import RegisterAdmin, UpdateAdmin
from src.application.commands.handlers.register_admin_handler import (
    RegisterAdminHandler,
)
from src.application.commands.handlers.update_admin_handler import (
    UpdateAdminHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.entities import Admin
from src.domain.enums import AdminRole
from tests.conftest import create_test_admin


def _register_command(**overrides) -> RegisterAdmin:
    fields = {
        "login_id": "hongdae_mgr",
        "password": "password123",
        "name": "Hongdae Manager",
        "role": AdminRole.OFFICE_MANAGER,
        "phone_number": "010-2222-3333",
    }
    fields.update(overrides)
    return RegisterAdmin(**fields)


@pytest.mark.unit
class TestRegisterAdminHandler:
    """Test admin registration."""

    async def test_success_saves_and_returns_id(self, mock_logger):
        """Test registration saves the admin and returns its ID."""
        repo = AsyncMock()
        handler = RegisterAdminHandler(admin_repo=repo, logger=mock_logger)

        result = await handler.handle(_register_command())

        assert isinstance(result, Success)
        assert isinstance(result.value, UUID)
        repo.save.assert_awaited_once()
        saved = repo.save.await_args.args[0]
        assert isinstance(saved, Admin)
        assert saved.id == result.value
        assert saved.login_id == "hongdae_mgr"
        mock_logger.info.assert_called_once()

    async def test_password_not_logged(self, mock_logger):
        """Test the password never appears in log context."""
        handler = RegisterAdminHandler(admin_repo=AsyncMock(), logger=mock_logger)

        await handler.handle(_register_command())

        for call in mock_logger.method_calls:
            assert "password123" not in str(call)

    async def test_invalid_field_returns_failure_without_save(self, mock_logger):
        """Test a short password fails validation and nothing is saved."""
        repo = AsyncMock()
        handler = RegisterAdminHandler(admin_repo=repo, logger=mock_logger)

        result = await handler.handle(_register_command(password="1234567"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert "at least 8" in result.error.message
        repo.save.assert_not_awaited()
        mock_logger.warning.assert_called_once()

    async def test_duplicate_login_id_propagates(self, mock_logger):
        """Test the repository's IntegrityError is not converted."""
        repo = AsyncMock()
        repo.save.side_effect = IntegrityError("INSERT", {}, Exception("unique"))
        handler = RegisterAdminHandler(admin_repo=repo, logger=mock_logger)

        with pytest.raises(IntegrityError):
            await handler.handle(_register_command())


@pytest.mark.unit
class TestUpdateAdminHandler:
    """Test admin updates."""

    async def test_admin_not_found(self, mock_logger):
        """Test unknown ID returns NotFoundError."""
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        handler = UpdateAdminHandler(admin_repo=repo, logger=mock_logger)
        admin_id = uuid7()

        result = await handler.handle(UpdateAdmin(admin_id=admin_id, name="X"))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.ADMIN_NOT_FOUND
        assert result.error.resource_id == str(admin_id)
        repo.save.assert_not_awaited()

    async def test_applies_only_given_fields(self, mock_logger):
        """Test None fields are left unchanged."""
        admin = create_test_admin()
        repo = AsyncMock()
        repo.find_by_id.return_value = admin
        handler = UpdateAdminHandler(admin_repo=repo, logger=mock_logger)

        result = await handler.handle(
            UpdateAdmin(
                admin_id=admin.id,
                phone_number="010-9876-5432",
                role=AdminRole.SUPER_ADMIN,
            )
        )

        assert isinstance(result, Success)
        assert admin.phone_number == "010-9876-5432"
        assert admin.role is AdminRole.SUPER_ADMIN
        assert admin.name == "Gangnam Manager"
        assert admin.password == "password123"
        repo.save.assert_awaited_once_with(admin)

    async def test_rejected_change_aborts_save(self, mock_logger):
        """Test an invalid phone number returns Failure and skips save."""
        admin = create_test_admin()
        repo = AsyncMock()
        repo.find_by_id.return_value = admin
        handler = UpdateAdminHandler(admin_repo=repo, logger=mock_logger)

        result = await handler.handle(
            UpdateAdmin(admin_id=admin.id, name="New", phone_number="011-1234-5678")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_PHONE_NUMBER
        assert result.error.field == "phone_number"
        repo.save.assert_not_awaited()
