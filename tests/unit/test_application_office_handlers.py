"""Unit tests for RegisterOfficeHandler and UpdateOfficeHandler.

Tests cover:
- Registration with initial accounts (duplicates collapse)
- Invalid name rejected without saving
- Update: not found, rename, welcome message, account add/remove
"""

from unittest.mock import AsyncMock
from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands import RegisterOffice, UpdateOffice
from src.application.commands.handlers.register_office_handler import (
    RegisterOfficeHandler,
)
from src.application.commands.handlers.update_office_handler import (
    UpdateOfficeHandler,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Success
from src.domain.value_objects import Account
from tests.conftest import create_test_office

KB = Account.of("KB Kookmin", "123-456-78910")
SHINHAN = Account.of("Shinhan", "987-654-32100")


@pytest.mark.unit
class TestRegisterOfficeHandler:
    """Test office registration."""

    async def test_success(self, mock_logger):
        """Test office saved with de-duplicated accounts."""
        repo = AsyncMock()
        handler = RegisterOfficeHandler(office_repo=repo, logger=mock_logger)

        result = await handler.handle(
            RegisterOffice(
                name="Hongdae",
                welcome_message="Hi",
                accounts=(KB, Account.of("KB Kookmin", "123-456-78910"), SHINHAN),
            )
        )

        assert isinstance(result, Success)
        assert isinstance(result.value, UUID)
        saved = repo.save.await_args.args[0]
        assert saved.accounts == {KB, SHINHAN}
        assert saved.welcome_message == "Hi"

    async def test_blank_name_rejected(self, mock_logger):
        """Test blank name returns Failure and nothing is saved."""
        repo = AsyncMock()
        handler = RegisterOfficeHandler(office_repo=repo, logger=mock_logger)

        result = await handler.handle(RegisterOffice(name="  "))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_NAME
        repo.save.assert_not_awaited()


@pytest.mark.unit
class TestUpdateOfficeHandler:
    """Test office updates."""

    async def test_office_not_found(self, mock_logger):
        """Test unknown ID returns NotFoundError."""
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        handler = UpdateOfficeHandler(office_repo=repo, logger=mock_logger)

        result = await handler.handle(UpdateOffice(office_id=uuid7()))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.OFFICE_NOT_FOUND

    async def test_account_changes(self, mock_logger):
        """Test removals then additions are applied and saved."""
        office = create_test_office(accounts={KB})
        repo = AsyncMock()
        repo.find_by_id.return_value = office
        handler = UpdateOfficeHandler(office_repo=repo, logger=mock_logger)

        result = await handler.handle(
            UpdateOffice(
                office_id=office.id,
                add_accounts=(SHINHAN,),
                remove_accounts=(KB, Account.of("Woori", "000")),
            )
        )

        assert isinstance(result, Success)
        assert office.accounts == {SHINHAN}
        repo.save.assert_awaited_once_with(office)

    async def test_welcome_message_set_and_cleared(self, mock_logger):
        """Test welcome message can be replaced and cleared."""
        office = create_test_office()
        repo = AsyncMock()
        repo.find_by_id.return_value = office
        handler = UpdateOfficeHandler(office_repo=repo, logger=mock_logger)

        await handler.handle(UpdateOffice(office_id=office.id, welcome_message="Yo"))
        assert office.welcome_message == "Yo"

        await handler.handle(UpdateOffice(office_id=office.id, clear_welcome_message=True))
        assert office.welcome_message is None

    async def test_invalid_name_aborts(self, mock_logger):
        """Test rejected name skips all other changes and the save."""
        office = create_test_office(accounts={KB})
        repo = AsyncMock()
        repo.find_by_id.return_value = office
        handler = UpdateOfficeHandler(office_repo=repo, logger=mock_logger)

        result = await handler.handle(
            UpdateOffice(office_id=office.id, name="x" * 101, add_accounts=(SHINHAN,))
        )

        assert isinstance(result, Failure)
        assert office.name == "Gangnam"
        assert office.accounts == {KB}
        repo.save.assert_not_awaited()
