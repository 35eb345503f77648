"""RegisterOffice command handler.

Builds the Office with its initial accounts and saves it. A duplicate
office name surfaces as the repository's IntegrityError.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.office_commands import RegisterOffice
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.office import Office
from src.domain.errors import OfficeError
from src.domain.protocols import LoggerProtocol, OfficeRepository


class RegisterOfficeHandler:
    """Handler for RegisterOffice command."""

    def __init__(self, office_repo: OfficeRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            office_repo: Office repository.
            logger: Structured logger.
        """
        self._office_repo = office_repo
        self._logger = logger.bind(handler="RegisterOfficeHandler")

    async def handle(self, cmd: RegisterOffice) -> Result[UUID, ValidationError]:
        """Handle RegisterOffice command.

        Args:
            cmd: RegisterOffice command.

        Returns:
            Success(office_id): Office registered.
            Failure(ValidationError): Name was rejected.
        """
        try:
            office = Office(
                id=uuid7(),
                name=cmd.name,
                accounts=cmd.accounts,
                welcome_message=cmd.welcome_message,
            )
        except ValueError as e:
            self._logger.warning("Office registration rejected", reason=str(e))
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_NAME,
                    message=f"{OfficeError.REGISTRATION_REJECTED}: {e}",
                    field="name",
                )
            )

        await self._office_repo.save(office)

        self._logger.info(
            "Office registered",
            office_id=str(office.id),
            name=office.name,
            account_count=len(office.accounts),
        )
        return Success(value=office.id)
