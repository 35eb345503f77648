"""UpdateOffice command handler.

Renames the office, replaces or clears its welcome message, and removes
then adds bank accounts. A rejected name aborts before anything is saved.
"""

from src.application.commands.office_commands import UpdateOffice
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import OfficeError
from src.domain.protocols import LoggerProtocol, OfficeRepository


class UpdateOfficeHandler:
    """Handler for UpdateOffice command."""

    def __init__(self, office_repo: OfficeRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            office_repo: Office repository.
            logger: Structured logger.
        """
        self._office_repo = office_repo
        self._logger = logger.bind(handler="UpdateOfficeHandler")

    async def handle(
        self, cmd: UpdateOffice
    ) -> Result[None, NotFoundError | ValidationError]:
        """Handle UpdateOffice command.

        Args:
            cmd: UpdateOffice command.

        Returns:
            Success(None): Changes saved.
            Failure(NotFoundError): No office with cmd.office_id.
            Failure(ValidationError): New name rejected; nothing saved.
        """
        office = await self._office_repo.find_by_id(cmd.office_id)
        if office is None:
            self._logger.warning("Office not found", office_id=str(cmd.office_id))
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.OFFICE_NOT_FOUND,
                    message=OfficeError.OFFICE_NOT_FOUND,
                    resource_type="Office",
                    resource_id=str(cmd.office_id),
                )
            )

        if cmd.name is not None:
            result = office.change_name(cmd.name)
            if isinstance(result, Failure):
                self._logger.warning(
                    "Office update rejected",
                    office_id=str(office.id),
                    field=result.error.field,
                    reason=result.error.message,
                )
                return result

        if cmd.clear_welcome_message:
            office.change_welcome_message(None)
        elif cmd.welcome_message is not None:
            office.change_welcome_message(cmd.welcome_message)

        for account in cmd.remove_accounts:
            office.remove_account(account)
        for account in cmd.add_accounts:
            office.add_account(account)

        await self._office_repo.save(office)

        self._logger.info(
            "Office updated",
            office_id=str(office.id),
            account_count=len(office.accounts),
        )
        return Success(value=None)
