"""UpdateAdmin command handler.

Loads the admin, applies each requested change in order and saves. The
first rejected change aborts the update: nothing is saved and the stored
admin keeps every old value.
"""

from src.application.commands.admin_commands import UpdateAdmin
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import AdminError
from src.domain.protocols import AdminRepository, LoggerProtocol


class UpdateAdminHandler:
    """Handler for UpdateAdmin command.

    Dependencies (injected via constructor):
        - AdminRepository: For persistence
        - LoggerProtocol: For structured logging
    """

    def __init__(self, admin_repo: AdminRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            admin_repo: Admin repository.
            logger: Structured logger.
        """
        self._admin_repo = admin_repo
        self._logger = logger.bind(handler="UpdateAdminHandler")

    async def handle(
        self, cmd: UpdateAdmin
    ) -> Result[None, NotFoundError | ValidationError]:
        """Handle UpdateAdmin command.

        Args:
            cmd: UpdateAdmin command; None fields are left unchanged.

        Returns:
            Success(None): All requested changes saved.
            Failure(NotFoundError): No admin with cmd.admin_id.
            Failure(ValidationError): A change was rejected; nothing saved.
        """
        admin = await self._admin_repo.find_by_id(cmd.admin_id)
        if admin is None:
            self._logger.warning("Admin not found", admin_id=str(cmd.admin_id))
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.ADMIN_NOT_FOUND,
                    message=AdminError.ADMIN_NOT_FOUND,
                    resource_type="Admin",
                    resource_id=str(cmd.admin_id),
                )
            )

        changes = [
            (admin.change_name, cmd.name),
            (admin.change_password, cmd.password),
            (admin.change_phone_number, cmd.phone_number),
            (admin.change_role, cmd.role),
        ]
        for change, value in changes:
            if value is None:
                continue
            result = change(value)
            if isinstance(result, Failure):
                self._logger.warning(
                    "Admin update rejected",
                    admin_id=str(admin.id),
                    field=result.error.field,
                    reason=result.error.message,
                )
                return result

        await self._admin_repo.save(admin)

        self._logger.info("Admin updated", admin_id=str(admin.id))
        return Success(value=None)
