"""RegisterAdmin command handler.

Flow:
1. Build the Admin entity (construction validates every field)
2. Save through the repository
3. Return Success(admin_id)

On validation failure nothing is saved and Failure(ValidationError) is
returned. A duplicate login_id is a storage failure: the repository's
IntegrityError propagates to the caller unchanged.

Architecture:
- Application layer ONLY imports from domain and core layers
- Repository and logger are injected via protocols
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.admin_commands import RegisterAdmin
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.admin import Admin
from src.domain.errors import AdminError
from src.domain.protocols import AdminRepository, LoggerProtocol


class RegisterAdminHandler:
    """Handler for RegisterAdmin command.

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
        self._logger = logger.bind(handler="RegisterAdminHandler")

    async def handle(self, cmd: RegisterAdmin) -> Result[UUID, ValidationError]:
        """Handle RegisterAdmin command.

        Args:
            cmd: RegisterAdmin command.

        Returns:
            Success(admin_id): Admin registered.
            Failure(ValidationError): A field was rejected.

        Raises:
            IntegrityError: login_id already taken (from the repository).
        """
        try:
            admin = Admin(
                id=uuid7(),
                login_id=cmd.login_id,
                password=cmd.password,
                name=cmd.name,
                role=cmd.role,
                phone_number=cmd.phone_number,
            )
        except ValueError as e:
            self._logger.warning(
                "Admin registration rejected", login_id=cmd.login_id, reason=str(e)
            )
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"{AdminError.REGISTRATION_REJECTED}: {e}",
                )
            )

        await self._admin_repo.save(admin)

        self._logger.info(
            "Admin registered",
            admin_id=str(admin.id),
            login_id=admin.login_id,
            role=admin.role.value,
        )
        return Success(value=admin.id)
