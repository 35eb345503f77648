"""CreateTheme command handler.

Builds the Theme and saves it. Two storage failures propagate unchanged:
InvalidReferenceError when office_id names no stored Office, and
IntegrityError when the theme name is already taken.
"""

from uuid import UUID

from uuid_extensions import uuid7

from src.application.commands.theme_commands import CreateTheme
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.theme import Theme
from src.domain.errors import ThemeError
from src.domain.protocols import LoggerProtocol, ThemeRepository


class CreateThemeHandler:
    """Handler for CreateTheme command."""

    def __init__(self, theme_repo: ThemeRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            theme_repo: Theme repository.
            logger: Structured logger.
        """
        self._theme_repo = theme_repo
        self._logger = logger.bind(handler="CreateThemeHandler")

    async def handle(self, cmd: CreateTheme) -> Result[UUID, ValidationError]:
        """Handle CreateTheme command.

        Args:
            cmd: CreateTheme command.

        Returns:
            Success(theme_id): Theme created.
            Failure(ValidationError): A field was rejected.

        Raises:
            InvalidReferenceError: office_id is not a stored Office.
            IntegrityError: Theme name already taken.
        """
        try:
            theme = Theme(
                id=uuid7(),
                office_id=cmd.office_id,
                name=cmd.name,
                price=cmd.price,
                open_time=cmd.open_time,
                discount_amount=cmd.discount_amount,
                is_available=cmd.is_available,
                capacity=cmd.capacity,
            )
        except ValueError as e:
            self._logger.warning(
                "Theme creation rejected",
                office_id=str(cmd.office_id),
                reason=str(e),
            )
            return Failure(
                error=ValidationError(
                    code=ErrorCode.VALIDATION_FAILED,
                    message=f"{ThemeError.CREATION_REJECTED}: {e}",
                )
            )

        await self._theme_repo.save(theme)

        self._logger.info(
            "Theme created",
            theme_id=str(theme.id),
            office_id=str(theme.office_id),
            name=theme.name,
        )
        return Success(value=theme.id)
