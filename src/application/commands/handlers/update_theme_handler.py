"""UpdateTheme command handler.

Loads the theme, applies each requested change in order and saves. The
first rejected change aborts the update and nothing is saved.
"""

from src.application.commands.theme_commands import UpdateTheme
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Result, Success
from src.domain.errors import ThemeError
from src.domain.protocols import LoggerProtocol, ThemeRepository


class UpdateThemeHandler:
    """Handler for UpdateTheme command."""

    def __init__(self, theme_repo: ThemeRepository, logger: LoggerProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            theme_repo: Theme repository.
            logger: Structured logger.
        """
        self._theme_repo = theme_repo
        self._logger = logger.bind(handler="UpdateThemeHandler")

    async def handle(
        self, cmd: UpdateTheme
    ) -> Result[None, NotFoundError | ValidationError]:
        """Handle UpdateTheme command.

        Args:
            cmd: UpdateTheme command; None fields are left unchanged.

        Returns:
            Success(None): All requested changes saved.
            Failure(NotFoundError): No theme with cmd.theme_id.
            Failure(ValidationError): A change was rejected; nothing saved.
        """
        theme = await self._theme_repo.find_by_id(cmd.theme_id)
        if theme is None:
            self._logger.warning("Theme not found", theme_id=str(cmd.theme_id))
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.THEME_NOT_FOUND,
                    message=ThemeError.THEME_NOT_FOUND,
                    resource_type="Theme",
                    resource_id=str(cmd.theme_id),
                )
            )

        changes = [
            (theme.change_name, cmd.name),
            (theme.change_price, cmd.price),
            (theme.change_open_time, cmd.open_time),
            (theme.change_discount_amount, cmd.discount_amount),
            (theme.change_is_available, cmd.is_available),
            (theme.change_capacity, cmd.capacity),
        ]
        for change, value in changes:
            if value is None:
                continue
            result = change(value)
            if isinstance(result, Failure):
                self._logger.warning(
                    "Theme update rejected",
                    theme_id=str(theme.id),
                    field=result.error.field,
                    reason=result.error.message,
                )
                return result

        await self._theme_repo.save(theme)

        self._logger.info(
            "Theme updated",
            theme_id=str(theme.id),
            final_entrance_fee=theme.final_entrance_fee,
        )
        return Success(value=None)
