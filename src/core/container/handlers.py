"""Command handler factories.

Each factory wires a handler with its session-scoped repository and the
app-scoped logger.

Usage:
    async for session in get_db_session():
        handler = get_create_theme_handler(session)
        result = await handler.handle(CreateTheme(...))
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.application.commands.handlers.create_theme_handler import (
    CreateThemeHandler,
)
from src.application.commands.handlers.register_admin_handler import (
    RegisterAdminHandler,
)
from src.application.commands.handlers.register_office_handler import (
    RegisterOfficeHandler,
)
from src.application.commands.handlers.update_admin_handler import (
    UpdateAdminHandler,
)
from src.application.commands.handlers.update_office_handler import (
    UpdateOfficeHandler,
)
from src.application.commands.handlers.update_theme_handler import (
    UpdateThemeHandler,
)
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_admin_repository,
    get_office_repository,
    get_theme_repository,
)


# ============================================================================
# Admin Handlers
# ============================================================================


def get_register_admin_handler(session: AsyncSession) -> RegisterAdminHandler:
    """Get RegisterAdmin handler."""
    return RegisterAdminHandler(
        admin_repo=get_admin_repository(session), logger=get_logger()
    )


def get_update_admin_handler(session: AsyncSession) -> UpdateAdminHandler:
    """Get UpdateAdmin handler."""
    return UpdateAdminHandler(
        admin_repo=get_admin_repository(session), logger=get_logger()
    )


# ============================================================================
# Office Handlers
# ============================================================================


def get_register_office_handler(session: AsyncSession) -> RegisterOfficeHandler:
    """Get RegisterOffice handler."""
    return RegisterOfficeHandler(
        office_repo=get_office_repository(session), logger=get_logger()
    )


def get_update_office_handler(session: AsyncSession) -> UpdateOfficeHandler:
    """Get UpdateOffice handler."""
    return UpdateOfficeHandler(
        office_repo=get_office_repository(session), logger=get_logger()
    )


# ============================================================================
# Theme Handlers
# ============================================================================


def get_create_theme_handler(session: AsyncSession) -> CreateThemeHandler:
    """Get CreateTheme handler."""
    return CreateThemeHandler(
        theme_repo=get_theme_repository(session), logger=get_logger()
    )


def get_update_theme_handler(session: AsyncSession) -> UpdateThemeHandler:
    """Get UpdateTheme handler."""
    return UpdateThemeHandler(
        theme_repo=get_theme_repository(session), logger=get_logger()
    )
