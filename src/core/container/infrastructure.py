"""Infrastructure dependency factories.

App-scoped singletons (lru_cache) for the logger and database manager,
plus a session-scoped generator for database sessions.

All adapter selection happens here (composition root); the domain and
application layers only see protocols.
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance built from settings.database_url.

    Note:
        Prefer get_db_session() for sessions.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development/production: ConsoleAdapter (human-readable)
    - testing/ci: ConsoleAdapter (JSON)

    Every event carries the app name and version.

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    return ConsoleAdapter(
        use_json=settings.is_testing or settings.is_ci,
        level=settings.log_level,
        app=settings.app_name,
        version=settings.app_version,
    )


# ============================================================================
# Session-Scoped Dependencies
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session with automatic transaction management.

    Commits on success, rolls back on exception, always closes.

    Yields:
        Database session.

    Usage:
        async for session in get_db_session():
            handler = get_register_admin_handler(session)
            result = await handler.handle(cmd)
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
