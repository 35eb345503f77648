"""Repository dependency factories.

Session-scoped repository instances. Repositories built from the same
session share one transaction.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from src.infrastructure.persistence.repositories import (
    AdminRepository,
    OfficeRepository,
    ThemeRepository,
)


def get_admin_repository(session: AsyncSession) -> AdminRepository:
    """Get admin repository bound to session.

    Args:
        session: Database session.

    Returns:
        AdminRepository instance.
    """
    return AdminRepository(session=session)


def get_office_repository(session: AsyncSession) -> OfficeRepository:
    """Get office repository bound to session.

    Args:
        session: Database session.

    Returns:
        OfficeRepository instance.
    """
    return OfficeRepository(session=session)


def get_theme_repository(session: AsyncSession) -> ThemeRepository:
    """Get theme repository bound to session.

    Args:
        session: Database session.

    Returns:
        ThemeRepository instance.
    """
    return ThemeRepository(session=session)
