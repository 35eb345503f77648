"""Admin repository implementation.

SQLAlchemy implementation of the AdminRepository protocol.
Maps between Admin domain entity and Admin database model.

Uniqueness of login_id is enforced by the admins table; a duplicate
surfaces from save() as sqlalchemy.exc.IntegrityError, unchanged.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.admin import Admin
from src.domain.enums.admin_role import AdminRole
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.admin import Admin as AdminModel


class AdminRepository:
    """SQLAlchemy implementation of AdminRepository protocol.

    Handles persistence of Admin entities using SQLAlchemy async sessions.

    **Implementation Notes**:
    - Maps between domain entity (dataclass) and database model (SQLAlchemy)
    - Uses select() for queries (SQLAlchemy 2.0 style)
    - save() flushes but does not commit; the session owner commits
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, admin_id: UUID) -> Admin | None:
        """Find admin by ID.

        Args:
            admin_id: Unique admin identifier.

        Returns:
            Admin entity if found, None otherwise.
        """
        stmt = select(AdminModel).where(AdminModel.id == admin_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def find_by_login_id(self, login_id: str) -> Admin | None:
        """Find admin by login ID.

        Args:
            login_id: Login identifier.

        Returns:
            Admin entity if found, None otherwise.
        """
        stmt = select(AdminModel).where(AdminModel.login_id == login_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def exists_by_login_id(self, login_id: str) -> bool:
        """Check if an admin with login ID exists.

        Args:
            login_id: Login identifier to check.

        Returns:
            True if admin exists, False otherwise.
        """
        stmt = select(AdminModel.id).where(AdminModel.login_id == login_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def save(self, admin: Admin) -> None:
        """Save an admin (create or update).

        Args:
            admin: Admin entity to save.

        Raises:
            IntegrityError: If login_id is already used by another admin.
        """
        stmt = select(AdminModel).where(AdminModel.id == admin.id)
        result = await self._session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self._session.add(self._to_model(admin))
        else:
            existing.login_id = admin.login_id
            existing.password = admin.password
            existing.name = admin.name
            existing.phone_number = admin.phone_number
            existing.role = admin.role.value
            existing.updated_at = admin.updated_at

        await self._session.flush()

    async def delete(self, admin_id: UUID) -> bool:
        """Remove admin from database (hard delete).

        Args:
            admin_id: Admin's unique identifier.

        Returns:
            True if a row was deleted, False if admin did not exist.
        """
        stmt = delete(AdminModel).where(AdminModel.id == admin_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_entity(self, model: AdminModel) -> Admin:
        """Map database model to domain entity.

        Args:
            model: Database model.

        Returns:
            Admin domain entity.
        """
        return Admin(
            id=model.id,
            login_id=model.login_id,
            password=model.password,
            name=model.name,
            role=AdminRole(model.role),
            phone_number=model.phone_number,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Admin) -> AdminModel:
        """Map domain entity to database model.

        Args:
            entity: Admin domain entity.

        Returns:
            Admin database model.
        """
        return AdminModel(
            id=entity.id,
            login_id=entity.login_id,
            password=entity.password,
            name=entity.name,
            phone_number=entity.phone_number,
            role=entity.role.value,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

