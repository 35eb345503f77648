"""Theme repository implementation.

SQLAlchemy implementation of the ThemeRepository protocol.
Maps between Theme domain entity and Theme database model.

Storage rules enforced here rather than by the entity:
- Theme names are unique (IntegrityError from the themes table)
- office_id is required (IntegrityError from the NOT NULL column)
- office_id must name a stored Office (InvalidReferenceError, checked
  before writing so the failure does not depend on the backend's
  foreign key enforcement)
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.theme import Theme
from src.infrastructure.errors import InvalidReferenceError
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.office import Office as OfficeModel
from src.infrastructure.persistence.models.theme import Theme as ThemeModel


class ThemeRepository:
    """SQLAlchemy implementation of ThemeRepository protocol.

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

    async def find_by_id(self, theme_id: UUID) -> Theme | None:
        """Find theme by ID.

        Args:
            theme_id: Unique theme identifier.

        Returns:
            Theme entity if found, None otherwise.
        """
        stmt = select(ThemeModel).where(ThemeModel.id == theme_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def find_by_name(self, name: str) -> Theme | None:
        """Find theme by name.

        Args:
            name: Theme name.

        Returns:
            Theme entity if found, None otherwise.
        """
        stmt = select(ThemeModel).where(ThemeModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    async def find_by_office_id(
        self, office_id: UUID, available_only: bool = False
    ) -> list[Theme]:
        """List the themes of an office ordered by name.

        Args:
            office_id: Office identifier.
            available_only: If True, only bookable themes are returned.

        Returns:
            List of themes (empty if none).
        """
        stmt = select(ThemeModel).where(ThemeModel.office_id == office_id)
        if available_only:
            stmt = stmt.where(ThemeModel.is_available.is_(True))
        stmt = stmt.order_by(ThemeModel.name)

        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(m) for m in models]

    async def save(self, theme: Theme) -> None:
        """Save a theme (create or update).

        Args:
            theme: Theme entity to save.

        Raises:
            InvalidReferenceError: If theme.office_id is not a stored Office.
            IntegrityError: If name is already used by another theme, or
                office_id is None.
        """
        if theme.office_id is not None and not await self._office_exists(
            theme.office_id
        ):
            raise InvalidReferenceError("Office", theme.office_id)

        stmt = select(ThemeModel).where(ThemeModel.id == theme.id)
        result = await self._session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self._session.add(self._to_model(theme))
        else:
            existing.office_id = theme.office_id
            existing.name = theme.name
            existing.price = theme.price
            existing.open_time = theme.open_time
            existing.discount_amount = theme.discount_amount
            existing.is_available = theme.is_available
            existing.capacity = theme.capacity
            existing.updated_at = theme.updated_at

        await self._session.flush()

    async def delete(self, theme_id: UUID) -> bool:
        """Remove theme from database (hard delete).

        Args:
            theme_id: Theme's unique identifier.

        Returns:
            True if a row was deleted, False if theme did not exist.
        """
        stmt = delete(ThemeModel).where(ThemeModel.id == theme_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0

    async def _office_exists(self, office_id: UUID) -> bool:
        stmt = select(OfficeModel.id).where(OfficeModel.id == office_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    def _to_entity(self, model: ThemeModel) -> Theme:
        """Map database model to domain entity.

        Args:
            model: Database model.

        Returns:
            Theme domain entity.
        """
        return Theme(
            id=model.id,
            office_id=model.office_id,
            name=model.name,
            price=model.price,
            open_time=model.open_time,
            discount_amount=model.discount_amount,
            is_available=model.is_available,
            capacity=model.capacity,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Theme) -> ThemeModel:
        """Map domain entity to database model.

        Args:
            entity: Theme domain entity.

        Returns:
            Theme database model.
        """
        return ThemeModel(
            id=entity.id,
            office_id=entity.office_id,
            name=entity.name,
            price=entity.price,
            open_time=entity.open_time,
            discount_amount=entity.discount_amount,
            is_available=entity.is_available,
            capacity=entity.capacity,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
