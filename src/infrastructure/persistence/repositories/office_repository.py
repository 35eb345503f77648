"""Office repository implementation.

SQLAlchemy implementation of the OfficeRepository protocol.
Maps between the Office aggregate and two tables: offices and
office_accounts.

The entity's account set is the source of truth. save() compares it with
the stored rows and deletes or inserts only the difference, so an account
the office keeps is never re-inserted.
"""

from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities.office import Office
from src.domain.value_objects.account import Account
from src.infrastructure.persistence.base import as_utc
from src.infrastructure.persistence.models.office import Office as OfficeModel
from src.infrastructure.persistence.models.office import (
    OfficeAccount as OfficeAccountModel,
)


class OfficeRepository:
    """SQLAlchemy implementation of OfficeRepository protocol.

    **Implementation Notes**:
    - Accounts are loaded with a second query per office
    - Office name uniqueness violations surface as IntegrityError
    - save() flushes but does not commit; the session owner commits
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self._session = session

    async def find_by_id(self, office_id: UUID) -> Office | None:
        """Find office by ID, with its accounts.

        Args:
            office_id: Unique office identifier.

        Returns:
            Office entity if found, None otherwise.
        """
        stmt = select(OfficeModel).where(OfficeModel.id == office_id)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return await self._load(model)

    async def find_by_name(self, name: str) -> Office | None:
        """Find office by name.

        Args:
            name: Branch name.

        Returns:
            Office entity if found, None otherwise.
        """
        stmt = select(OfficeModel).where(OfficeModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return await self._load(model)

    async def exists(self, office_id: UUID) -> bool:
        """Check if an office with ID is stored.

        Args:
            office_id: Office identifier to check.

        Returns:
            True if office exists, False otherwise.
        """
        stmt = select(OfficeModel.id).where(OfficeModel.id == office_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none() is not None

    async def list_all(self) -> list[Office]:
        """List all offices ordered by name.

        Returns:
            List of all offices.
        """
        stmt = select(OfficeModel).order_by(OfficeModel.name)
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [await self._load(m) for m in models]

    async def save(self, office: Office) -> None:
        """Save an office and synchronize its account rows.

        Args:
            office: Office entity to save.

        Raises:
            IntegrityError: If name is already used by another office.
        """
        stmt = select(OfficeModel).where(OfficeModel.id == office.id)
        result = await self._session.execute(stmt)
        existing = result.scalar_one_or_none()

        if existing is None:
            self._session.add(self._to_model(office))
            # Parent row first so account rows satisfy the FK
            await self._session.flush()
            stored: dict[Account, OfficeAccountModel] = {}
        else:
            existing.name = office.name
            existing.welcome_message = office.welcome_message
            existing.updated_at = office.updated_at
            stored = await self._account_rows(office.id)

        for account, row in stored.items():
            if account not in office.accounts:
                await self._session.delete(row)

        for account in office.accounts - set(stored):
            self._session.add(
                OfficeAccountModel(
                    office_id=office.id,
                    bank_name=account.bank_name,
                    account_number=account.account_number,
                )
            )

        await self._session.flush()

    async def delete(self, office_id: UUID) -> bool:
        """Remove office and its accounts from database (hard delete).

        Args:
            office_id: Office's unique identifier.

        Returns:
            True if a row was deleted, False if office did not exist.

        Raises:
            IntegrityError: If themes still reference the office.
        """
        await self._session.execute(
            delete(OfficeAccountModel).where(OfficeAccountModel.office_id == office_id)
        )
        stmt = delete(OfficeModel).where(OfficeModel.id == office_id)
        result = await self._session.execute(stmt)
        await self._session.flush()
        return result.rowcount > 0

    # =========================================================================
    # Entity ↔ Model Mapping (Private Methods)
    # =========================================================================

    async def _account_rows(self, office_id: UUID) -> dict[Account, OfficeAccountModel]:
        stmt = select(OfficeAccountModel).where(
            OfficeAccountModel.office_id == office_id
        )
        result = await self._session.execute(stmt)
        return {
            Account.of(row.bank_name, row.account_number): row
            for row in result.scalars().all()
        }

    async def _load(self, model: OfficeModel) -> Office:
        rows = await self._account_rows(model.id)
        return self._to_entity(model, rows.keys())

    def _to_entity(self, model: OfficeModel, accounts: Iterable[Account]) -> Office:
        """Map database rows to domain entity.

        Args:
            model: Office database model.
            accounts: Accounts read from office_accounts.

        Returns:
            Office domain entity.
        """
        return Office(
            id=model.id,
            name=model.name,
            accounts=frozenset(accounts),
            welcome_message=model.welcome_message,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _to_model(self, entity: Office) -> OfficeModel:
        """Map domain entity to the offices row (accounts are separate rows).

        Args:
            entity: Office domain entity.

        Returns:
            Office database model.
        """
        return OfficeModel(
            id=entity.id,
            name=entity.name,
            welcome_message=entity.welcome_message,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )
