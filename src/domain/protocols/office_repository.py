"""OfficeRepository protocol for office persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.office import Office


class OfficeRepository(Protocol):
    """Office repository protocol (port).

    The Office aggregate is saved and loaded whole: its account set travels
    with it and is never persisted on its own.

    Constraint Failures:
        Office name is unique. A duplicate surfaces as the store's own
        exception, propagated untranslated.

    Methods:
        find_by_id: Retrieve office (with accounts) by ID
        find_by_name: Retrieve office by name
        exists: Check whether an office ID is stored
        list_all: Retrieve every office ordered by name
        save: Create or update office and its account set
        delete: Remove office and its accounts
    """

    async def find_by_id(self, office_id: UUID) -> Office | None:
        """Find office by ID.

        Args:
            office_id: Office's unique identifier.

        Returns:
            Office with its accounts if found, None otherwise.
        """
        ...

    async def find_by_name(self, name: str) -> Office | None:
        """Find office by name.

        Args:
            name: Branch name.

        Returns:
            Office if found, None otherwise.
        """
        ...

    async def exists(self, office_id: UUID) -> bool:
        """Check if an office is stored.

        Args:
            office_id: Office's unique identifier.

        Returns:
            True if stored, False otherwise.
        """
        ...

    async def list_all(self) -> list[Office]:
        """List all offices ordered by name.

        Returns:
            List of offices (empty if none).
        """
        ...

    async def save(self, office: Office) -> None:
        """Create or update office.

        The stored account set is made equal to office.accounts.

        Args:
            office: Office entity to persist.
        """
        ...

    async def delete(self, office_id: UUID) -> bool:
        """Delete office and its accounts.

        Args:
            office_id: Office's unique identifier.

        Returns:
            True if a row was deleted, False if office did not exist.
        """
        ...
