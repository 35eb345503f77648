"""AdminRepository protocol for admin persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.admin import Admin


class AdminRepository(Protocol):
    """Admin repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Constraint Failures:
        login_id is unique. A save() that would duplicate it fails inside
        the store's transaction and the store's own exception propagates
        to the caller untranslated.

    Methods:
        find_by_id: Retrieve admin by ID
        find_by_login_id: Retrieve admin by login ID
        exists_by_login_id: Check whether a login ID is taken
        save: Create or update admin
        delete: Remove admin
    """

    async def find_by_id(self, admin_id: UUID) -> Admin | None:
        """Find admin by ID.

        Args:
            admin_id: Admin's unique identifier.

        Returns:
            Admin if found, None otherwise.
        """
        ...

    async def find_by_login_id(self, login_id: str) -> Admin | None:
        """Find admin by login ID.

        Args:
            login_id: Login identifier.

        Returns:
            Admin if found, None otherwise.
        """
        ...

    async def exists_by_login_id(self, login_id: str) -> bool:
        """Check if an admin with this login ID exists.

        Args:
            login_id: Login identifier.

        Returns:
            True if taken, False otherwise.
        """
        ...

    async def save(self, admin: Admin) -> None:
        """Create or update admin (whole object).

        Args:
            admin: Admin entity to persist.
        """
        ...

    async def delete(self, admin_id: UUID) -> bool:
        """Delete admin.

        Args:
            admin_id: Admin's unique identifier.

        Returns:
            True if a row was deleted, False if admin did not exist.
        """
        ...
