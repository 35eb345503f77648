"""ThemeRepository protocol for theme persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.theme import Theme


class ThemeRepository(Protocol):
    """Theme repository protocol (port).

    Constraint Failures:
        - Theme name is unique; a duplicate surfaces as the store's own
          exception, propagated untranslated.
        - A Theme whose office_id names an Office that is not stored is
          rejected with InvalidReferenceError (distinct from constraint
          violations).

    Methods:
        find_by_id: Retrieve theme by ID
        find_by_name: Retrieve theme by name
        find_by_office_id: Retrieve every theme of an office
        save: Create or update theme
        delete: Remove theme
    """

    async def find_by_id(self, theme_id: UUID) -> Theme | None:
        """Find theme by ID.

        Args:
            theme_id: Theme's unique identifier.

        Returns:
            Theme if found, None otherwise.
        """
        ...

    async def find_by_name(self, name: str) -> Theme | None:
        """Find theme by name.

        Args:
            name: Theme name.

        Returns:
            Theme if found, None otherwise.
        """
        ...

    async def find_by_office_id(
        self, office_id: UUID, available_only: bool = False
    ) -> list[Theme]:
        """Find all themes offered by an office.

        Args:
            office_id: Office's unique identifier.
            available_only: If True, return only bookable themes.

        Returns:
            List of themes ordered by name (empty if none).
        """
        ...

    async def save(self, theme: Theme) -> None:
        """Create or update theme.

        Args:
            theme: Theme entity to persist.

        Raises:
            InvalidReferenceError: If theme.office_id is not a stored Office.
        """
        ...

    async def delete(self, theme_id: UUID) -> bool:
        """Delete theme.

        Args:
            theme_id: Theme's unique identifier.

        Returns:
            True if a row was deleted, False if theme did not exist.
        """
        ...
