"""Domain entities for business logic.

Pure business logic entities with no framework dependencies.
"""

from src.domain.entities.admin import Admin
from src.domain.entities.office import Office
from src.domain.entities.theme import Theme

__all__ = [
    "Admin",
    "Office",
    "Theme",
]
