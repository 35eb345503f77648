"""Repository implementations (adapters for hexagonal architecture).

This package contains concrete implementations of repository protocols
defined in the domain layer.
"""

from src.infrastructure.persistence.repositories.admin_repository import (
    AdminRepository,
)
from src.infrastructure.persistence.repositories.office_repository import (
    OfficeRepository,
)
from src.infrastructure.persistence.repositories.theme_repository import (
    ThemeRepository,
)

__all__ = [
    "AdminRepository",
    "OfficeRepository",
    "ThemeRepository",
]
