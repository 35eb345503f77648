"""Domain errors package.

Exports all domain-level error constant classes for convenient importing.

Usage:
    from src.domain.errors import AdminError, OfficeError, ThemeError
"""

from src.domain.errors.admin_error import AdminError
from src.domain.errors.office_error import OfficeError
from src.domain.errors.theme_error import ThemeError

__all__ = [
    "AdminError",
    "OfficeError",
    "ThemeError",
]
