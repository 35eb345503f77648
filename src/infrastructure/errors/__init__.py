"""Infrastructure errors package.

Exports infrastructure-level exceptions for convenient importing.

Usage:
    from src.infrastructure.errors import InvalidReferenceError
"""

from src.infrastructure.errors.infrastructure_error import (
    InvalidReferenceError,
    PersistenceError,
)

__all__ = [
    "PersistenceError",
    "InvalidReferenceError",
]
