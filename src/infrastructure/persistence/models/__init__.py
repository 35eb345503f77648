"""Database models for persistence layer.

This package contains SQLAlchemy database models that map to database
tables. These are infrastructure concerns and should not be imported by the
domain layer.

Models Organization:
    - admin.py: Admin model
    - office.py: Office model and its office_accounts rows
    - theme.py: Theme model

Note:
    Domain entities (dataclasses) live in src/domain/entities/
    Database models live here in src/infrastructure/persistence/models/
    They are separate and mapped via repository layer.
"""

from src.infrastructure.persistence.models.admin import Admin
from src.infrastructure.persistence.models.office import Office, OfficeAccount
from src.infrastructure.persistence.models.theme import Theme

__all__ = [
    "Admin",
    "Office",
    "OfficeAccount",
    "Theme",
]
