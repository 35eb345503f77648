"""Admin database model.

Stores back-office administrators. The login_id column carries the
uniqueness rule the Admin entity leaves to storage.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.validators import (
    MAX_LOGIN_ID_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_NUMBER_LENGTH,
)
from src.infrastructure.persistence.base import BaseMutableModel


class Admin(BaseMutableModel):
    """Admin model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when admin was registered (from BaseMutableModel)
        updated_at: Timestamp when admin was last modified (from BaseMutableModel)
        login_id: Login identifier, unique across admins
        password: Password as supplied (no hashing at this layer)
        name: Display name
        phone_number: Optional 010-XXXX-XXXX number
        role: AdminRole value

    Indexes:
        - ix_admins_login_id: (login_id) UNIQUE
    """

    __tablename__ = "admins"

    login_id: Mapped[str] = mapped_column(
        String(MAX_LOGIN_ID_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Login identifier (unique)",
    )

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password as supplied by the caller",
    )

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        comment="Display name",
    )

    phone_number: Mapped[str | None] = mapped_column(
        String(MAX_PHONE_NUMBER_LENGTH),
        nullable=True,
        comment="Mobile number (010-XXXX-XXXX)",
    )

    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        comment="AdminRole value: super_admin, office_manager, office_staff",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of admin.
        """
        return f"<Admin(id={self.id}, login_id={self.login_id!r}, role={self.role!r})>"
