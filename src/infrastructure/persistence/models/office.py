"""Office and office account database models.

An Office row holds the branch itself; its bank accounts live in
office_accounts, one row per (office, bank, account number). Deleting an
office removes its account rows (ON DELETE CASCADE).
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.validators import MAX_NAME_LENGTH
from src.infrastructure.persistence.base import BaseModel, BaseMutableModel


class Office(BaseMutableModel):
    """Office model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when office was registered (from BaseMutableModel)
        updated_at: Timestamp when office was last modified (from BaseMutableModel)
        name: Branch name, unique across offices
        welcome_message: Optional greeting for visitors

    Indexes:
        - ix_offices_name: (name) UNIQUE
    """

    __tablename__ = "offices"

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Branch name (unique)",
    )

    welcome_message: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
        comment="Greeting shown to visitors",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of office.
        """
        return f"<Office(id={self.id}, name={self.name!r})>"


class OfficeAccount(BaseModel):
    """Bank account published by an office.

    Rows are inserted or deleted as the Office's account set changes; they
    are never updated, so there is no updated_at.

    Fields:
        id: UUID primary key (from BaseModel)
        created_at: Timestamp when account was added (from BaseModel)
        office_id: FK to offices (CASCADE delete)
        bank_name: Bank name
        account_number: Account number at that bank
    """

    __tablename__ = "office_accounts"

    office_id: Mapped[UUID] = mapped_column(
        ForeignKey("offices.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
        comment="FK to offices table",
    )

    bank_name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Bank name",
    )

    account_number: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Account number at the bank",
    )

    __table_args__ = (
        # An office holds a given account at most once
        UniqueConstraint(
            "office_id",
            "bank_name",
            "account_number",
            name="uq_office_accounts_office_bank_number",
        ),
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of office account.
        """
        return (
            f"<OfficeAccount(office_id={self.office_id}, "
            f"bank_name={self.bank_name!r}, account_number={self.account_number!r})>"
        )
