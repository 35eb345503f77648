"""Theme database model.

Every theme row belongs to an office (office_id NOT NULL). Names are unique
across all themes, not per office.
"""

from datetime import time
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Integer, String, Time
from sqlalchemy.orm import Mapped, mapped_column

from src.domain.validators import MAX_NAME_LENGTH
from src.infrastructure.persistence.base import BaseMutableModel


class Theme(BaseMutableModel):
    """Theme model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        created_at: Timestamp when theme was created (from BaseMutableModel)
        updated_at: Timestamp when theme was last modified (from BaseMutableModel)
        office_id: FK to offices (required)
        name: Theme name, unique across themes
        price: Entrance price before discount
        open_time: Time of day reservations open
        discount_amount: Amount taken off the price
        is_available: Whether the theme can be booked
        capacity: Players per session

    Indexes:
        - ix_themes_name: (name) UNIQUE
        - ix_themes_office_id: (office_id)
    """

    __tablename__ = "themes"

    office_id: Mapped[UUID] = mapped_column(
        ForeignKey("offices.id"),
        nullable=False,
        index=True,
        comment="FK to offices table",
    )

    name: Mapped[str] = mapped_column(
        String(MAX_NAME_LENGTH),
        nullable=False,
        unique=True,
        index=True,
        comment="Theme name (unique)",
    )

    price: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Entrance price before discount",
    )

    open_time: Mapped[time] = mapped_column(
        Time,
        nullable=False,
        comment="Time of day reservations open",
    )

    discount_amount: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Amount taken off the price",
    )

    is_available: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        comment="Whether the theme can be booked",
    )

    capacity: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=2,
        comment="Players per session (1-6)",
    )

    def __repr__(self) -> str:
        """String representation for debugging.

        Returns:
            str: Human-readable representation of theme.
        """
        return (
            f"<Theme(id={self.id}, name={self.name!r}, office_id={self.office_id})>"
        )
