"""Theme commands (CQRS write operations)."""

from dataclasses import dataclass
from datetime import time
from uuid import UUID

from src.domain.entities.theme import DEFAULT_CAPACITY, DEFAULT_DISCOUNT_AMOUNT


@dataclass(frozen=True, kw_only=True)
class CreateTheme:
    """Create a theme for an office.

    An office_id that names no stored Office is rejected by the repository
    with InvalidReferenceError.

    Attributes:
        office_id: Office offering the theme.
        name: Theme name (unique across all themes).
        price: Entrance price before discount.
        open_time: Time of day reservations open.
        discount_amount: Amount taken off the price.
        is_available: Whether the theme can be booked.
        capacity: Players per session (1-6).
    """

    office_id: UUID
    name: str
    price: int
    open_time: time
    discount_amount: int = DEFAULT_DISCOUNT_AMOUNT
    is_available: bool = False
    capacity: int = DEFAULT_CAPACITY


@dataclass(frozen=True, kw_only=True)
class UpdateTheme:
    """Change one or more fields of an existing theme.

    Fields left as None are not touched. The office cannot be changed.

    Attributes:
        theme_id: Theme to update.
        name: New name.
        price: New price.
        open_time: New reservation open time.
        discount_amount: New discount.
        is_available: New availability.
        capacity: New capacity.
    """

    theme_id: UUID
    name: str | None = None
    price: int | None = None
    open_time: time | None = None
    discount_amount: int | None = None
    is_available: bool | None = None
    capacity: int | None = None
