"""Theme domain entity.

A Theme is one escape-room experience offered by an Office: its name,
entrance price and discount, the time of day reservations open, how many
players a session takes and whether it is currently bookable.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - office_id is a reference only; Theme never inspects the Office.
      The repository rejects a Theme whose Office is not stored.
    - Change methods validate first, then mutate, and return Result types
    - No way to move a Theme to another Office after creation

Usage:
    from datetime import time
    from uuid_extensions import uuid7
    from src.domain.entities import Theme

    theme = Theme(
        id=uuid7(),
        office_id=office.id,
        name="The Haunted Library",
        price=25000,
        open_time=time(10, 0),
    )
    theme.final_entrance_fee  # 25000
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime, time
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import check
from src.domain.validators import (
    MAX_CAPACITY,
    MIN_CAPACITY,
    validate_capacity,
    validate_discount_amount,
    validate_entity_name,
    validate_is_available,
    validate_open_time,
    validate_price,
)

DEFAULT_DISCOUNT_AMOUNT = 0
DEFAULT_CAPACITY = 2


@dataclass(eq=False)
class Theme:
    """Escape-room theme offered by an Office.

    Business Rules:
        - name: non-blank, at most 100 characters
        - price: integer, >= 0
        - open_time: required time of day
        - discount_amount: integer, >= 0 (not capped by price)
        - is_available: bool, never None
        - capacity: integer between MIN_CAPACITY and MAX_CAPACITY

    Attributes:
        id: Unique theme identifier.
        office_id: Office offering this theme.
        name: Theme name (unique across themes).
        price: Entrance price before discount.
        open_time: Time of day reservations open.
        discount_amount: Amount taken off the price.
        is_available: Whether the theme can be booked.
        capacity: Players per session.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.

    Identity:
        Two Theme instances are equal when their IDs are equal.
    """

    MIN_CAPACITY = MIN_CAPACITY
    MAX_CAPACITY = MAX_CAPACITY

    id: UUID
    office_id: UUID
    name: str
    price: int
    open_time: time
    discount_amount: int = DEFAULT_DISCOUNT_AMOUNT
    is_available: bool = False
    capacity: int = DEFAULT_CAPACITY

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate theme after initialization.

        office_id is not checked here; a missing or unknown Office is a
        persistence failure raised by the repository.

        Raises:
            ValueError: If any validated field violates its rule.
        """
        validate_entity_name(self.name)
        validate_price(self.price)
        validate_open_time(self.open_time)
        validate_discount_amount(self.discount_amount)
        validate_is_available(self.is_available)
        validate_capacity(self.capacity)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Theme):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # -------------------------------------------------------------------------
    # Query Methods (Read-Only)
    # -------------------------------------------------------------------------

    def get_final_entrance_fee(self) -> int:
        """Price after discount.

        Not guarded: a discount larger than the price gives a negative fee.

        Returns:
            price - discount_amount.

        Example:
            >>> theme.price, theme.discount_amount = 10000, 500
            >>> theme.get_final_entrance_fee()
            9500
        """
        return self.price - self.discount_amount

    @property
    def final_entrance_fee(self) -> int:
        """Price after discount (see get_final_entrance_fee)."""
        return self.get_final_entrance_fee()

    # -------------------------------------------------------------------------
    # Change Methods - Return Result Types
    # -------------------------------------------------------------------------

    def change_name(self, name: str) -> Result[None, ValidationError]:
        """Replace the theme name.

        Returns:
            Success(None): Name replaced.
            Failure(ValidationError): Name rejected; old name kept.
        """
        result = check(
            validate_entity_name, name, field="name", code=ErrorCode.INVALID_NAME
        )
        if isinstance(result, Failure):
            return result

        self.name = result.value
        self._touch()
        return Success(value=None)

    def change_price(self, price: int) -> Result[None, ValidationError]:
        """Replace the entrance price (no upper bound).

        Returns:
            Success(None): Price replaced.
            Failure(ValidationError): Negative price; old price kept.
        """
        result = check(validate_price, price, field="price", code=ErrorCode.INVALID_PRICE)
        if isinstance(result, Failure):
            return result

        self.price = result.value
        self._touch()
        return Success(value=None)

    def change_open_time(self, open_time: time) -> Result[None, ValidationError]:
        """Replace the reservation open time.

        Returns:
            Success(None): Open time replaced.
            Failure(ValidationError): Open time was None; old value kept.
        """
        result = check(
            validate_open_time,
            open_time,
            field="open_time",
            code=ErrorCode.INVALID_OPEN_TIME,
        )
        if isinstance(result, Failure):
            return result

        self.open_time = result.value
        self._touch()
        return Success(value=None)

    def change_discount_amount(
        self, discount_amount: int
    ) -> Result[None, ValidationError]:
        """Replace the discount amount.

        The discount may exceed the price.

        Returns:
            Success(None): Discount replaced.
            Failure(ValidationError): Negative discount; old value kept.
        """
        result = check(
            validate_discount_amount,
            discount_amount,
            field="discount_amount",
            code=ErrorCode.INVALID_DISCOUNT_AMOUNT,
        )
        if isinstance(result, Failure):
            return result

        self.discount_amount = result.value
        self._touch()
        return Success(value=None)

    def change_is_available(
        self, is_available: bool | None
    ) -> Result[None, ValidationError]:
        """Open or close the theme for booking.

        Returns:
            Success(None): Availability replaced.
            Failure(ValidationError): Value was None; old value kept.
        """
        result = check(
            validate_is_available,
            is_available,
            field="is_available",
            code=ErrorCode.INVALID_AVAILABILITY,
        )
        if isinstance(result, Failure):
            return result

        self.is_available = result.value
        self._touch()
        return Success(value=None)

    def change_capacity(self, capacity: int) -> Result[None, ValidationError]:
        """Replace the players-per-session capacity.

        Returns:
            Success(None): Capacity replaced.
            Failure(ValidationError): Capacity outside 1-6; old value kept.

        Example:
            >>> theme.change_capacity(7)
            Failure(error=ValidationError(code=<ErrorCode.INVALID_CAPACITY...>))
        """
        result = check(
            validate_capacity,
            capacity,
            field="capacity",
            code=ErrorCode.INVALID_CAPACITY,
        )
        if isinstance(result, Failure):
            return result

        self.capacity = result.value
        self._touch()
        return Success(value=None)

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
