"""Centralized validation functions (DRY principle).

All field-level rules for Admin, Office and Theme are defined once here.
Validators are pure functions that raise ValueError on validation failure
and return the value unchanged otherwise.

Entities call them directly in __post_init__ (construction fails fast) and
through src.core.validation.check() in their change_* methods (a rejected
change comes back as Failure(ValidationError) and leaves the entity as it was).
"""

import re
from datetime import time
from typing import Any

from src.domain.enums.admin_role import AdminRole

MAX_NAME_LENGTH = 100
MAX_LOGIN_ID_LENGTH = 20
MIN_PASSWORD_LENGTH = 8
MAX_PHONE_NUMBER_LENGTH = 13
MIN_CAPACITY = 1
MAX_CAPACITY = 6

PHONE_NUMBER_PATTERN = re.compile(r"^(010)-([0-9]{4})-([0-9]{4})$")

# Count as text in blank checks: no-break spaces and NEL
_NON_BLANK_SPACES = frozenset("\u00a0\u2007\u202f\u0085")


def _is_blank(v: str) -> bool:
    return all(c.isspace() and c not in _NON_BLANK_SPACES for c in v)


def _require_text(v: str | None, label: str) -> str:
    if v is None or not isinstance(v, str) or _is_blank(v):
        raise ValueError(f"{label} cannot be null, empty or whitespace only")
    return v


def _require_int(v: Any, label: str) -> int:
    # bool is an int subclass; True/False are never a price or a head count
    if v is None:
        raise ValueError(f"{label} cannot be null")
    if isinstance(v, bool) or not isinstance(v, int):
        raise ValueError(f"{label} must be an integer")
    return v


def validate_entity_name(v: str | None) -> str:
    """Validate an Admin, Office or Theme name.

    Args:
        v: Name to validate.

    Returns:
        Name unchanged.

    Raises:
        ValueError: If name is null, blank, or longer than 100 characters.

    Example:
        >>> validate_entity_name("Gangnam")
        'Gangnam'
        >>> validate_entity_name("a" * 101)
        ValueError: Name cannot exceed 100 characters
    """
    _require_text(v, "Name")
    if len(v) > MAX_NAME_LENGTH:
        raise ValueError(f"Name cannot exceed {MAX_NAME_LENGTH} characters")
    return v


def validate_login_id(v: str | None) -> str:
    """Validate an admin login ID.

    Args:
        v: Login ID to validate.

    Returns:
        Login ID unchanged.

    Raises:
        ValueError: If login ID is null, blank, or longer than 20 characters.
    """
    _require_text(v, "Login ID")
    if len(v) > MAX_LOGIN_ID_LENGTH:
        raise ValueError(f"Login ID cannot exceed {MAX_LOGIN_ID_LENGTH} characters")
    return v


def validate_password(v: str | None) -> str:
    """Validate an admin password.

    Only a minimum length is enforced; there is no upper bound and no hashing
    happens here.

    Args:
        v: Password to validate.

    Returns:
        Password unchanged.

    Raises:
        ValueError: If password is null, blank, or shorter than 8 characters.

    Example:
        >>> validate_password("12345678")
        '12345678'
        >>> validate_password("1234567")
        ValueError: Password must be at least 8 characters
    """
    _require_text(v, "Password")
    if len(v) < MIN_PASSWORD_LENGTH:
        raise ValueError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters")
    return v


def validate_phone_number(v: str | None) -> str:
    """Validate a mobile phone number in 010-XXXX-XXXX form.

    The pattern is applied with re.search(), not re.fullmatch(). Because the
    pattern itself is anchored with ^ and $, the only extra input it lets
    through is a single trailing newline, which the 13-character limit
    rejects first.

    Args:
        v: Phone number to validate.

    Returns:
        Phone number unchanged.

    Raises:
        ValueError: If phone number is null, blank, longer than 13 characters,
            or does not match the pattern.

    Example:
        >>> validate_phone_number("010-9876-5432")
        '010-9876-5432'
        >>> validate_phone_number("011-1234-5678")
        ValueError: Phone number does not match the 010-XXXX-XXXX pattern
    """
    _require_text(v, "Phone number")
    if len(v) > MAX_PHONE_NUMBER_LENGTH:
        raise ValueError(
            f"Phone number cannot exceed {MAX_PHONE_NUMBER_LENGTH} characters"
        )
    if not PHONE_NUMBER_PATTERN.search(v):
        raise ValueError("Phone number does not match the 010-XXXX-XXXX pattern")
    return v


def validate_role(v: AdminRole | str | None) -> AdminRole:
    """Validate and coerce an admin role.

    Args:
        v: AdminRole member or its string value.

    Returns:
        The AdminRole member.

    Raises:
        ValueError: If role is null or not one of the AdminRole values.
    """
    if v is None:
        raise ValueError("Role cannot be null")
    if not isinstance(v, str) or not AdminRole.is_valid(v):
        raise ValueError(f"Role must be one of: {', '.join(AdminRole.values())}")
    return AdminRole(v)


def validate_price(v: int | None) -> int:
    """Validate a theme entrance price.

    Raises:
        ValueError: If price is null, not an integer, or negative.
    """
    _require_int(v, "Price")
    if v < 0:
        raise ValueError("Price cannot be negative")
    return v


def validate_open_time(v: time | None) -> time:
    """Validate a theme reservation open time.

    Raises:
        ValueError: If open time is null or not a time of day.
    """
    if v is None:
        raise ValueError("Open time cannot be null")
    if not isinstance(v, time):
        raise ValueError("Open time must be a time of day")
    return v


def validate_discount_amount(v: int | None) -> int:
    """Validate a theme discount amount.

    The discount is not compared against the price.

    Raises:
        ValueError: If discount is null, not an integer, or negative.
    """
    _require_int(v, "Discount amount")
    if v < 0:
        raise ValueError("Discount amount cannot be negative")
    return v


def validate_is_available(v: bool | None) -> bool:
    """Validate a theme availability flag.

    Raises:
        ValueError: If the flag is null or not a bool.
    """
    if v is None:
        raise ValueError("Availability cannot be null")
    if not isinstance(v, bool):
        raise ValueError("Availability must be a boolean")
    return v


def validate_capacity(v: int | None) -> int:
    """Validate a theme capacity (players per session).

    Raises:
        ValueError: If capacity is null, not an integer, or outside 1-6.

    Example:
        >>> validate_capacity(6)
        6
        >>> validate_capacity(7)
        ValueError: Capacity must be between 1 and 6
    """
    _require_int(v, "Capacity")
    if v < MIN_CAPACITY or v > MAX_CAPACITY:
        raise ValueError(f"Capacity must be between {MIN_CAPACITY} and {MAX_CAPACITY}")
    return v
