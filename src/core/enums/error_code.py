"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_NAME = "invalid_name"
    INVALID_LOGIN_ID = "invalid_login_id"
    INVALID_PASSWORD = "invalid_password"
    INVALID_PHONE_NUMBER = "invalid_phone_number"
    INVALID_ROLE = "invalid_role"
    INVALID_PRICE = "invalid_price"
    INVALID_OPEN_TIME = "invalid_open_time"
    INVALID_DISCOUNT_AMOUNT = "invalid_discount_amount"
    INVALID_AVAILABILITY = "invalid_availability"
    INVALID_CAPACITY = "invalid_capacity"

    # Resource errors
    ADMIN_NOT_FOUND = "admin_not_found"
    OFFICE_NOT_FOUND = "office_not_found"
    THEME_NOT_FOUND = "theme_not_found"
