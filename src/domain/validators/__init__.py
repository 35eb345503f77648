"""Validators package exports.

Exports:
    - Validator functions (from functions.py)
    - Field limits shared with entities and database models
"""

from src.domain.validators.functions import (
    MAX_CAPACITY,
    MAX_LOGIN_ID_LENGTH,
    MAX_NAME_LENGTH,
    MAX_PHONE_NUMBER_LENGTH,
    MIN_CAPACITY,
    MIN_PASSWORD_LENGTH,
    validate_capacity,
    validate_discount_amount,
    validate_entity_name,
    validate_is_available,
    validate_login_id,
    validate_open_time,
    validate_password,
    validate_phone_number,
    validate_price,
    validate_role,
)

__all__ = [
    # Limits
    "MAX_CAPACITY",
    "MAX_LOGIN_ID_LENGTH",
    "MAX_NAME_LENGTH",
    "MAX_PHONE_NUMBER_LENGTH",
    "MIN_CAPACITY",
    "MIN_PASSWORD_LENGTH",
    # Validator functions
    "validate_capacity",
    "validate_discount_amount",
    "validate_entity_name",
    "validate_is_available",
    "validate_login_id",
    "validate_open_time",
    "validate_password",
    "validate_phone_number",
    "validate_price",
    "validate_role",
]
