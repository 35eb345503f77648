"""Bridge between raising domain validators and Result types.

Domain validators (src/domain/validators) are plain functions that raise
ValueError with a human-readable reason. Construction code calls them
directly and lets the ValueError propagate; change operations call them
through check() so a rejected value comes back as a Failure instead.

Usage:
    from src.core.validation import check
    from src.domain.validators import validate_capacity

    result = check(validate_capacity, 7, field="capacity", code=ErrorCode.INVALID_CAPACITY)
    match result:
        case Success(value=capacity):
            ...
        case Failure(error=error):
            print(error.message)
"""

from collections.abc import Callable
from typing import TypeVar

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success

T = TypeVar("T")


def check(
    validator: Callable[[T], T],
    value: T,
    *,
    field: str,
    code: ErrorCode = ErrorCode.VALIDATION_FAILED,
) -> Result[T, ValidationError]:
    """Run a raising validator and wrap its outcome in a Result.

    Args:
        validator: Function that returns the value or raises ValueError.
        value: Value to validate.
        field: Name of the field being validated.
        code: Error code reported on failure.

    Returns:
        Success with the validated value, Failure with ValidationError otherwise.
    """
    try:
        validated = validator(value)
    except ValueError as e:
        return Failure(error=ValidationError(code=code, message=str(e), field=field))
    return Success(value=validated)
