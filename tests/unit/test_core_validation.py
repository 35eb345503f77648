"""Unit tests for Result types and the validator-to-Result bridge.

Tests cover:
- check() returns Success with the validated value
- check() converts ValueError into Failure(ValidationError)
- Error codes, field names and messages carried by the failure
- Non-ValueError exceptions are not swallowed
- DomainError string formatting
"""

import pytest

from src.core.enums import ErrorCode
from src.core.errors import NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.core.validation import check
from src.domain.validators import validate_capacity, validate_password


@pytest.mark.unit
class TestCheck:
    """Test check() wrapping of raising validators."""

    def test_valid_value_returns_success_with_value(self):
        """Test a passing validator yields Success carrying the value."""
        result = check(validate_capacity, 4, field="capacity")

        assert isinstance(result, Success)
        assert result.value == 4

    def test_invalid_value_returns_failure(self):
        """Test a raising validator yields Failure(ValidationError)."""
        result = check(
            validate_capacity, 7, field="capacity", code=ErrorCode.INVALID_CAPACITY
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.INVALID_CAPACITY
        assert result.error.field == "capacity"
        assert result.error.message == "Capacity must be between 1 and 6"

    def test_default_code_is_validation_failed(self):
        """Test code defaults to VALIDATION_FAILED."""
        result = check(validate_password, "short", field="password")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.VALIDATION_FAILED

    def test_other_exceptions_propagate(self):
        """Test check() only converts ValueError."""

        def broken(value):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError, match="boom"):
            check(broken, 1, field="anything")


@pytest.mark.unit
class TestResultTypes:
    """Test Success/Failure dataclasses."""

    def test_success_and_failure_are_frozen(self):
        """Test Result variants are immutable."""
        success = Success(value=1)
        failure = Failure(error="nope")

        with pytest.raises(AttributeError):
            success.value = 2  # type: ignore[misc]
        with pytest.raises(AttributeError):
            failure.error = "other"  # type: ignore[misc]

    def test_result_supports_pattern_matching(self):
        """Test Success/Failure can be destructured with match."""
        match check(validate_capacity, 0, field="capacity"):
            case Success(value=_):
                pytest.fail("capacity 0 should be rejected")
            case Failure(error=error):
                assert error.field == "capacity"


@pytest.mark.unit
class TestDomainErrorFormatting:
    """Test DomainError string representation."""

    def test_str_includes_code_and_message(self):
        """Test str(error) is '<code>: <message>'."""
        error = NotFoundError(
            code=ErrorCode.THEME_NOT_FOUND,
            message="Theme not found",
            resource_type="Theme",
            resource_id="123",
        )

        assert str(error) == "theme_not_found: Theme not found"
