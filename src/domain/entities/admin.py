"""Admin domain entity.

A back-office administrator who logs in to manage branches and themes.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Construction validates every field (fails fast with ValueError)
    - Change methods validate first, then mutate, and return Result types
    - login_id is fixed at creation (no change method)
    - login_id uniqueness is enforced by the repository, not here

Usage:
    from uuid_extensions import uuid7
    from src.domain.entities import Admin
    from src.domain.enums import AdminRole

    admin = Admin(
        id=uuid7(),
        login_id="gangnam_mgr",
        password="password123",
        name="Gangnam Manager",
        role=AdminRole.OFFICE_MANAGER,
        phone_number="010-1234-5678",
    )
    result = admin.change_phone_number("010-9876-5432")
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import check
from src.domain.enums.admin_role import AdminRole
from src.domain.validators import (
    validate_entity_name,
    validate_login_id,
    validate_password,
    validate_phone_number,
    validate_role,
)


@dataclass(eq=False)
class Admin:
    """Back-office administrator.

    Business Rules:
        - login_id: non-blank, at most 20 characters, immutable
        - password: non-blank, at least 8 characters (stored as given)
        - name: non-blank, at most 100 characters
        - phone_number: optional; when set, 010-XXXX-XXXX and at most 13 characters
        - role: always one of AdminRole, never None

    Attributes:
        id: Unique admin identifier.
        login_id: Login identifier (unique across admins).
        password: Password as supplied by the caller (hashing is external).
        name: Display name.
        role: Back-office role.
        phone_number: Optional mobile number.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.

    Identity:
        Two Admin instances are equal when their IDs are equal.

    Example:
        >>> admin.change_password("1234567")
        Failure(error=ValidationError(...))
        >>> admin.change_password("12345678")
        Success(value=None)
    """

    id: UUID
    login_id: str
    password: str
    name: str
    role: AdminRole
    phone_number: str | None = None

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate admin after initialization.

        Raises:
            ValueError: If any field violates its rule.
        """
        validate_login_id(self.login_id)
        validate_password(self.password)
        validate_entity_name(self.name)
        if self.phone_number is not None:
            validate_phone_number(self.phone_number)
        self.role = validate_role(self.role)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Admin):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # -------------------------------------------------------------------------
    # Change Methods - Return Result Types
    # -------------------------------------------------------------------------

    def change_name(self, name: str) -> Result[None, ValidationError]:
        """Replace the display name.

        Args:
            name: New name, non-blank and at most 100 characters.

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

    def change_password(self, password: str) -> Result[None, ValidationError]:
        """Replace the password.

        Args:
            password: New password, non-blank and at least 8 characters.

        Returns:
            Success(None): Password replaced.
            Failure(ValidationError): Password rejected; old password kept.
        """
        result = check(
            validate_password,
            password,
            field="password",
            code=ErrorCode.INVALID_PASSWORD,
        )
        if isinstance(result, Failure):
            return result

        self.password = result.value
        self._touch()
        return Success(value=None)

    def change_phone_number(self, phone_number: str) -> Result[None, ValidationError]:
        """Replace the phone number.

        Clearing the number is not supported; None is rejected like any
        other invalid value.

        Args:
            phone_number: New number in 010-XXXX-XXXX form.

        Returns:
            Success(None): Number replaced.
            Failure(ValidationError): Number rejected; old number kept.
        """
        result = check(
            validate_phone_number,
            phone_number,
            field="phone_number",
            code=ErrorCode.INVALID_PHONE_NUMBER,
        )
        if isinstance(result, Failure):
            return result

        self.phone_number = result.value
        self._touch()
        return Success(value=None)

    def change_role(self, role: AdminRole) -> Result[None, ValidationError]:
        """Replace the role.

        Args:
            role: Any AdminRole member (or its string value).

        Returns:
            Success(None): Role replaced.
            Failure(ValidationError): Role was None or unknown; old role kept.
        """
        result = check(validate_role, role, field="role", code=ErrorCode.INVALID_ROLE)
        if isinstance(result, Failure):
            return result

        self.role = result.value
        self._touch()
        return Success(value=None)

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
