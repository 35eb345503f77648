"""Admin commands (CQRS write operations).

All commands are immutable (frozen=True) and use keyword-only arguments
(kw_only=True). Handlers return Result types.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums.admin_role import AdminRole


@dataclass(frozen=True, kw_only=True)
class RegisterAdmin:
    """Register a new back-office administrator.

    Attributes:
        login_id: Login identifier (unique; duplicates fail in storage).
        password: Password, at least 8 characters.
        name: Display name.
        role: Back-office role.
        phone_number: Optional 010-XXXX-XXXX number.

    Example:
        >>> result = await handler.handle(
        ...     RegisterAdmin(
        ...         login_id="gangnam_mgr",
        ...         password="password123",
        ...         name="Gangnam Manager",
        ...         role=AdminRole.OFFICE_MANAGER,
        ...     )
        ... )
    """

    login_id: str
    password: str
    name: str
    role: AdminRole
    phone_number: str | None = None


@dataclass(frozen=True, kw_only=True)
class UpdateAdmin:
    """Change one or more fields of an existing administrator.

    Fields left as None are not touched. login_id cannot be changed.

    Attributes:
        admin_id: Admin to update.
        name: New display name.
        password: New password.
        phone_number: New phone number.
        role: New role.
    """

    admin_id: UUID
    name: str | None = None
    password: str | None = None
    phone_number: str | None = None
    role: AdminRole | None = None
