"""Administrator roles.

Every Admin carries exactly one role; it is never null after construction.

Usage:
    from src.domain.enums import AdminRole

    if admin.role == AdminRole.SUPER_ADMIN:
        # Head-office only logic
"""

from enum import Enum


class AdminRole(str, Enum):
    """Back-office roles for administrators.

    String Enum:
        Inherits from str for easy serialization. The value is what gets
        stored in the admins.role column.
    """

    SUPER_ADMIN = "super_admin"
    """Head-office administrator managing every branch."""

    OFFICE_MANAGER = "office_manager"
    """Manager of a single branch (themes, accounts, welcome message)."""

    OFFICE_STAFF = "office_staff"
    """Front-desk staff with day-to-day access to a branch."""

    @classmethod
    def values(cls) -> list[str]:
        """Get all role values as strings.

        Returns:
            list[str]: List of role values.
        """
        return [role.value for role in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a valid role.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a valid role.
        """
        return value in cls.values()
