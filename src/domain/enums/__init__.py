"""Domain enums for business logic.

Available Enums:
    - AdminRole: Back-office roles assigned to administrators
"""

from src.domain.enums.admin_role import AdminRole

__all__ = [
    "AdminRole",
]
