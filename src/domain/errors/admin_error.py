"""Admin domain errors.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from src.domain.errors import AdminError
    from src.core.result import Failure

    if admin is None:
        return Failure(error=NotFoundError(..., message=AdminError.ADMIN_NOT_FOUND))
"""


class AdminError:
    """Admin error constants.

    Field-level validation messages live with the validators
    (src/domain/validators/functions.py); these cover lookups and
    registration outcomes.
    """

    ADMIN_NOT_FOUND = "Admin not found"
    """Admin with given ID does not exist."""

    REGISTRATION_REJECTED = "Admin registration rejected"
    """One or more fields failed validation at construction time."""
