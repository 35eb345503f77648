"""Office domain errors.

Usage:
    from src.domain.errors import OfficeError
"""


class OfficeError:
    """Office error constants."""

    OFFICE_NOT_FOUND = "Office not found"
    """Office with given ID does not exist."""

    REGISTRATION_REJECTED = "Office registration rejected"
    """One or more fields failed validation at construction time."""
