"""Theme domain errors.

Usage:
    from src.domain.errors import ThemeError
"""


class ThemeError:
    """Theme error constants."""

    THEME_NOT_FOUND = "Theme not found"
    """Theme with given ID does not exist."""

    CREATION_REJECTED = "Theme creation rejected"
    """One or more fields failed validation at construction time."""
