"""Domain value objects.

Immutable value objects compared by their field values.
"""

from src.domain.value_objects.account import Account

__all__ = [
    "Account",
]
