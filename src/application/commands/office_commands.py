"""Office commands (CQRS write operations)."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.value_objects.account import Account


@dataclass(frozen=True, kw_only=True)
class RegisterOffice:
    """Register a new branch office.

    Attributes:
        name: Branch name (unique; duplicates fail in storage).
        welcome_message: Optional greeting for visitors.
        accounts: Initial bank accounts (duplicates collapse into one).
    """

    name: str
    welcome_message: str | None = None
    accounts: tuple[Account, ...] = ()


@dataclass(frozen=True, kw_only=True)
class UpdateOffice:
    """Change an existing office.

    Removals are applied before additions, so an account listed in both
    ends up held.

    Attributes:
        office_id: Office to update.
        name: New branch name (None leaves it unchanged).
        welcome_message: New greeting (None leaves it unchanged).
        clear_welcome_message: If True, welcome message is set to None.
        add_accounts: Accounts to add.
        remove_accounts: Accounts to remove (absent ones are ignored).
    """

    office_id: UUID
    name: str | None = None
    welcome_message: str | None = None
    clear_welcome_message: bool = False
    add_accounts: tuple[Account, ...] = ()
    remove_accounts: tuple[Account, ...] = ()
