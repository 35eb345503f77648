"""Office domain entity.

An Office is a branch of the business. It is the aggregate root for the
bank accounts the branch publishes and carries an optional welcome message
shown to visitors. Themes reference an Office by ID.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Owns its Account set; callers only ever see an immutable snapshot
    - name uniqueness is enforced by the repository, not here

Usage:
    from uuid_extensions import uuid7
    from src.domain.entities import Office
    from src.domain.value_objects import Account

    office = Office(id=uuid7(), name="Gangnam", welcome_message="Welcome!")
    office.add_account(Account.of("KB Kookmin", "123-456-78910"))
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.core.validation import check
from src.domain.validators import validate_entity_name
from src.domain.value_objects.account import Account


@dataclass(eq=False)
class Office:
    """Escape-room branch office.

    Business Rules:
        - name: non-blank, at most 100 characters
        - accounts: a set; value-equal accounts are stored once
        - welcome_message: free text, may be None, never validated

    Attributes:
        id: Unique office identifier.
        name: Branch name (unique across offices).
        accounts: Bank accounts of the branch (read-only snapshot).
        welcome_message: Optional greeting for visitors.
        created_at: Record creation timestamp.
        updated_at: Last modification timestamp.

    Identity:
        Two Office instances are equal when their IDs are equal.

    Example:
        >>> office.add_account(Account.of("Shinhan", "987-654-32100"))
        >>> office.add_account(Account.of("Shinhan", "987-654-32100"))
        >>> len(office.accounts)
        1
    """

    id: UUID
    name: str
    accounts: frozenset[Account] = field(default_factory=frozenset)
    welcome_message: str | None = None

    # Timestamps
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        """Validate office after initialization.

        Accepts any iterable of accounts and freezes it into a set.

        Raises:
            ValueError: If name is invalid.
        """
        validate_entity_name(self.name)
        self.accounts = frozenset(self.accounts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Office):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    # -------------------------------------------------------------------------
    # Change Methods
    # -------------------------------------------------------------------------

    def change_name(self, name: str) -> Result[None, ValidationError]:
        """Replace the branch name.

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

    def add_account(self, account: Account) -> None:
        """Add a bank account.

        Adding an account equal to one already held changes nothing.

        Args:
            account: Account to add.
        """
        if account in self.accounts:
            return
        self.accounts = self.accounts | {account}
        self._touch()

    def remove_account(self, account: Account) -> None:
        """Remove the bank account equal to the given one.

        Removing an account the office does not hold is a silent no-op.

        Args:
            account: Account to remove (matched by value).
        """
        if account not in self.accounts:
            return
        self.accounts = self.accounts - {account}
        self._touch()

    def change_welcome_message(self, welcome_message: str | None) -> None:
        """Replace the welcome message (no validation).

        Args:
            welcome_message: New message, or None to clear it.
        """
        self.welcome_message = welcome_message
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)
