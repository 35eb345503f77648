"""Bank account value object.

An Account is the bank name + account number pair an Office publishes for
deposits. It has no identity or lifecycle of its own: two Accounts with the
same fields are the same account, and an Office holds copies, never shared
references.

Usage:
    from src.domain.value_objects import Account

    office.add_account(Account.of("KB Kookmin", "123-456-78910"))
"""

from dataclasses import dataclass
from typing import Self


@dataclass(frozen=True)
class Account:
    """Immutable bank account (bank name + account number).

    Neither field is validated; both are free-form strings.

    Attributes:
        bank_name: Name of the bank holding the account.
        account_number: Account number as printed by the bank.

    Equality:
        Structural. Frozen dataclass gives __eq__ and __hash__ over both
        fields, so value-equal accounts collapse to one entry in a set.

    Example:
        >>> a = Account.of("Shinhan", "987-654-32100")
        >>> a == Account.of("Shinhan", "987-654-32100")
        True
        >>> len({a, Account.of("Shinhan", "987-654-32100")})
        1
    """

    bank_name: str
    account_number: str

    @classmethod
    def of(cls, bank_name: str, account_number: str) -> Self:
        """Create an Account from its two fields.

        Args:
            bank_name: Name of the bank.
            account_number: Account number.

        Returns:
            New Account instance.
        """
        return cls(bank_name=bank_name, account_number=account_number)

    def __str__(self) -> str:
        """Return display form, e.g. 'Shinhan 987-654-32100'."""
        return f"{self.bank_name} {self.account_number}"
