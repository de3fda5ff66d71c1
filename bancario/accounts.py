"""Bank accounts and the ordered collection that holds them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator


class AccountStatus(str, Enum):
    """Whether an account may still take part in movements."""

    ACTIVE = "ATIVA"
    INACTIVE = "INATIVA"


class AccountType(str, Enum):
    """Kind of bank account."""

    CHECKING = "CORRENTE"
    SAVINGS = "POUPANCA"
    CREDIT = "CREDITO"


@dataclass
class BankAccount:
    """A registered bank account."""

    code: int
    bank: str = ""
    agency: str = ""
    number: str = ""
    account_type: AccountType = AccountType.CHECKING
    balance: float = 0.0
    limit: float = 0.0
    status: AccountStatus = AccountStatus.ACTIVE
    transaction_count: int = 0

    @property
    def available(self) -> float:
        """Balance plus limit: the most that can leave the account."""
        return self.balance + self.limit

    @property
    def is_active(self) -> bool:
        return self.status is AccountStatus.ACTIVE


class AccountList:
    """Ordered accounts, addressed by 1-based position or by code.

    Accounts given to the constructor are kept exactly as they are, as when
    loading saved data. Accounts added afterwards start as new registrations:
    active and without transactions.
    """

    def __init__(self, accounts: Iterable[BankAccount] | None = None) -> None:
        self._accounts: list[BankAccount] = list(accounts) if accounts is not None else []

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[BankAccount]:
        return iter(self._accounts)

    def __repr__(self) -> str:
        return f"AccountList({self._accounts!r})"

    def is_empty(self) -> bool:
        return not self._accounts

    @staticmethod
    def _register(account: BankAccount) -> BankAccount:
        account.transaction_count = 0
        account.status = AccountStatus.ACTIVE
        return account

    def add_first(self, account: BankAccount) -> None:
        """Register an account at the front of the list."""
        self._accounts.insert(0, self._register(account))

    def add_last(self, account: BankAccount) -> None:
        """Register an account at the end of the list."""
        self._accounts.append(self._register(account))

    def insert(self, account: BankAccount, position: int) -> None:
        """Register an account at a 1-based position, from 1 to len + 1."""
        if not 1 <= position <= len(self._accounts) + 1:
            raise IndexError(
                f"position [{position}] is out of bounds: [1, {len(self._accounts)}]"
            )
        self._accounts.insert(position - 1, self._register(account))

    def _require_items(self) -> None:
        if not self._accounts:
            raise IndexError("the list is already empty")

    def remove_first(self) -> BankAccount:
        """Remove and return the first account."""
        self._require_items()
        return self._accounts.pop(0)

    def remove_last(self) -> BankAccount:
        """Remove and return the last account."""
        self._require_items()
        return self._accounts.pop()

    def remove_at(self, position: int) -> BankAccount:
        """Remove and return the account at a 1-based position."""
        self._require_items()
        if not 1 <= position <= len(self._accounts):
            raise IndexError(
                f"position [{position}] is out of bounds: [1, {len(self._accounts)}]"
            )
        return self._accounts.pop(position - 1)

    def find(self, code: int) -> BankAccount | None:
        """Return the account with the given code, or None."""
        return next((account for account in self._accounts if account.code == code), None)

    def at_position(self, position: int) -> BankAccount | None:
        """Return the account at a 1-based position, or None."""
        if 1 <= position <= len(self._accounts):
            return self._accounts[position - 1]
        return None

    def first(self) -> BankAccount:
        """Return the first account."""
        self._require_items()
        return self._accounts[0]

    def last(self) -> BankAccount:
        """Return the last account."""
        self._require_items()
        return self._accounts[-1]

    def sort(self, *, key, reverse: bool = False) -> None:
        """Reorder the accounts in place."""
        self._accounts.sort(key=key, reverse=reverse)