"""Bank movements and the ledger that records them in order."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

from bancario.accounts import AccountList, BankAccount

NO_DATE = "0"


class TransactionKind(str, Enum):
    """Direction of a movement."""

    CREDIT = "CREDITO"
    DEBIT = "DEBITO"


@dataclass
class BankTransaction:
    """One movement on one account."""

    account_code: int
    date: str = ""
    kind: TransactionKind = TransactionKind.CREDIT
    payee: str = ""
    amount: float = 0.0
    balance: float = 0.0
    sequence: int = 0


class TransactionList:
    """Movements in the order they were recorded.

    Transactions given to the constructor are kept as they are, as when
    loading saved data; the accounts are not touched.
    """

    def __init__(self, transactions: Iterable[BankTransaction] | None = None) -> None:
        self._items: list[BankTransaction] = (
            list(transactions) if transactions is not None else []
        )

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[BankTransaction]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"TransactionList({self._items!r})"

    def is_empty(self) -> bool:
        return not self._items

    def add(
        self,
        transaction: BankTransaction,
        accounts: AccountList,
        kind: TransactionKind | None = None,
    ) -> BankTransaction:
        """Record a movement and apply it to its account.

        The movement gets the next sequence number; the account's balance is
        raised for a credit or lowered for a debit and its movement count
        grows by one. ``kind`` defaults to the movement's own kind.
        """
        account = accounts.find(transaction.account_code)
        if account is None:
            raise LookupError(f"no account with code {transaction.account_code}")
        operation = TransactionKind(kind) if kind is not None else transaction.kind
        self._items.append(transaction)
        transaction.sequence = len(self._items)
        account.transaction_count += 1
        if operation is TransactionKind.CREDIT:
            account.balance += transaction.amount
        else:
            account.balance -= transaction.amount
        return transaction

    def add_transfer(
        self,
        accounts: AccountList,
        origin: BankAccount,
        destination: BankAccount,
        amount: float,
        date: str,
    ) -> tuple[BankTransaction, BankTransaction]:
        """Move ``amount`` from ``origin`` to ``destination`` on ``date``.

        Records a debit on the origin followed by a credit on the destination
        and returns both.
        """
        debit = BankTransaction(
            account_code=origin.code,
            date=date,
            kind=TransactionKind.DEBIT,
            payee=f"TRANSFERENCIA PARA {destination.bank}",
            amount=amount,
            balance=origin.balance - amount,
        )
        self.add(debit, accounts, TransactionKind.DEBIT)
        credit = BankTransaction(
            account_code=destination.code,
            date=date,
            kind=TransactionKind.CREDIT,
            payee=f"TRANSFERENCIA DE {origin.bank}",
            amount=amount,
            balance=destination.balance + amount,
        )
        self.add(credit, accounts, TransactionKind.CREDIT)
        return debit, credit

    def last_date(self, account_code: int) -> str:
        """Date of the latest movement of an account, or ``"0"`` if none."""
        return next(
            (t.date for t in reversed(self._items) if t.account_code == account_code),
            NO_DATE,
        )

    def for_account(self, account_code: int) -> Iterator[BankTransaction]:
        """Yield the movements of one account in recorded order."""
        return (t for t in self._items if t.account_code == account_code)