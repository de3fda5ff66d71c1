"""Binary files holding the accounts and the movements between runs."""

from __future__ import annotations

import struct
from pathlib import Path
from typing import Iterable

from bancario.accounts import AccountList, AccountStatus, AccountType, BankAccount
from bancario.transactions import BankTransaction, TransactionKind, TransactionList

DEFAULT_ACCOUNTS_PATH = Path("src/database/lista_contas.dat")
DEFAULT_TRANSACTIONS_PATH = Path("src/database/lista_transacoes.dat")

ENCODING = "latin-1"

# code, bank, agency, number, type, balance, limit, status, pad, movement count
_ACCOUNT_RECORD = struct.Struct("<i50s10s20s20sdd10s2xi")
# sequence, code, date, kind, payee, amount, balance
_TRANSACTION_RECORD = struct.Struct("<ii12s10s50sdd")


def _pack_text(text: str, size: int) -> bytes:
    return text.encode(ENCODING, errors="replace")[: size - 1]


def _unpack_text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode(ENCODING)


def _records(path: Path, record: struct.Struct):
    try:
        data = path.read_bytes()
    except FileNotFoundError:
        return iter(())
    usable = len(data) - len(data) % record.size
    return record.iter_unpack(data[:usable])


def _write(path: Path, chunks: Iterable[bytes]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"".join(chunks))


def load_accounts(path: str | Path | None = None) -> AccountList:
    """Read the saved accounts; a missing file gives an empty list."""
    accounts = [
        BankAccount(
            code=code,
            bank=_unpack_text(bank),
            agency=_unpack_text(agency),
            number=_unpack_text(number),
            account_type=AccountType(_unpack_text(account_type)),
            balance=balance,
            limit=limit,
            status=AccountStatus(_unpack_text(status)),
            transaction_count=count,
        )
        for code, bank, agency, number, account_type, balance, limit, status, count in _records(
            Path(path or DEFAULT_ACCOUNTS_PATH), _ACCOUNT_RECORD
        )
    ]
    return AccountList(accounts)


def save_accounts(accounts: Iterable[BankAccount], path: str | Path | None = None) -> None:
    """Write every account, in list order, replacing the file."""
    _write(
        Path(path or DEFAULT_ACCOUNTS_PATH),
        (
            _ACCOUNT_RECORD.pack(
                account.code,
                _pack_text(account.bank, 50),
                _pack_text(account.agency, 10),
                _pack_text(account.number, 20),
                _pack_text(AccountType(account.account_type).value, 20),
                account.balance,
                account.limit,
                _pack_text(AccountStatus(account.status).value, 10),
                account.transaction_count,
            )
            for account in accounts
        ),
    )


def load_transactions(path: str | Path | None = None) -> TransactionList:
    """Read the saved movements; a missing file gives an empty ledger."""
    items = [
        BankTransaction(
            account_code=code,
            date=_unpack_text(date),
            kind=TransactionKind(_unpack_text(kind)),
            payee=_unpack_text(payee),
            amount=amount,
            balance=balance,
            sequence=sequence,
        )
        for sequence, code, date, kind, payee, amount, balance in _records(
            Path(path or DEFAULT_TRANSACTIONS_PATH), _TRANSACTION_RECORD
        )
    ]
    return TransactionList(items)


def save_transactions(
    transactions: Iterable[BankTransaction], path: str | Path | None = None
) -> None:
    """Write every movement, in recorded order, replacing the file."""
    _write(
        Path(path or DEFAULT_TRANSACTIONS_PATH),
        (
            _TRANSACTION_RECORD.pack(
                t.sequence,
                t.account_code,
                _pack_text(t.date, 12),
                _pack_text(TransactionKind(t.kind).value, 10),
                _pack_text(t.payee, 50),
                t.amount,
                t.balance,
            )
            for t in transactions
        ),
    )