"""Screen that records a debit or a credit on one account."""

from __future__ import annotations

from bancario.accounts import AccountList, AccountType, BankAccount
from bancario.console import Console
from bancario.transactions import BankTransaction, TransactionKind, TransactionList
from bancario.validation import date_key, validate_date

_FIELD_X = 29
_BLANK = " " * 40
_DATE_SIZE = 12
_PAYEE_SIZE = 50


def _warn(console: Console, text: str) -> None:
    console.clear_message()
    console.message(text)
    console.wait_key()
    console.clear_message()


def _prepare_field(console: Console, row: int) -> None:
    console.write_at(_FIELD_X, row, _BLANK)
    console.goto(_FIELD_X, row)


def _ask_account(console: Console, accounts: AccountList) -> BankAccount | None:
    while True:
        _prepare_field(console, 7)
        code = console.read_int()
        if code == 0:
            return None
        if code is None or code < 0:
            _warn(console, "Digite um numero maior que 0!")
            continue
        account = accounts.find(code)
        if account is None:
            _warn(console, "Insira uma conta existente!")
            continue
        return account


def _show_account(console: Console, account: BankAccount) -> None:
    fields = (
        account.bank,
        account.agency,
        account.number,
        AccountType(account.account_type).value,
        f"{account.balance:.2f}",
        f"{account.limit:.2f}",
        f"{account.available:.2f}",
    )
    for row, text in enumerate(fields, start=8):
        console.write_at(_FIELD_X, row, text)


def _ask_date(console: Console, transactions: TransactionList, code: int) -> str:
    while True:
        _prepare_field(console, 16)
        text = console.read_line(_DATE_SIZE)
        if not text.strip():
            continue
        if not validate_date(text):
            _warn(console, "Digite uma data valida!")
            continue
        latest = transactions.last_date(code)
        if date_key(text) < date_key(latest):
            _warn(console, f"Digite uma data posterior ou igual a {latest}")
            continue
        return text


def _ask_kind(console: Console) -> TransactionKind:
    while True:
        console.message("[1] CREDITO [2] DEBITO: ")
        _prepare_field(console, 17)
        choice = console.read_int()
        if choice == 1:
            return TransactionKind.CREDIT
        if choice == 2:
            return TransactionKind.DEBIT
        _warn(console, "Digite um valor valido!")


def _ask_payee(console: Console) -> str:
    while True:
        console.goto(_FIELD_X, 18)
        text = console.read_line(_PAYEE_SIZE)
        if text.strip():
            return text


def _ask_amount(console: Console, available: float) -> float:
    while True:
        _prepare_field(console, 19)
        amount = console.read_float()
        if amount is None or amount <= 0 or amount > available:
            _warn(console, "Digite um valor dentro do limite e maior que 0!")
            continue
        return amount


def _ask_choice(console: Console, prompt: str) -> int:
    while True:
        console.message(prompt)
        choice = console.read_int()
        if choice in (1, 2):
            return choice
        _warn(console, "Digite uma opcao valida!")


def debit_credit_screen(
    console: Console, accounts: AccountList, transactions: TransactionList
) -> None:
    """Ask for a movement on an active account and record it when confirmed.

    The date may not be earlier than the account's latest movement, and the
    amount must be positive and within balance plus limit.
    """
    while True:
        console.frame()
        console.title("CADASTRAR MOVIMENTACOES BANCARIAS")
        console.transaction_form()

        account = _ask_account(console, accounts)
        if account is None:
            return
        if not account.is_active:
            _warn(console, "A conta esta inativa!")
            return

        _show_account(console, account)
        available = account.available

        date = _ask_date(console, transactions, account.code)
        kind = _ask_kind(console)
        console.clear_message()
        console.write_at(_FIELD_X + 1, 17, f" - {kind.value}")
        payee = _ask_payee(console)
        amount = _ask_amount(console, available)

        if kind is TransactionKind.DEBIT:
            new_balance = account.balance - amount
        else:
            new_balance = account.balance + amount
        console.write_at(_FIELD_X, 20, f"{new_balance:.2f}")

        if _ask_choice(console, "[1] Confirmar transacao [2] Voltar: ") == 1:
            transactions.add(
                BankTransaction(
                    account_code=account.code,
                    date=date,
                    kind=kind,
                    payee=payee,
                    amount=amount,
                    balance=new_balance,
                ),
                accounts,
                kind,
            )

        if _ask_choice(console, "[1] Nova transacao [2] Voltar ao Menu de transacao: ") == 2:
            return