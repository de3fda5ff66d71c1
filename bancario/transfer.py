"""Screen that moves money from one account to another."""

from __future__ import annotations

from bancario.accounts import AccountList, BankAccount
from bancario.console import Console
from bancario.transactions import TransactionList
from bancario.validation import date_key, validate_date

_ORIGIN_X = 21
_DESTINATION_X = 79
_INPUT_X = 29
_BLANK = " " * 37
_DATE_SIZE = 12


def _warn(console: Console, text: str) -> None:
    console.clear_message()
    console.message(text)
    console.wait_key()
    console.clear_message()


def _prepare_field(console: Console, x: int, row: int) -> None:
    console.write_at(x, row, _BLANK)
    console.goto(x, row)


def _draw(console: Console) -> None:
    console.frame()
    console.title("TRANSFERENCIA ENTRE CONTAS")
    for row in range(8, 18):
        console.write_centered(row, "|")
    for row in (7, 18):
        console.write_at(2, row, "-" * 116)
    for x, row in ((1, 7), (59, 7), (118, 7), (59, 18)):
        console.write_at(x, row, "+")
    console.write_centered_between(2, 59, 7, "C O N T A  O R I G E M")
    console.write_centered_between(59, 119, 7, "C O N T A  D E S T I N O")
    console.write_at(3, 9, "Codigo Origem...: ")
    console.write_at(61, 9, "Codigo Destino..: ")
    console.transfer_form(3, 10)
    console.transfer_form(61, 10)
    console.write_at(3, 20, "Valor a Ser transferido.:")
    console.write_at(3, 21, "Data da Transferencia...:")


def _ask_account(
    console: Console, accounts: AccountList, x: int, excluded: int | None = None
) -> BankAccount | None:
    while True:
        _prepare_field(console, x, 9)
        code = console.read_int()
        if code == 0:
            return None
        if code is None or code < 0:
            _warn(console, "Digite um numero maior que 0!")
            continue
        if excluded is not None and code == excluded:
            _warn(console, "A conta destino não pode ser a mesma de origem!")
            continue
        account = accounts.find(code)
        if account is None:
            _warn(console, "Insira uma conta existente!")
            continue
        return account


def _show_side(console: Console, x: int, account: BankAccount) -> None:
    fields = (
        account.bank,
        account.agency,
        account.number,
        f"{account.balance:.2f}",
        f"{account.limit:.2f}",
        f"{account.available:.2f}",
    )
    for row, text in enumerate(fields, start=10):
        console.write_at(x, row, text)


def _ask_amount(console: Console, available: float) -> float:
    while True:
        _prepare_field(console, _INPUT_X, 20)
        amount = console.read_float()
        if amount is None or amount < 0:
            _warn(console, "Insira um valor maior que 0!")
            continue
        if amount > available:
            _warn(console, "O valor inserido ultrapassa o credito disponivel!")
            continue
        return amount


def _latest_date(transactions: TransactionList, origin: int, destination: int) -> str:
    origin_date = transactions.last_date(origin)
    destination_date = transactions.last_date(destination)
    if date_key(origin_date) > date_key(destination_date):
        return origin_date
    return destination_date


def _ask_date(
    console: Console, transactions: TransactionList, origin: int, destination: int
) -> str:
    while True:
        _prepare_field(console, _INPUT_X, 21)
        text = console.read_line(_DATE_SIZE)
        if not text.strip():
            continue
        if not validate_date(text):
            _warn(console, "Digite uma data valida!")
            continue
        latest = _latest_date(transactions, origin, destination)
        if date_key(text) < date_key(latest):
            _warn(console, f"Digite uma data posterior ou igual a {latest}")
            continue
        return text


def _ask_choice(console: Console, prompt: str) -> int:
    while True:
        console.clear_message()
        console.message(prompt)
        choice = console.read_int()
        if choice in (1, 2):
            return choice
        _warn(console, "Digite uma opcao valida")


def transfer_screen(
    console: Console, accounts: AccountList, transactions: TransactionList
) -> None:
    """Ask for two active accounts, an amount and a date, then transfer.

    The amount may not exceed the origin's balance plus limit, and the date
    may not be earlier than the latest movement of either account.
    """
    while True:
        _draw(console)

        origin = _ask_account(console, accounts, _ORIGIN_X)
        if origin is None:
            return
        available = origin.available
        if not origin.is_active:
            _warn(console, "A conta esta inativa!")
            return
        _show_side(console, _ORIGIN_X, origin)

        destination = _ask_account(console, accounts, _DESTINATION_X, excluded=origin.code)
        if destination is None:
            return
        if not destination.is_active:
            _warn(console, "A conta esta inativa!")
            return
        _show_side(console, _DESTINATION_X, destination)

        amount = _ask_amount(console, available)
        date = _ask_date(console, transactions, origin.code, destination.code)

        console.write_at(_ORIGIN_X, 16, f"{origin.balance - amount:.2f}")
        console.write_at(_DESTINATION_X, 16, f"{destination.balance + amount:.2f}")

        if _ask_choice(console, "[1] Confirma a Transferencia [2] Retorna: ") == 1:
            transactions.add_transfer(accounts, origin, destination, amount, date)
            _warn(console, "Transferencia Realizada!")

        if _ask_choice(console, "[1] Nova Transferencia [2] Retorna: ") == 2:
            return