"""Screens that register new accounts and edit existing ones."""

from __future__ import annotations

from enum import IntEnum

from bancario.accounts import AccountList, AccountStatus, AccountType, BankAccount
from bancario.console import FORM_WITH_STATUS, Console

_FIELD_X = 26
_BLANK = " " * 40
_BANK_SIZE = 50
_AGENCY_SIZE = 10
_NUMBER_SIZE = 20

_TYPES = {
    1: AccountType.CHECKING,
    2: AccountType.SAVINGS,
    3: AccountType.CREDIT,
}
_STATUSES = {
    1: AccountStatus.ACTIVE,
    2: AccountStatus.INACTIVE,
}
# The status prompt accepts this choice too, leaving the status unchanged.
_STATUS_KEEP = 3


class InsertMode(IntEnum):
    """Where a newly registered account goes in the list."""

    LAST = 1
    FIRST = 2
    POSITION = 3


def _warn(console: Console, text: str) -> None:
    console.clear_message()
    console.message(text)
    console.wait_key()
    console.clear_message()


def _prepare_field(console: Console, row: int) -> None:
    console.write_at(_FIELD_X, row, _BLANK)
    console.goto(_FIELD_X, row)


def _ask_text(console: Console, row: int, size: int) -> str:
    while True:
        _prepare_field(console, row)
        text = console.read_line(size)
        if text.strip():
            return text


def _ask_type(console: Console) -> AccountType:
    while True:
        _prepare_field(console, 14)
        console.clear_message()
        console.message("1=Corrente / 2=Poupanca / 3=Cartao Credito")
        console.goto(_FIELD_X, 14)
        choice = console.read_int()
        console.clear_message()
        account_type = _TYPES.get(choice) if choice is not None else None
        if account_type is not None:
            console.write_at(_FIELD_X + 2, 14, f"- {account_type.value}")
            return account_type
        _warn(console, "Digite um valor valido!")


def _ask_non_negative(console: Console, row: int) -> float:
    while True:
        _prepare_field(console, row)
        value = console.read_float()
        if value is not None and value >= 0:
            return value
        _warn(console, "Digite um valor maior que 0!")


def _ask_position(console: Console) -> int:
    while True:
        _prepare_field(console, 22)
        position = console.read_int()
        if position is not None and position >= 0:
            return position
        _warn(console, "Digite um valor maior que 0!")


def _ask_choice(console: Console, prompt: str, invalid: str) -> int:
    while True:
        console.clear_message()
        console.message(prompt)
        choice = console.read_int()
        if choice in (1, 2):
            return choice
        _warn(console, invalid)


def _ask_new_code(console: Console, accounts: AccountList) -> int | None:
    while True:
        console.message("Digite 0 para sair:")
        _prepare_field(console, 6)
        code = console.read_int()
        if code is None or code < 0:
            _warn(console, "Digite um codigo maior que 0!")
        elif accounts.find(code) is not None:
            _warn(console, "Codigo ja existente, digite outro!")
        elif code == 0:
            return None
        else:
            return code


def register_account(console: Console, accounts: AccountList, mode: InsertMode | int) -> None:
    """Ask for a new account's data and add it at the end, start or a position.

    Code 0 goes back. Codes must be unused; balance, limit and position may
    not be negative.
    """
    mode = InsertMode(mode)
    while True:
        console.frame()
        console.title("TELA DE CONTAS BANCARIAS")
        console.account_form(mode)

        code = _ask_new_code(console, accounts)
        if code is None:
            return
        console.clear_message()

        account = BankAccount(code=code)
        account.bank = _ask_text(console, 8, _BANK_SIZE)
        account.agency = _ask_text(console, 10, _AGENCY_SIZE)
        account.number = _ask_text(console, 12, _NUMBER_SIZE)
        account.account_type = _ask_type(console)
        account.balance = _ask_non_negative(console, 16)
        account.limit = _ask_non_negative(console, 18)
        position = _ask_position(console) if mode is InsertMode.POSITION else 0

        if _ask_choice(console, "[1] Confirmar Cadastro [2] Voltar: ", "Digite um valor valido!") == 1:
            if mode is InsertMode.LAST:
                accounts.add_last(account)
            elif mode is InsertMode.FIRST:
                accounts.add_first(account)
            else:
                try:
                    accounts.insert(account, position)
                except IndexError as error:
                    console.clear_message()
                    console.message(str(error))

        again = _ask_choice(
            console,
            "[1] Novo Cadastro [2] Voltar ao Menu de Contas: ",
            "Digite um valor valido!",
        )
        if again == 2:
            return


def _ask_existing(console: Console, accounts: AccountList) -> BankAccount | None:
    while True:
        _prepare_field(console, 6)
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
        AccountStatus(account.status).value,
    )
    for row, text in zip(range(8, 22, 2), fields):
        console.write_at(_FIELD_X, row, text)


def _ask_field(console: Console) -> int | None:
    while True:
        console.clear_message()
        console.message("Digite o codigo da informacao que deseja alterar: ")
        field = console.read_int()
        if field == 0:
            return None
        if field is None or field < 1 or field > 7:
            _warn(console, "Digite um valor valido!")
        elif field == 5:
            _warn(console, "O saldo nao pode ser alterado!")
        else:
            return field


def _ask_status(console: Console, current: AccountStatus) -> AccountStatus:
    while True:
        _prepare_field(console, 20)
        console.clear_message()
        console.message("1=ATIVA / 2=INATIVA")
        console.goto(_FIELD_X, 20)
        choice = console.read_int()
        console.clear_message()
        status = _STATUSES.get(choice) if choice is not None else None
        if status is not None:
            current = status
            break
        _warn(console, "Digite um valor valido!")
        if choice == _STATUS_KEEP:
            break
    console.write_at(_FIELD_X + 2, 20, f"- {AccountStatus(current).value}")
    return current


def _edit_field(console: Console, account: BankAccount, field: int) -> None:
    if field == 1:
        account.bank = _ask_text(console, 8, _BANK_SIZE)
    elif field == 2:
        account.agency = _ask_text(console, 10, _AGENCY_SIZE)
    elif field == 3:
        account.number = _ask_text(console, 12, _NUMBER_SIZE)
    elif field == 4:
        account.account_type = _ask_type(console)
    elif field == 6:
        account.limit = _ask_non_negative(console, 18)
    elif field == 7:
        account.status = _ask_status(console, account.status)


def edit_account(console: Console, accounts: AccountList) -> None:
    """Change the bank, agency, number, type, limit or status of accounts.

    The balance cannot be changed here; 0 at any code prompt goes back.
    """
    while True:
        console.frame()
        console.title("ALTERAR INFORMACAO DE UMA CONTA")
        console.account_form(FORM_WITH_STATUS)
        console.message("'0' para voltar")

        account = _ask_existing(console, accounts)
        if account is None:
            return
        _show_account(console, account)

        while True:
            field = _ask_field(console)
            if field is None:
                return
            _edit_field(console, account, field)
            more = _ask_choice(
                console,
                "[1] Editar outra informacao [2] Voltar: ",
                "Digite uma opcao valida!",
            )
            if more == 2:
                break

        other = _ask_choice(
            console, "[1] Editar outra conta [2] Voltar: ", "Digite uma opcao valida!"
        )
        if other == 2:
            return