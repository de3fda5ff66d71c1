"""Screen that removes an account from the list."""

from __future__ import annotations

from enum import IntEnum

from bancario.accounts import AccountList, BankAccount
from bancario.console import FORM_WITH_STATUS, Console


class RemoveMode(IntEnum):
    """Which account the removal screen targets."""

    FIRST = 1
    LAST = 2
    POSITION = 3


def _show_account(console: Console, account: BankAccount) -> None:
    fields = (
        str(account.code),
        account.bank,
        account.agency,
        account.number,
        account.account_type.value,
        f"{account.balance:f}",
        f"{account.limit:f}",
        account.status.value,
    )
    for row, text in zip(range(6, 22, 2), fields):
        console.write_at(25, row, text)


def _invalid(console: Console, text: str) -> None:
    console.clear_message()
    console.message(text)
    console.wait_key()
    console.clear_message()


def _ask_position(console: Console, size: int) -> int:
    while True:
        console.message("Digite a posicao: ")
        position = console.read_int()
        if position is not None and 1 <= position <= size:
            return position
        _invalid(console, "Digite uma posicao valida")


def _ask_choice(console: Console, prompt: str) -> int:
    while True:
        console.message(prompt)
        choice = console.read_int()
        if choice in (1, 2):
            return choice
        _invalid(console, "Digite uma opcao valida")


def remove_account(console: Console, accounts: AccountList, mode: RemoveMode | int) -> None:
    """Ask for confirmation and remove the first, last or chosen account.

    Accounts that already have movements cannot be removed.
    """
    mode = RemoveMode(mode)
    while True:
        if accounts.is_empty():
            console.message("Nao ha nenhuma conta cadastrada.")
            console.wait_key()
            return

        console.frame()
        console.title("TELA DE EXCLUSAO DE CONTAS")
        console.account_form(FORM_WITH_STATUS)

        position = 0
        if mode is RemoveMode.FIRST:
            account = accounts.first()
        elif mode is RemoveMode.LAST:
            account = accounts.last()
        else:
            position = _ask_position(console, len(accounts))
            account = accounts.at_position(position)

        if account.transaction_count > 0:
            console.message("Conta com transações, impossivel excluir!")
            console.wait_key()
            return

        _show_account(console, account)

        if _ask_choice(console, "[1] Confirmar Exclusao [2] Voltar: ") == 1:
            if mode is RemoveMode.FIRST:
                accounts.remove_first()
            elif mode is RemoveMode.LAST:
                accounts.remove_last()
            else:
                accounts.remove_at(position)
            console.message("Conta excluida com sucesso!")
            console.wait_key()
            console.clear_message()

        console.message("[1] Excluir Outra Conta [2] Voltar ao Menu Anterior: ")
        again = console.read_int()
        if again == 2:
            return
        if again != 1:
            _invalid(console, "Digite uma opcao valida")