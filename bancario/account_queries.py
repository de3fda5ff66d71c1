"""Screens that list and look up the registered accounts."""

from __future__ import annotations

from itertools import islice
from typing import Callable, Iterator

from bancario.accounts import AccountList, AccountStatus, AccountType, BankAccount
from bancario.console import FORM_WITH_STATUS, Console
from bancario.ordering import SortOrder, sort_accounts

ROWS_PER_PAGE = 13

_TABLE_HEADER = (
    (3, "Cod"),
    (8, "Banco"),
    (35, "Agencia"),
    (47, "Conta"),
    (58, "Tipo Conta"),
    (72, "Saldo"),
    (85, "Limite"),
    (98, "Status"),
    (107, "Transacoes"),
)
_HEADER_ROW = 6
_FIRST_DATA_ROW = 7
_DETAIL_X = 25

_MENU_OPTIONS = (
    "1. Consulta Geral",
    "2. Consulta por Codigo",
    "3. Consulta por Ordem de Codigo",
    "4. Consulta por Ordem Alfabetica",
    "5. Consulta Contas Inativas",
    "6. Retorna ao Menu Anterior",
)


def page_count(total: int, rows_per_page: int = ROWS_PER_PAGE) -> int:
    """Number of pages needed to show ``total`` rows."""
    if rows_per_page <= 0:
        raise ValueError("rows_per_page must be positive")
    return -(-total // rows_per_page)


def _type_text(account: BankAccount) -> str:
    return AccountType(account.account_type).value


def _status_text(account: BankAccount) -> str:
    return AccountStatus(account.status).value


def _is_inactive(account: BankAccount) -> bool:
    return AccountStatus(account.status) is AccountStatus.INACTIVE


def _warn(console: Console, text: str) -> None:
    console.clear_message()
    console.message(text)
    console.wait_key()
    console.clear_message()


def _no_accounts(console: Console, accounts: AccountList) -> bool:
    if accounts.is_empty():
        console.message("Nao ha nenhuma conta cadastrada.")
        console.wait_key()
        return True
    return False


def _show_details(console: Console, account: BankAccount, *, with_code: bool) -> None:
    fields = [
        account.bank,
        account.agency,
        account.number,
        _type_text(account),
        f"{account.balance:f}",
        f"{account.limit:f}",
        _status_text(account),
    ]
    rows = range(8, 22, 2)
    if with_code:
        console.write_at(_DETAIL_X, 6, str(account.code))
    for row, text in zip(rows, fields):
        console.write_at(_DETAIL_X, row, text)


def _write_table_row(console: Console, row: int, account: BankAccount) -> None:
    cells = (
        (4, str(account.code)),
        (8, account.bank),
        (35, account.agency),
        (47, account.number),
        (58, _type_text(account)),
        (72, f"{account.balance:.2f}"),
        (85, f"{account.limit:.2f}"),
        (98, _status_text(account)),
        (107, str(account.transaction_count)),
    )
    for x, text in cells:
        console.write_at(x, row, text)


def _page_items(
    accounts: AccountList, start: int, include: Callable[[BankAccount], bool]
) -> Iterator[BankAccount]:
    for index, account in enumerate(islice(accounts, start + ROWS_PER_PAGE)):
        if index >= start and include(account):
            yield account


def _paged_table(
    console: Console, accounts: AccountList, include: Callable[[BankAccount], bool]
) -> None:
    page = 1
    while True:
        console.frame()
        for x, label in _TABLE_HEADER:
            console.write_at(x, _HEADER_ROW, label)

        start = (page - 1) * ROWS_PER_PAGE
        for count, account in enumerate(_page_items(accounts, start, include), start=1):
            _write_table_row(console, _FIRST_DATA_ROW + count, account)

        console.message(
            f"Pagina {page} de {page_count(len(accounts))} "
            "([0] Sair, [1] Anterior, [2] Proxima): "
        )
        option = console.read_int()
        if option == 1 and page > 1:
            page -= 1
        elif option == 2 and start + ROWS_PER_PAGE < len(accounts):
            page += 1
        elif option == 0:
            return


def show_all_accounts(console: Console, accounts: AccountList) -> None:
    """Show every account, one screen each, waiting for a key between them."""
    if _no_accounts(console, accounts):
        return
    for account in accounts:
        console.frame()
        console.title("CONSULTA GERAL DE CONTAS")
        console.account_form(FORM_WITH_STATUS)
        _show_details(console, account, with_code=True)
        console.message("Pressione qualquer tecla para continuar...")
        console.wait_key()


def show_account_by_code(console: Console, accounts: AccountList) -> None:
    """Ask for account codes and show each account found; 0 goes back."""
    while True:
        console.frame()
        console.title("CONSULTA DE CONTAS POR CODIGO")
        console.account_form(FORM_WITH_STATUS)
        console.message("Pressione 0 para voltar")
        console.goto(_DETAIL_X, 6)

        code = console.read_int()
        if code == 0:
            return

        account = accounts.find(code) if code is not None else None
        if account is None:
            console.message("O codigo informado nao existe")
            console.wait_key()
            continue

        _show_details(console, account, with_code=False)

        console.message("[1] Consultar Outra Conta [2] Voltar ao Menu Anterior: ")
        choice = console.read_int()
        if choice == 2:
            return
        if choice != 1:
            _warn(console, "Digite uma opcao valida")


def show_accounts_sorted(
    console: Console, accounts: AccountList, order: SortOrder | int
) -> None:
    """Sort the accounts in place and show them as a paged table."""
    if _no_accounts(console, accounts):
        return
    sort_accounts(accounts, order)
    _paged_table(console, accounts, lambda account: True)


def show_inactive_accounts(console: Console, accounts: AccountList) -> None:
    """Show the inactive accounts as a paged table.

    Pages are cut over the whole list, so a page shows the inactive
    accounts among the positions it covers.
    """
    if _no_accounts(console, accounts):
        return
    _paged_table(console, accounts, _is_inactive)


def query_menu(console: Console, accounts: AccountList) -> None:
    """Menu of the account queries; option 6 goes back."""
    while True:
        console.frame()
        console.title("TELA DE CONSULTA DE CONTAS")
        for row, text in zip(range(8, 20, 2), _MENU_OPTIONS):
            console.write_at(4, row, text)

        console.goto(8, 24)
        option = console.read_int()
        if option == 1:
            show_all_accounts(console, accounts)
        elif option == 2:
            show_account_by_code(console, accounts)
        elif option == 3:
            show_accounts_sorted(console, accounts, SortOrder.CODE)
        elif option == 4:
            show_accounts_sorted(console, accounts, SortOrder.BANK)
        elif option == 5:
            show_inactive_accounts(console, accounts)
        elif option == 6:
            return
        else:
            console.message("Digite uma opcao valida!")
            console.wait_key()
            console.clear_message()