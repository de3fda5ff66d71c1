"""Main menu, sub-menus and the movement listing, plus the entry point."""

from __future__ import annotations

import argparse
from itertools import islice
from pathlib import Path
from typing import Callable

from bancario.account_forms import InsertMode, edit_account, register_account
from bancario.account_queries import ROWS_PER_PAGE, page_count, query_menu
from bancario.account_removal import RemoveMode, remove_account
from bancario.accounts import AccountList
from bancario.console import Console
from bancario.debit_credit import debit_credit_screen
from bancario.storage import (
    DEFAULT_ACCOUNTS_PATH,
    DEFAULT_TRANSACTIONS_PATH,
    load_accounts,
    load_transactions,
    save_accounts,
    save_transactions,
)
from bancario.transactions import TransactionKind, TransactionList
from bancario.transfer import transfer_screen

SaveFunction = Callable[[AccountList, TransactionList], None]

_TRANSACTION_HEADER = (
    (3, "Seq"),
    (8, "Banco"),
    (15, "Data"),
    (27, "Tipo"),
    (37, "Favorecido"),
    (85, "Valor"),
    (100, "Saldo"),
)

_ACCOUNT_OPTIONS = (
    "1. Cadastrar Conta Bancaria no Final",
    "2. Cadastrar Conta Bancaria no Inicio",
    "3. Cadastrar Conta Bancaria na Posicao",
    "4. Remover Conta Bancaria no Final",
    "5. Remover Conta Bancaria no Inicio",
    "6. Remover Conta Bancaria na Posicao",
    "7. Alteracao de Conta Bancaria",
    "8. Consulta de Conta Bancaria",
    "9. Retornar ao Menu Anterior",
)

_MOVEMENT_OPTIONS = (
    "1. Movimentacao de Debito e Credito",
    "2. Transferencia entre Contas Bancarias",
    "3. Consulta Movimentacoes Bancarias",
    "4. Retornar ao Menu Anterior",
)

_MAIN_OPTIONS = (
    "1. Contas Bancarias",
    "2. Movimentacoes Bancarias",
    "3. Sair do Programa",
)


def _warn(console: Console, text: str) -> None:
    console.clear_message()
    console.message(text)
    console.wait_key()
    console.clear_message()


def _ask_account_code(console: Console, accounts: AccountList) -> int | None:
    while True:
        console.write_at(30, 5, " " * 37)
        console.goto(30, 5)
        code = console.read_int()
        if code == 0:
            return None
        if code is None or code < 0:
            _warn(console, "Digite um numero maior que 0!")
            continue
        if accounts.find(code) is None:
            _warn(console, "Insira uma conta existente!")
            continue
        return code


def transactions_query_screen(
    console: Console, accounts: AccountList, transactions: TransactionList
) -> None:
    """List the movements of one account, page by page; 0 goes back.

    Pages are cut over the whole ledger, so a page shows the account's
    movements among the positions it covers.
    """
    page = 1
    while True:
        console.frame()
        console.write_at(2, 6, "-" * 116)
        console.write_at(3, 5, "Digite o codigo da conta: ")

        code = _ask_account_code(console, accounts)
        if code is None:
            return

        for x, label in _TRANSACTION_HEADER:
            console.write_at(x, 8, label)

        start = (page - 1) * ROWS_PER_PAGE
        shown = (
            t
            for index, t in enumerate(islice(transactions, start + ROWS_PER_PAGE))
            if t.account_code == code and index >= start
        )
        for count, t in enumerate(shown, start=1):
            row = 9 + count
            cells = (
                (3, str(t.sequence)),
                (8, str(t.account_code)),
                (15, t.date),
                (27, TransactionKind(t.kind).value),
                (37, t.payee),
                (85, f"{t.amount:.2f}"),
                (100, f"{t.balance:.2f}"),
            )
            for x, text in cells:
                console.write_at(x, row, text)

        console.message(
            f"Pagina {page} de {page_count(len(transactions))} "
            "([0] Sair, [1] Anterior, [2] Proxima): "
        )
        option = console.read_int()
        if option == 1 and page > 1:
            page -= 1
        elif option == 2 and start + ROWS_PER_PAGE < len(transactions):
            page += 1
        elif option == 0:
            return


def accounts_menu(console: Console, accounts: AccountList) -> None:
    """Menu for registering, removing, editing and querying accounts."""
    actions = {
        1: lambda: register_account(console, accounts, InsertMode.LAST),
        2: lambda: register_account(console, accounts, InsertMode.FIRST),
        3: lambda: register_account(console, accounts, InsertMode.POSITION),
        4: lambda: remove_account(console, accounts, RemoveMode.LAST),
        5: lambda: remove_account(console, accounts, RemoveMode.FIRST),
        6: lambda: remove_account(console, accounts, RemoveMode.POSITION),
        7: lambda: edit_account(console, accounts),
        8: lambda: query_menu(console, accounts),
    }
    while True:
        console.frame()
        console.title("TELA DE CONTAS BANCARIAS")
        for row, text in enumerate(_ACCOUNT_OPTIONS, start=9):
            console.write_at(4, row, text)
        console.goto(8, 24)
        option = console.read_int()
        if option == 9:
            return
        action = actions.get(option) if option is not None else None
        if action is None:
            _warn(console, "Digite uma opcao valida!")
        else:
            action()


def movements_menu(
    console: Console, accounts: AccountList, transactions: TransactionList
) -> None:
    """Menu for debits and credits, transfers and the movement listing."""
    actions = {
        1: debit_credit_screen,
        2: transfer_screen,
        3: transactions_query_screen,
    }
    while True:
        console.frame()
        console.title("MENU DE MOVIMENTACOES BANCARIAS")
        for row, text in zip(range(10, 18, 2), _MOVEMENT_OPTIONS):
            console.write_at(4, row, text)
        console.goto(8, 24)
        option = console.read_int()
        if option == 4:
            return
        action = actions.get(option) if option is not None else None
        if action is None:
            _warn(console, "Digite uma opcao valida!")
        else:
            action(console, accounts, transactions)


def _save_to_defaults(accounts: AccountList, transactions: TransactionList) -> None:
    save_accounts(accounts)
    save_transactions(transactions)


def main_menu(
    console: Console,
    accounts: AccountList,
    transactions: TransactionList,
    save: SaveFunction | None = None,
) -> None:
    """Top menu; leaving it saves the accounts and movements."""
    store = save if save is not None else _save_to_defaults
    while True:
        console.frame()
        console.title("Selecione o Menu que Deseja Acessar")
        for row, text in zip(range(11, 17, 2), _MAIN_OPTIONS):
            console.write_at(4, row, text)
        console.goto(8, 24)
        option = console.read_int()
        if option == 1:
            accounts_menu(console, accounts)
        elif option == 2:
            movements_menu(console, accounts, transactions)
        elif option == 3:
            store(accounts, transactions)
            return
        else:
            console.message("Digite uma opcao valida!")
            console.wait_key()


def main(argv: list[str] | None = None) -> int:
    """Load the saved data, run the menus and save on exit."""
    parser = argparse.ArgumentParser(prog="bancario", description="Bank account control.")
    parser.add_argument("--accounts", type=Path, default=DEFAULT_ACCOUNTS_PATH)
    parser.add_argument("--transactions", type=Path, default=DEFAULT_TRANSACTIONS_PATH)
    args = parser.parse_args(argv)

    accounts = load_accounts(args.accounts)
    transactions = load_transactions(args.transactions)

    def store(accounts: AccountList, transactions: TransactionList) -> None:
        save_accounts(accounts, args.accounts)
        save_transactions(transactions, args.transactions)

    try:
        main_menu(Console(), accounts, transactions, store)
    except EOFError:
        return 1
    return 0