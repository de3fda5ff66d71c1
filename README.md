# bancario

A full-screen terminal program that keeps a register of bank accounts and of
the money that moves through them. The screens and messages are in
Portuguese.

## What it does

- **Accounts**
  - Register an account at the end of the list, at the start, or at a chosen
    position.
  - The account code must be new.
  - Balance and limit may not be negative.
  - Remove the first account, the last account, or the account at a position.
  - An account that already has movements cannot be removed.
  - Edit an account's bank, agency, number, type (corrente, poupança, crédito),
    limit or status (ativa, inativa). The balance cannot be edited.
- **Account queries**
  - Show every account, one screen each.
  - Look an account up by its code.
  - List the accounts in pages of 13 rows, ordered by code or by bank name.
    Ordering changes the order of the list itself.
  - List only the inactive accounts.
- **Movements**
  - Post a credit or a debit to an active account. The amount must be above
    zero and no more than the account's balance plus its limit.
  - Transfer between two different active accounts. The amount may not be
    negative or exceed the origin's balance plus limit.
  - A transfer records a debit on the origin account ("TRANSFERENCIA PARA …")
    and a credit on the destination account ("TRANSFERENCIA DE …").
  - List one account's movements page by page.
- **Dates**
  - Dates are entered as `dd/mm/yyyy`.
  - A date must be a real date with a year between 1900 and the current year.
  - It must not be earlier than the latest movement of the account, or of
    either account in a transfer.

## Installing

```
pip install .
```

## Running

```
bancario [--accounts PATH] [--transactions PATH]
```

The files default to `src/database/lista_contas.dat` and
`src/database/lista_transacoes.dat`. These paths are relative to the current
directory. A missing file counts as an empty list.

- **Saving.** Both files are written, with their folders created if needed,
  only when you choose **3. Sair do Programa** from the main menu. If the
  input ends first, the command exits with status 1 without saving.
- **Input.** Every entry is a line ended with Enter, and so is every "press a
  key" pause.
- **Going back.** At a prompt for an account code, `0` returns to the
  previous screen.
- **Screen.** The screen is drawn with ANSI escape sequences, so the terminal
  must support them.

The data files hold fixed-size binary records with text in Latin-1. Text
longer than its field is cut short when saved.

## Using it as a library

```python
from bancario.accounts import AccountList, BankAccount
from bancario.transactions import BankTransaction, TransactionKind, TransactionList
from bancario.storage import load_accounts, save_accounts

accounts = AccountList()
accounts.add_last(BankAccount(code=1, bank="ALFA", balance=100.0, limit=50.0))
accounts.add_last(BankAccount(code=2, bank="BETA"))

transactions = TransactionList()
transactions.add(
    BankTransaction(account_code=1, date="10/01/2024", kind=TransactionKind.DEBIT, amount=30.0),
    accounts,
)
transactions.add_transfer(accounts, accounts.find(1), accounts.find(2), 20.0, "11/01/2024")
```

### `bancario.accounts`

`AccountList` keeps accounts in order and addresses them by 1-based
position or by code:

- adding: `add_first`, `add_last`, `insert`
- removing: `remove_first`, `remove_last`, `remove_at`
- looking up: `find`, `at_position`, `first`, `last`

Accounts added this way are reset to active with no movements. Positions out
of range raise `IndexError`.

### `bancario.transactions`

`TransactionList.add` numbers the movement and updates the account's balance
and movement count. It raises `LookupError` for an unknown account. The class
also has `add_transfer`, `last_date` and `for_account`.

### Other modules

- `bancario.ordering.sort_accounts` orders by `SortOrder.BANK` or
  `SortOrder.CODE`.
- `bancario.validation.validate_date` checks a date.
- `bancario.validation.date_key` turns `dd/mm/yyyy` into a sortable
  `yyyymmdd` integer.
- `bancario.storage` reads and writes the data files: `load_accounts`,
  `save_accounts`, `load_transactions` and `save_transactions`.
- `bancario.console.Console` takes any text streams, so the screens in
  `bancario.menus` and the other screen modules can run against them.

## Running the tests

```
pip install .[test]
pytest
```