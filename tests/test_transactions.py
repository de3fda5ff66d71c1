import pytest

from bancario.accounts import AccountList, BankAccount
from bancario.transactions import (
    BankTransaction,
    TransactionKind,
    TransactionList,
)


@pytest.fixture
def accounts():
    return AccountList(
        [
            BankAccount(1, bank="ALPHA", balance=100.0, limit=50.0),
            BankAccount(2, bank="BETA", balance=40.0),
        ]
    )


def test_new_list_is_empty():
    ledger = TransactionList()
    assert ledger.is_empty()
    assert len(ledger) == 0


def test_credit_raises_balance_and_count(accounts):
    ledger = TransactionList()
    account = accounts.find(1)
    before = account.balance
    ledger.add(
        BankTransaction(1, date="01/02/2024", kind=TransactionKind.CREDIT, amount=25.0),
        accounts,
        TransactionKind.CREDIT,
    )
    assert account.balance == before + 25.0
    assert account.transaction_count == 1
    assert not ledger.is_empty()


def test_debit_lowers_balance(accounts):
    ledger = TransactionList()
    account = accounts.find(2)
    before = account.balance
    ledger.add(
        BankTransaction(2, kind=TransactionKind.DEBIT, amount=10.0),
        accounts,
        TransactionKind.DEBIT,
    )
    assert account.balance == before - 10.0


def test_kind_defaults_to_transaction_kind(accounts):
    ledger = TransactionList()
    account = accounts.find(1)
    before = account.balance
    ledger.add(BankTransaction(1, kind=TransactionKind.DEBIT, amount=5.0), accounts)
    assert account.balance == before - 5.0


def test_sequence_numbers_follow_order(accounts):
    ledger = TransactionList()
    for code in (1, 2, 1):
        ledger.add(BankTransaction(code, amount=1.0), accounts)
    assert [t.sequence for t in ledger] == list(range(1, len(ledger) + 1))


def test_unknown_account_is_rejected_without_change(accounts):
    ledger = TransactionList()
    with pytest.raises(LookupError):
        ledger.add(BankTransaction(99, amount=1.0), accounts)
    assert ledger.is_empty()


def test_transfer_records_debit_then_credit(accounts):
    ledger = TransactionList()
    origin, destination = accounts.find(1), accounts.find(2)
    total_before = origin.balance + destination.balance
    origin_before = origin.balance
    debit, credit = ledger.add_transfer(accounts, origin, destination, 30.0, "03/03/2024")
    assert list(ledger) == [debit, credit]
    assert debit.kind is TransactionKind.DEBIT
    assert credit.kind is TransactionKind.CREDIT
    assert debit.payee == "TRANSFERENCIA PARA BETA"
    assert credit.payee == "TRANSFERENCIA DE ALPHA"
    assert debit.balance == origin_before - 30.0
    assert debit.balance == origin.balance
    assert credit.balance == destination.balance
    assert origin.balance + destination.balance == total_before
    assert origin.transaction_count == destination.transaction_count == 1
    assert debit.date == credit.date == "03/03/2024"


def test_last_date_without_movements_is_placeholder(accounts):
    assert TransactionList().last_date(1) == "0"


def test_last_date_is_latest_for_account(accounts):
    ledger = TransactionList()
    ledger.add(BankTransaction(1, date="01/01/2024", amount=1.0), accounts)
    ledger.add(BankTransaction(1, date="05/01/2024", amount=1.0), accounts)
    ledger.add(BankTransaction(2, date="09/01/2024", amount=1.0), accounts)
    assert ledger.last_date(1) == "05/01/2024"
    assert ledger.last_date(2) == "09/01/2024"


def test_for_account_filters_in_order(accounts):
    ledger = TransactionList()
    first = ledger.add(BankTransaction(1, amount=1.0), accounts)
    ledger.add(BankTransaction(2, amount=1.0), accounts)
    third = ledger.add(BankTransaction(1, amount=2.0), accounts)
    assert list(ledger.for_account(1)) == [first, third]
    assert list(ledger.for_account(3)) == []


def test_loaded_transactions_keep_their_data(accounts):
    saved = [BankTransaction(1, amount=3.0, sequence=7)]
    ledger = TransactionList(saved)
    assert [t.sequence for t in ledger] == [7]
    assert accounts.find(1).transaction_count == 0