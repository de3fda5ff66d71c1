import io

import pytest

from bancario.account_forms import InsertMode, edit_account, register_account
from bancario.accounts import AccountList, AccountStatus, AccountType, BankAccount
from bancario.console import Console


def _console(lines):
    out = io.StringIO()
    console = Console(stdout=out, stdin=io.StringIO("".join(f"{line}\n" for line in lines)))
    return console, out


def _accounts(*codes):
    return AccountList(
        BankAccount(code=code, bank=f"Banco {code}", agency="0001", number="1000", balance=10.0)
        for code in codes
    )


NEW_ACCOUNT = ["Banco X", "0001", "12345", "1", "100", "50"]


def test_register_at_end():
    accounts = _accounts(1)
    console, _ = _console(["2", *NEW_ACCOUNT, "1", "2"])
    register_account(console, accounts, InsertMode.LAST)
    assert [a.code for a in accounts] == [1, 2]
    added = accounts.last()
    assert added.bank == "Banco X"
    assert added.agency == "0001"
    assert added.number == "12345"
    assert added.account_type is AccountType.CHECKING
    assert added.balance == 100.0
    assert added.limit == 50.0
    assert added.status is AccountStatus.ACTIVE
    assert added.transaction_count == 0


def test_register_at_start():
    accounts = _accounts(1)
    console, _ = _console(["2", *NEW_ACCOUNT, "1", "2"])
    register_account(console, accounts, InsertMode.FIRST)
    assert [a.code for a in accounts] == [2, 1]


def test_register_at_position():
    accounts = _accounts(1, 3)
    console, out = _console(["2", *NEW_ACCOUNT, "2", "1", "2"])
    register_account(console, accounts, InsertMode.POSITION)
    assert [a.code for a in accounts] == [1, 2, 3]
    assert "Posicao de cadastro:" in out.getvalue()


def test_register_position_out_of_bounds_adds_nothing():
    accounts = _accounts(1)
    console, out = _console(["2", *NEW_ACCOUNT, "5", "1", "2"])
    register_account(console, accounts, InsertMode.POSITION)
    assert [a.code for a in accounts] == [1]
    assert "out of bounds" in out.getvalue()


def test_register_cancelled_adds_nothing():
    accounts = _accounts(1)
    console, _ = _console(["2", *NEW_ACCOUNT, "2", "2"])
    register_account(console, accounts, InsertMode.LAST)
    assert [a.code for a in accounts] == [1]


def test_register_zero_goes_back():
    accounts = _accounts(1)
    console, _ = _console(["0"])
    register_account(console, accounts, InsertMode.LAST)
    assert len(accounts) == 1


def test_register_rejects_duplicate_and_negative_codes():
    accounts = _accounts(1)
    console, out = _console(["1", "", "-4", "", "0"])
    register_account(console, accounts, InsertMode.LAST)
    text = out.getvalue()
    assert "Codigo ja existente, digite outro!" in text
    assert "Digite um codigo maior que 0!" in text
    assert len(accounts) == 1


def test_register_repeats_blank_text_and_bad_values():
    accounts = AccountList()
    lines = ["7", "   ", "Banco Y", "0002", "999", "9", "", "2", "-1", "", "20", "0", "1", "2"]
    console, out = _console(lines)
    register_account(console, accounts, InsertMode.LAST)
    added = accounts.first()
    assert added.bank == "Banco Y"
    assert added.account_type is AccountType.SAVINGS
    assert added.balance == 20.0
    assert added.limit == 0.0
    text = out.getvalue()
    assert "Digite um valor valido!" in text
    assert "Digite um valor maior que 0!" in text


def test_register_several_in_a_row():
    accounts = AccountList()
    lines = ["5", *NEW_ACCOUNT, "1", "1", "6", *NEW_ACCOUNT, "1", "1", "0"]
    console, _ = _console(lines)
    register_account(console, accounts, InsertMode.LAST)
    assert [a.code for a in accounts] == [5, 6]


def test_register_runs_out_of_input():
    console, _ = _console(["3"])
    with pytest.raises(EOFError):
        register_account(console, AccountList(), InsertMode.LAST)


def test_edit_bank():
    accounts = _accounts(1)
    console, _ = _console(["1", "1", "Novo Banco", "2", "2"])
    edit_account(console, accounts)
    assert accounts.first().bank == "Novo Banco"


def test_edit_type_and_limit():
    accounts = _accounts(1)
    console, out = _console(["1", "4", "3", "1", "6", "-5", "", "300", "2", "2"])
    edit_account(console, accounts)
    account = accounts.first()
    assert account.account_type is AccountType.CREDIT
    assert account.limit == 300.0
    assert "Digite um valor maior que 0!" in out.getvalue()


def test_edit_status():
    accounts = _accounts(1)
    console, _ = _console(["1", "7", "2", "2", "2"])
    edit_account(console, accounts)
    assert accounts.first().status is AccountStatus.INACTIVE


def test_edit_status_choice_three_keeps_status():
    accounts = _accounts(1)
    console, _ = _console(["1", "7", "3", "", "2", "2"])
    edit_account(console, accounts)
    assert accounts.first().status is AccountStatus.ACTIVE


def test_edit_balance_is_refused():
    accounts = _accounts(1)
    console, out = _console(["1", "5", "", "0"])
    edit_account(console, accounts)
    assert accounts.first().balance == 10.0
    assert "O saldo nao pode ser alterado!" in out.getvalue()


def test_edit_unknown_account():
    accounts = _accounts(1)
    console, out = _console(["9", "", "0"])
    edit_account(console, accounts)
    assert "Insira uma conta existente!" in out.getvalue()
    assert accounts.first().bank == "Banco 1"


def test_edit_another_account():
    accounts = _accounts(1, 2)
    lines = ["1", "1", "A", "2", "1", "2", "1", "B", "2", "2"]
    console, _ = _console(lines)
    edit_account(console, accounts)
    assert [a.bank for a in accounts] == ["A", "B"]
    assert len(accounts) == 2