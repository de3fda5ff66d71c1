import io

import pytest

from bancario.account_removal import RemoveMode, remove_account
from bancario.accounts import AccountList, BankAccount
from bancario.console import Console


def _accounts(*codes):
    return AccountList(BankAccount(code=code, bank=f"Banco {code}") for code in codes)


def _run(accounts, mode, script):
    out = io.StringIO()
    remove_account(Console(out, io.StringIO(script)), accounts, mode)
    return out.getvalue()


def test_remove_first():
    accounts = _accounts(1, 2, 3)
    output = _run(accounts, RemoveMode.FIRST, "1\n\n2\n")
    assert [a.code for a in accounts] == [2, 3]
    assert "Conta excluida com sucesso!" in output


def test_remove_last():
    accounts = _accounts(1, 2, 3)
    _run(accounts, RemoveMode.LAST, "1\n\n2\n")
    assert [a.code for a in accounts] == [1, 2]


def test_remove_at_position_after_invalid_position():
    accounts = _accounts(1, 2, 3)
    output = _run(accounts, RemoveMode.POSITION, "5\n\n2\n1\n\n2\n")
    assert [a.code for a in accounts] == [1, 3]
    assert "Digite uma posicao valida" in output


def test_declining_keeps_the_account():
    accounts = _accounts(1, 2)
    output = _run(accounts, RemoveMode.FIRST, "2\n2\n")
    assert [a.code for a in accounts] == [1, 2]
    assert "Conta excluida com sucesso!" not in output


def test_remove_several_in_a_row():
    accounts = _accounts(1, 2, 3)
    _run(accounts, RemoveMode.FIRST, "1\n\n1\n1\n\n2\n")
    assert [a.code for a in accounts] == [3]


def test_emptied_list_ends_the_screen():
    accounts = _accounts(1)
    output = _run(accounts, RemoveMode.LAST, "1\n\n1\n\n")
    assert accounts.is_empty()
    assert "Nao ha nenhuma conta cadastrada." in output


def test_account_with_movements_is_not_removed():
    accounts = AccountList([BankAccount(code=1, transaction_count=2), BankAccount(code=2)])
    output = _run(accounts, RemoveMode.FIRST, "\n")
    assert [a.code for a in accounts] == [1, 2]
    assert "Conta com transações, impossivel excluir!" in output


def test_empty_list_reports_and_returns():
    accounts = AccountList()
    output = _run(accounts, RemoveMode.FIRST, "")
    assert "Nao ha nenhuma conta cadastrada." in output


def test_invalid_confirmation_is_asked_again():
    accounts = _accounts(1, 2)
    output = _run(accounts, RemoveMode.FIRST, "9\n\n1\n\n2\n")
    assert [a.code for a in accounts] == [2]
    assert "Digite uma opcao valida" in output


def test_account_details_are_shown():
    accounts = _accounts(4)
    output = _run(accounts, RemoveMode.FIRST, "2\n2\n")
    assert "Banco 4" in output


def test_running_out_of_input_raises():
    accounts = _accounts(1)
    with pytest.raises(EOFError):
        _run(accounts, RemoveMode.FIRST, "")