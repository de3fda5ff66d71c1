import pytest

from bancario.accounts import AccountList, BankAccount
from bancario.ordering import SortOrder, sort_accounts


def _accounts(*pairs):
    return AccountList(BankAccount(code=code, bank=bank) for code, bank in pairs)


def test_sort_by_code():
    accounts = _accounts((3, "Caixa"), (1, "Itau"), (2, "Bradesco"))
    sort_accounts(accounts, SortOrder.CODE)
    assert [a.code for a in accounts] == [1, 2, 3]


def test_sort_by_bank_name():
    accounts = _accounts((1, "Caixa"), (2, "Banco do Brasil"), (3, "Itau"))
    sort_accounts(accounts, SortOrder.BANK)
    assert [a.bank for a in accounts] == ["Banco do Brasil", "Caixa", "Itau"]


def test_sort_by_bank_keeps_equal_names_in_order():
    accounts = _accounts((5, "Itau"), (9, "Caixa"), (2, "Itau"))
    sort_accounts(accounts, SortOrder.BANK)
    assert [a.code for a in accounts] == [9, 5, 2]


def test_upper_case_sorts_before_lower_case():
    accounts = _accounts((1, "banco"), (2, "Zeta"))
    sort_accounts(accounts, SortOrder.BANK)
    assert [a.bank for a in accounts] == ["Zeta", "banco"]


def test_plain_integers_select_the_order():
    accounts = _accounts((2, "A"), (1, "B"))
    sort_accounts(accounts, 2)
    assert [a.code for a in accounts] == [1, 2]
    sort_accounts(accounts, 1)
    assert [a.bank for a in accounts] == ["A", "B"]


def test_returns_the_same_list():
    accounts = _accounts((2, "A"), (1, "B"))
    assert sort_accounts(accounts, SortOrder.CODE) is accounts


def test_empty_list_stays_empty():
    accounts = AccountList()
    sort_accounts(accounts, SortOrder.CODE)
    assert len(accounts) == 0


def test_unknown_order_is_rejected():
    with pytest.raises(ValueError):
        sort_accounts(_accounts((1, "A")), 7)