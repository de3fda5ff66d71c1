"""Reordering the registered accounts."""

from __future__ import annotations

from enum import IntEnum

from bancario.accounts import AccountList


class SortOrder(IntEnum):
    """Criterion used to reorder accounts."""

    BANK = 1
    CODE = 2


def sort_accounts(accounts: AccountList, order: SortOrder | int) -> AccountList:
    """Reorder ``accounts`` in place, by bank name or by account code.

    Bank names compare character by character, so upper case comes before
    lower case. Accounts that compare equal keep their relative order.
    """
    criterion = SortOrder(order)
    if criterion is SortOrder.BANK:
        accounts.sort(key=lambda account: account.bank)
    else:
        accounts.sort(key=lambda account: account.code)
    return accounts