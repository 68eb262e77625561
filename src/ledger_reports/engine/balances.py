"""Running account balances under double-entry rules."""

from collections.abc import Iterable
from decimal import Decimal

from ledger_reports.models import AccountType, Movement, to_decimal


def signed_delta(account_type: AccountType | None, debit: Decimal, credit: Decimal) -> Decimal:
    """Return how much a debit/credit pair moves an account's balance.

    Asset and Expense accounts grow with debits; every other account,
    including one whose type is unknown, grows with credits.
    """
    if account_type is not None and account_type.increases_with_debit():
        return debit - credit
    return credit - debit


def calculate_account_balance(
    account_type: AccountType,
    opening_balance: Decimal | float | int | None,
    transactions: Iterable[Movement] | None,
) -> Decimal:
    """Calculate the running balance for one account.

    Args:
        account_type: Type of the account, which fixes its normal balance side
        opening_balance: Balance before any of the transactions (None reads as 0)
        transactions: Debit/credit movements in any order

    Returns:
        The final balance
    """
    balance = to_decimal(opening_balance)
    for movement in transactions or ():
        balance += signed_delta(account_type, movement.debit, movement.credit)
    return balance
