"""Display strings handed to the front-end.

All presentation conventions live here so the engine itself stays numeric:
Swedish currency rendering, the fixed interest-rate strings and the
account type labels.
"""

from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_EVEN, Decimal
from typing import TYPE_CHECKING

from bank_ledger.models.account import Amount, to_money
from bank_ledger.models.enums import AccountType

if TYPE_CHECKING:
    from bank_ledger.models import Account, Customer, Transaction

GROUP_SEPARATOR = "\u00a0"  # no-break space
CURRENCY_SUFFIX = " kr"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

ACCOUNT_TYPE_LABELS = {
    AccountType.SAVINGS: "Sparkonto",
    AccountType.CREDIT: "Kreditkonto",
}

_CENT = Decimal("0.01")

# Rates the front-end expects rendered exactly like this
_EXACT_RATES = (
    (Decimal("5.0"), "5 %"),
    (Decimal("1.1"), "1,1 %"),
    (Decimal("2.4"), "2,4 %"),
)


def format_currency(value: Amount) -> str:
    """Render an amount in Swedish kronor, e.g. ``-5 000,00 kr``.

    Parameters
    ----------
    value : Amount
        Amount to render; rounded half-even to whole öre.

    Returns
    -------
    str
        Grouped with no-break spaces, decimal comma, ``" kr"`` suffix.
    """
    amount = to_money(value).quantize(_CENT, rounding=ROUND_HALF_EVEN)
    sign = "-" if amount < 0 else ""
    digits = f"{abs(amount):,.2f}".replace(",", GROUP_SEPARATOR).replace(".", ",")
    return f"{sign}{digits}{CURRENCY_SUFFIX}"


def format_interest_rate(rate: Amount) -> str:
    """Render a percentage rate, e.g. ``2,4 %``."""
    rate = to_money(rate)
    for exact, text in _EXACT_RATES:
        if abs(rate) == exact:
            return ("-" if rate < 0 else "") + text
    return f"{rate:.1f} %".replace(".", ",")


def account_type_label(account_type: AccountType) -> str:
    return ACCOUNT_TYPE_LABELS[account_type]


def customer_line(customer: Customer) -> str:
    return f"{customer.personal_number} {customer.given_name} {customer.family_name}"


def account_line(account: Account) -> str:
    """``<number> <balance> <type label> <interest rate>``."""
    return (
        f"{account.account_number} {format_currency(account.balance)} "
        f"{account_type_label(account.account_type)} "
        f"{format_interest_rate(account.interest_rate())}"
    )


def closed_account_line(account: Account, interest: Amount) -> str:
    """``<number> <balance> <type label> <interest amount>``."""
    return (
        f"{account.account_number} {format_currency(account.balance)} "
        f"{account_type_label(account.account_type)} {format_currency(interest)}"
    )


def transaction_line(transaction: Transaction) -> str:
    return (
        f"{transaction.timestamp.strftime(TIMESTAMP_FORMAT)} "
        f"{format_currency(transaction.amount)} "
        f"Saldo: {format_currency(transaction.balance_after)}"
    )


def statement_header(day: date) -> str:
    return f"Kontoutdrag - {day.isoformat()}"
