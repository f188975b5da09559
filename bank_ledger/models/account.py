"""Account models: the savings and credit variants and their policies."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import ClassVar

from bank_ledger.models.enums import AccountType, TransactionKind
from bank_ledger.models.transaction import Transaction

Amount = int | float | str | Decimal

# Account numbers are minted by pre-incrementing, so the first one is 1001
ACCOUNT_NUMBER_START = 1000


def to_money(value: Amount) -> Decimal:
    """Convert a user-supplied amount to ``Decimal`` without float noise."""
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def parse_amount(value: Amount) -> Decimal | None:
    """Convert an operation's amount, or ``None`` if it is not a finite number."""
    try:
        amount = to_money(value)
    except (ArithmeticError, ValueError, TypeError):
        return None
    if not amount.is_finite():
        return None
    return amount


@dataclass
class Account(ABC):
    """Bank account owned by exactly one customer.

    Balances only change through :meth:`deposit` and :meth:`withdraw`, and
    every successful change appends one :class:`Transaction`, so the last
    transaction's ``balance_after`` always equals ``balance``.
    """

    ACCOUNT_TYPE: ClassVar[AccountType]

    account_number: int
    balance: Decimal = Decimal("0")
    transactions: list[Transaction] = field(default_factory=list)

    @property
    def account_type(self) -> AccountType:
        return self.ACCOUNT_TYPE

    @property
    def last_transaction(self) -> Transaction | None:
        return self.transactions[-1] if self.transactions else None

    def deposit(self, amount: Amount) -> bool:
        """Add ``amount`` to the balance.

        Parameters
        ----------
        amount : Amount
            Amount to deposit; must be a positive finite number.

        Returns
        -------
        bool
            ``False`` when the amount is not positive or not a number.
        """
        amount = parse_amount(amount)
        if amount is None or amount <= 0:
            return False
        self.balance += amount
        self._append(TransactionKind.DEPOSIT, amount)
        return True

    @abstractmethod
    def withdraw(self, amount: Amount) -> bool:
        """Withdraw ``amount`` according to the variant's policy."""

    @abstractmethod
    def interest_rate(self) -> Decimal:
        """Current interest rate in percent (``2.4`` means 2.4 %)."""

    @abstractmethod
    def close(self) -> Decimal:
        """Return the interest settled when the account is closed.

        The balance is left untouched; the owner discards the account
        right after closing it.
        """

    def _append(self, kind: TransactionKind, amount: Decimal) -> None:
        self.transactions.append(Transaction.record(kind, amount, self.balance))


@dataclass
class SavingsAccount(Account):
    """Savings account: one free withdrawal, then a 2 % fee on each one.

    The balance can never go negative.
    """

    ACCOUNT_TYPE: ClassVar[AccountType] = AccountType.SAVINGS
    INTEREST_RATE: ClassVar[Decimal] = Decimal("0.024")
    WITHDRAWAL_FEE: ClassVar[Decimal] = Decimal("0.02")

    first_withdrawal_used: bool = False

    def withdraw(self, amount: Amount) -> bool:
        amount = parse_amount(amount)
        if amount is None or amount <= 0:
            return False

        debit = amount
        if self.first_withdrawal_used:
            debit = amount * (1 + self.WITHDRAWAL_FEE)

        if debit > self.balance:
            return False

        self.balance -= debit
        self.first_withdrawal_used = True
        self._append(TransactionKind.WITHDRAW, -debit)
        return True

    def interest_rate(self) -> Decimal:
        return self.INTEREST_RATE * 100

    def close(self) -> Decimal:
        return self.balance * self.INTEREST_RATE


@dataclass
class CreditAccount(Account):
    """Credit account with a 5 000 kr credit line.

    Positive balances earn 1.1 %, debt is charged 5 %. Withdrawals carry
    no fee. A zero withdrawal is accepted and still logged.
    """

    ACCOUNT_TYPE: ClassVar[AccountType] = AccountType.CREDIT
    CREDIT_LIMIT: ClassVar[Decimal] = Decimal("-5000")
    POSITIVE_RATE: ClassVar[Decimal] = Decimal("0.011")
    NEGATIVE_RATE: ClassVar[Decimal] = Decimal("0.05")

    def withdraw(self, amount: Amount) -> bool:
        amount = parse_amount(amount)
        if amount is None or amount < 0:
            return False
        if self.balance - amount < self.CREDIT_LIMIT:
            return False

        self.balance -= amount
        self._append(TransactionKind.WITHDRAW, -amount)
        return True

    def interest_rate(self) -> Decimal:
        return self._current_rate() * 100

    def close(self) -> Decimal:
        return self.balance * self._current_rate()

    def _current_rate(self) -> Decimal:
        if self.balance >= 0:
            return self.POSITIVE_RATE
        return self.NEGATIVE_RATE


ACCOUNT_CLASSES: dict[AccountType, type[Account]] = {
    AccountType.SAVINGS: SavingsAccount,
    AccountType.CREDIT: CreditAccount,
}
