"""Ledger domain models."""

from bank_ledger.models.account import (
    ACCOUNT_CLASSES,
    ACCOUNT_NUMBER_START,
    Account,
    CreditAccount,
    SavingsAccount,
    parse_amount,
    to_money,
)
from bank_ledger.models.customer import Customer
from bank_ledger.models.enums import AccountType, TransactionKind
from bank_ledger.models.transaction import Transaction

__all__ = [
    "ACCOUNT_CLASSES",
    "ACCOUNT_NUMBER_START",
    "Account",
    "AccountType",
    "CreditAccount",
    "Customer",
    "SavingsAccount",
    "Transaction",
    "TransactionKind",
    "parse_amount",
    "to_money",
]
