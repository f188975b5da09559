"""Enumeration types for ledger entities."""

from enum import Enum


class TransactionKind(str, Enum):
    DEPOSIT = "Deposit"
    WITHDRAW = "Withdraw"


class AccountType(str, Enum):
    SAVINGS = "SAVINGS"
    CREDIT = "CREDIT"
