"""In-memory store for the bank's customers and accounts."""

from bank_ledger.store.bank import Bank

__all__ = ["Bank"]
