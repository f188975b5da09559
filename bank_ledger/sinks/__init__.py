"""File sinks for persisting bank data."""

from bank_ledger.sinks.snapshot import BankState, SnapshotCodec
from bank_ledger.sinks.statement import StatementWriter

__all__ = ["BankState", "SnapshotCodec", "StatementWriter"]
