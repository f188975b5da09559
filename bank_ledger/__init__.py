"""In-memory bank ledger with savings and credit accounts."""

from bank_ledger.store import Bank

__version__ = "0.1.0"

__all__ = ["Bank", "__version__"]
