"""Transaction model for the ledger."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import TransactionKind


@dataclass(frozen=True)
class Transaction:
    """One balance change on one account.

    ``amount`` is signed: positive for deposits, negative for withdrawals
    (fee included). ``balance_after`` is the account balance right after
    the change.
    """

    kind: TransactionKind
    amount: Decimal
    balance_after: Decimal
    timestamp: datetime

    @classmethod
    def record(
        cls,
        kind: TransactionKind,
        amount: Decimal,
        balance_after: Decimal,
        timestamp: datetime | None = None,
    ) -> "Transaction":
        """Create a transaction stamped with the local wall clock."""
        if timestamp is None:
            timestamp = datetime.now().replace(microsecond=0)
        return cls(
            kind=kind,
            amount=amount,
            balance_after=balance_after,
            timestamp=timestamp,
        )

    def __str__(self) -> str:
        from bank_ledger.formatting import transaction_line

        return transaction_line(self)
