"""Snapshot codec: the whole bank in one JSON file.

Layout::

    {
      "format": "bank-ledger-snapshot",
      "version": 1,
      "saved_at": "2024-06-15T10:30:00",
      "next_account_number": 1002,
      "customers": [
        {"personal_number": ..., "given_name": ..., "family_name": ...,
         "accounts": [
           {"account_type": "SAVINGS", "account_number": 1001,
            "balance": "398.00", "first_withdrawal_used": true,
            "transactions": [
              {"kind": "Deposit", "amount": "1000", "balance_after": "1000",
               "timestamp": "2024-06-15T10:29:58"}]}]}]
    }

Amounts are stored as decimal strings and timestamps as ISO 8601, so a
save/load cycle reproduces every balance and timestamp exactly.
"""

from __future__ import annotations

import contextlib
import json
import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from bank_ledger.exceptions import SnapshotError
from bank_ledger.models import (
    ACCOUNT_CLASSES,
    ACCOUNT_NUMBER_START,
    Account,
    AccountType,
    CreditAccount,
    Customer,
    SavingsAccount,
    Transaction,
    TransactionKind,
)
from bank_ledger.sinks.serialization import (
    dataclass_to_dict,
    parse_bool,
    parse_datetime,
    parse_decimal,
    parse_int,
    serialize_value,
)

if TYPE_CHECKING:
    from bank_ledger.store.bank import Bank

logger = logging.getLogger(__name__)

SNAPSHOT_FORMAT = "bank-ledger-snapshot"
SNAPSHOT_VERSION = 1


@dataclass
class BankState:
    """Decoded contents of a snapshot."""

    customers: list[Customer]
    next_account_number: int


class SnapshotCodec:
    """Save and restore bank snapshots."""

    def __init__(self, pretty: bool = False) -> None:
        """Initialize snapshot codec.

        Parameters
        ----------
        pretty : bool
            Pretty-print JSON output.
        """
        self.pretty = pretty

    def save(self, bank: Bank, path: str | Path) -> Path:
        """Write a snapshot of ``bank`` to ``path``.

        Missing parent directories are created. The document is written to
        a sibling temporary file first and then moved over ``path``, so an
        existing snapshot survives a failed save.

        Raises
        ------
        SnapshotError
            If the file cannot be written.
        """
        path = Path(path)
        document = self.encode(bank)

        temp_path = path.with_name(f".{path.name}.tmp")
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with open(temp_path, "w", encoding="utf-8") as f:
                if self.pretty:
                    json.dump(document, f, indent=2, ensure_ascii=False)
                else:
                    json.dump(document, f, ensure_ascii=False)
            temp_path.replace(path)
        except OSError as exc:
            with contextlib.suppress(OSError):
                temp_path.unlink()
            raise SnapshotError(f"Could not save snapshot to {path}: {exc}") from exc

        logger.info(
            "Saved snapshot to %s: %d customers", path, len(document["customers"])
        )
        return path

    def load(self, path: str | Path) -> BankState:
        """Read and validate the snapshot at ``path``.

        Raises
        ------
        SnapshotError
            If the file cannot be read, is not a snapshot, or breaks a
            ledger invariant.
        """
        path = Path(path)
        try:
            with open(path, encoding="utf-8") as f:
                document = json.load(f)
        except OSError as exc:
            raise SnapshotError(f"Could not read snapshot {path}: {exc}") from exc
        except ValueError as exc:
            raise SnapshotError(f"Snapshot {path} is not valid JSON: {exc}") from exc

        state = self.decode(document)
        logger.info(
            "Loaded snapshot from %s: %d customers", path, len(state.customers)
        )
        return state

    def encode(self, bank: Bank) -> dict[str, Any]:
        """Convert a bank into a JSON-compatible document."""
        return {
            "format": SNAPSHOT_FORMAT,
            "version": SNAPSHOT_VERSION,
            "saved_at": serialize_value(datetime.now().replace(microsecond=0)),
            "next_account_number": bank.next_account_number,
            "customers": [
                self._encode_customer(customer) for customer in bank.customers.values()
            ],
        }

    def decode(self, document: Any) -> BankState:
        """Rebuild customers and the account counter from a document."""
        try:
            return self._decode(document)
        except SnapshotError:
            raise
        except (KeyError, TypeError, ValueError, ArithmeticError) as exc:
            raise SnapshotError(f"Malformed snapshot: {exc!r}") from exc

    def _encode_customer(self, customer: Customer) -> dict[str, Any]:
        return {
            "personal_number": customer.personal_number,
            "given_name": customer.given_name,
            "family_name": customer.family_name,
            "accounts": [self._encode_account(account) for account in customer.accounts],
        }

    def _encode_account(self, account: Account) -> dict[str, Any]:
        record: dict[str, Any] = {"account_type": account.account_type.value}
        record.update(dataclass_to_dict(account))
        return record

    def _decode(self, document: Any) -> BankState:
        if not isinstance(document, dict) or document.get("format") != SNAPSHOT_FORMAT:
            raise SnapshotError("Not a bank-ledger snapshot")

        version = document.get("version")
        if version != SNAPSHOT_VERSION:
            raise SnapshotError(f"Unsupported snapshot version: {version}")

        customers = [self._decode_customer(record) for record in document["customers"]]
        _validate(customers)

        # Never hand out a number that already exists in the file
        highest = max(
            (a.account_number for c in customers for a in c.accounts),
            default=ACCOUNT_NUMBER_START,
        )
        stored = parse_int(document.get("next_account_number", ACCOUNT_NUMBER_START))
        return BankState(customers=customers, next_account_number=max(stored, highest))

    def _decode_customer(self, record: dict[str, Any]) -> Customer:
        return Customer(
            personal_number=str(record["personal_number"]),
            given_name=str(record["given_name"]),
            family_name=str(record["family_name"]),
            accounts=[self._decode_account(a) for a in record["accounts"]],
        )

    def _decode_account(self, record: dict[str, Any]) -> Account:
        account_type = AccountType(record["account_type"])
        fields: dict[str, Any] = {
            "account_number": parse_int(record["account_number"]),
            "balance": parse_decimal(record["balance"]),
            "transactions": [self._decode_transaction(t) for t in record["transactions"]],
        }
        if account_type is AccountType.SAVINGS:
            fields["first_withdrawal_used"] = parse_bool(record["first_withdrawal_used"])
        return ACCOUNT_CLASSES[account_type](**fields)

    def _decode_transaction(self, record: dict[str, Any]) -> Transaction:
        return Transaction(
            kind=TransactionKind(record["kind"]),
            amount=parse_decimal(record["amount"]),
            balance_after=parse_decimal(record["balance_after"]),
            timestamp=parse_datetime(record["timestamp"]),
        )


def _validate(customers: list[Customer]) -> None:
    """Reject decoded state that breaks a ledger invariant."""
    personal_numbers: set[str] = set()
    account_numbers: set[int] = set()

    for customer in customers:
        if customer.personal_number in personal_numbers:
            raise SnapshotError(f"Duplicate personal number {customer.personal_number}")
        personal_numbers.add(customer.personal_number)

        for account in customer.accounts:
            number = account.account_number
            if number in account_numbers:
                raise SnapshotError(f"Duplicate account number {number}")
            account_numbers.add(number)

            last = account.last_transaction
            if last is not None and last.balance_after != account.balance:
                raise SnapshotError(
                    f"Account {number} balance {account.balance} does not match "
                    f"its last transaction ({last.balance_after})"
                )
            if isinstance(account, SavingsAccount) and account.balance < 0:
                raise SnapshotError(f"Savings account {number} has a negative balance")
            if isinstance(account, CreditAccount) and account.balance < account.CREDIT_LIMIT:
                raise SnapshotError(f"Credit account {number} is beyond its credit limit")
