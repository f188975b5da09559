"""The bank: customers, their accounts and every operation the front-end calls."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from bank_ledger.exceptions import (
    AccountNotFoundError,
    CustomerNotFoundError,
    DuplicateCustomerError,
    EntityNotFoundError,
)
from bank_ledger.formatting import (
    account_line,
    closed_account_line,
    customer_line,
    transaction_line,
)
from bank_ledger.models import (
    ACCOUNT_CLASSES,
    ACCOUNT_NUMBER_START,
    Account,
    AccountType,
    Customer,
)
from bank_ledger.models.account import Amount
from bank_ledger.sinks.snapshot import SnapshotCodec

logger = logging.getLogger(__name__)


@dataclass
class Bank:
    """In-memory ledger of customers and their accounts.

    The operations below are what the front-end invokes. They never raise
    for a missing customer or account or for a rejected amount: the result
    is ``False``, ``-1`` or ``None`` depending on the return type. Only
    snapshot I/O raises (:class:`~bank_ledger.exceptions.SnapshotError`).

    Account numbers are unique across all customers and never reused,
    not even after a customer is deleted.
    """

    customers: dict[str, Customer] = field(default_factory=dict)
    next_account_number: int = ACCOUNT_NUMBER_START

    # Entity access
    def find_customer(self, personal_number: str) -> Customer:
        """Return the customer with this personal number.

        Raises
        ------
        CustomerNotFoundError
            If no such customer exists.
        """
        customer = self.customers.get(personal_number)
        if customer is None:
            raise CustomerNotFoundError(f"Customer {personal_number} not found")
        return customer

    def find_account(self, personal_number: str, account_id: int) -> Account:
        """Return an account, which must belong to the given customer.

        Raises
        ------
        CustomerNotFoundError
            If no such customer exists.
        AccountNotFoundError
            If the customer owns no account with this number.
        """
        account = self.find_customer(personal_number).find_account(account_id)
        if account is None:
            raise AccountNotFoundError(
                f"Account {account_id} not found for customer {personal_number}"
            )
        return account

    def add_customer(self, customer: Customer) -> None:
        """Register a customer.

        Raises
        ------
        DuplicateCustomerError
            If the personal number is already registered.
        """
        if customer.personal_number in self.customers:
            raise DuplicateCustomerError(
                f"Customer {customer.personal_number} already exists"
            )
        self.customers[customer.personal_number] = customer

    # Customer operations
    def create_customer(self, name: str, surname: str, personal_number: str) -> bool:
        """Create a customer; ``False`` if the personal number is taken."""
        try:
            self.add_customer(Customer(personal_number, name, surname))
        except DuplicateCustomerError as exc:
            logger.debug("Customer not created: %s", exc)
            return False
        logger.info("Created customer %s", personal_number, extra=_context(personal_number))
        return True

    def get_all_customers(self) -> list[str]:
        """One ``"<pNo> <given> <family>"`` line per customer, oldest first."""
        return [customer_line(customer) for customer in self.customers.values()]

    def get_customer(self, personal_number: str) -> list[str] | None:
        """Customer line followed by one account line per owned account."""
        try:
            customer = self.find_customer(personal_number)
        except EntityNotFoundError:
            return None
        return [customer_line(customer)] + [
            account_line(account) for account in customer.accounts
        ]

    def change_customer_name(
        self, personal_number: str, name: str | None, surname: str | None
    ) -> bool:
        """Rename a customer; both names must be non-empty."""
        if not name or not surname:
            return False
        try:
            customer = self.find_customer(personal_number)
        except EntityNotFoundError as exc:
            logger.debug("Name not changed: %s", exc)
            return False
        customer.rename(name, surname)
        logger.info("Renamed customer %s", personal_number, extra=_context(personal_number))
        return True

    def delete_customer(self, personal_number: str) -> list[str] | None:
        """Close every account of a customer, then remove the customer.

        Returns
        -------
        list[str] | None
            The customer line followed by one closed-account line per
            account in opening order, or ``None`` if the customer does
            not exist.
        """
        try:
            customer = self.find_customer(personal_number)
        except EntityNotFoundError:
            return None

        result = [customer_line(customer)]
        for account in list(customer.accounts):
            result.append(self._settle(customer, account))

        del self.customers[personal_number]
        logger.info("Deleted customer %s", personal_number, extra=_context(personal_number))
        return result

    # Account operations
    def create_savings_account(self, personal_number: str) -> int:
        """Open a savings account; returns its number or ``-1``."""
        return self.open_account(personal_number, AccountType.SAVINGS)

    def create_credit_account(self, personal_number: str) -> int:
        """Open a credit account; returns its number or ``-1``."""
        return self.open_account(personal_number, AccountType.CREDIT)

    def open_account(self, personal_number: str, account_type: AccountType) -> int:
        """Open an account of the given type for a customer.

        Parameters
        ----------
        personal_number : str
            Owner of the new account.
        account_type : AccountType
            Savings or credit.

        Returns
        -------
        int
            The new account number, or ``-1`` if the customer does not
            exist (no number is consumed in that case).
        """
        try:
            customer = self.find_customer(personal_number)
        except EntityNotFoundError as exc:
            logger.debug("Account not opened: %s", exc)
            return -1

        self.next_account_number += 1
        account = ACCOUNT_CLASSES[account_type](account_number=self.next_account_number)
        customer.add_account(account)
        logger.info(
            "Opened %s account %d for customer %s",
            account_type.value,
            account.account_number,
            personal_number,
            extra=_context(personal_number, account.account_number),
        )
        return account.account_number

    def get_account(self, personal_number: str, account_id: int) -> str | None:
        """Formatted account line, or ``None`` if not found."""
        try:
            return account_line(self.find_account(personal_number, account_id))
        except EntityNotFoundError:
            return None

    def deposit(self, personal_number: str, account_id: int, amount: Amount) -> bool:
        try:
            account = self.find_account(personal_number, account_id)
        except EntityNotFoundError as exc:
            logger.debug("Deposit rejected: %s", exc)
            return False

        if not account.deposit(amount):
            logger.debug("Deposit of %s to account %d rejected", amount, account_id)
            return False
        logger.info(
            "Deposited %s to account %d",
            amount,
            account_id,
            extra=_context(personal_number, account_id),
        )
        return True

    def withdraw(self, personal_number: str, account_id: int, amount: Amount) -> bool:
        """Withdraw under the account's fee and limit rules."""
        try:
            account = self.find_account(personal_number, account_id)
        except EntityNotFoundError as exc:
            logger.debug("Withdrawal rejected: %s", exc)
            return False

        if not account.withdraw(amount):
            logger.debug(
                "Withdrawal of %s from account %d rejected (balance %s)",
                amount,
                account_id,
                account.balance,
            )
            return False
        logger.info(
            "Withdrew %s from account %d",
            amount,
            account_id,
            extra=_context(personal_number, account_id),
        )
        return True

    def get_transactions(self, personal_number: str, account_id: int) -> list[str] | None:
        """Transaction lines, oldest first; ``None`` if the account is unknown."""
        try:
            account = self.find_account(personal_number, account_id)
        except EntityNotFoundError:
            return None
        return [transaction_line(transaction) for transaction in account.transactions]

    def close_account(self, personal_number: str, account_id: int) -> str | None:
        """Settle interest and remove an account.

        Returns
        -------
        str | None
            ``"<number> <balance> <type> <interest>"`` where balance is the
            balance before interest, or ``None`` if not found.
        """
        try:
            account = self.find_account(personal_number, account_id)
        except EntityNotFoundError as exc:
            logger.debug("Account not closed: %s", exc)
            return None
        return self._settle(self.customers[personal_number], account)

    def _settle(self, customer: Customer, account: Account) -> str:
        interest = account.close()
        customer.remove_account(account.account_number)
        logger.info(
            "Closed account %d (balance %s, interest %s)",
            account.account_number,
            account.balance,
            interest,
            extra=_context(customer.personal_number, account.account_number),
        )
        return closed_account_line(account, interest)

    # Persistence
    def save_customers_to_file(self, path: str | Path, pretty: bool = False) -> Path:
        """Write the whole bank to a snapshot file.

        Raises
        ------
        SnapshotError
            If the file cannot be written.
        """
        return SnapshotCodec(pretty=pretty).save(self, path)

    def load_customers_from_file(self, path: str | Path) -> None:
        """Replace this bank's contents with a snapshot file.

        The current state is kept when the file cannot be loaded. The
        account counter never moves backwards, so numbers handed out
        earlier in this process are not reissued.

        Raises
        ------
        SnapshotError
            If the file cannot be read or is not a valid snapshot.
        """
        state = SnapshotCodec().load(path)
        self.customers = {c.personal_number: c for c in state.customers}
        self.next_account_number = max(self.next_account_number, state.next_account_number)

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        accounts = [a for c in self.customers.values() for a in c.accounts]
        return {
            "customers": len(self.customers),
            "accounts": len(accounts),
            "transactions": sum(len(a.transactions) for a in accounts),
        }


def _context(personal_number: str, account_number: int | None = None) -> dict:
    """Log record attributes picked up by the JSON formatter."""
    return {"personal_number": personal_number, "account_number": account_number}
