"""Sample bank scenario: customers with accounts and some history."""

import logging
import random

from bank_ledger.generators import CustomerGenerator
from bank_ledger.store.bank import Bank

logger = logging.getLogger(__name__)


class SampleBankScenario:
    """Populate a bank through its public operations.

    Every customer, account and transaction goes through the same calls
    the front-end uses, so the generated bank obeys the normal fee and
    credit-limit rules. Some generated withdrawals are therefore rejected.
    """

    DEPOSIT_RANGE = (100, 20000)
    WITHDRAWAL_RANGE = (50, 8000)
    DEPOSIT_SHARE = 0.6

    def __init__(
        self,
        num_customers: int = 10,
        accounts_per_customer: tuple[int, int] = (1, 3),
        transactions_per_account: int = 5,
        credit_share: float = 0.4,
        seed: int | None = None,
        locale: str = "sv_SE",
    ) -> None:
        """Initialize sample bank scenario.

        Parameters
        ----------
        num_customers : int
            Number of customers to create.
        accounts_per_customer : tuple[int, int]
            Min and max accounts per customer.
        transactions_per_account : int
            Deposits and withdrawals attempted per account.
        credit_share : float
            Probability that a new account is a credit account.
        seed : int | None
            Random seed for reproducibility.
        locale : str
            Faker locale for names and personal numbers.
        """
        self.num_customers = num_customers
        self.accounts_per_customer = accounts_per_customer
        self.transactions_per_account = transactions_per_account
        self.credit_share = credit_share
        self.seed = seed

        if seed is not None:
            random.seed(seed)

        self.bank = Bank()
        self._customer_gen = CustomerGenerator(seed=seed, locale=locale)

    def generate(self) -> Bank:
        """Generate the sample bank.

        Returns
        -------
        Bank
            Bank holding all generated data.
        """
        logger.info("Starting sample bank scenario: %d customers", self.num_customers)

        for customer in self._customer_gen.generate_batch(self.num_customers):
            self._generate_customer_profile(
                customer.given_name, customer.family_name, customer.personal_number
            )

        counts = self.bank.summary()
        logger.info(
            "Generated sample bank: %d customers, %d accounts, %d transactions",
            counts["customers"],
            counts["accounts"],
            counts["transactions"],
        )
        return self.bank

    def _generate_customer_profile(
        self, given_name: str, family_name: str, personal_number: str
    ) -> None:
        if not self.bank.create_customer(given_name, family_name, personal_number):
            return

        for _ in range(random.randint(*self.accounts_per_customer)):
            if random.random() < self.credit_share:
                account_id = self.bank.create_credit_account(personal_number)
            else:
                account_id = self.bank.create_savings_account(personal_number)
            self._generate_activity(personal_number, account_id)

    def _generate_activity(self, personal_number: str, account_id: int) -> None:
        for _ in range(self.transactions_per_account):
            if random.random() < self.DEPOSIT_SHARE:
                self.bank.deposit(
                    personal_number, account_id, random.randint(*self.DEPOSIT_RANGE)
                )
            else:
                self.bank.withdraw(
                    personal_number, account_id, random.randint(*self.WITHDRAWAL_RANGE)
                )
