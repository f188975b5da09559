"""Customer generator for sample banks."""

from __future__ import annotations

from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import Customer


class CustomerGenerator(BaseGenerator):
    """Generate customers with local names and unique personal numbers."""

    def generate(self) -> Customer:
        """Generate a single customer.

        Returns
        -------
        Customer
            Generated customer without accounts.
        """
        return Customer(
            personal_number=self.fake.unique.ssn(),
            given_name=self.fake.first_name(),
            family_name=self.fake.last_name(),
        )

    def generate_batch(self, count: int) -> Iterator[Customer]:
        """Generate multiple customers.

        Parameters
        ----------
        count : int
            Number of customers to generate.

        Yields
        ------
        Customer
            Generated customers.
        """
        for _ in range(count):
            yield self.generate()
