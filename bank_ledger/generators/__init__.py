"""Faker-backed generators for sample data."""

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.generators.customer import CustomerGenerator

__all__ = ["BaseGenerator", "CustomerGenerator"]
