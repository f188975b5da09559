"""Pytest configuration and fixtures."""

import pytest

from bank_ledger.store.bank import Bank


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_personal_number() -> str:
    """Sample personal number."""
    return "19900101"


@pytest.fixture
def bank() -> Bank:
    """Create a fresh bank for each test."""
    return Bank()


@pytest.fixture
def bank_with_customer(bank: Bank, sample_personal_number: str) -> Bank:
    """Bank holding one customer without accounts."""
    bank.create_customer("A", "B", sample_personal_number)
    return bank
