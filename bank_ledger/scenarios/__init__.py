"""Pre-built data generation scenarios."""

from bank_ledger.scenarios.sample_bank import SampleBankScenario

__all__ = ["SampleBankScenario"]
