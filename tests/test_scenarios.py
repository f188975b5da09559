"""Tests for scenarios."""

from pathlib import Path

from bank_ledger.models import CreditAccount, SavingsAccount
from bank_ledger.scenarios import SampleBankScenario
from bank_ledger.store.bank import Bank


def _accounts(bank: Bank) -> list:
    return [a for c in bank.customers.values() for a in c.accounts]


class TestSampleBankScenario:
    """Tests for SampleBankScenario."""

    def test_generate_scenario(self, seed: int) -> None:
        scenario = SampleBankScenario(num_customers=10, seed=seed)
        bank = scenario.generate()

        assert bank is scenario.bank
        assert len(bank.customers) == 10
        for customer in bank.customers.values():
            assert 1 <= len(customer.accounts) <= 3

    def test_account_numbers_are_sequential(self, seed: int) -> None:
        bank = SampleBankScenario(num_customers=8, seed=seed).generate()

        numbers = sorted(a.account_number for a in _accounts(bank))
        assert numbers == list(range(1001, 1001 + len(numbers)))
        assert bank.next_account_number == numbers[-1]

    def test_ledger_rules_hold(self, seed: int) -> None:
        """Generated history respects balances and limits."""
        bank = SampleBankScenario(
            num_customers=15, transactions_per_account=20, seed=seed
        ).generate()

        for account in _accounts(bank):
            if account.transactions:
                assert account.transactions[-1].balance_after == account.balance
            else:
                assert account.balance == 0
            if isinstance(account, SavingsAccount):
                assert account.balance >= 0
            if isinstance(account, CreditAccount):
                assert account.balance >= CreditAccount.CREDIT_LIMIT

    def test_both_account_types(self, seed: int) -> None:
        bank = SampleBankScenario(num_customers=20, seed=seed).generate()

        kinds = {type(a) for a in _accounts(bank)}
        assert kinds == {SavingsAccount, CreditAccount}

    def test_only_savings(self, seed: int) -> None:
        bank = SampleBankScenario(num_customers=5, credit_share=0.0, seed=seed).generate()

        assert all(isinstance(a, SavingsAccount) for a in _accounts(bank))

    def test_no_transactions(self, seed: int) -> None:
        bank = SampleBankScenario(
            num_customers=3, transactions_per_account=0, seed=seed
        ).generate()

        assert bank.summary()["transactions"] == 0

    def test_reproducible_with_seed(self, seed: int) -> None:
        first = SampleBankScenario(num_customers=5, seed=seed).generate()
        second = SampleBankScenario(num_customers=5, seed=seed).generate()

        assert first.get_all_customers() == second.get_all_customers()
        assert [a.balance for a in _accounts(first)] == [
            a.balance for a in _accounts(second)
        ]

    def test_snapshot_of_generated_bank(self, seed: int, tmp_path: Path) -> None:
        bank = SampleBankScenario(num_customers=5, seed=seed).generate()
        path = bank.save_customers_to_file(tmp_path / "bank.json")

        restored = Bank()
        restored.load_customers_from_file(path)

        assert restored.summary() == bank.summary()
        assert restored.get_all_customers() == bank.get_all_customers()
