"""Customer model."""

from dataclasses import dataclass, field

from bank_ledger.models.account import Account


@dataclass
class Customer:
    """Bank customer and the accounts they own, in opening order."""

    personal_number: str
    given_name: str
    family_name: str
    accounts: list[Account] = field(default_factory=list)

    def add_account(self, account: Account) -> None:
        """Attach an account to this customer."""
        self.accounts.append(account)

    def find_account(self, account_number: int) -> Account | None:
        """Return the owned account with this number, if any."""
        for account in self.accounts:
            if account.account_number == account_number:
                return account
        return None

    def remove_account(self, account_number: int) -> Account | None:
        """Detach and return the owned account with this number, if any."""
        account = self.find_account(account_number)
        if account is not None:
            self.accounts.remove(account)
        return account

    def rename(self, given_name: str, family_name: str) -> None:
        self.given_name = given_name
        self.family_name = family_name
