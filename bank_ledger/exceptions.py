"""Custom exception hierarchy for bank-ledger."""


class BankError(Exception):
    """Base exception for all bank-ledger errors."""


class EntityNotFoundError(BankError):
    """Raised when a referenced customer or account does not exist."""


class CustomerNotFoundError(EntityNotFoundError):
    """Raised when no customer has the given personal number."""


class AccountNotFoundError(EntityNotFoundError):
    """Raised when a customer owns no account with the given number."""


class DuplicateCustomerError(BankError):
    """Raised when a personal number is already registered."""


class ConfigurationError(BankError):
    """Raised when configuration is invalid or missing."""


class PersistenceError(BankError):
    """Raised when reading or writing a bank file fails."""


class SnapshotError(PersistenceError):
    """Raised when a snapshot cannot be saved, read or validated."""


class StatementError(PersistenceError):
    """Raised when an account statement cannot be written."""
