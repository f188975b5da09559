"""Tests for custom exception hierarchy."""

from bank_ledger.exceptions import (
    AccountNotFoundError,
    BankError,
    ConfigurationError,
    CustomerNotFoundError,
    DuplicateCustomerError,
    EntityNotFoundError,
    PersistenceError,
    SnapshotError,
    StatementError,
)


class TestExceptionHierarchy:
    """Test exception inheritance chain."""

    def test_bank_error_is_exception(self) -> None:
        assert isinstance(BankError("test"), Exception)

    def test_customer_not_found_is_entity_not_found(self) -> None:
        err = CustomerNotFoundError("test")
        assert isinstance(err, EntityNotFoundError)
        assert isinstance(err, BankError)

    def test_account_not_found_is_entity_not_found(self) -> None:
        err = AccountNotFoundError("test")
        assert isinstance(err, EntityNotFoundError)
        assert isinstance(err, BankError)

    def test_duplicate_customer_is_bank_error(self) -> None:
        assert isinstance(DuplicateCustomerError("test"), BankError)

    def test_configuration_error_is_bank_error(self) -> None:
        assert isinstance(ConfigurationError("test"), BankError)

    def test_persistence_errors(self) -> None:
        assert isinstance(SnapshotError("test"), PersistenceError)
        assert isinstance(StatementError("test"), PersistenceError)
        assert isinstance(PersistenceError("test"), BankError)

    def test_exception_message(self) -> None:
        err = CustomerNotFoundError("Customer 19900101 not found")
        assert str(err) == "Customer 19900101 not found"
