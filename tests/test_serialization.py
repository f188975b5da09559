"""Tests for snapshot value conversion."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum

import pytest

from bank_ledger.sinks.serialization import (
    dataclass_to_dict,
    parse_bool,
    parse_datetime,
    parse_decimal,
    parse_int,
    serialize_value,
)


class _SampleEnum(str, Enum):
    VALUE_A = "VALUE_A"
    VALUE_B = "VALUE_B"


@dataclass
class _SampleData:
    name: str
    amount: Decimal
    created_at: datetime


@dataclass
class _SampleParent:
    label: str
    children: list[_SampleData] = field(default_factory=list)


class TestSerializeValue:
    """Tests for serialize_value function."""

    def test_decimal_keeps_exact_digits(self) -> None:
        assert serialize_value(Decimal("398.00")) == "398.00"
        assert serialize_value(Decimal("-102.000")) == "-102.000"

    def test_datetime(self) -> None:
        dt = datetime(2024, 6, 15, 10, 30, 0)
        assert serialize_value(dt) == "2024-06-15T10:30:00"

    def test_date(self) -> None:
        assert serialize_value(date(2024, 6, 15)) == "2024-06-15"

    def test_nested_dict(self) -> None:
        data = {"amount": Decimal("50.00"), "info": {"date": datetime(2024, 1, 1)}}
        result = serialize_value(data)
        assert result["amount"] == "50.00"
        assert result["info"]["date"] == "2024-01-01T00:00:00"

    def test_list(self) -> None:
        assert serialize_value([Decimal("10.00"), Decimal("20.00")]) == ["10.00", "20.00"]

    def test_passthrough(self) -> None:
        assert serialize_value("hello") == "hello"
        assert serialize_value(42) == 42
        assert serialize_value(True) is True
        assert serialize_value(None) is None

    def test_enum(self) -> None:
        assert serialize_value(_SampleEnum.VALUE_A) == "VALUE_A"


class TestDataclassToDict:
    """Tests for dataclass_to_dict function."""

    def test_converts_all_fields(self) -> None:
        obj = _SampleData(name="test", amount=Decimal("100.00"), created_at=datetime(2024, 1, 1))
        result = dataclass_to_dict(obj)
        assert set(result.keys()) == {"name", "amount", "created_at"}
        assert isinstance(result["amount"], str)
        assert isinstance(result["created_at"], str)

    def test_nested_dataclasses(self) -> None:
        """Nested dataclass lists are serialized recursively."""
        child = _SampleData(name="c", amount=Decimal("1.50"), created_at=datetime(2024, 2, 1))
        result = dataclass_to_dict(_SampleParent(label="p", children=[child]))
        assert result["children"] == [
            {"name": "c", "amount": "1.50", "created_at": "2024-02-01T00:00:00"}
        ]

    def test_rejects_non_dataclass(self) -> None:
        with pytest.raises(TypeError):
            dataclass_to_dict({"name": "x"})

    def test_ledger_transaction(self) -> None:
        from bank_ledger.models import Transaction, TransactionKind

        tx = Transaction(
            kind=TransactionKind.WITHDRAW,
            amount=Decimal("-102.00"),
            balance_after=Decimal("398.00"),
            timestamp=datetime(2024, 9, 12, 10, 53, 44),
        )
        assert dataclass_to_dict(tx) == {
            "kind": "Withdraw",
            "amount": "-102.00",
            "balance_after": "398.00",
            "timestamp": "2024-09-12T10:53:44",
        }


class TestParseDecimal:
    """Tests for parse_decimal function."""

    def test_string(self) -> None:
        assert parse_decimal("398.00") == Decimal("398.00")
        assert str(parse_decimal("-102.000")) == "-102.000"

    def test_int(self) -> None:
        assert parse_decimal(1000) == Decimal("1000")

    @pytest.mark.parametrize("value", [12.5, True, None, ["1"]])
    def test_rejects_other_types(self, value: object) -> None:
        with pytest.raises(TypeError):
            parse_decimal(value)

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ArithmeticError):
            parse_decimal("lots")

    @pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
    def test_rejects_non_finite(self, value: str) -> None:
        with pytest.raises(ValueError):
            parse_decimal(value)


class TestParseDatetime:
    """Tests for parse_datetime function."""

    def test_iso(self) -> None:
        assert parse_datetime("2024-06-15T10:30:00") == datetime(2024, 6, 15, 10, 30, 0)

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TypeError):
            parse_datetime(1718447400)

    def test_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_datetime("yesterday")


class TestParseScalars:
    """Tests for parse_int and parse_bool."""

    def test_int(self) -> None:
        assert parse_int(1001) == 1001

    @pytest.mark.parametrize("value", [1001.0, 1001.9, "1001", True, None])
    def test_int_rejects_other_types(self, value: object) -> None:
        with pytest.raises(TypeError):
            parse_int(value)

    def test_bool(self) -> None:
        assert parse_bool(True) is True
        assert parse_bool(False) is False

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_bool_rejects_other_types(self, value: object) -> None:
        with pytest.raises(TypeError):
            parse_bool(value)
