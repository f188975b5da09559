"""Value conversion between ledger objects and JSON documents.

Encoding: ``Decimal`` becomes its exact string (``"398.00"``), enums their
value, ``datetime`` ISO 8601 text. Decoding reverses that for the two
types JSON cannot carry natively.
"""

from dataclasses import asdict, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a dataclass instance to a JSON-compatible dict.

    Nested dataclasses (an account's transactions, for instance) are
    converted recursively.
    """
    if not is_dataclass(obj) or isinstance(obj, type):
        raise TypeError(f"Expected a dataclass instance, got {type(obj).__name__}")
    return {key: serialize_value(value) for key, value in asdict(obj).items()}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v) for v in value]
    return value


def parse_decimal(value: Any) -> Decimal:
    """Read an amount written by :func:`serialize_value`.

    Integers are accepted as well; floats are rejected because they would
    not round-trip exactly.

    Raises
    ------
    TypeError
        For anything but ``str`` or ``int``.
    decimal.InvalidOperation
        For a string that is not a number.
    """
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise TypeError(f"Expected a decimal string, got {value!r}")
    result = Decimal(value)
    if not result.is_finite():
        raise ValueError(f"Amount must be finite, got {value!r}")
    return result


def parse_datetime(value: Any) -> datetime:
    """Read a timestamp written by :func:`serialize_value`."""
    if not isinstance(value, str):
        raise TypeError(f"Expected an ISO 8601 string, got {value!r}")
    return datetime.fromisoformat(value)


def parse_int(value: Any) -> int:
    """Read an integer field; floats, strings and booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected an integer, got {value!r}")
    return value


def parse_bool(value: Any) -> bool:
    """Read a boolean field; ``"false"``, ``0`` and the like are rejected."""
    if not isinstance(value, bool):
        raise TypeError(f"Expected a boolean, got {value!r}")
    return value
