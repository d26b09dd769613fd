"""
siunits.io.codec
================

Record and JSON form of a quantity: ``{"Value": 100.0, "Unit": "CENTIMETER"}``.

The unit travels as its enum member name, not its symbol, so the record stays
ASCII and does not depend on symbol spelling. Reading a record goes through the
ordinary ``cls(value, unit)`` constructor.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Type, TypeVar

from siunits.core.quantity import Quantity
from siunits.errors import QuantityFormatError

Q = TypeVar("Q", bound=Quantity)

VALUE_KEY = "Value"
UNIT_KEY = "Unit"


def to_record(q: Quantity) -> dict[str, Any]:
    return {VALUE_KEY: q.value, UNIT_KEY: q.unit.name}


def from_record(cls: Type[Q], record: Mapping[str, Any]) -> Q:
    """Rebuild a ``cls`` quantity from a record produced by `to_record`.

    Raises
    ------
    QuantityFormatError
        A key is missing or the value is not a number.
    UnknownUnitSymbolError
        The unit name is not a member of ``cls.Units``.
    """
    try:
        raw_value = record[VALUE_KEY]
        unit_name = record[UNIT_KEY]
    except (KeyError, TypeError) as exc:
        raise QuantityFormatError(f"{cls.__name__} record needs {VALUE_KEY!r} and {UNIT_KEY!r}: {record!r}") from exc
    try:
        value = float(raw_value)
    except (TypeError, ValueError):
        raise QuantityFormatError(f"{cls.__name__} record value is not a number: {raw_value!r}") from None
    return cls(value, cls.descriptor.unit_from_name(str(unit_name)))


def dumps(q: Quantity) -> str:
    """``'{"Value":100.0,"Unit":"CENTIMETER"}'``"""
    return json.dumps(to_record(q), separators=(",", ":"))


def loads(cls: Type[Q], text: str) -> Q:
    try:
        record = json.loads(text)
    except json.JSONDecodeError as exc:
        raise QuantityFormatError(f"Invalid {cls.__name__} JSON: {exc}") from exc
    return from_record(cls, record)


__all__ = ["to_record", "from_record", "dumps", "loads", "VALUE_KEY", "UNIT_KEY"]
