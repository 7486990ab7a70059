"""Serialization of identifiers into JSON-compatible dictionaries."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from typing import Any

from czech_identifiers.models import AccountNumber, BirthNumber, IdentificationNumber

DERIVED_FIELDS: dict[type, tuple[str, ...]] = {
    AccountNumber: ("prefix_checksum", "number_checksum", "is_valid"),
    BirthNumber: (
        "year",
        "month",
        "belongs_to_woman",
        "date_of_birth",
        "expected_check_digit",
        "is_valid",
    ),
    IdentificationNumber: ("expected_check_digit", "is_valid"),
}


def to_dict(identifier: Any) -> dict:
    """Convert an identifier to a dictionary.

    The dictionary contains the type name, the stored fields, the parsed
    text (``input``, only for parsed identifiers), the derived properties
    and the identifier in its standard form.

    Parameters
    ----------
    identifier : Any
        An identifier dataclass instance.

    Returns
    -------
    dict
        Serialized dictionary.
    """
    if not is_dataclass(identifier):
        raise TypeError(f"Expected an identifier, got {type(identifier).__name__}.")

    result: dict[str, Any] = {"type": type(identifier).__name__}
    for f in fields(identifier):
        if f.name == "input_text":
            continue
        result[f.name] = serialize_value(getattr(identifier, f.name))

    if identifier.input_text is not None:
        result["input"] = identifier.input_text

    for name in DERIVED_FIELDS.get(type(identifier), ()):
        result[name] = serialize_value(getattr(identifier, name))

    result["formatted"] = str(identifier)
    return result


def failure_to_dict(text: str, exception: Exception) -> dict:
    """Convert a parsing failure to a dictionary."""
    return {
        "input": text,
        "error": type(exception).__name__,
        "message": str(exception),
    }


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
