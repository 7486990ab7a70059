"""Text patterns for parsing and formatting identifiers."""

from czech_identifiers.patterns.account_number import AccountNumberPattern
from czech_identifiers.patterns.base import Pattern, digits_to_int
from czech_identifiers.patterns.birth_number import BirthNumberPattern
from czech_identifiers.patterns.identification_number import IdentificationNumberPattern

__all__ = [
    "AccountNumberPattern",
    "BirthNumberPattern",
    "IdentificationNumberPattern",
    "Pattern",
    "digits_to_int",
]
