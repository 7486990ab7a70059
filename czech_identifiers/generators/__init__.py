"""Generators of valid identifiers."""

from czech_identifiers.generators.account_number import AccountNumberGenerator
from czech_identifiers.generators.base import BaseGenerator
from czech_identifiers.generators.birth_number import BirthNumberGenerator
from czech_identifiers.generators.identification_number import (
    IdentificationNumberGenerator,
)

__all__ = [
    "AccountNumberGenerator",
    "BaseGenerator",
    "BirthNumberGenerator",
    "IdentificationNumberGenerator",
]
