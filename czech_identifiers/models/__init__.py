"""Value types of Czech identifiers."""

from czech_identifiers.models.account_number import AccountNumber
from czech_identifiers.models.birth_number import BirthNumber
from czech_identifiers.models.identification_number import IdentificationNumber

__all__ = ["AccountNumber", "BirthNumber", "IdentificationNumber"]
