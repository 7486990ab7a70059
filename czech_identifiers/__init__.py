"""Validation, parsing and formatting of Czech identifiers.

Supported identifiers:
- bank account numbers (``19-2000145399/0800``)
- birth numbers, rodné číslo (``675914/1488``)
- identification numbers of legal persons, IČO (``00007064``)
"""

from czech_identifiers.exceptions import (
    IdentifierFormatError,
    IdentifierRangeError,
    IdentifiersError,
    MissingInputError,
    UnknownFormatError,
)
from czech_identifiers.models import AccountNumber, BirthNumber, IdentificationNumber
from czech_identifiers.patterns import (
    AccountNumberPattern,
    BirthNumberPattern,
    IdentificationNumberPattern,
    Pattern,
)
from czech_identifiers.result import ParseResult

__version__ = "0.1.0"

__all__ = [
    "AccountNumber",
    "AccountNumberPattern",
    "BirthNumber",
    "BirthNumberPattern",
    "IdentificationNumber",
    "IdentificationNumberPattern",
    "IdentifierFormatError",
    "IdentifierRangeError",
    "IdentifiersError",
    "MissingInputError",
    "ParseResult",
    "Pattern",
    "UnknownFormatError",
    "__version__",
]
