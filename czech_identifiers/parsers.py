"""Legacy parsers, superseded by the patterns.

Unlike patterns, parsers raise on malformed text instead of returning a
:class:`ParseResult`. New code should use the patterns directly.
"""

import warnings

from czech_identifiers.models import AccountNumber, BirthNumber, IdentificationNumber
from czech_identifiers.patterns import (
    AccountNumberPattern,
    BirthNumberPattern,
    IdentificationNumberPattern,
)


def _warn_deprecated(parser: str, replacement: str) -> None:
    warnings.warn(
        f"{parser} is deprecated, use {replacement} instead.",
        DeprecationWarning,
        stacklevel=3,
    )


class AccountNumberParser:
    """Parse an account number in the standard form."""

    def __init__(self) -> None:
        _warn_deprecated("AccountNumberParser", "AccountNumberPattern.STANDARD")

    def parse(self, text: str) -> AccountNumber:
        """Parse an account number.

        Raises
        ------
        MissingInputError
            If ``text`` is ``None``.
        IdentifierFormatError
            If ``text`` is not an account number.
        """
        return AccountNumberPattern.STANDARD.parse(text).get_value_or_raise()


class BirthNumberParser:
    """Parse a birth number written as a 9 or 10 digit number."""

    def __init__(self) -> None:
        _warn_deprecated("BirthNumberParser", "BirthNumberPattern.NUMBER")

    def parse(self, text: str) -> BirthNumber:
        return BirthNumberPattern.NUMBER.parse(text).get_value_or_raise()


class IdentificationNumberParser:
    """Parse an 8 digit identification number (IČO) in a ``DDDDDDDC`` format."""

    def __init__(self) -> None:
        _warn_deprecated("IdentificationNumberParser", "IdentificationNumberPattern.STANDARD")

    def parse(self, text: str) -> IdentificationNumber:
        return IdentificationNumberPattern.STANDARD.parse(text).get_value_or_raise()
