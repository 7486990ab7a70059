"""Pattern for account numbers."""

from __future__ import annotations

import re
from typing import ClassVar

from czech_identifiers.exceptions import IdentifierFormatError, UnknownFormatError
from czech_identifiers.logging import get_logger
from czech_identifiers.models.account_number import FORMATS, AccountNumber
from czech_identifiers.patterns.base import Pattern, digits_to_int
from czech_identifiers.result import ParseResult

logger = get_logger(__name__)

# CNB decree 169/2011 only requires prefix and number to be "clearly
# separated"; a dash is what everyone uses. A bare leading dash means an
# empty prefix.
STANDARD_FORM = re.compile(r"(([0-9]{1,6})-|-?)([0-9]{2,10})/([0-9]{4})")

EXPECTED_FORM = "prefix-number/bank_code"


class AccountNumberPattern(Pattern[AccountNumber]):
    """Pattern of an account number.

    Parsing accepts ``[prefix-]number/bank_code`` with 1-6 prefix digits,
    2-10 number digits and a 4 digit bank code, leading zeros included.
    Formatting uses the format selector of the pattern, see
    :meth:`AccountNumber.format`.

    Use the :attr:`STANDARD` and :attr:`FULL` instances; they are the only
    supported ones.
    """

    STANDARD: ClassVar[AccountNumberPattern]
    FULL: ClassVar[AccountNumberPattern]

    def __init__(self, format_spec: str) -> None:
        if format_spec not in FORMATS:
            raise UnknownFormatError(format_spec, "S, F")
        self._format_spec = format_spec

    def parse(self, text: str) -> ParseResult[AccountNumber]:
        text = self._require_text(text)

        match = STANDARD_FORM.fullmatch(text)
        if match is None:
            logger.debug("Rejected account number %r", text)
            return ParseResult.for_exception(
                IdentifierFormatError(
                    f"The account number '{text}' doesn't have expected format, "
                    f"it should be {EXPECTED_FORM}.",
                    text=text,
                    expected_form=EXPECTED_FORM,
                )
            )

        prefix_digits = match.group(2)
        prefix = digits_to_int(prefix_digits) if prefix_digits is not None else 0
        number = digits_to_int(match.group(3))
        bank_code = match.group(4)

        return ParseResult.for_value(
            AccountNumber(prefix, number, bank_code, input_text=text)
        )

    def format(self, value: AccountNumber) -> str:
        return value.format(self._format_spec)

    def __repr__(self) -> str:
        return f"AccountNumberPattern({self._format_spec!r})"


AccountNumberPattern.STANDARD = AccountNumberPattern("S")
AccountNumberPattern.FULL = AccountNumberPattern("F")
