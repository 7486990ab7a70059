"""Pattern for identification numbers (IČO)."""

from __future__ import annotations

import re
from typing import ClassVar

from czech_identifiers.exceptions import IdentifierFormatError
from czech_identifiers.logging import get_logger
from czech_identifiers.models.identification_number import IdentificationNumber
from czech_identifiers.patterns.base import Pattern, digits_to_int
from czech_identifiers.result import ParseResult

logger = get_logger(__name__)

STANDARD_FORM = re.compile(r"([0-9]{7})([0-9])")


class IdentificationNumberPattern(Pattern[IdentificationNumber]):
    """Standard pattern of an 8 digit IČO (identifikační číslo osoby).

    - ``00007064``: number 706 with check digit 4
    - ``69663963``: number 6966396 with check digit 3
    """

    STANDARD: ClassVar[IdentificationNumberPattern]

    def parse(self, text: str) -> ParseResult[IdentificationNumber]:
        text = self._require_text(text)

        match = STANDARD_FORM.fullmatch(text)
        if match is None:
            logger.debug("Rejected identification number %r", text)
            return ParseResult.for_exception(
                IdentifierFormatError(
                    f"Unable to parse identification number '{text}'. "
                    "Expecting a text of 8 digits.",
                    text=text,
                    expected_form="DDDDDDDC",
                )
            )

        identification_number = IdentificationNumber(
            digits_to_int(match.group(1)),
            digits_to_int(match.group(2)),
            input_text=text,
        )
        return ParseResult.for_value(identification_number)

    def format(self, value: IdentificationNumber) -> str:
        return value.format("S")

    def __repr__(self) -> str:
        return "IdentificationNumberPattern()"


IdentificationNumberPattern.STANDARD = IdentificationNumberPattern()
