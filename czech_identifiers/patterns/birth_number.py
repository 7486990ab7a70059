"""Patterns for birth numbers."""

from __future__ import annotations

import re
from typing import ClassVar

from czech_identifiers.exceptions import IdentifierFormatError, UnknownFormatError
from czech_identifiers.logging import get_logger
from czech_identifiers.models.birth_number import FORMATS, BirthNumber
from czech_identifiers.patterns.base import Pattern, digits_to_int
from czech_identifiers.result import ParseResult

logger = get_logger(__name__)


class BirthNumberPattern(Pattern[BirthNumber]):
    """Pattern of a birth number written as ``YYMMDD[/]SSS[C]``.

    - ``YY``: year in the century
    - ``MM``: month 1-12, plus 50 for women, plus another 20 (from 2004)
      when the sequence numbers of the day were exhausted
    - ``DD``: day of the month
    - ``SSS``: sequence number of the day, 000-999
    - ``C``: check digit, only for numbers assigned from 1954-01-01

    Two patterns exist: :attr:`STANDARD` with a slash between the date part
    and the sequence, and :attr:`NUMBER` written as a plain 9 or 10 digit
    number. Neither accepts the shape of the other. They are the only
    supported instances.
    """

    STANDARD: ClassVar[BirthNumberPattern]
    NUMBER: ClassVar[BirthNumberPattern]

    def __init__(self, regex: str, format_spec: str, expected_form: str) -> None:
        if format_spec not in FORMATS:
            raise UnknownFormatError(format_spec, "S, N")
        self._regex = re.compile(regex)
        self._format_spec = format_spec
        self._expected_form = expected_form

    def parse(self, text: str) -> ParseResult[BirthNumber]:
        text = self._require_text(text)

        match = self._regex.fullmatch(text)
        if match is None:
            logger.debug("Rejected birth number %r", text)
            return ParseResult.for_exception(
                IdentifierFormatError(
                    f"Unable to parse birth number '{text}', "
                    f"expecting {self._expected_form}.",
                    text=text,
                    expected_form=self._expected_form,
                )
            )

        check_digit = match.group(5)
        birth_number = BirthNumber(
            year_part=digits_to_int(match.group(1)),
            month_part=digits_to_int(match.group(2)),
            day_part=digits_to_int(match.group(3)),
            sequence=digits_to_int(match.group(4)),
            check_digit=digits_to_int(check_digit) if check_digit is not None else None,
            input_text=text,
        )
        return ParseResult.for_value(birth_number)

    def format(self, value: BirthNumber) -> str:
        return value.format(self._format_spec)

    def __repr__(self) -> str:
        return f"BirthNumberPattern({self._expected_form!r})"


BirthNumberPattern.STANDARD = BirthNumberPattern(
    r"([0-9]{2})([0-9]{2})([0-9]{2})/([0-9]{3})([0-9])?",
    "S",
    "YYMMDD/SSS[C]",
)
BirthNumberPattern.NUMBER = BirthNumberPattern(
    r"([0-9]{2})([0-9]{2})([0-9]{2})([0-9]{3})([0-9])?",
    "N",
    "YYMMDDSSS[C]",
)
