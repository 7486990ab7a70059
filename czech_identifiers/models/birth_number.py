"""Birth number model."""

import calendar
from dataclasses import dataclass, field
from datetime import date

from czech_identifiers.checksum import birth_number_check_digit
from czech_identifiers.exceptions import IdentifierRangeError, UnknownFormatError

DATE_PART_LIMITS = (0, 99)
SEQUENCE_LIMITS = (0, 999)
CHECK_DIGIT_LIMITS = (0, 9)

STANDARD_FORMATS = ("S", "s")
NUMBER_FORMATS = ("N", "n")
FORMATS = STANDARD_FORMATS + NUMBER_FORMATS

# Law no. 133/2000 § 13 (5): women have 50 added to the month part.
WOMAN_MONTH_SHIFT = 50

# Same law: once the sequence numbers of a day are exhausted, 20 may be
# added to the month part. Applies to numbers assigned from 2004.
EXHAUST_MONTH_SHIFT = 20
EXHAUSTION_START_YEAR = 2004

# Numbers with a check digit were assigned from 1954-01-01.
CENTURY_THRESHOLD = 54


def _check_range(name: str, value: int, limits: tuple[int, int]) -> None:
    lower, upper = limits
    if value < lower or value > upper:
        raise IdentifierRangeError(name, value, lower, upper)


@dataclass(frozen=True)
class BirthNumber:
    """Birth number (rodné číslo) given to every person born in Czech Republic.

    A birth number consists of
    - date of birth (``YYMMDD``, the month part encodes sex and exhaustion),
    - sequence number of the day (``SSS``),
    - check digit (``C``), only for numbers assigned from 1954.

    Examples:
    - ``675914/1488``: a woman born 1967-09-14, sequence 148, check digit 8
    - ``350105/321``: a man born 1935-01-05, sequence 321

    The date part is decoded permissively; a birth number with an
    impossible date can be constructed, it is just not valid.
    """

    year_part: int
    month_part: int
    day_part: int
    sequence: int
    check_digit: int | None = None
    input_text: str | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        _check_range("year_part", self.year_part, DATE_PART_LIMITS)
        _check_range("month_part", self.month_part, DATE_PART_LIMITS)
        _check_range("day_part", self.day_part, DATE_PART_LIMITS)
        _check_range("sequence", self.sequence, SEQUENCE_LIMITS)
        if self.check_digit is not None:
            _check_range("check_digit", self.check_digit, CHECK_DIGIT_LIMITS)

    @property
    def has_check_digit(self) -> bool:
        """Whether the number uses the 10 digit scheme (assigned from 1954)."""
        return self.check_digit is not None

    @property
    def belongs_to_woman(self) -> bool:
        """Whether the birth number belongs to a woman."""
        return self.month_part > WOMAN_MONTH_SHIFT

    @property
    def year(self) -> int:
        """Year of birth in the range 1854-2053."""
        if self.has_check_digit:
            century = 2000 if self.year_part < CENTURY_THRESHOLD else 1900
        else:
            century = 1900 if self.year_part < CENTURY_THRESHOLD else 1800
        return century + self.year_part

    @property
    def month(self) -> int:
        """Month of birth, outside 1-12 if the month part is invalid."""
        month = self.month_part
        if month > WOMAN_MONTH_SHIFT:
            month -= WOMAN_MONTH_SHIFT
        if self.year >= EXHAUSTION_START_YEAR and month > EXHAUST_MONTH_SHIFT:
            month -= EXHAUST_MONTH_SHIFT
        return month

    @property
    def date_of_birth(self) -> date | None:
        """Date of birth, ``None`` if the date part is not a valid date."""
        month = self.month
        if month < 1 or month > 12 or self.day_part < 1:
            return None
        year = self.year
        if self.day_part > calendar.monthrange(year, month)[1]:
            return None
        return date(year, month, self.day_part)

    @property
    def expected_check_digit(self) -> int | None:
        """Expected check digit, ``None`` for numbers assigned before 1954."""
        if not self.has_check_digit:
            return None
        return birth_number_check_digit(
            self.year_part, self.month_part, self.day_part, self.sequence
        )

    @property
    def is_valid(self) -> bool:
        """Valid if the date is valid and, after 1954, the check digit is correct."""
        if self.date_of_birth is None:
            return False
        if self.has_check_digit:
            return self.check_digit == self.expected_check_digit
        return True

    def format(self, fmt: str | None = None) -> str:
        """Format the birth number.

        Parameters
        ----------
        fmt : str | None
            ``None``, ``"S"`` or ``"s"`` for the standard format with a slash
            between the date part and the sequence. ``"N"`` or ``"n"`` for
            a 9 or 10 digit number.

        Raises
        ------
        UnknownFormatError
            If ``fmt`` is not supported.
        """
        check_digit = "" if self.check_digit is None else str(self.check_digit)
        date_part = f"{self.year_part:02d}{self.month_part:02d}{self.day_part:02d}"
        if fmt is None or fmt in STANDARD_FORMATS:
            return f"{date_part}/{self.sequence:03d}{check_digit}"
        if fmt in NUMBER_FORMATS:
            return f"{date_part}{self.sequence:03d}{check_digit}"
        raise UnknownFormatError(fmt, "S, N")

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    def __str__(self) -> str:
        return self.format()
