"""Identification number (IČO) model."""

from dataclasses import dataclass, field

from czech_identifiers.checksum import identification_number_check_digit
from czech_identifiers.exceptions import IdentifierRangeError, UnknownFormatError

NUMBER_LIMITS = (0, 9_999_999)
CHECK_DIGIT_LIMITS = (0, 9)

FORMATS = ("S", "s")


@dataclass(frozen=True)
class IdentificationNumber:
    """Identification number of a legal person (IČO).

    A company or a self-employed trader. The number has 8 digits, leading
    zeros included: 7 digits of the number followed by a check digit, e.g.
    ``00007064`` is the number 706 with check digit 4.

    See https://phpfashion.com/jak-overit-platne-ic-a-rodne-cislo
    """

    number: int
    check_digit: int
    input_text: str | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        lower, upper = NUMBER_LIMITS
        if self.number < lower or self.number > upper:
            raise IdentifierRangeError("number", self.number, lower, upper)
        lower, upper = CHECK_DIGIT_LIMITS
        if self.check_digit < lower or self.check_digit > upper:
            raise IdentifierRangeError("check_digit", self.check_digit, lower, upper)

    @property
    def expected_check_digit(self) -> int:
        """Check digit required by the checksum algorithm."""
        return identification_number_check_digit(self.number)

    @property
    def is_valid(self) -> bool:
        return self.check_digit == self.expected_check_digit

    def format(self, fmt: str | None = None) -> str:
        """Format as 8 digits; ``None``, ``"S"`` and ``"s"`` are supported."""
        if fmt is None or fmt in FORMATS:
            return f"{self.number:07d}{self.check_digit}"
        raise UnknownFormatError(fmt, "S")

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    def __str__(self) -> str:
        return self.format()
