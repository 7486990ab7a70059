"""Account number model."""

from dataclasses import dataclass, field

from czech_identifiers.checksum import account_number_checksum, count_non_zero_digits
from czech_identifiers.exceptions import MissingInputError, UnknownFormatError

PREFIX_UPPER_LIMIT = 999_999
NUMBER_UPPER_LIMIT = 9_999_999_999

STANDARD_FORMATS = ("S", "s")
FULL_FORMATS = ("F", "f")
FORMATS = STANDARD_FORMATS + FULL_FORMATS


@dataclass(frozen=True)
class AccountNumber:
    """Bank account number used in Czech Republic.

    The account number consists of three parts:
    - prefix: optional, up to 6 digits
    - number: 2 to 10 digits
    - bank_code: 4 digits

    Prefix and number are separated by a dash, number and bank code by a
    slash, e.g. ``19-123457/0710``.

    Construction accepts any prefix and number; parts out of range make
    the account number invalid, they are not rejected.

    See https://www.cnb.cz/cs/platebni_styk/iban/iban_napoveda.html
    """

    prefix: int
    number: int
    bank_code: str
    input_text: str | None = field(default=None, compare=False, repr=False)

    def __post_init__(self) -> None:
        if self.bank_code is None:
            raise MissingInputError("bank_code")

    @property
    def prefix_checksum(self) -> int:
        """Weighted checksum of the prefix part."""
        return account_number_checksum(self.prefix)

    @property
    def number_checksum(self) -> int:
        """Weighted checksum of the number part."""
        return account_number_checksum(self.number)

    @property
    def is_valid(self) -> bool:
        """Check if the account number is valid.

        The account number is valid if
        - prefix has at most 6 digits and number at most 10 digits,
        - prefix weighted checksum is divisible by 11,
        - number weighted checksum is divisible by 11,
        - number has at least two non-zero digits.
        """
        if not 0 <= self.prefix <= PREFIX_UPPER_LIMIT:
            return False
        if not 0 <= self.number <= NUMBER_UPPER_LIMIT:
            return False
        return (
            self.prefix_checksum % 11 == 0
            and self.number_checksum % 11 == 0
            and count_non_zero_digits(self.number) >= 2
        )

    def format(self, fmt: str | None = None) -> str:
        """Format the account number.

        Parameters
        ----------
        fmt : str | None
            ``None``, ``"S"`` or ``"s"`` for the standard format (no prefix
            when it is zero, no leading zeros). ``"F"`` or ``"f"`` for the
            full format (6 digit prefix, 10 digit number).

        Returns
        -------
        str
            Formatted account number.

        Raises
        ------
        UnknownFormatError
            If ``fmt`` is not supported.
        """
        if fmt is None or fmt in STANDARD_FORMATS:
            prefix = f"{self.prefix}-" if self.prefix != 0 else ""
            return f"{prefix}{self.number:02d}/{self.bank_code}"
        if fmt in FULL_FORMATS:
            return f"{self.prefix:06d}-{self.number:010d}/{self.bank_code}"
        raise UnknownFormatError(fmt, "S, F")

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)

    def __str__(self) -> str:
        return self.format()
