"""Birth number generator."""

from datetime import date

from czech_identifiers.checksum import birth_number_check_digit
from czech_identifiers.exceptions import IdentifierRangeError
from czech_identifiers.generators.base import BaseGenerator
from czech_identifiers.models import BirthNumber
from czech_identifiers.models.birth_number import (
    EXHAUST_MONTH_SHIFT,
    EXHAUSTION_START_YEAR,
    WOMAN_MONTH_SHIFT,
)

FIRST_YEAR = 1854
LAST_YEAR = 2053
CHECK_DIGIT_START_YEAR = 1954


class BirthNumberGenerator(BaseGenerator[BirthNumber]):
    """Generate valid birth numbers.

    Dates before 1954 produce 9 digit numbers without a check digit.
    """

    MAXIMUM_AGE = 100

    def generate(
        self,
        date_of_birth: date | None = None,
        woman: bool | None = None,
        exhausted: bool = False,
    ) -> BirthNumber:
        """Generate a single birth number.

        Parameters
        ----------
        date_of_birth : date | None
            Date of birth, random date within the last 100 years if ``None``.
        woman : bool | None
            Whether the number belongs to a woman, random if ``None``.
        exhausted : bool
            Use the month shift for exhausted sequences (dates from 2004).

        Returns
        -------
        BirthNumber
            Generated valid birth number.

        Raises
        ------
        IdentifierRangeError
            If the year is outside 1854-2053, or before 2004 when ``exhausted``.
        """
        if date_of_birth is None:
            date_of_birth = self.fake.date_of_birth(
                minimum_age=0, maximum_age=self.MAXIMUM_AGE
            )
        year = date_of_birth.year
        if year < FIRST_YEAR or year > LAST_YEAR:
            raise IdentifierRangeError("year", year, FIRST_YEAR, LAST_YEAR)
        if exhausted and year < EXHAUSTION_START_YEAR:
            raise IdentifierRangeError("year", year, EXHAUSTION_START_YEAR, LAST_YEAR)
        if woman is None:
            woman = self.fake.boolean()

        month_part = date_of_birth.month
        if woman:
            month_part += WOMAN_MONTH_SHIFT
        if exhausted:
            month_part += EXHAUST_MONTH_SHIFT

        year_part = year % 100
        sequence = self.fake.random_int(min=0, max=999)
        check_digit = None
        if year >= CHECK_DIGIT_START_YEAR:
            check_digit = birth_number_check_digit(
                year_part, month_part, date_of_birth.day, sequence
            )

        return BirthNumber(
            year_part=year_part,
            month_part=month_part,
            day_part=date_of_birth.day,
            sequence=sequence,
            check_digit=check_digit,
        )
