"""Identification number (IČO) generator."""

from czech_identifiers.checksum import identification_number_check_digit
from czech_identifiers.generators.base import BaseGenerator
from czech_identifiers.models import IdentificationNumber
from czech_identifiers.models.identification_number import NUMBER_LIMITS


class IdentificationNumberGenerator(BaseGenerator[IdentificationNumber]):
    """Generate valid identification numbers of legal persons."""

    def generate(self) -> IdentificationNumber:
        """Generate a single identification number with a correct check digit."""
        number = self.fake.random_int(min=NUMBER_LIMITS[0], max=NUMBER_LIMITS[1])
        return IdentificationNumber(number, identification_number_check_digit(number))
