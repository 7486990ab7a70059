"""Account number generator."""

from czech_identifiers.checksum import account_number_checksum, count_non_zero_digits
from czech_identifiers.generators.base import BaseGenerator
from czech_identifiers.models import AccountNumber


class AccountNumberGenerator(BaseGenerator[AccountNumber]):
    """Generate valid Czech bank account numbers.

    Most accounts (~80%) have no prefix, as is common for current
    accounts of individuals.
    """

    BANK_CODES = {
        "0100": "Komerční banka",
        "0300": "ČSOB",
        "0600": "MONETA Money Bank",
        "0710": "Česká národní banka",
        "0800": "Česká spořitelna",
        "2010": "Fio banka",
        "2700": "UniCredit Bank",
        "3030": "Air Bank",
        "5500": "Raiffeisenbank",
        "6210": "mBank",
    }

    PREFIX_PROBABILITY = 20

    def generate(self, bank_code: str | None = None) -> AccountNumber:
        """Generate a single account number.

        Parameters
        ----------
        bank_code : str | None
            Bank code of the account, random known bank when ``None``.

        Returns
        -------
        AccountNumber
            Generated valid account number.
        """
        if bank_code is None:
            bank_code = self.fake.random_element(list(self.BANK_CODES))

        prefix = 0
        if self.fake.boolean(chance_of_getting_true=self.PREFIX_PROBABILITY):
            prefix = self._generate_part(max_base=99_999)

        number = self._generate_part(max_base=999_999_999)
        while count_non_zero_digits(number) < 2:
            number = self._generate_part(max_base=999_999_999)

        return AccountNumber(prefix, number, bank_code)

    def _generate_part(self, max_base: int) -> int:
        """Generate a part whose weighted checksum is divisible by 11.

        The rightmost digit has weight 1, so it is solved from the checksum
        of the other digits. Bases that would need a digit 10 are skipped.
        """
        while True:
            base = self.fake.random_int(min=1, max=max_base)
            check = -account_number_checksum(base * 10) % 11
            if check < 10:
                return base * 10 + check
