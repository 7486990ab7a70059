"""Weighted modulo-11 checksums used by Czech identifiers.

Account numbers (CNB decree 169/2011) weight the digits of the prefix and
of the number from the rightmost one::

    position  9  8  7  6  5  4  3  2  1  0
    weight    6  3  7  9 10  5  8  4  2  1

and a part is correct when its weighted sum is divisible by 11.

Identification numbers (IČO) weight the first seven digits 8..2 from the
left and derive the eighth digit from the sum modulo 11. Birth numbers
(rodné číslo) after 1954 append the remainder of the nine leading digits
divided by 11.
"""

ACCOUNT_NUMBER_WEIGHTS = (1, 2, 4, 8, 5, 10, 9, 7, 3, 6)

IDENTIFICATION_NUMBER_DIGITS = 7


def account_number_checksum(part: int) -> int:
    """Calculate the weighted checksum of an account number part.

    Parameters
    ----------
    part : int
        Prefix or number part of the account.

    Returns
    -------
    int
        Weighted sum of the ten rightmost digits. Digits beyond the tenth
        position don't contribute.
    """
    checksum = 0
    for weight in ACCOUNT_NUMBER_WEIGHTS:
        checksum += (part % 10) * weight
        part //= 10
    return checksum


def count_non_zero_digits(value: int) -> int:
    """Count decimal digits of ``value`` that are not zero."""
    count = 0
    while value > 0:
        if value % 10 != 0:
            count += 1
        value //= 10
    return count


def identification_number_modulo(number: int) -> int:
    """Weighted sum of the seven IČO digits modulo 11.

    ``(d1 * 8 + d2 * 7 + d3 * 6 + d4 * 5 + d5 * 4 + d6 * 3 + d7 * 2) mod 11``
    where ``d1`` is the leftmost digit, leading zeros included.
    """
    weighted_sum = 0
    weight = 2
    for _ in range(IDENTIFICATION_NUMBER_DIGITS):
        weighted_sum += (number % 10) * weight
        weight += 1
        number //= 10
    return weighted_sum % 11


def identification_number_check_digit(number: int) -> int:
    """Expected IČO check digit for the seven leading digits in ``number``."""
    modulo = identification_number_modulo(number)
    if modulo == 0:
        return 1
    if modulo == 1:
        return 0
    return 11 - modulo


def birth_number_check_digit(
    year_part: int, month_part: int, day_part: int, sequence: int
) -> int:
    """Expected check digit of a birth number with a check digit (after 1954)."""
    number = ((year_part * 100 + month_part) * 100 + day_part) * 1000 + sequence
    modulo = number % 11
    return 0 if modulo == 10 else modulo
