"""Tests for the checksum kernel."""

import pytest

from czech_identifiers.checksum import (
    ACCOUNT_NUMBER_WEIGHTS,
    account_number_checksum,
    birth_number_check_digit,
    count_non_zero_digits,
    identification_number_check_digit,
    identification_number_modulo,
)


class TestAccountNumberChecksum:
    """Tests for the weighted account number checksum."""

    def test_weights_order(self) -> None:
        assert ACCOUNT_NUMBER_WEIGHTS == (1, 2, 4, 8, 5, 10, 9, 7, 3, 6)

    @pytest.mark.parametrize(
        "part, checksum",
        [
            (0, 0),
            (19, 11),
            (73, 17),
            (483, 35),
            (742418, 132),
            (575427, 152),
            (58509, 118),
            (765178, 166),
            (78, 22),
            (9999999999, 495),
        ],
    )
    def test_checksum(self, part: int, checksum: int) -> None:
        assert account_number_checksum(part) == checksum

    def test_each_position_uses_its_weight(self) -> None:
        for position, weight in enumerate(ACCOUNT_NUMBER_WEIGHTS):
            assert account_number_checksum(10**position) == weight

    def test_digits_beyond_ten_positions_are_ignored(self) -> None:
        assert account_number_checksum(10**10 + 19) == account_number_checksum(19)


class TestCountNonZeroDigits:
    """Tests for counting non-zero digits."""

    @pytest.mark.parametrize(
        "value, count",
        [
            (0, 0),
            (10, 1),
            (19, 2),
            (400000, 1),
            (9000000001, 2),
            (1234567890, 9),
            (-19, 0),
        ],
    )
    def test_count(self, value: int, count: int) -> None:
        assert count_non_zero_digits(value) == count


class TestIdentificationNumberChecksum:
    """Tests for the IČO checksum."""

    def test_modulo_uses_weights_8_to_2_from_left(self) -> None:
        # 0*8 + 0*7 + 0*6 + 0*5 + 7*4 + 0*3 + 6*2 = 40
        assert identification_number_modulo(706) == 40 % 11

    @pytest.mark.parametrize(
        "number, check_digit",
        [
            (706, 4),
            (6966396, 3),
            (694, 7),
            (9999999, 4),
        ],
    )
    def test_check_digit(self, number: int, check_digit: int) -> None:
        assert identification_number_check_digit(number) == check_digit

    def test_modulo_0_gives_check_digit_1(self) -> None:
        assert identification_number_modulo(0) == 0
        assert identification_number_check_digit(0) == 1

    def test_modulo_1_gives_check_digit_0(self) -> None:
        # 6*2 = 12
        assert identification_number_modulo(6) == 1
        assert identification_number_check_digit(6) == 0


class TestBirthNumberCheckDigit:
    """Tests for the birth number check digit."""

    @pytest.mark.parametrize(
        "year_part, month_part, day_part, sequence, check_digit",
        [
            (54, 1, 1, 1, 0),
            (65, 3, 19, 264, 1),
            (95, 59, 12, 190, 2),
            (1, 51, 19, 448, 3),
            (79, 53, 22, 994, 4),
            (98, 11, 8, 551, 5),
            (55, 52, 24, 269, 6),
            (0, 4, 26, 620, 7),
            (67, 59, 14, 148, 8),
            (54, 55, 28, 586, 9),
            (78, 1, 23, 354, 0),
        ],
    )
    def test_check_digit(
        self,
        year_part: int,
        month_part: int,
        day_part: int,
        sequence: int,
        check_digit: int,
    ) -> None:
        assert birth_number_check_digit(year_part, month_part, day_part, sequence) == check_digit

    def test_remainder_10_gives_0(self) -> None:
        # 000101001 % 11 == 10
        assert birth_number_check_digit(0, 1, 1, 1) == 0
