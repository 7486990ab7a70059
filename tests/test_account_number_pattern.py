"""Tests for AccountNumberPattern."""

import io

import pytest

from czech_identifiers.exceptions import (
    IdentifierFormatError,
    MissingInputError,
    UnknownFormatError,
)
from czech_identifiers.models import AccountNumber
from czech_identifiers.patterns import AccountNumberPattern


@pytest.fixture
def pattern() -> AccountNumberPattern:
    return AccountNumberPattern.STANDARD


class TestAccountNumberPatternParse:
    """Tests for parsing account numbers."""

    def test_doesnt_accept_none(self, pattern: AccountNumberPattern) -> None:
        with pytest.raises(MissingInputError):
            pattern.parse(None)

    @pytest.mark.parametrize(
        "text, expected_prefix",
        [
            ("-12/0100", 0),
            ("00123-12/0100", 123),
            ("123456-12/0100", 123456),
            ("12/0100", 0),
        ],
    )
    def test_prefix_with_0_to_6_digits_is_accepted(
        self, pattern: AccountNumberPattern, text: str, expected_prefix: int
    ) -> None:
        assert pattern.parse(text).value.prefix == expected_prefix

    @pytest.mark.parametrize("text", ["aa-12/0100", "0000123-12/0100", "abc-12/0100"])
    def test_prefix_other_than_0_to_6_digits_is_not_accepted(
        self, pattern: AccountNumberPattern, text: str
    ) -> None:
        with pytest.raises(IdentifierFormatError):
            pattern.parse(text).get_value_or_raise()

    @pytest.mark.parametrize(
        "text, expected_number",
        [
            ("12/0100", 12),
            ("00123/0100", 123),
            ("1234567890/0100", 1234567890),
            ("9999999999/0100", 9999999999),
        ],
    )
    def test_number_with_2_to_10_digits_is_accepted(
        self, pattern: AccountNumberPattern, text: str, expected_number: int
    ) -> None:
        assert pattern.parse(text).value.number == expected_number

    @pytest.mark.parametrize("text", ["1/0100", "0/0100", "12345678901/0100", "abd/0100"])
    def test_number_other_than_2_to_10_digits_is_not_accepted(
        self, pattern: AccountNumberPattern, text: str
    ) -> None:
        with pytest.raises(IdentifierFormatError):
            pattern.parse(text).get_value_or_raise()

    @pytest.mark.parametrize(
        "text, expected_number, expected_bank_code",
        [
            ("0012/0300", 12, "0300"),
            ("1234567890/6200", 1234567890, "6200"),
            ("0000/6200", 0, "6200"),
        ],
    )
    def test_accepts_account_without_prefix(
        self,
        pattern: AccountNumberPattern,
        text: str,
        expected_number: int,
        expected_bank_code: str,
    ) -> None:
        account = pattern.parse(text).value

        assert account.prefix == 0
        assert account.number == expected_number
        assert account.bank_code == expected_bank_code

    @pytest.mark.parametrize(
        "text, expected_prefix, expected_number, expected_bank_code",
        [
            ("17-0012/0300", 17, 12, "0300"),
            ("000-1234567890/6200", 0, 1234567890, "6200"),
        ],
    )
    def test_accepts_account_with_prefix(
        self,
        pattern: AccountNumberPattern,
        text: str,
        expected_prefix: int,
        expected_number: int,
        expected_bank_code: str,
    ) -> None:
        account = pattern.parse(text).value

        assert account.prefix == expected_prefix
        assert account.number == expected_number
        assert account.bank_code == expected_bank_code

    @pytest.mark.parametrize("text", ["12/123", "12/12345", "12/abcd", "12/A100"])
    def test_bank_code_must_have_4_digits(
        self, pattern: AccountNumberPattern, text: str
    ) -> None:
        with pytest.raises(IdentifierFormatError):
            pattern.parse(text).get_value_or_raise()

    @pytest.mark.parametrize("text", ["12/0100\n", " 12/0100", "12/0100 ", "", "12-/0100"])
    def test_whole_text_must_match(self, pattern: AccountNumberPattern, text: str) -> None:
        assert pattern.parse(text).success is False

    def test_parsed_value_keeps_input_text(self, pattern: AccountNumberPattern) -> None:
        account = pattern.parse("0019-0000000019/0100").value

        assert account.input_text == "0019-0000000019/0100"
        assert account == AccountNumber(19, 19, "0100")

    def test_failure_describes_expected_form(self, pattern: AccountNumberPattern) -> None:
        result = pattern.parse("12/abcd")

        assert result.success is False
        error = result.exception
        assert isinstance(error, IdentifierFormatError)
        assert error.text == "12/abcd"
        assert error.expected_form == "prefix-number/bank_code"
        assert "12/abcd" in str(error)

    def test_checksum_invalid_text_is_parsed(self, pattern: AccountNumberPattern) -> None:
        result = pattern.parse("73-37/0100")

        assert result.success is True
        assert result.value.is_valid is False


class TestAccountNumberPatternFormat:
    """Tests for formatting account numbers."""

    def test_standard_pattern_uses_standard_format(self, pattern: AccountNumberPattern) -> None:
        account = AccountNumber(0, 0, "0100")

        assert pattern.format(account) == account.format("S")

    def test_full_pattern_uses_full_format(self) -> None:
        account = AccountNumber(15, 12, "0100")

        assert AccountNumberPattern.FULL.format(account) == "000015-0000000012/0100"

    def test_full_pattern_parses_same_grammar(self) -> None:
        account = AccountNumberPattern.FULL.parse("15-12/0100").value

        assert account == AccountNumber(15, 12, "0100")

    def test_invalid_value_is_formatted(self, pattern: AccountNumberPattern) -> None:
        assert pattern.format(AccountNumber(73, 37, "0100")) == "73-37/0100"

    def test_append_format_checks_builder_is_not_none(
        self, pattern: AccountNumberPattern
    ) -> None:
        with pytest.raises(MissingInputError):
            pattern.append_format(AccountNumber(0, 0, "0100"), None)

    def test_append_format_appends_standard_format(self, pattern: AccountNumberPattern) -> None:
        builder = io.StringIO()
        builder.write("Hello, my account is ")

        result = pattern.append_format(AccountNumber(0, 0, "0100"), builder)

        assert result is builder
        assert builder.getvalue() == "Hello, my account is 00/0100"


class TestAccountNumberRoundTrip:
    """Tests for formatting and parsing back."""

    @pytest.mark.parametrize(
        "account",
        [
            AccountNumber(0, 19, "0100"),
            AccountNumber(19, 2000145399, "0800"),
            AccountNumber(999999, 9999999999, "0100"),
            AccountNumber(0, 0, "0100"),
        ],
    )
    @pytest.mark.parametrize("fmt", ["S", "F"])
    def test_round_trip(self, account: AccountNumber, fmt: str) -> None:
        parsed = AccountNumberPattern.STANDARD.parse(account.format(fmt)).value

        assert parsed == account


class TestAccountNumberPatternConstruction:
    """Tests for creating account number patterns."""

    @pytest.mark.parametrize("format_spec", ["X", "N", ""])
    def test_unsupported_format_raises(self, format_spec: str) -> None:
        with pytest.raises(UnknownFormatError) as exc_info:
            AccountNumberPattern(format_spec)

        assert exc_info.value.format_spec == format_spec

    def test_supported_format_formats_like_constant(self) -> None:
        account = AccountNumber(15, 12, "0100")
        pattern = AccountNumberPattern("f")

        assert pattern.format(account) == AccountNumberPattern.FULL.format(account)
