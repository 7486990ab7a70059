"""Pytest configuration and fixtures."""

import pytest

from czech_identifiers.models import AccountNumber, BirthNumber, IdentificationNumber


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def valid_account_number() -> AccountNumber:
    """Valid account number with a prefix (19-2000145399/0800)."""
    return AccountNumber(19, 2000145399, "0800")


@pytest.fixture
def woman_birth_number() -> BirthNumber:
    """Birth number 675914/1488 of a woman born 1967-09-14."""
    return BirthNumber(67, 59, 14, 148, 8)


@pytest.fixture
def man_birth_number_before_1954() -> BirthNumber:
    """Birth number 350105/321 of a man born 1935-01-05."""
    return BirthNumber(35, 1, 5, 321, None)


@pytest.fixture
def valid_identification_number() -> IdentificationNumber:
    """Valid identification number 00007064."""
    return IdentificationNumber(706, 4)
