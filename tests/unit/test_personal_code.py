"""Unit tests for personal code validation"""

import pytest
from datetime import date
from inbank_gateway.domain.personal_code import (
    EstonianPersonalCodeValidator,
    checksum,
    encoded_birth_date,
    is_valid_personal_code,
    segment_digits,
)


@pytest.mark.parametrize(
    "code",
    ["37605030299", "50307172740", "50307184567", "38411266610", "35006069515", "51001012743"],
)
def test_is_valid_personal_code_accepts_valid_codes(code: str):
    assert is_valid_personal_code(code) is True
    assert EstonianPersonalCodeValidator().is_valid(code) is True


@pytest.mark.parametrize(
    "code",
    [
        "37605030298",  # wrong check digit
        "3760503029",  # too short
        "376050302990",  # too long
        "97605030299",  # no such century digit
        "37613030299",  # month 13
        "3760503029a",
        "",
        "３７６０５０３０２９９",  # full-width digits
    ],
)
def test_is_valid_personal_code_rejects_malformed_codes(code: str):
    assert is_valid_personal_code(code) is False


def test_is_valid_personal_code_rejects_non_strings():
    """Never raises on unexpected input"""
    assert is_valid_personal_code(None) is False
    assert is_valid_personal_code(37605030299) is False


def test_checksum_first_pass():
    """Weights 1..9,1 give remainder 9 for 3760503029"""
    assert checksum("37605030299") == 9


def test_checksum_second_pass():
    """First pass remainder is 10, second pass gives 0"""
    assert checksum("38411266610") == 0


def test_encoded_birth_date_uses_century_digit():
    assert encoded_birth_date("37605030299") == date(1976, 5, 3)
    assert encoded_birth_date("50307172740") == date(2003, 7, 17)
    assert encoded_birth_date("17605030000") == date(1876, 5, 3)


def test_encoded_birth_date_leap_day():
    """Feb 29 exists in 2000 but not in 1900"""
    assert encoded_birth_date("50002291234") == date(2000, 2, 29)
    assert encoded_birth_date("30002291234") is None


def test_segment_digits():
    assert segment_digits("50307172740") == 2740
    assert segment_digits("37605030299") == 299
