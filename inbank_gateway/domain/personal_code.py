"""Estonian personal identification code (isikukood) parsing and validation"""

from datetime import date
from typing import Optional, Protocol

CODE_LENGTH = 11

# Century of birth keyed by the leading gender/century digit
CENTURY_BY_DIGIT = {
    "1": 1800, "2": 1800,
    "3": 1900, "4": 1900,
    "5": 2000, "6": 2000,
    "7": 2100, "8": 2100,
}

FIRST_PASS_WEIGHTS = (1, 2, 3, 4, 5, 6, 7, 8, 9, 1)
SECOND_PASS_WEIGHTS = (3, 4, 5, 6, 7, 8, 9, 1, 2, 3)


class PersonalCodeValidator(Protocol):
    """Format and checksum predicate consumed by the decision engine"""

    def is_valid(self, code: str) -> bool:
        ...


def checksum(code: str) -> int:
    """
    Compute the expected check digit from the first 10 digits.

    Algorithm:
    - Weighted sum with weights 1..9,1, take remainder mod 11
    - If the remainder is 10, repeat with weights 3..9,1,2,3
    - If it is 10 again, the check digit is 0
    """
    digits = [int(c) for c in code[:10]]

    remainder = sum(d * w for d, w in zip(digits, FIRST_PASS_WEIGHTS)) % 11
    if remainder < 10:
        return remainder

    remainder = sum(d * w for d, w in zip(digits, SECOND_PASS_WEIGHTS)) % 11
    return remainder if remainder < 10 else 0


def encoded_birth_date(code: str) -> Optional[date]:
    """Birth date as encoded by the century digit, None if not a real date"""
    century = CENTURY_BY_DIGIT.get(code[0])
    if century is None:
        return None

    try:
        return date(century + int(code[1:3]), int(code[3:5]), int(code[5:7]))
    except ValueError:
        return None


def is_valid_personal_code(code: str) -> bool:
    """
    Check an Estonian personal code.

    Format: GYYMMDDSSSC (11 digits)
    - G: century and gender (1-8)
    - YYMMDD: date of birth
    - SSS: serial number
    - C: check digit

    Never raises; malformed input is simply invalid.
    """
    if not isinstance(code, str) or len(code) != CODE_LENGTH:
        return False

    if not (code.isascii() and code.isdigit()):
        return False

    if encoded_birth_date(code) is None:
        return False

    return checksum(code) == int(code[-1])


class EstonianPersonalCodeValidator:
    """Default PersonalCodeValidator backed by is_valid_personal_code"""

    def is_valid(self, code: str) -> bool:
        return is_valid_personal_code(code)


def segment_digits(code: str) -> int:
    """Last four digits of the code, used to pick the credit segment"""
    return int(code[-4:])
