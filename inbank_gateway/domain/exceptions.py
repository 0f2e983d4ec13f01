"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidInputError(DomainException):
    """Request failed input validation; reported back as a rejected decision"""

    pass


class InvalidPersonalCodeError(InvalidInputError):
    """Personal code failed the format or checksum check"""

    pass


class InvalidLoanAmountError(InvalidInputError):
    """Requested amount is outside the allowed range"""

    pass


class InvalidLoanPeriodError(InvalidInputError):
    """Requested period is outside the allowed range"""

    pass


class AgeEligibilityError(DomainException):
    """Applicant is too young now or too old at loan maturity"""

    pass


class NoValidLoanError(DomainException):
    """Personal code falls in the debt segment, no loan can be offered"""

    pass
