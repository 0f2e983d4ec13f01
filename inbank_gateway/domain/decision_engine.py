"""Loan decision engine - core business logic for loan offers"""

import logging
from datetime import date
from typing import Callable, Optional

from inbank_gateway.config import Settings, settings as default_settings
from inbank_gateway.domain.exceptions import (
    AgeEligibilityError,
    InvalidInputError,
    InvalidLoanAmountError,
    InvalidLoanPeriodError,
    InvalidPersonalCodeError,
    NoValidLoanError,
)
from inbank_gateway.domain.models import Decision
from inbank_gateway.domain.personal_code import (
    EstonianPersonalCodeValidator,
    PersonalCodeValidator,
    segment_digits,
)
from inbank_gateway.utils.date_utils import add_months, add_years

logger = logging.getLogger(__name__)


def verify_inputs(
    personal_code: str,
    loan_amount: int,
    loan_period: int,
    validator: PersonalCodeValidator,
    rules: Settings,
) -> None:
    """
    Check the request against business rules, in order.

    Raises:
        InvalidPersonalCodeError: code fails format/checksum validation
        InvalidLoanAmountError: amount outside [minimum, maximum]
        InvalidLoanPeriodError: period outside [minimum, maximum]
    """
    if not validator.is_valid(personal_code):
        raise InvalidPersonalCodeError("Invalid personal ID code!")

    if not rules.minimum_loan_amount <= loan_amount <= rules.maximum_loan_amount:
        raise InvalidLoanAmountError("Invalid loan amount!")

    if not rules.minimum_loan_period <= loan_period <= rules.maximum_loan_period:
        raise InvalidLoanPeriodError("Invalid loan period!")


def birth_date_from_code(personal_code: str, today: date) -> date:
    """
    Derive the birth date from the YYMMDD part of the code.

    The century digit is ignored: a two-digit year greater than today's
    two-digit year is read as 19YY, anything else as 20YY.
    """
    year = int(personal_code[1:3])
    month = int(personal_code[3:5])
    day = int(personal_code[5:7])

    if year > today.year % 100:
        year += 1900
    else:
        year += 2000

    return date(year, month, day)


def verify_age(personal_code: str, loan_period: int, today: date, rules: Settings) -> None:
    """
    Reject applicants under the minimum age today, or who would outlive the
    expected lifeline before the loan matures.

    Raises:
        AgeEligibilityError: age is outside the allowed range
    """
    birth_date = birth_date_from_code(personal_code, today)

    too_young = today < add_years(birth_date, rules.minimum_age)
    too_old = add_months(today, loan_period) > add_years(birth_date, rules.expected_lifeline)

    if too_young or too_old:
        raise AgeEligibilityError("Age constraints do not allow this loan to be taken.")


def credit_modifier_for(personal_code: str, rules: Settings) -> int:
    """
    Map the last four digits of the code to a credit modifier.

    Segments (with default thresholds):
    - 0000-2499: debt, modifier 0
    - 2500-4999: segment 1
    - 5000-7499: segment 2
    - 7500-9999: segment 3
    """
    segment = segment_digits(personal_code)

    if segment < rules.segment_1_threshold:
        return 0
    elif segment < rules.segment_2_threshold:
        return rules.segment_1_credit_modifier
    elif segment < rules.segment_3_threshold:
        return rules.segment_2_credit_modifier
    else:
        return rules.segment_3_credit_modifier


def credit_score(credit_modifier: int, loan_amount: int, loan_period: int) -> float:
    """Credit score = (modifier / amount) * period / 10"""
    return (credit_modifier / loan_amount) * loan_period / 10


def find_best_offer(
    credit_modifier: int,
    loan_amount: int,
    loan_period: int,
    rules: Settings,
) -> tuple[int, int]:
    """
    Search for the largest amount, then the shortest period, that reaches the
    approval threshold.

    Amount is lowered in steps while it is above the minimum, then the period
    is extended up to the maximum. The result is returned as-is even when the
    threshold is never reached; the amount can also end up below the minimum
    when the requested amount is not a multiple of the step.

    Returns: (amount, period)
    """
    threshold = rules.minimum_credit_score_to_approve

    while (
        credit_score(credit_modifier, loan_amount, loan_period) < threshold
        and loan_amount > rules.minimum_loan_amount
    ):
        loan_amount -= rules.loan_amount_step

    while (
        credit_score(credit_modifier, loan_amount, loan_period) < threshold
        and loan_period < rules.maximum_loan_period
    ):
        loan_period += 1

    return loan_amount, loan_period


class DecisionEngine:
    """
    Calculates the approved loan amount and period for a customer.

    Holds only immutable collaborators, so one instance can serve any number
    of calls.
    """

    def __init__(
        self,
        rules: Optional[Settings] = None,
        validator: Optional[PersonalCodeValidator] = None,
        clock: Callable[[], date] = date.today,
    ):
        self.rules = rules or default_settings
        self.validator = validator or EstonianPersonalCodeValidator()
        self.clock = clock

    def decide(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        """
        Main entry point: validate the request and find the best offer.

        Invalid input is reported as a rejected Decision.

        Raises:
            AgeEligibilityError: applicant's age is out of range
            NoValidLoanError: the code belongs to the debt segment
        """
        try:
            verify_inputs(personal_code, loan_amount, loan_period, self.validator, self.rules)
        except InvalidInputError as e:
            logger.info("Loan request rejected", extra={"reason": str(e)})
            return Decision.rejected(str(e))

        verify_age(personal_code, loan_period, self.clock(), self.rules)

        credit_modifier = credit_modifier_for(personal_code, self.rules)
        if credit_modifier == 0:
            raise NoValidLoanError("No valid loan found!")

        amount, period = find_best_offer(credit_modifier, loan_amount, loan_period, self.rules)
        logger.debug(
            "Loan offer found",
            extra={
                "credit_modifier": credit_modifier,
                "requested_amount": loan_amount,
                "requested_period": loan_period,
                "approved_amount": amount,
                "approved_period": period,
            },
        )

        return Decision.approved(amount, period)
