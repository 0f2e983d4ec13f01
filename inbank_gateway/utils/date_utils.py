"""Date manipulation utilities"""

from datetime import date
from dateutil.relativedelta import relativedelta


def add_months(from_date: date, months: int) -> date:
    """Add calendar months, clamping to the last day of a shorter month"""
    return from_date + relativedelta(months=months)


def add_years(from_date: date, years: int) -> date:
    """Add calendar years (Feb 29 lands on Feb 28 in non-leap years)"""
    return from_date + relativedelta(years=years)
