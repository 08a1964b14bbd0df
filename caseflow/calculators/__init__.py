"""Intake calculators for income parsing and age calculation."""

from caseflow.calculators.age import calculate_age, parse_birth_date
from caseflow.calculators.income import parse_monthly_income

__all__ = [
    "calculate_age",
    "parse_birth_date",
    "parse_monthly_income",
]
