"""Derive normalized facts from an intake record.

Runs once per evaluation, before any rule, so the rules never see missing
data: every absent or malformed field is already resolved to its default.
"""

from __future__ import annotations

from datetime import date

from caseflow.calculators.age import calculate_age, parse_birth_date
from caseflow.calculators.income import parse_monthly_income
from caseflow.models.enums import HousingCategory, HousingStatus
from caseflow.schemas.eligibility import IntakeFacts
from caseflow.schemas.intake import ClientIntakeForm

_HOUSING_CATEGORIES: dict[str, HousingCategory] = {
    HousingStatus.UNSHELTERED.value: HousingCategory.UNHOUSED,
    HousingStatus.EMERGENCY_SHELTER.value: HousingCategory.UNHOUSED,
    HousingStatus.TRANSITIONAL_HOUSING.value: HousingCategory.UNHOUSED,
    HousingStatus.AT_RISK.value: HousingCategory.AT_RISK,
    HousingStatus.HOUSED.value: HousingCategory.HOUSED,
}


def categorize_housing(housing_status: str | None) -> HousingCategory:
    """Map a recorded housing status onto the category the rules use."""
    if not housing_status:
        return HousingCategory.UNKNOWN
    return _HOUSING_CATEGORIES.get(housing_status, HousingCategory.UNKNOWN)


def member_age(date_of_birth: str | None, today: date) -> int | None:
    """Age of a household member, or None when the date of birth is unknown."""
    if parse_birth_date(date_of_birth) is None:
        return None
    return calculate_age(date_of_birth, today)


def derive_facts(intake: ClientIntakeForm, today: date | None = None) -> IntakeFacts:
    """Build IntakeFacts from a (possibly empty) intake record."""
    today = today or date.today()
    demographics = intake.demographics
    case = intake.case_management
    members = intake.household.members

    return IntakeFacts(
        income=parse_monthly_income(demographics.monthly_income),
        age=calculate_age(intake.applicant_date_of_birth, today),
        housing_category=categorize_housing(case.housing_status),
        is_disabled=demographics.disability_status is True,
        is_veteran=demographics.veteran_status is True,
        health_status=case.health_status,
        benefits=frozenset(b.lower() for b in case.non_cash_benefits),
        household_size=len(members) + 1,
        member_ages=tuple(member_age(m.date_of_birth, today) for m in members),
    )
