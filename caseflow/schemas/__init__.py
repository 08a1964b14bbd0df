"""Pydantic schemas for intake records and eligibility results."""

from caseflow.schemas.eligibility import EligibilityResult, IntakeFacts, RuleCondition
from caseflow.schemas.intake import (
    CaseManagement,
    ClientIntakeForm,
    Demographics,
    Household,
    HouseholdMember,
    ParticipantDetails,
)

__all__ = [
    "CaseManagement",
    "ClientIntakeForm",
    "Demographics",
    "EligibilityResult",
    "Household",
    "HouseholdMember",
    "IntakeFacts",
    "ParticipantDetails",
    "RuleCondition",
]
