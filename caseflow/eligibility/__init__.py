"""Rule-based screening for 22 public-assistance programs."""

from caseflow.eligibility.calculator import calculate_benefits
from caseflow.eligibility.engine import eligible_program_ids, evaluate_eligibility
from caseflow.eligibility.programs import PROGRAM_NAMES, ProgramId
from caseflow.schemas.eligibility import EligibilityResult, IntakeFacts, RuleCondition
from caseflow.schemas.intake import ClientIntakeForm

__all__ = [
    "evaluate_eligibility",
    "calculate_benefits",
    "eligible_program_ids",
    "ProgramId",
    "PROGRAM_NAMES",
    "ClientIntakeForm",
    "IntakeFacts",
    "EligibilityResult",
    "RuleCondition",
]
