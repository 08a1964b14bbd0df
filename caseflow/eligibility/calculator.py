"""Benefits calculator: the subset of programs worth showing a case manager."""

from __future__ import annotations

from datetime import date

from caseflow.config import EligibilityLimits
from caseflow.eligibility.engine import IntakeInput, evaluate_eligibility
from caseflow.schemas.eligibility import EligibilityResult


def calculate_benefits(
    intake: IntakeInput,
    *,
    today: date | None = None,
    limits: EligibilityLimits | None = None,
) -> list[EligibilityResult]:
    """Eligible and potential-match programs, in program ID order."""
    results = evaluate_eligibility(intake, today=today, limits=limits)
    return [r for r in results if r.is_eligible or r.is_maybe]
