"""Eligibility engine. Evaluates all 22 programs against an intake record.

Pure Python orchestrator. No DB access, no network calls, never raises on
incomplete input. The caller sources the intake record and presents results.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import Any

from pydantic import ValidationError

from caseflow.config import EligibilityLimits, settings
from caseflow.eligibility.facts import derive_facts
from caseflow.eligibility.programs import ProgramId
from caseflow.eligibility.rules import RULE_CHECKS
from caseflow.schemas.eligibility import EligibilityResult
from caseflow.schemas.intake import ClientIntakeForm

logger = logging.getLogger(__name__)

IntakeInput = ClientIntakeForm | Mapping[str, Any] | None


def coerce_intake(intake: IntakeInput) -> ClientIntakeForm:
    """Turn whatever the caller has into a ClientIntakeForm.

    Field validators are lenient, so this only falls back to an empty record
    if validation fails in a way they do not cover.
    """
    if isinstance(intake, ClientIntakeForm):
        return intake
    try:
        return ClientIntakeForm.model_validate(intake)
    except ValidationError as e:
        logger.warning("Intake record could not be read, evaluating as empty: %d error(s)", e.error_count())
        return ClientIntakeForm()


def evaluate_eligibility(
    intake: IntakeInput,
    *,
    today: date | None = None,
    limits: EligibilityLimits | None = None,
) -> list[EligibilityResult]:
    """Evaluate every program against an intake record.

    Args:
        intake: ClientIntakeForm, a raw camelCase mapping, or None.
        today: Reference date for age calculation (defaults to today).
        limits: Threshold overrides (defaults to settings.eligibility).

    Returns:
        One EligibilityResult per program, ordered by program ID 1-22.
    """
    limits = limits or settings.eligibility
    facts = derive_facts(coerce_intake(intake), today)

    results = [RULE_CHECKS[program](facts, limits) for program in ProgramId]

    logger.debug(
        "Eligibility evaluated: income=%s age=%d housing=%s disabled=%s veteran=%s household=%d eligible=%s",
        facts.income,
        facts.age,
        facts.housing_category.value,
        facts.is_disabled,
        facts.is_veteran,
        facts.household_size,
        eligible_program_ids(results),
    )
    return results


def eligible_program_ids(results: list[EligibilityResult]) -> list[int]:
    """IDs of the programs the client is fully eligible for."""
    return [r.program_id for r in results if r.is_eligible]
