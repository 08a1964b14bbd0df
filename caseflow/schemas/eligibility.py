"""Pydantic schemas for the eligibility engine.

Pure data classes, no I/O. IntakeFacts is the normalized input every rule
reads; EligibilityResult is the per-program output.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from caseflow.models.enums import HousingCategory


# ---------------------------------------------------------------------------
# Derived facts
# ---------------------------------------------------------------------------


class IntakeFacts(BaseModel):
    """Normalized values derived once from an intake record.

    All defaults are the conservative "nothing known" values.
    """

    model_config = ConfigDict(frozen=True)

    income: Decimal = Decimal("0")           # monthly, dollars
    age: int = 0
    housing_category: HousingCategory = HousingCategory.UNKNOWN
    is_disabled: bool = False
    is_veteran: bool = False
    health_status: str | None = None         # raw, compared case-sensitively
    benefits: frozenset[str] = frozenset()   # lower-cased benefit keys
    household_size: int = 1                  # members + applicant
    member_ages: tuple[int | None, ...] = ()  # None: date of birth unknown

    @property
    def is_unhoused(self) -> bool:
        return self.housing_category == HousingCategory.UNHOUSED

    @property
    def is_housed(self) -> bool:
        return self.housing_category == HousingCategory.HOUSED

    @property
    def member_count(self) -> int:
        return self.household_size - 1


# ---------------------------------------------------------------------------
# Rule output
# ---------------------------------------------------------------------------


class RuleCondition(BaseModel):
    """A single criterion evaluated by a program rule."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    description: str
    met: bool
    is_hard: bool = True       # hard conditions gate eligibility
    value: str | None = None   # the fact the criterion was checked against


class EligibilityResult(BaseModel):
    """Determination for one program.

    Dump with ``by_alias=True`` for the camelCase shape the intake UI reads.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    program_id: int
    program_name: str
    is_eligible: bool
    is_maybe: bool
    met_conditions: list[str] = Field(default_factory=list)
    missing_conditions: list[str] = Field(default_factory=list)
    eligibility_reason: str = ""
    next_steps: list[str] = Field(default_factory=list)
    conditions: list[RuleCondition] = Field(default_factory=list)

    @property
    def is_surfaced(self) -> bool:
        """Shown to the case manager: eligible or a potential match."""
        return self.is_eligible or self.is_maybe
