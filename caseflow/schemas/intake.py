"""Pydantic schemas for the client intake record.

Every field is optional and every validator is lenient: a value of the wrong
type is treated as unset instead of being rejected, so a half-filled form can
be evaluated at any point during data entry. Wire names are camelCase (as the
intake form sends them); snake_case attribute names are accepted too.
"""

from __future__ import annotations

from collections.abc import Mapping
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


def _text_or_none(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _flag_or_none(value: Any) -> bool | None:
    return value if isinstance(value, bool) else None


class IntakeSection(BaseModel):
    """Base for all intake sections. camelCase aliases, unknown keys ignored."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def coerce_section(cls, data: Any) -> Any:
        """Anything that is not a mapping becomes an empty section."""
        if isinstance(data, (cls, dict)):
            return data
        if isinstance(data, Mapping):
            return dict(data)
        return {}


class ParticipantDetails(IntakeSection):
    """Identity and contact fields. Only date_of_birth is read by the rules."""

    first_name: str | None = None
    middle_name: str | None = None
    last_name: str | None = None
    date_of_birth: str | None = None
    email: str | None = None
    primary_phone: str | None = None
    secondary_phone: str | None = None
    street_address: str | None = None
    city: str | None = None
    state: str | None = None
    county: str | None = None
    zip_code: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def text_fields(cls, v: Any) -> str | None:
        return _text_or_none(v)


class Demographics(IntakeSection):
    """Income, date of birth and status flags."""

    monthly_income: str | None = None  # free text, e.g. "$2,500.00"
    date_of_birth: str | None = None   # ISO date
    veteran_status: bool | None = None
    disability_status: bool | None = None
    employment_status: str | None = None
    income_source: str | None = None

    @field_validator("monthly_income", mode="before")
    @classmethod
    def income_as_text(cls, v: Any) -> str | None:
        """Numbers are kept as fixed-point text; other types are dropped."""
        if isinstance(v, (int, float, Decimal)) and not isinstance(v, bool):
            # No exponent: the income parser strips "e", "+" and "-"
            return format(Decimal(str(v)), "f")
        return _text_or_none(v)

    @field_validator("date_of_birth", "employment_status", "income_source", mode="before")
    @classmethod
    def text_fields(cls, v: Any) -> str | None:
        return _text_or_none(v)

    @field_validator("veteran_status", "disability_status", mode="before")
    @classmethod
    def strict_flags(cls, v: Any) -> bool | None:
        """Only real booleans count; "yes" or 1 are treated as unset."""
        return _flag_or_none(v)


class CaseManagement(IntakeSection):
    """Housing, health and existing benefit enrollment."""

    housing_status: str | None = None
    health_status: str | None = None
    non_cash_benefits: list[str] = Field(default_factory=list)

    @field_validator("housing_status", "health_status", mode="before")
    @classmethod
    def text_fields(cls, v: Any) -> str | None:
        return _text_or_none(v)

    @field_validator("non_cash_benefits", mode="before")
    @classmethod
    def benefit_keys(cls, v: Any) -> list[str]:
        """Keep only the string entries of a list."""
        if not isinstance(v, (list, tuple)):
            return []
        return [item for item in v if isinstance(item, str)]


class HouseholdMember(IntakeSection):
    """One household member besides the applicant."""

    name: str | None = None
    relationship: str | None = None
    date_of_birth: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def text_fields(cls, v: Any) -> str | None:
        return _text_or_none(v)


class Household(IntakeSection):
    """Household composition, in entry order."""

    members: list[HouseholdMember] = Field(default_factory=list)

    @field_validator("members", mode="before")
    @classmethod
    def member_list(cls, v: Any) -> list[Any]:
        if not isinstance(v, (list, tuple)):
            return []
        return list(v)


class ClientIntakeForm(IntakeSection):
    """Full intake record as captured by the intake form.

    Built from form state or a persisted client record by the caller.
    """

    participant_details: ParticipantDetails = Field(default_factory=ParticipantDetails)
    demographics: Demographics = Field(default_factory=Demographics)
    case_management: CaseManagement = Field(default_factory=CaseManagement)
    household: Household = Field(default_factory=Household)

    @property
    def applicant_date_of_birth(self) -> str | None:
        """Demographics date of birth, falling back to the participant details one."""
        return self.demographics.date_of_birth or self.participant_details.date_of_birth
