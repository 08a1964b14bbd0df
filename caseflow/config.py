"""Application configuration via pydantic-settings.

Values are loaded from environment variables (.env file).
Program thresholds live in their own group so a policy change is a config
change, not a code change.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class EligibilityLimits(BaseSettings):
    """Income limits and age cut-offs used by the program rules.

    Income figures are monthly, in dollars. Defaults are the current
    placeholder business values, not statutory limits.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="ELIGIBILITY_", extra="ignore")

    # Income limits (strictly below unless noted)
    calfresh_income_limit: Decimal = Field(default=Decimal("2500"))
    calworks_income_limit: Decimal = Field(default=Decimal("3000"))
    capi_income_limit: Decimal = Field(default=Decimal("2000"))
    care_income_limit: Decimal = Field(default=Decimal("3000"))
    fera_income_floor: Decimal = Field(default=Decimal("3000"), description="Exclusive lower bound")
    fera_income_ceiling: Decimal = Field(default=Decimal("4000"), description="Exclusive upper bound")
    ga_income_limit: Decimal = Field(default=Decimal("150"), description="Inclusive upper bound")
    ga_maybe_income_limit: Decimal = Field(default=Decimal("1500"))
    hud_vash_income_limit: Decimal = Field(default=Decimal("2500"))
    lifeline_income_limit: Decimal = Field(default=Decimal("2500"))
    lifeline_maybe_income_limit: Decimal = Field(default=Decimal("3000"))
    liheap_income_limit: Decimal = Field(default=Decimal("2800"))
    liheap_maybe_income_limit: Decimal = Field(default=Decimal("4500"))
    section8_income_limit: Decimal = Field(default=Decimal("3500"))
    section8_maybe_income_limit: Decimal = Field(default=Decimal("2500"))
    ssi_income_limit: Decimal = Field(default=Decimal("1000"))
    ssi_maybe_income_limit: Decimal = Field(default=Decimal("1200"))
    va_pension_income_limit: Decimal = Field(default=Decimal("2000"))
    wic_income_limit: Decimal = Field(default=Decimal("3000"))
    wic_maybe_income_limit: Decimal = Field(default=Decimal("3000"))

    # Age cut-offs (inclusive)
    adult_age: int = Field(default=18)
    ga_max_age: int = Field(default=64)
    senior_age: int = Field(default=65, description="CAPI, IHSS, VA Pension")
    calfresh_senior_age: int = Field(default=60)
    near_senior_age: int = Field(default=60, description="Maybe threshold for senior programs")
    id_senior_age: int = Field(default=62, description="No-fee ID; reduced-fee ID applies below it")
    reduced_fee_id_maybe_age: int = Field(default=55)
    wic_child_age: int = Field(default=5, description="Household member must be younger than this")

    # Household
    fera_min_household_size: int = Field(default=3)

    @field_validator("*")
    @classmethod
    def validate_non_negative(cls, v: Decimal | int) -> Decimal | int:
        """Reject negative limits."""
        if v < 0:
            msg = f"Eligibility limits must be non-negative, got {v}"
            raise ValueError(msg)
        return v


class Settings(BaseSettings):
    """Root settings.

    Usage:
        settings = Settings()
        settings.log_level
        settings.eligibility.calfresh_income_limit
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = Field(default="INFO")

    eligibility: EligibilityLimits = Field(default_factory=EligibilityLimits)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log level is valid."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid:
            msg = f"Invalid log level: {v}. Must be one of {valid}"
            raise ValueError(msg)
        return upper


# Module-level singleton; import this wherever settings are needed.
settings = Settings()
