"""Per-program eligibility rule functions.

Each function takes only the facts it depends on (plus the configured limits)
and returns an EligibilityResult with full condition tracking. Pure Python,
deterministic, no I/O.

Hard conditions gate eligibility; soft conditions are noted when met and
otherwise dropped. A missing condition is therefore always an unmet hard one.
"""

from __future__ import annotations

from collections.abc import Callable
from decimal import Decimal

from caseflow.config import EligibilityLimits
from caseflow.eligibility.programs import (
    ADSA_CORE_BENEFITS,
    CARE_QUALIFYING_BENEFITS,
    PROGRAM_NAMES,
    WIC_QUALIFYING_BENEFITS,
    ProgramId,
)
from caseflow.models.enums import HealthStatus, HousingCategory
from caseflow.schemas.eligibility import EligibilityResult, IntakeFacts, RuleCondition


def _money(amount: Decimal) -> str:
    return f"${amount:,}"


def _hard_met(conditions: list[RuleCondition]) -> bool:
    return all(c.met for c in conditions if c.is_hard)


def _any_of(
    name: str,
    options: list[tuple[str, bool]],
    missing: str,
    value: str | None = None,
) -> list[RuleCondition]:
    """Hard "one of these" requirement.

    One met condition per satisfied alternative, or a single unmet condition
    described by ``missing`` when none holds.
    """
    met = [
        RuleCondition(name=name, description=description, met=True, value=value)
        for description, ok in options
        if ok
    ]
    return met or [RuleCondition(name=name, description=missing, met=False, value=value)]


def _result(
    program: ProgramId,
    conditions: list[RuleCondition],
    *,
    is_maybe: bool,
    reason: str,
    next_steps: list[str],
) -> EligibilityResult:
    return EligibilityResult(
        program_id=int(program),
        program_name=PROGRAM_NAMES[program],
        is_eligible=_hard_met(conditions),
        is_maybe=is_maybe,
        met_conditions=[c.description for c in conditions if c.met],
        missing_conditions=[c.description for c in conditions if c.is_hard and not c.met],
        eligibility_reason=reason,
        next_steps=next_steps,
        conditions=conditions,
    )


# ── 1. UPLIFT ──────────────────────────────────────────────────────────────


def check_uplift(housing: HousingCategory) -> EligibilityResult:
    """Transit assistance for people who are unhoused or at risk."""
    unhoused = housing == HousingCategory.UNHOUSED
    at_risk = housing == HousingCategory.AT_RISK
    conditions = _any_of(
        "housing",
        [("Experiencing homelessness", unhoused), ("At risk of homelessness", at_risk)],
        missing="Housing status (unhoused or at risk)",
        value=housing.value,
    )

    if unhoused:
        reason = (
            "You may be eligible for UPLIFT because you're experiencing homelessness. "
            "This program provides transportation assistance to help you access essential services."
        )
        steps = ["Contact your local UPLIFT coordinator", "Bring proof of homelessness status"]
    elif at_risk:
        reason = (
            "You may be eligible for UPLIFT because you're at risk of homelessness. "
            "This program provides transportation assistance to help you maintain housing stability."
        )
        steps = ["Contact your local UPLIFT coordinator", "Provide documentation of housing situation"]
    else:
        reason = "UPLIFT requires that you are experiencing homelessness or at risk of homelessness."
        steps = ["Update your housing status in the case management section"]

    return _result(ProgramId.UPLIFT, conditions, is_maybe=False, reason=reason, next_steps=steps)


# ── 2. ADSA ────────────────────────────────────────────────────────────────


def check_adsa(is_disabled: bool, health_status: str | None, benefits: frozenset[str]) -> EligibilityResult:
    """Assistance Dog Special Allowance."""
    # Case-sensitive: health status comes from a fixed-value dropdown
    blind_or_deaf = health_status in (HealthStatus.BLIND.value, HealthStatus.DEAF.value)
    has_disability = is_disabled or blind_or_deaf
    core = benefits & ADSA_CORE_BENEFITS

    conditions = _any_of(
        "disability",
        [("Has qualifying disability", is_disabled), ("Blind or deaf", blind_or_deaf)],
        missing="Qualifying disability status",
        value=health_status,
    )
    conditions.append(RuleCondition(
        name="core_benefits",
        description="Receives SSI, SSDI, IHSS, or CAPI",
        met=bool(core),
        value=", ".join(sorted(core)) or None,
    ))

    if _hard_met(conditions):
        reason = (
            "You may be eligible for ADSA because you have a qualifying disability and already receive "
            "core benefits. ADSA helps cover the costs of a service dog."
        )
        steps = [
            "Contact ADSA program coordinator",
            "Provide disability verification",
            "Show proof of service dog or application",
        ]
    elif has_disability:
        reason = "You have a qualifying disability; ADSA also requires SSI, SSDI, IHSS, or CAPI."
        steps = ["Apply for core disability benefits if not already receiving them"]
    else:
        reason = (
            "ADSA requires a qualifying disability (blindness, deafness, or other disability) "
            "and receipt of core benefits like SSI, SSDI, IHSS, or CAPI."
        )
        steps = [
            "Complete disability assessment with your doctor",
            "Apply for SSI, SSDI, or other core benefits if eligible",
        ]

    return _result(
        ProgramId.ADSA, conditions,
        is_maybe=has_disability or bool(core), reason=reason, next_steps=steps,
    )


# ── 3. CalFresh ───────────────────────────────────────────────────────────


def check_calfresh(income: Decimal, age: int, is_disabled: bool, limits: EligibilityLimits) -> EligibilityResult:
    """Monthly grocery benefits. Seniors and disabled applicants are noted, not gated."""
    limit = limits.calfresh_income_limit
    conditions = [
        RuleCondition(
            name="income_limit",
            description=f"Income below {_money(limit)}/month",
            met=income < limit,
            value=_money(income),
        ),
        RuleCondition(
            name="senior",
            description=f"Age {limits.calfresh_senior_age} or older",
            met=age >= limits.calfresh_senior_age,
            is_hard=False,
            value=str(age),
        ),
        RuleCondition(
            name="disability",
            description="Has qualifying disability",
            met=is_disabled,
            is_hard=False,
        ),
    ]

    if _hard_met(conditions):
        reason = (
            f"You may be eligible for CalFresh because your monthly income of {_money(income)} "
            "is below the program limit. CalFresh provides monthly benefits for groceries."
        )
        steps = ["Apply online at GetCalFresh.org", "Bring income verification and ID"]
    else:
        reason = (
            f"CalFresh income limit is {_money(limit)}/month for most households. "
            "Your current income may exceed this limit."
        )
        steps = [
            "Report any recent changes in income",
            "Consider applying if income changes or household size increases",
        ]

    return _result(ProgramId.CALFRESH, conditions, is_maybe=False, reason=reason, next_steps=steps)


# ── 4. CalWORKs ───────────────────────────────────────────────────────────


def check_calworks(member_count: int, income: Decimal, limits: EligibilityLimits) -> EligibilityResult:
    """Cash aid and job training for families."""
    limit = limits.calworks_income_limit
    has_children = member_count > 0
    conditions = [
        RuleCondition(
            name="children",
            description="Children in household",
            met=has_children,
            value=str(member_count),
        ),
        RuleCondition(
            name="income_limit",
            description=f"Income below {_money(limit)}/month",
            met=income < limit,
            value=_money(income),
        ),
    ]

    if _hard_met(conditions):
        reason = (
            "You may be eligible for CalWORKs because you have children in your household and "
            "your income appears to be within program limits."
        )
        steps = [
            "Apply at your county welfare office",
            "Bring proof of income and children's birth certificates",
        ]
    elif has_children:
        reason = "CalWORKs serves families with children; your income may exceed the program limit."
        steps = ["Report any changes in household income"]
    else:
        reason = "CalWORKs is a family assistance program that requires children in the household."
        steps = ["Add household members if you have children"]

    return _result(ProgramId.CALWORKS, conditions, is_maybe=has_children, reason=reason, next_steps=steps)


# ── 5. CAPI ───────────────────────────────────────────────────────────────


def check_capi(income: Decimal, age: int, is_disabled: bool, limits: EligibilityLimits) -> EligibilityResult:
    """Cash Assistance Program for Immigrants."""
    limit = limits.capi_income_limit
    is_senior = age >= limits.senior_age
    conditions = _any_of(
        "age_or_disability",
        [(f"Age {limits.senior_age} or older", is_senior), ("Has qualifying disability", is_disabled)],
        missing=f"Age {limits.senior_age}+ or qualifying disability",
        value=str(age),
    )
    conditions.append(RuleCondition(
        name="income_limit",
        description=f"Income below {_money(limit)}/month",
        met=income < limit,
        value=_money(income),
    ))

    if _hard_met(conditions):
        reason = (
            "You may be eligible for CAPI, which provides cash assistance for immigrants "
            "who are not eligible for federal SSI."
        )
        steps = [
            "Apply at your county welfare office",
            "Bring immigration documents and income verification",
        ]
    else:
        reason = "CAPI is designed for immigrants who are 65 or older, blind, or disabled, with limited income."
        steps = ["Complete age or disability verification", "Report any changes in income"]

    return _result(
        ProgramId.CAPI, conditions,
        is_maybe=is_senior or is_disabled, reason=reason, next_steps=steps,
    )


# ── 6. CARE ───────────────────────────────────────────────────────────────


def check_care(income: Decimal, benefits: frozenset[str], limits: EligibilityLimits) -> EligibilityResult:
    """California Alternate Rates for Energy."""
    limit = limits.care_income_limit
    qualifying = benefits & CARE_QUALIFYING_BENEFITS
    conditions = _any_of(
        "income_or_benefits",
        [
            (f"Income below {_money(limit)}/month", income < limit),
            ("Receives LIHEAP, WIC, or CalFresh", bool(qualifying)),
        ],
        missing=f"Income below {_money(limit)}/month or qualifying benefits",
        value=_money(income),
    )

    if _hard_met(conditions):
        reason = (
            "You may be eligible for CARE, which provides discounted electric rates "
            "for qualifying low-income households."
        )
        steps = [
            "Contact your electric utility company",
            "Provide income verification or benefit documentation",
        ]
    else:
        reason = (
            f"CARE requires income below {_money(limit)}/month or participation in programs "
            "like LIHEAP, WIC, or CalFresh."
        )
        steps = ["Apply for qualifying benefits if eligible"]

    return _result(ProgramId.CARE, conditions, is_maybe=False, reason=reason, next_steps=steps)


# ── 7. FERA ───────────────────────────────────────────────────────────────


def check_fera(household_size: int, income: Decimal, limits: EligibilityLimits) -> EligibilityResult:
    """Family Electric Rate Assistance, for larger households just above the CARE limit."""
    floor, ceiling = limits.fera_income_floor, limits.fera_income_ceiling
    min_size = limits.fera_min_household_size
    big_enough = household_size >= min_size
    conditions = [
        RuleCondition(
            name="household_size",
            description=f"Household of {min_size} or more",
            met=big_enough,
            value=str(household_size),
        ),
        RuleCondition(
            name="income_range",
            description=f"Income between {_money(floor)} and {_money(ceiling)}/month",
            met=floor < income < ceiling,
            value=_money(income),
        ),
    ]

    if _hard_met(conditions):
        reason = (
            f"You may be eligible for FERA because your household has {household_size} members "
            "and your income is in the FERA range."
        )
        steps = [
            "Contact your electric utility company",
            "Provide household size and income verification",
        ]
    elif big_enough:
        reason = "FERA serves larger households whose income is just above the CARE limit."
        steps = ["Verify current household income"]
    else:
        reason = f"FERA is specifically for households with {min_size} or more members who don't qualify for CARE."
        steps = ["Add all household members to your profile"]

    return _result(ProgramId.FERA, conditions, is_maybe=big_enough, reason=reason, next_steps=steps)


# ── 8. VA Disability Compensation ─────────────────────────────────────────


def check_va_disability(is_veteran: bool) -> EligibilityResult:
    """Tax-free payments for service-connected disabilities."""
    conditions = [RuleCondition(name="veteran", description="Veteran status", met=is_veteran)]

    if is_veteran:
        reason = (
            "You may be eligible for VA Disability Compensation because of your military service. "
            "This benefit provides tax-free payments for service-connected disabilities."
        )
        steps = [
            "File a disability claim with the VA",
            "Gather military medical records",
            "Schedule a VA medical exam if required",
        ]
    else:
        reason = "VA Disability Compensation requires military service and a service-connected disability."
        steps = [
            "Confirm veteran status and any service-connected disability",
            "Gather DD-214 or military separation documents",
            "Contact a Veterans Service Organization (VSO) for help filing a claim",
        ]

    return _result(ProgramId.VA_DISABILITY, conditions, is_maybe=is_veteran, reason=reason, next_steps=steps)


# ── 9. FSS ────────────────────────────────────────────────────────────────


def check_fss(housing: HousingCategory) -> EligibilityResult:
    """Family Self Sufficiency, open to households in assisted housing."""
    housed = housing == HousingCategory.HOUSED
    conditions = [RuleCondition(
        name="housed",
        description="Currently housed" if housed else "Participation in housing assistance",
        met=housed,
        value=housing.value,
    )]

    if housed:
        reason = (
            "You may be eligible for FSS if you're participating in a housing assistance program. "
            "FSS helps families build savings and increase self-sufficiency."
        )
        steps = [
            "Contact your housing authority or case manager about FSS enrollment",
            "Provide proof of participation in housing assistance",
        ]
    else:
        reason = "FSS typically requires participation in a housing assistance program."
        steps = ["Check eligibility with your housing authority"]

    return _result(ProgramId.FSS, conditions, is_maybe=housed, reason=reason, next_steps=steps)


# ── 10. General Assistance ────────────────────────────────────────────────


def check_general_assistance(
    age: int,
    member_count: int,
    income: Decimal,
    limits: EligibilityLimits,
) -> EligibilityResult:
    """County cash aid for single adults with almost no income."""
    limit = limits.ga_income_limit
    working_age = limits.adult_age <= age <= limits.ga_max_age
    no_dependents = member_count == 0
    conditions = [
        RuleCondition(
            name="working_age",
            description=f"Age {limits.adult_age}-{limits.ga_max_age}",
            met=working_age,
            value=str(age),
        ),
        RuleCondition(
            name="no_dependents",
            description="No dependents in household",
            met=no_dependents,
            value=str(member_count),
        ),
        RuleCondition(
            name="income_limit",
            description=f"Income at or below {_money(limit)}/month",
            met=income <= limit,
            value=_money(income),
        ),
    ]

    if _hard_met(conditions):
        reason = (
            "You may be eligible for General Assistance as a low-income adult without other "
            "resources. GA provides temporary cash assistance."
        )
        steps = [
            "Contact your county general assistance office",
            "Provide income verification and ID",
        ]
    else:
        reason = "General Assistance is for low-income adults without dependents or other cash benefits."
        steps = ["Check eligibility with your county welfare office"]

    is_maybe = income < limits.ga_maybe_income_limit and age >= limits.adult_age
    return _result(ProgramId.GENERAL_ASSISTANCE, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 11. HUD-VASH ──────────────────────────────────────────────────────────


def check_hud_vash(
    is_veteran: bool,
    is_unhoused: bool,
    income: Decimal,
    limits: EligibilityLimits,
) -> EligibilityResult:
    """Housing vouchers for veterans experiencing homelessness."""
    limit = limits.hud_vash_income_limit
    conditions = [
        RuleCondition(name="veteran", description="Veteran status", met=is_veteran),
        RuleCondition(name="unhoused", description="Currently unhoused", met=is_unhoused),
        RuleCondition(
            name="income_limit",
            description=f"Income below {_money(limit)}/month",
            met=income < limit,
            value=_money(income),
        ),
    ]

    if _hard_met(conditions):
        reason = (
            "HUD-VASH provides housing vouchers for veterans experiencing homelessness. "
            "You may be eligible as a veteran who is currently unhoused."
        )
        steps = ["Contact the VA or local housing authority about HUD-VASH referrals"]
    else:
        reason = "HUD-VASH is targeted to low-income veterans who are experiencing homelessness."
        steps = ["Check with the VA or local housing authority for eligibility and referrals"]

    return _result(
        ProgramId.HUD_VASH, conditions,
        is_maybe=is_veteran or is_unhoused, reason=reason, next_steps=steps,
    )


# ── 12. No-fee ID ─────────────────────────────────────────────────────────


def check_no_fee_id(is_unhoused: bool, age: int, limits: EligibilityLimits) -> EligibilityResult:
    """Free state ID for unhoused people and seniors."""
    senior_age = limits.id_senior_age
    conditions = _any_of(
        "unhoused_or_senior",
        [("Unhoused", is_unhoused), (f"Senior ({senior_age}+)", age >= senior_age)],
        missing=f"Unhoused or age {senior_age}+",
        value=str(age),
    )

    if _hard_met(conditions):
        reason = (
            "You may qualify for a no-fee ID card if you are experiencing homelessness or a senior. "
            "This can help with accessing services."
        )
        steps = ["Contact your local DMV or shelter case manager about no-fee ID options"]
    else:
        reason = "No-fee ID cards are available for unhoused individuals and older adults."
        steps = ["Check with local DMV or case management for ID support"]

    is_maybe = is_unhoused or age >= limits.near_senior_age
    return _result(ProgramId.NO_FEE_ID, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 13. Reduced-fee ID ────────────────────────────────────────────────────


def check_reduced_fee_id(
    is_housed: bool,
    age: int,
    benefits: frozenset[str],
    limits: EligibilityLimits,
) -> EligibilityResult:
    """Discounted state ID for housed benefit recipients under the no-fee age."""
    senior_age = limits.id_senior_age
    receives_benefits = bool(benefits)
    conditions = [
        RuleCondition(name="housed", description="Currently housed", met=is_housed),
        RuleCondition(
            name="under_senior_age",
            description=f"Under age {senior_age}",
            met=age < senior_age,
            value=str(age),
        ),
        RuleCondition(
            name="benefits",
            description="Receives qualifying benefits",
            met=receives_benefits,
            value=", ".join(sorted(benefits)) or None,
        ),
    ]

    if _hard_met(conditions):
        reason = "You may qualify for a reduced-fee ID card because you receive qualifying benefits."
        steps = ["Apply for reduced-fee ID at the local DMV or community partner"]
    else:
        reason = "Reduced-fee ID eligibility is based on participation in qualifying benefit programs."
        steps = ["Check with DMV or local case manager for reduced-fee ID eligibility"]

    is_maybe = is_housed and (age >= limits.reduced_fee_id_maybe_age or receives_benefits)
    return _result(ProgramId.REDUCED_FEE_ID, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 14. IHSS ──────────────────────────────────────────────────────────────


def check_ihss(
    age: int,
    is_disabled: bool,
    health_status: str | None,
    is_housed: bool,
    limits: EligibilityLimits,
) -> EligibilityResult:
    """In-Home Supportive Services."""
    is_blind = health_status == HealthStatus.BLIND.value
    conditions = _any_of(
        "aged_blind_or_disabled",
        [
            ("Has qualifying disability", is_disabled),
            ("Blind", is_blind),
            (f"Age {limits.senior_age} or older", age >= limits.senior_age),
        ],
        missing=f"Age {limits.senior_age}+, blindness, or qualifying disability",
        value=str(age),
    )
    conditions.append(RuleCondition(name="housed", description="Currently housed", met=is_housed))

    if _hard_met(conditions):
        reason = (
            "IHSS provides in-home supportive services for those who are elderly, blind, or "
            "disabled and need help with daily activities at home."
        )
        steps = ["Contact the county IHSS office to request an assessment"]
    else:
        reason = "IHSS is available to people who are aged, blind, or disabled and need in-home support."
        steps = ["Discuss needs with your case manager or county IHSS office"]

    is_maybe = age >= limits.near_senior_age or is_disabled
    return _result(ProgramId.IHSS, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 15. LifeLine ──────────────────────────────────────────────────────────


def check_lifeline(income: Decimal, benefits: frozenset[str], limits: EligibilityLimits) -> EligibilityResult:
    """Discounted phone service."""
    limit = limits.lifeline_income_limit
    receives_benefits = bool(benefits)
    conditions = _any_of(
        "income_or_benefits",
        [
            (f"Income below {_money(limit)}/month", income < limit),
            ("Receives qualifying benefits", receives_benefits),
        ],
        missing="Income below program limits or qualifying benefits",
        value=_money(income),
    )

    if _hard_met(conditions):
        reason = (
            "LifeLine provides discounted phone service for low-income households "
            "or those receiving qualifying benefits."
        )
        steps = ["Apply for LifeLine through the official LifeLine website or your phone provider"]
    else:
        reason = "LifeLine eligibility is based on income or participation in qualifying benefit programs."
        steps = ["Check the LifeLine eligibility page for details"]

    is_maybe = income < limits.lifeline_maybe_income_limit or receives_benefits
    return _result(ProgramId.LIFELINE, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 16. LIHEAP ────────────────────────────────────────────────────────────


def check_liheap(is_housed: bool, income: Decimal, limits: EligibilityLimits) -> EligibilityResult:
    """Low Income Home Energy Assistance Program."""
    limit = limits.liheap_income_limit
    conditions = [
        RuleCondition(name="housed", description="Currently housed", met=is_housed),
        RuleCondition(
            name="income_limit",
            description=f"Income below {_money(limit)}/month",
            met=income < limit,
            value=_money(income),
        ),
    ]

    if _hard_met(conditions):
        reason = "LIHEAP helps with home energy costs for low-income households."
        steps = ["Contact your local energy assistance provider to apply for LIHEAP"]
    else:
        reason = "LIHEAP is for low-income households with home energy costs."
        steps = ["Review local LIHEAP eligibility and apply if income or housing changes"]

    is_maybe = income < limits.liheap_maybe_income_limit
    return _result(ProgramId.LIHEAP, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 17. VTA Paratransit ───────────────────────────────────────────────────


def check_vta_paratransit(is_disabled: bool) -> EligibilityResult:
    """Paratransit for riders who cannot use fixed-route transit."""
    conditions = [RuleCondition(name="disability", description="Qualifying disability", met=is_disabled)]

    if is_disabled:
        reason = (
            "You may be eligible for VTA Paratransit services if you have a qualifying disability "
            "that limits your ability to use regular transit."
        )
        steps = ["Contact VTA to apply for paratransit eligibility"]
    else:
        reason = "VTA Paratransit is for individuals with disabilities that prevent them from using fixed-route transit."
        steps = ["Request an eligibility assessment from VTA"]

    return _result(ProgramId.VTA_PARATRANSIT, conditions, is_maybe=is_disabled, reason=reason, next_steps=steps)


# ── 18. Section 8 Interest List ───────────────────────────────────────────


def check_section_8(
    income: Decimal,
    is_unhoused: bool,
    age: int,
    limits: EligibilityLimits,
) -> EligibilityResult:
    """Housing Choice Voucher interest list."""
    limit = limits.section8_income_limit
    conditions = [
        RuleCondition(
            name="income_limit",
            description=f"Income below {_money(limit)}/month",
            met=income < limit,
            value=_money(income),
        ),
        RuleCondition(name="unhoused", description="Currently unhoused", met=is_unhoused),
        RuleCondition(
            name="adult",
            description=f"Age {limits.adult_age} or older",
            met=age >= limits.adult_age,
            value=str(age),
        ),
    ]

    if _hard_met(conditions):
        reason = (
            "You may be eligible to join the Section 8 interest list as a low-income adult "
            "experiencing homelessness."
        )
        steps = ["Add your name to the local Section 8 interest list or contact housing authority"]
    else:
        reason = "Section 8 priority is given to low-income adults who are experiencing homelessness."
        steps = ["Check your local housing authority's waitlist and eligibility rules"]

    is_maybe = is_unhoused or income < limits.section8_maybe_income_limit
    return _result(ProgramId.SECTION_8, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 19. SSDI ──────────────────────────────────────────────────────────────


def check_ssdi(is_disabled: bool) -> EligibilityResult:
    """Social Security Disability Insurance."""
    conditions = [RuleCondition(name="disability", description="Qualifying disability", met=is_disabled)]

    if is_disabled:
        reason = "You may be eligible for SSDI if you have a qualifying disability and sufficient work history."
        steps = ["Consult SSA guidance and gather medical/work records for SSDI application"]
    else:
        reason = "SSDI requires a qualifying disability and minimum work credits."
        steps = ["Discuss disability assessment with your doctor"]

    return _result(ProgramId.SSDI, conditions, is_maybe=is_disabled, reason=reason, next_steps=steps)


# ── 20. SSI ───────────────────────────────────────────────────────────────


def check_ssi(is_disabled: bool, income: Decimal, limits: EligibilityLimits) -> EligibilityResult:
    """Supplemental Security Income."""
    limit = limits.ssi_income_limit
    conditions = [
        RuleCondition(name="disability", description="Has qualifying disability", met=is_disabled),
        RuleCondition(
            name="income_limit",
            description=f"Income below {_money(limit)}/month",
            met=income < limit,
            value=_money(income),
        ),
    ]

    if _hard_met(conditions):
        reason = "SSI provides financial assistance to disabled individuals with limited income and resources."
        steps = ["Apply for SSI and provide disability and income documentation"]
    else:
        reason = "SSI requires a qualifying disability and low income/resources."
        steps = ["Check SSI eligibility criteria and appeal if eligible"]

    is_maybe = is_disabled or income < limits.ssi_maybe_income_limit
    return _result(ProgramId.SSI, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 21. VA Pension ────────────────────────────────────────────────────────


def check_va_pension(
    is_veteran: bool,
    income: Decimal,
    age: int,
    is_disabled: bool,
    limits: EligibilityLimits,
) -> EligibilityResult:
    """Needs-based pension for low-income veterans who are senior or disabled."""
    limit = limits.va_pension_income_limit
    conditions = [
        RuleCondition(name="veteran", description="Veteran status", met=is_veteran),
        RuleCondition(
            name="income_limit",
            description=f"Income below {_money(limit)}/month",
            met=income < limit,
            value=_money(income),
        ),
    ]
    conditions.extend(_any_of(
        "age_or_disability",
        [(f"Age {limits.senior_age} or older", age >= limits.senior_age), ("Has qualifying disability", is_disabled)],
        missing=f"Age {limits.senior_age}+ or qualifying disability",
        value=str(age),
    ))

    if _hard_met(conditions):
        reason = (
            "VA Pension provides needs-based benefits to low-income wartime veterans "
            "who are age 65+ or disabled."
        )
        steps = ["Contact VA or a VSO for VA Pension eligibility and application assistance"]
    else:
        reason = "VA Pension requires wartime veteran status, age or disability, and limited income."
        steps = ["Review VA Pension criteria and contact VA for assistance"]

    is_maybe = is_veteran and (age >= limits.near_senior_age or is_disabled)
    return _result(ProgramId.VA_PENSION, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── 22. WIC ───────────────────────────────────────────────────────────────


def check_wic(
    income: Decimal,
    benefits: frozenset[str],
    member_ages: tuple[int | None, ...],
    limits: EligibilityLimits,
) -> EligibilityResult:
    """Women, Infants & Children. Requires a young child in the household."""
    limit = limits.wic_income_limit
    qualifying = benefits & WIC_QUALIFYING_BENEFITS
    young_children = [a for a in member_ages if a is not None and a < limits.wic_child_age]

    conditions = _any_of(
        "income_or_benefits",
        [
            (f"Income below {_money(limit)}/month", income < limit),
            ("Receives Medi-Cal or CalFresh", bool(qualifying)),
        ],
        missing=f"Income below {_money(limit)}/month or qualifying benefits",
        value=_money(income),
    )
    conditions.append(RuleCondition(
        name="young_child",
        description=f"Child under {limits.wic_child_age} in household",
        met=bool(young_children),
        value=str(len(young_children)),
    ))

    if _hard_met(conditions):
        reason = (
            "WIC supports new mothers and young children with supplemental nutritious foods "
            "and nutrition education."
        )
        steps = ["Contact your local WIC office to apply and confirm eligibility"]
    else:
        reason = "WIC eligibility is based on income and having an infant or young child in the household."
        steps = ["Check local WIC eligibility and application process"]

    is_maybe = income < limits.wic_maybe_income_limit
    return _result(ProgramId.WIC, conditions, is_maybe=is_maybe, reason=reason, next_steps=steps)


# ── Registry ──────────────────────────────────────────────────────────────


RuleCheck = Callable[[IntakeFacts, EligibilityLimits], EligibilityResult]

RULE_CHECKS: dict[ProgramId, RuleCheck] = {
    ProgramId.UPLIFT: lambda f, lim: check_uplift(f.housing_category),
    ProgramId.ADSA: lambda f, lim: check_adsa(f.is_disabled, f.health_status, f.benefits),
    ProgramId.CALFRESH: lambda f, lim: check_calfresh(f.income, f.age, f.is_disabled, lim),
    ProgramId.CALWORKS: lambda f, lim: check_calworks(f.member_count, f.income, lim),
    ProgramId.CAPI: lambda f, lim: check_capi(f.income, f.age, f.is_disabled, lim),
    ProgramId.CARE: lambda f, lim: check_care(f.income, f.benefits, lim),
    ProgramId.FERA: lambda f, lim: check_fera(f.household_size, f.income, lim),
    ProgramId.VA_DISABILITY: lambda f, lim: check_va_disability(f.is_veteran),
    ProgramId.FSS: lambda f, lim: check_fss(f.housing_category),
    ProgramId.GENERAL_ASSISTANCE: lambda f, lim: check_general_assistance(f.age, f.member_count, f.income, lim),
    ProgramId.HUD_VASH: lambda f, lim: check_hud_vash(f.is_veteran, f.is_unhoused, f.income, lim),
    ProgramId.NO_FEE_ID: lambda f, lim: check_no_fee_id(f.is_unhoused, f.age, lim),
    ProgramId.REDUCED_FEE_ID: lambda f, lim: check_reduced_fee_id(f.is_housed, f.age, f.benefits, lim),
    ProgramId.IHSS: lambda f, lim: check_ihss(f.age, f.is_disabled, f.health_status, f.is_housed, lim),
    ProgramId.LIFELINE: lambda f, lim: check_lifeline(f.income, f.benefits, lim),
    ProgramId.LIHEAP: lambda f, lim: check_liheap(f.is_housed, f.income, lim),
    ProgramId.VTA_PARATRANSIT: lambda f, lim: check_vta_paratransit(f.is_disabled),
    ProgramId.SECTION_8: lambda f, lim: check_section_8(f.income, f.is_unhoused, f.age, lim),
    ProgramId.SSDI: lambda f, lim: check_ssdi(f.is_disabled),
    ProgramId.SSI: lambda f, lim: check_ssi(f.is_disabled, f.income, lim),
    ProgramId.VA_PENSION: lambda f, lim: check_va_pension(f.is_veteran, f.income, f.age, f.is_disabled, lim),
    ProgramId.WIC: lambda f, lim: check_wic(f.income, f.benefits, f.member_ages, lim),
}
