"""Program identifiers, display names and benefit-key lookup tables."""

from __future__ import annotations

from enum import IntEnum


class ProgramId(IntEnum):
    """The 22 programs evaluated by the eligibility engine.

    Values are the stable numeric IDs existing callers store and display.
    """

    UPLIFT = 1
    ADSA = 2
    CALFRESH = 3
    CALWORKS = 4
    CAPI = 5
    CARE = 6
    FERA = 7
    VA_DISABILITY = 8
    FSS = 9
    GENERAL_ASSISTANCE = 10
    HUD_VASH = 11
    NO_FEE_ID = 12
    REDUCED_FEE_ID = 13
    IHSS = 14
    LIFELINE = 15
    LIHEAP = 16
    VTA_PARATRANSIT = 17
    SECTION_8 = 18
    SSDI = 19
    SSI = 20
    VA_PENSION = 21
    WIC = 22


PROGRAM_NAMES: dict[int, str] = {
    ProgramId.UPLIFT: "UPLIFT",
    ProgramId.ADSA: "ADSA (Assistance Dog Special Allowance)",
    ProgramId.CALFRESH: "CalFresh",
    ProgramId.CALWORKS: "CalWORKs",
    ProgramId.CAPI: "CAPI (Cash Assistance Program for Immigrants)",
    ProgramId.CARE: "CARE (California Alternate Rates for Energy)",
    ProgramId.FERA: "FERA (Family Electric Rate Assistance)",
    ProgramId.VA_DISABILITY: "VA Disability Compensation",
    ProgramId.FSS: "FSS (Family Self Sufficiency)",
    ProgramId.GENERAL_ASSISTANCE: "General Assistance",
    ProgramId.HUD_VASH: "HUD-VASH",
    ProgramId.NO_FEE_ID: "No-fee ID card",
    ProgramId.REDUCED_FEE_ID: "Reduced-fee ID card",
    ProgramId.IHSS: "IHSS (In-Home Supportive Services)",
    ProgramId.LIFELINE: "LifeLine Phone",
    ProgramId.LIHEAP: "LIHEAP (Low Income Home Energy Assistance Program)",
    ProgramId.VTA_PARATRANSIT: "VTA Paratransit Pass",
    ProgramId.SECTION_8: "Section 8 Interest List",
    ProgramId.SSDI: "SSDI (Social Security Disability Insurance)",
    ProgramId.SSI: "SSI (Supplemental Security Income)",
    ProgramId.VA_PENSION: "VA Pension",
    ProgramId.WIC: "WIC (Women, Infants & Children)",
}

# Existing enrollments that qualify for another program (lower-case keys)
ADSA_CORE_BENEFITS: frozenset[str] = frozenset({"ssi", "ssdi", "ihss", "capi"})
CARE_QUALIFYING_BENEFITS: frozenset[str] = frozenset({"liheap", "wic", "calfresh"})
WIC_QUALIFYING_BENEFITS: frozenset[str] = frozenset({"medical", "calfresh"})
