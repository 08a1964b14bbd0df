"""Tests for the eligibility engine.

Each scenario builds an intake record and asserts per-program results.
Dates are pinned by passing ``today`` explicitly.
"""

from __future__ import annotations

import copy
from datetime import date
from decimal import Decimal

import pytest

from caseflow.config import EligibilityLimits
from caseflow.eligibility import PROGRAM_NAMES, ProgramId, evaluate_eligibility
from caseflow.schemas.eligibility import EligibilityResult
from caseflow.schemas.intake import ClientIntakeForm

TODAY = date(2024, 6, 15)


def _evaluate(data, **kwargs) -> list[EligibilityResult]:
    return evaluate_eligibility(data, today=TODAY, **kwargs)


def _find(results: list[EligibilityResult], program: ProgramId) -> EligibilityResult:
    for r in results:
        if r.program_id == program:
            return r
    pytest.fail(f"Program {program.name} not found in results")


SAMPLE_INTAKES = [
    None,
    {},
    "not a mapping",
    {"demographics": {"veteranStatus": True}},
    {"demographics": {"disabilityStatus": True, "monthlyIncome": "$900"}},
    {"caseManagement": {"housingStatus": "unsheltered"}},
    {
        "participantDetails": {"firstName": "Ana", "dateOfBirth": "1950-02-01"},
        "demographics": {"monthlyIncome": "$3,500", "veteranStatus": True, "disabilityStatus": True},
        "caseManagement": {"housingStatus": "housed", "healthStatus": "deaf", "nonCashBenefits": ["SSI", "WIC"]},
        "household": {"members": [{"dateOfBirth": "2022-01-01"}, {"dateOfBirth": "2010-05-05"}]},
    },
    {"demographics": {"monthlyIncome": 12, "dateOfBirth": "garbage"}, "household": {"members": "x"}},
]


class TestEngineInvariants:
    @pytest.mark.parametrize("intake", SAMPLE_INTAKES)
    def test_always_22_results_in_id_order(self, intake) -> None:
        results = _evaluate(intake)
        assert [r.program_id for r in results] == list(range(1, 23))

    @pytest.mark.parametrize("intake", SAMPLE_INTAKES)
    def test_missing_conditions_imply_ineligible(self, intake) -> None:
        for r in _evaluate(intake):
            assert (len(r.missing_conditions) > 0) == (not r.is_eligible), r.program_name

    @pytest.mark.parametrize("intake", SAMPLE_INTAKES)
    def test_idempotent(self, intake) -> None:
        assert _evaluate(intake) == _evaluate(intake)

    def test_program_names(self) -> None:
        for r in _evaluate({}):
            assert r.program_name == PROGRAM_NAMES[r.program_id]

    def test_input_not_mutated(self) -> None:
        intake = copy.deepcopy(SAMPLE_INTAKES[6])
        _evaluate(intake)
        assert intake == SAMPLE_INTAKES[6]

    def test_accepts_model_instance(self) -> None:
        form = ClientIntakeForm.model_validate(SAMPLE_INTAKES[4])
        assert _evaluate(form) == _evaluate(SAMPLE_INTAKES[4])

    def test_every_result_explains_itself(self) -> None:
        for r in _evaluate({}):
            assert r.eligibility_reason
            assert r.next_steps

    def test_camel_case_dump(self) -> None:
        dumped = _evaluate({})[0].model_dump(mode="json", by_alias=True)
        assert dumped["programId"] == 1
        assert dumped["programName"] == "UPLIFT"
        for key in ("isEligible", "isMaybe", "metConditions", "missingConditions", "eligibilityReason", "nextSteps"):
            assert key in dumped


class TestEmptyIntake:
    """Nothing filled in: income 0, age 0, housing unknown, no flags."""

    @pytest.fixture()
    def results(self):
        return _evaluate({})

    def test_eligible_programs(self, results) -> None:
        eligible = [r.program_id for r in results if r.is_eligible]
        # CalFresh, CARE, LifeLine: zero income is under every income limit
        assert eligible == [3, 6, 15]

    def test_maybe_programs(self, results) -> None:
        maybe = [r.program_id for r in results if r.is_maybe]
        # LifeLine, LIHEAP, Section 8, SSI, WIC: income-only maybe thresholds
        assert maybe == [15, 16, 18, 20, 22]

    def test_uplift_missing_housing(self, results) -> None:
        uplift = _find(results, ProgramId.UPLIFT)
        assert uplift.is_eligible is False
        assert uplift.missing_conditions == ["Housing status (unhoused or at risk)"]


class TestVeteranOnly:
    @pytest.fixture()
    def results(self):
        return _evaluate({"demographics": {"veteranStatus": True}})

    def test_va_disability_eligible(self, results) -> None:
        va = _find(results, ProgramId.VA_DISABILITY)
        assert va.is_eligible is True
        assert va.met_conditions == ["Veteran status"]

    def test_ssdi_ineligible(self, results) -> None:
        assert _find(results, ProgramId.SSDI).is_eligible is False

    def test_hud_vash_maybe(self, results) -> None:
        hud = _find(results, ProgramId.HUD_VASH)
        assert hud.is_eligible is False
        assert hud.is_maybe is True
        assert hud.missing_conditions == ["Currently unhoused"]

    def test_va_pension_needs_age_or_disability(self, results) -> None:
        pension = _find(results, ProgramId.VA_PENSION)
        assert pension.is_eligible is False
        assert pension.is_maybe is False
        assert pension.missing_conditions == ["Age 65+ or qualifying disability"]


class TestDisabledLowIncome:
    @pytest.fixture()
    def results(self):
        return _evaluate({"demographics": {"disabilityStatus": True, "monthlyIncome": "$900"}})

    def test_ssi_eligible(self, results) -> None:
        ssi = _find(results, ProgramId.SSI)
        assert ssi.is_eligible is True
        assert ssi.met_conditions == ["Has qualifying disability", "Income below $1,000/month"]

    @pytest.mark.parametrize("program", [ProgramId.SSDI, ProgramId.VTA_PARATRANSIT, ProgramId.CAPI])
    def test_disability_programs(self, results, program: ProgramId) -> None:
        assert _find(results, program).is_eligible is True

    def test_adsa_partial(self, results) -> None:
        adsa = _find(results, ProgramId.ADSA)
        assert adsa.is_eligible is False
        assert adsa.is_maybe is True
        assert adsa.missing_conditions == ["Receives SSI, SSDI, IHSS, or CAPI"]

    def test_ihss_needs_housing(self, results) -> None:
        ihss = _find(results, ProgramId.IHSS)
        assert ihss.is_eligible is False
        assert ihss.missing_conditions == ["Currently housed"]

    def test_calfresh_notes_disability(self, results) -> None:
        calfresh = _find(results, ProgramId.CALFRESH)
        assert calfresh.is_eligible is True
        assert "Has qualifying disability" in calfresh.met_conditions


class TestUnsheltered:
    @pytest.fixture()
    def results(self):
        return _evaluate({
            "participantDetails": {"dateOfBirth": "1990-01-01"},
            "caseManagement": {"housingStatus": "unsheltered"},
        })

    def test_uplift_eligible(self, results) -> None:
        uplift = _find(results, ProgramId.UPLIFT)
        assert uplift.is_eligible is True
        assert uplift.met_conditions == ["Experiencing homelessness"]

    def test_fss_ineligible(self, results) -> None:
        fss = _find(results, ProgramId.FSS)
        assert fss.is_eligible is False
        assert fss.missing_conditions == ["Participation in housing assistance"]

    def test_no_fee_id(self, results) -> None:
        assert _find(results, ProgramId.NO_FEE_ID).is_eligible is True

    def test_section_8(self, results) -> None:
        assert _find(results, ProgramId.SECTION_8).is_eligible is True

    def test_liheap_needs_housing(self, results) -> None:
        assert _find(results, ProgramId.LIHEAP).is_eligible is False


class TestYoungChildInHousehold:
    @pytest.fixture()
    def results(self):
        return _evaluate({
            "demographics": {"monthlyIncome": "$500"},
            "household": {"members": [{"name": "Kid", "relationship": "child", "dateOfBirth": "2021-06-15"}]},
        })

    def test_wic_eligible(self, results) -> None:
        wic = _find(results, ProgramId.WIC)
        assert wic.is_eligible is True
        assert wic.met_conditions == ["Income below $3,000/month", "Child under 5 in household"]

    def test_calworks_eligible(self, results) -> None:
        assert _find(results, ProgramId.CALWORKS).is_eligible is True

    def test_fera_household_too_small(self, results) -> None:
        fera = _find(results, ProgramId.FERA)
        assert fera.is_eligible is False
        assert fera.is_maybe is False

    def test_general_assistance_has_dependents(self, results) -> None:
        assert "No dependents in household" in _find(results, ProgramId.GENERAL_ASSISTANCE).missing_conditions


class TestWicChildAge:
    def test_child_turns_five_today(self) -> None:
        results = _evaluate({
            "demographics": {"monthlyIncome": "$500"},
            "household": {"members": [{"dateOfBirth": "2019-06-15"}]},
        })
        assert _find(results, ProgramId.WIC).is_eligible is False

    def test_child_turns_five_tomorrow(self) -> None:
        results = _evaluate({
            "demographics": {"monthlyIncome": "$500"},
            "household": {"members": [{"dateOfBirth": "2019-06-16"}]},
        })
        assert _find(results, ProgramId.WIC).is_eligible is True

    def test_member_without_birth_date_is_not_a_young_child(self) -> None:
        results = _evaluate({"household": {"members": [{"name": "Unknown"}]}})
        wic = _find(results, ProgramId.WIC)
        assert wic.is_eligible is False
        assert wic.missing_conditions == ["Child under 5 in household"]

    def test_benefits_qualify_above_income_limit(self) -> None:
        results = _evaluate({
            "demographics": {"monthlyIncome": "$5,000"},
            "caseManagement": {"nonCashBenefits": ["Medical"]},
            "household": {"members": [{"dateOfBirth": "2023-01-01"}]},
        })
        wic = _find(results, ProgramId.WIC)
        assert wic.is_eligible is True
        assert wic.met_conditions[0] == "Receives Medi-Cal or CalFresh"


class TestPotentialMatches:
    """Partial matches surfaced for review even when a hard condition fails."""

    def test_wic_low_income_without_children(self) -> None:
        wic = _find(_evaluate({"demographics": {"monthlyIncome": "$500"}}), ProgramId.WIC)
        assert (wic.is_eligible, wic.is_maybe) == (False, True)

    def test_wic_over_income(self) -> None:
        wic = _find(_evaluate({"demographics": {"monthlyIncome": "$3,000"}}), ProgramId.WIC)
        assert (wic.is_eligible, wic.is_maybe) == (False, False)

    def test_general_assistance_adult_with_dependent(self) -> None:
        results = _evaluate({
            "demographics": {"monthlyIncome": "$500", "dateOfBirth": "1990-01-01"},
            "household": {"members": [{"name": "Kid", "dateOfBirth": "2015-01-01"}]},
        })
        ga = _find(results, ProgramId.GENERAL_ASSISTANCE)
        assert (ga.is_eligible, ga.is_maybe) == (False, True)

    def test_general_assistance_minor(self) -> None:
        results = _evaluate({"demographics": {"monthlyIncome": "$100", "dateOfBirth": "2010-01-01"}})
        assert _find(results, ProgramId.GENERAL_ASSISTANCE).is_maybe is False

    def test_reduced_fee_id_housed_near_senior(self) -> None:
        results = _evaluate({
            "demographics": {"dateOfBirth": "1966-01-01"},
            "caseManagement": {"housingStatus": "housed"},
        })
        reduced = _find(results, ProgramId.REDUCED_FEE_ID)
        assert (reduced.is_eligible, reduced.is_maybe) == (False, True)
        assert reduced.missing_conditions == ["Receives qualifying benefits"]

    def test_reduced_fee_id_unhoused_near_senior(self) -> None:
        results = _evaluate({
            "demographics": {"dateOfBirth": "1966-01-01"},
            "caseManagement": {"housingStatus": "unsheltered"},
        })
        assert _find(results, ProgramId.REDUCED_FEE_ID).is_maybe is False


class TestBenefitAndHealthMatching:
    def test_benefits_case_insensitive(self) -> None:
        results = _evaluate({
            "demographics": {"disabilityStatus": True},
            "caseManagement": {"nonCashBenefits": ["SsDi"]},
        })
        assert _find(results, ProgramId.ADSA).is_eligible is True

    def test_health_status_case_sensitive(self) -> None:
        results = _evaluate({"caseManagement": {"healthStatus": "Blind", "nonCashBenefits": ["ssi"]}})
        adsa = _find(results, ProgramId.ADSA)
        assert adsa.is_eligible is False
        assert adsa.missing_conditions == ["Qualifying disability status"]

    def test_deaf_qualifies_for_adsa(self) -> None:
        results = _evaluate({"caseManagement": {"healthStatus": "deaf", "nonCashBenefits": ["capi"]}})
        assert _find(results, ProgramId.ADSA).is_eligible is True


class TestSenior:
    """Housed senior on a fixed income."""

    @pytest.fixture()
    def results(self):
        return _evaluate({
            "demographics": {"dateOfBirth": "1954-01-01", "monthlyIncome": "$1,500", "veteranStatus": True},
            "caseManagement": {"housingStatus": "housed", "nonCashBenefits": ["calfresh"]},
        })

    @pytest.mark.parametrize(
        "program",
        [ProgramId.CAPI, ProgramId.IHSS, ProgramId.NO_FEE_ID, ProgramId.VA_PENSION, ProgramId.LIHEAP],
    )
    def test_eligible(self, results, program: ProgramId) -> None:
        assert _find(results, program).is_eligible is True

    def test_reduced_fee_id_over_age(self, results) -> None:
        reduced = _find(results, ProgramId.REDUCED_FEE_ID)
        assert reduced.is_eligible is False
        assert reduced.missing_conditions == ["Under age 62"]

    def test_calfresh_notes_senior(self, results) -> None:
        assert "Age 60 or older" in _find(results, ProgramId.CALFRESH).met_conditions


class TestLimitOverrides:
    def test_custom_calfresh_limit(self) -> None:
        limits = EligibilityLimits(calfresh_income_limit=Decimal("1000"))
        results = _evaluate({"demographics": {"monthlyIncome": "$1,500"}}, limits=limits)
        calfresh = _find(results, ProgramId.CALFRESH)
        assert calfresh.is_eligible is False
        assert calfresh.missing_conditions == ["Income below $1,000/month"]

    def test_default_limits(self) -> None:
        results = _evaluate({"demographics": {"monthlyIncome": "$1,500"}})
        assert _find(results, ProgramId.CALFRESH).is_eligible is True
