"""Unit tests for EnergyPlanOrchestrator."""

import pytest

from nutricalc.application.nutrition_calculator.orchestrators.energy_plan_orchestrator import (  # noqa: E501
    EnergyPlan,
    EnergyPlanOrchestrator,
)
from nutricalc.domain.nutrition_calculator.calculation.geb_service import GEBService
from nutricalc.domain.nutrition_calculator.calculation.get_service import GETService
from nutricalc.domain.nutrition_calculator.calculation.macro_service import MacroService
from nutricalc.domain.nutrition_calculator.core.exceptions import UnsupportedAgeError
from nutricalc.domain.nutrition_calculator.core.value_objects import (
    ActivityLevel,
    Gender,
    GETCalculationParameters,
    GramRange,
    MacronutrientPercentageRanges,
    PercentageRange,
    TargetMacronutrientDistribution,
)


@pytest.fixture
def orchestrator() -> EnergyPlanOrchestrator:
    """Create orchestrator with real services."""
    return EnergyPlanOrchestrator(
        geb_service=GEBService(),
        get_service=GETService(),
        macro_service=MacroService(),
    )


@pytest.fixture
def sample_params() -> GETCalculationParameters:
    """Create sample patient parameters."""
    return GETCalculationParameters(
        age=30,
        gender=Gender.FEMALE,
        weight_kg=60.0,
        height_cm=165.0,
        activity_level=ActivityLevel.ACTIVE,
    )


@pytest.fixture
def standard_targets() -> TargetMacronutrientDistribution:
    return TargetMacronutrientDistribution(carbohydrate=50, protein=20, lipid=30)


def test_calculate_plan(
    orchestrator: EnergyPlanOrchestrator,
    sample_params: GETCalculationParameters,
    standard_targets: TargetMacronutrientDistribution,
) -> None:
    """Test the full plan for an active adult woman."""
    plan = orchestrator.calculate_plan(sample_params, standard_targets)

    assert isinstance(plan, EnergyPlan)
    assert plan.geb == pytest.approx(1906.2)
    assert plan.get == 2381  # 146.7 + 1.27 × 1759.5
    assert plan.macronutrient_ranges.carbohydrates == GramRange(min_g=268, max_g=387)
    assert plan.recommended_macronutrients.grams.cho == 297.6  # 1190.5 / 4
    assert plan.recommended_macronutrients.kcal.cho == 1191.0
    assert plan.recommended_macronutrients.grams.lip == 79.4  # 714.3 / 9
    assert plan.recommended_macronutrients.per_kg.cho == 5.0


def test_calculate_plan_custom_ranges(
    orchestrator: EnergyPlanOrchestrator,
    sample_params: GETCalculationParameters,
    standard_targets: TargetMacronutrientDistribution,
) -> None:
    """Test that caller AMDR fractions are used for the gram ranges."""
    ranges = MacronutrientPercentageRanges(
        proteins=PercentageRange(min=0.20, max=0.20),
    )

    plan = orchestrator.calculate_plan(sample_params, standard_targets, ranges)

    # 2381 × 0.20 / 4 = 119.05
    assert plan.macronutrient_ranges.proteins == GramRange(min_g=119, max_g=119)
    assert plan.macronutrient_ranges.carbohydrates == GramRange(min_g=268, max_g=387)


def test_calculate_plan_uses_get_for_macros(
    orchestrator: EnergyPlanOrchestrator,
    sample_params: GETCalculationParameters,
    standard_targets: TargetMacronutrientDistribution,
) -> None:
    """Test that macro kcal are a share of GET, not GEB."""
    plan = orchestrator.calculate_plan(sample_params, standard_targets)

    assert plan.recommended_macronutrients.kcal.total() == pytest.approx(plan.get, abs=1.5)


def test_calculate_plan_under_3_raises(
    orchestrator: EnergyPlanOrchestrator,
    standard_targets: TargetMacronutrientDistribution,
) -> None:
    """Test that toddlers have no energy plan."""
    toddler = GETCalculationParameters(
        age=2,
        gender=Gender.MALE,
        weight_kg=12.0,
        height_cm=88.0,
        activity_level=ActivityLevel.SEDENTARY,
    )

    with pytest.raises(UnsupportedAgeError):
        orchestrator.calculate_plan(toddler, standard_targets)
