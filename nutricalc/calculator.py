"""Function-call interface to the nutrition calculator.

Thin wrappers over the domain services for callers that want plain
functions instead of service objects:

    >>> from nutricalc.calculator import calculate_get
    >>> from nutricalc.domain.nutrition_calculator.core.value_objects import (
    ...     ActivityLevel, Gender, GETCalculationParameters,
    ... )
    >>> calculate_get(GETCalculationParameters(
    ...     age=30, gender=Gender.FEMALE, weight_kg=60, height_cm=165,
    ...     activity_level=ActivityLevel.ACTIVE,
    ... ))
    2381
"""

from typing import Optional

from nutricalc.domain.nutrition_calculator.calculation.geb_service import GEBService
from nutricalc.domain.nutrition_calculator.calculation.get_service import GETService
from nutricalc.domain.nutrition_calculator.calculation.macro_service import MacroService
from nutricalc.domain.nutrition_calculator.calculation.micronutrient_tables import (
    get_biotin_recommendation,
    get_calcium_recommendation,
    get_choline_recommendation,
    get_chromium_recommendation,
    get_cobalamin_recommendation,
    get_copper_recommendation,
    get_folate_recommendation,
    get_iodine_recommendation,
    get_iron_recommendation,
    get_magnesium_recommendation,
    get_manganese_recommendation,
    get_niacin_recommendation,
    get_pantothenic_acid_recommendation,
    get_phosphorus_recommendation,
    get_potassium_recommendation,
    get_pyridoxine_recommendation,
    get_riboflavin_recommendation,
    get_selenium_recommendation,
    get_sodium_recommendation,
    get_thiamin_recommendation,
    get_vitamin_a_recommendation,
    get_vitamin_c_recommendation,
    get_vitamin_d_recommendation,
    get_vitamin_e_recommendation,
    get_zinc_recommendation,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.activity_level import (
    ActivityLevel,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.gender import Gender
from nutricalc.domain.nutrition_calculator.core.value_objects.macronutrients import (
    CalculatedMacronutrientValues,
    MacronutrientPercentageRanges,
    RangedMacronutrientGrams,
    TargetMacronutrientDistribution,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.patient_info import (
    BasicPatientInfo,
    GETCalculationParameters,
)

_geb_service = GEBService()
_get_service = GETService()
_macro_service = MacroService()


def calculate_geb(info: BasicPatientInfo) -> float:
    """Basal energy expenditure, kcal/day (IOM 2002, adults)."""
    return _geb_service.calculate(info)


def get_pa_coefficient(gender: Gender, activity_level: ActivityLevel) -> float:
    """IOM 2005 physical activity coefficient."""
    return activity_level.pa_coefficient(gender)


def calculate_get(params: GETCalculationParameters) -> int:
    """Total energy expenditure (EER), whole kcal/day."""
    return _get_service.calculate(params)


def calculate_macronutrient_ranges(
    vet: float, percentage_ranges: Optional[MacronutrientPercentageRanges] = None
) -> RangedMacronutrientGrams:
    """Gram ranges for an energy value and AMDR fractions."""
    return _macro_service.calculate_ranges(vet, percentage_ranges)


def calculate_recommended_macronutrients(
    total_kcal: float,
    targets: TargetMacronutrientDistribution,
    weight_kg: Optional[float] = None,
) -> CalculatedMacronutrientValues:
    """Grams, kcal and g/kg for a target macronutrient split."""
    return _macro_service.calculate_recommended(total_kcal, targets, weight_kg)


def get_internal_gender(patient_gender: Optional[str]) -> Gender:
    """Map a patient-record gender to the calculation gender."""
    return Gender.from_patient_gender(patient_gender)


__all__ = [
    "calculate_geb",
    "get_pa_coefficient",
    "calculate_get",
    "calculate_macronutrient_ranges",
    "calculate_recommended_macronutrients",
    "get_internal_gender",
    "get_calcium_recommendation",
    "get_iron_recommendation",
    "get_zinc_recommendation",
    "get_magnesium_recommendation",
    "get_selenium_recommendation",
    "get_iodine_recommendation",
    "get_potassium_recommendation",
    "get_sodium_recommendation",
    "get_phosphorus_recommendation",
    "get_copper_recommendation",
    "get_chromium_recommendation",
    "get_manganese_recommendation",
    "get_vitamin_a_recommendation",
    "get_vitamin_d_recommendation",
    "get_vitamin_e_recommendation",
    "get_vitamin_c_recommendation",
    "get_thiamin_recommendation",
    "get_riboflavin_recommendation",
    "get_niacin_recommendation",
    "get_pantothenic_acid_recommendation",
    "get_pyridoxine_recommendation",
    "get_biotin_recommendation",
    "get_folate_recommendation",
    "get_cobalamin_recommendation",
    "get_choline_recommendation",
]
