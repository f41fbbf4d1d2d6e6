"""Value objects for the nutrition calculator domain."""

from .activity_level import ActivityLevel
from .gender import Gender
from .macronutrients import (
    CARBOHYDRATE_KCAL_PER_G,
    LIPID_KCAL_PER_G,
    PROTEIN_KCAL_PER_G,
    CalculatedMacronutrientValues,
    GramRange,
    MacronutrientPercentageRanges,
    MacronutrientValues,
    PercentageRange,
    RangedMacronutrientGrams,
    TargetMacronutrientDistribution,
)
from .micronutrients import (
    MicronutrientInput,
    MicronutrientRecommendation,
    NutrientCategory,
)
from .patient_info import (
    BasicPatientInfo,
    GETCalculationParameters,
    LactationPeriod,
    calculate_age,
)

__all__ = [
    "Gender",
    "ActivityLevel",
    "LactationPeriod",
    "BasicPatientInfo",
    "GETCalculationParameters",
    "calculate_age",
    "CARBOHYDRATE_KCAL_PER_G",
    "PROTEIN_KCAL_PER_G",
    "LIPID_KCAL_PER_G",
    "PercentageRange",
    "MacronutrientPercentageRanges",
    "GramRange",
    "RangedMacronutrientGrams",
    "TargetMacronutrientDistribution",
    "MacronutrientValues",
    "CalculatedMacronutrientValues",
    "NutrientCategory",
    "MicronutrientInput",
    "MicronutrientRecommendation",
]
