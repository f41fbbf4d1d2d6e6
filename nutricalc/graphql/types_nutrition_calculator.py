"""GraphQL types for the nutrition calculator domain.

These types expose GEB/GET calculation, macronutrient distribution and
micronutrient DRI recommendations.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import List, Optional

import strawberry

__all__ = [
    # Enums
    "PatientGenderEnum",
    "ActivityLevelEnum",
    "LactationPeriodEnum",
    "NutrientCategoryEnum",
    # Output types
    "GramRangeType",
    "MacronutrientRangesType",
    "MacronutrientValuesType",
    "RecommendedMacronutrientsType",
    "EnergyPlanType",
    "MicronutrientRecommendationType",
    # Input types
    "PatientInput",
    "EnergyParametersInput",
    "PercentageRangeInput",
    "MacronutrientRangesInput",
    "MacronutrientTargetsInput",
    "MicronutrientQueryInput",
]


# ============================================
# ENUMS
# ============================================


@strawberry.enum
class PatientGenderEnum(str, Enum):
    """Patient-record gender. OTHER is calculated as FEMALE."""

    MALE = "male"
    FEMALE = "female"
    OTHER = "other"


@strawberry.enum
class ActivityLevelEnum(str, Enum):
    """Physical activity category for EER calculation."""

    SEDENTARY = "sedentary"
    LOW_ACTIVE = "low_active"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"


@strawberry.enum
class LactationPeriodEnum(str, Enum):
    """Months postpartum bracket."""

    FIRST_6 = "first6"
    AFTER_6 = "after6"


@strawberry.enum
class NutrientCategoryEnum(str, Enum):
    """Micronutrient family."""

    MINERAL = "mineral"
    VITAMIN = "vitamin"


# ============================================
# OUTPUT TYPES
# ============================================


@strawberry.type
class GramRangeType:
    """Min/max grams per day."""

    min_g: int
    max_g: int


@strawberry.type
class MacronutrientRangesType:
    """AMDR gram ranges."""

    carbohydrates: GramRangeType
    proteins: GramRangeType
    lipids: GramRangeType


@strawberry.type
class MacronutrientValuesType:
    """One value per macronutrient."""

    cho: float  # carbohydrate
    ptn: float  # protein
    lip: float  # lipid


@strawberry.type
class RecommendedMacronutrientsType:
    """Grams, kcal and g/kg for a target macronutrient split."""

    grams: MacronutrientValuesType
    kcal: MacronutrientValuesType
    per_kg: Optional[MacronutrientValuesType] = None


@strawberry.type
class EnergyPlanType:
    """GEB, GET and the derived macronutrient plan."""

    geb: float  # kcal/day
    get: int  # kcal/day
    macronutrient_ranges: MacronutrientRangesType
    recommended_macronutrients: RecommendedMacronutrientsType


@strawberry.type
class MicronutrientRecommendationType:
    """Daily recommended intake for one micronutrient."""

    nutrient: str
    display_name: str
    category: NutrientCategoryEnum
    amount: float
    unit: str


# ============================================
# INPUT TYPES
# ============================================


@strawberry.input
class PatientInput:
    """Demographic and anthropometric data."""

    age: int  # years
    gender: PatientGenderEnum
    weight_kg: float
    height_cm: float


@strawberry.input
class EnergyParametersInput:
    """Patient data with activity level and special conditions."""

    age: int  # years
    gender: PatientGenderEnum
    weight_kg: float
    height_cm: float
    activity_level: ActivityLevelEnum
    is_obese_child_or_adolescent: bool = False
    is_pregnant: bool = False
    pregnancy_trimester: Optional[int] = None  # 1, 2 or 3
    is_lactating: bool = False
    lactation_period: Optional[LactationPeriodEnum] = None


@strawberry.input
class PercentageRangeInput:
    """Fraction of total energy, e.g. 0.45-0.65."""

    min: float
    max: float


@strawberry.input
class MacronutrientRangesInput:
    """AMDR override; omitted macronutrients keep the adult default."""

    carbohydrates: Optional[PercentageRangeInput] = None
    proteins: Optional[PercentageRangeInput] = None
    lipids: Optional[PercentageRangeInput] = None


@strawberry.input
class MacronutrientTargetsInput:
    """Target split as percentages (0-100) of total energy."""

    carbohydrate: float
    protein: float
    lipid: float


@strawberry.input
class MicronutrientQueryInput:
    """Patient data for the DRI panel; give age or date of birth."""

    gender: PatientGenderEnum
    age: Optional[int] = None
    date_of_birth: Optional[date] = None
    is_pregnant: bool = False
    is_lactating: bool = False
    nutrients: Optional[List[str]] = None
