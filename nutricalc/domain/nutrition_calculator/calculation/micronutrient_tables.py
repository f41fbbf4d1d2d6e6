"""Micronutrient DRI tables.

One lookup per vitamin or mineral, transcribed from the adult Dietary
Reference Intakes (RDA where established, AI otherwise). Each returns the
daily amount in the unit listed in ``MICRONUTRIENT_TABLE``. Inputs outside
a published bracket fall through to the baseline value; nothing raises.

Nutrients whose adult DRI does not vary with age, gender or condition are
zero-argument functions.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from ..core.value_objects.gender import Gender
from ..core.value_objects.micronutrients import MicronutrientInput, NutrientCategory

# --- Minerals ---


def get_calcium_recommendation(params: MicronutrientInput) -> float:
    """Calcium, mg/day."""
    if params.is_pregnant or params.is_lactating:
        return 1300 if params.age < 19 else 1000
    if params.gender == Gender.FEMALE and params.age >= 51:
        return 1200
    if params.gender == Gender.MALE and params.age >= 71:
        return 1200
    return 1000


def get_iron_recommendation(params: MicronutrientInput) -> float:
    """Iron, mg/day."""
    if params.is_pregnant:
        return 27
    if params.gender == Gender.FEMALE and 19 <= params.age <= 50:
        return 18
    return 8


def get_zinc_recommendation(params: MicronutrientInput) -> float:
    """Zinc, mg/day."""
    if params.is_pregnant or params.gender == Gender.MALE:
        return 11
    return 8


def get_magnesium_recommendation(params: MicronutrientInput) -> float:
    """Magnesium, mg/day."""
    young_adult = 19 <= params.age <= 30
    if params.gender == Gender.MALE:
        return 400 if young_adult else 420
    return 310 if young_adult else 320


def get_selenium_recommendation() -> float:
    """Selenium, mcg/day."""
    return 55


def get_iodine_recommendation(params: MicronutrientInput) -> float:
    """Iodine, mcg/day."""
    return 220 if params.is_pregnant else 150


def get_potassium_recommendation(params: MicronutrientInput) -> float:
    """Potassium (AI), mg/day."""
    return 3400 if params.gender == Gender.MALE else 2600


def get_sodium_recommendation() -> float:
    """Sodium (AI), mg/day. The UL of 2300 mg is not part of the panel."""
    return 1500


def get_phosphorus_recommendation() -> float:
    """Phosphorus, mg/day."""
    return 700


def get_copper_recommendation() -> float:
    """Copper, mcg/day."""
    return 900


def get_chromium_recommendation(params: MicronutrientInput) -> float:
    """Chromium (AI), mcg/day."""
    return 35 if params.gender == Gender.MALE else 25


def get_manganese_recommendation(params: MicronutrientInput) -> float:
    """Manganese (AI), mg/day."""
    return 2.3 if params.gender == Gender.MALE else 1.8


# --- Vitamins ---


def get_vitamin_a_recommendation(params: MicronutrientInput) -> float:
    """Vitamin A, mcg RAE/day."""
    return 900 if params.gender == Gender.MALE else 700


def get_vitamin_d_recommendation(params: MicronutrientInput) -> float:
    """Vitamin D, mcg/day."""
    return 20 if params.age > 70 else 15


def get_vitamin_e_recommendation() -> float:
    """Vitamin E, mg/day alpha-tocopherol."""
    return 15


def get_vitamin_c_recommendation(params: MicronutrientInput) -> float:
    """Vitamin C, mg/day."""
    return 90 if params.gender == Gender.MALE else 75


def get_thiamin_recommendation(params: MicronutrientInput) -> float:
    """Thiamin (B1), mg/day."""
    return 1.2 if params.gender == Gender.MALE else 1.1


def get_riboflavin_recommendation(params: MicronutrientInput) -> float:
    """Riboflavin (B2), mg/day."""
    return 1.3 if params.gender == Gender.MALE else 1.1


def get_niacin_recommendation(params: MicronutrientInput) -> float:
    """Niacin (B3), mg NE/day."""
    return 16 if params.gender == Gender.MALE else 14


def get_pantothenic_acid_recommendation() -> float:
    """Pantothenic acid (B5, AI), mg/day."""
    return 5


def get_pyridoxine_recommendation(params: MicronutrientInput) -> float:
    """Pyridoxine (B6), mg/day."""
    if 19 <= params.age <= 50:
        return 1.3
    if params.age >= 51:
        return 1.7 if params.gender == Gender.MALE else 1.5
    return 1.3


def get_biotin_recommendation() -> float:
    """Biotin (B7, AI), mcg/day."""
    return 30


def get_folate_recommendation(params: MicronutrientInput) -> float:
    """Folate (B9), mcg DFE/day."""
    return 600 if params.is_pregnant else 400


def get_cobalamin_recommendation() -> float:
    """Cobalamin (B12), mcg/day."""
    return 2.4


def get_choline_recommendation(params: MicronutrientInput) -> float:
    """Choline (AI), mg/day."""
    return 550 if params.gender == Gender.MALE else 425


@dataclass(frozen=True)
class MicronutrientEntry:
    """Table row tying a nutrient key to its lookup and unit."""

    display_name: str
    category: NutrientCategory
    unit: str
    lookup: Callable[..., float]
    depends_on_patient: bool = True

    def amount(self, params: MicronutrientInput) -> float:
        if self.depends_on_patient:
            return self.lookup(params)
        return self.lookup()


_M = NutrientCategory.MINERAL
_V = NutrientCategory.VITAMIN

# Panel order: minerals first, then vitamins.
MICRONUTRIENT_TABLE: Dict[str, MicronutrientEntry] = {
    "calcium": MicronutrientEntry("Calcium", _M, "mg", get_calcium_recommendation),
    "iron": MicronutrientEntry("Iron", _M, "mg", get_iron_recommendation),
    "zinc": MicronutrientEntry("Zinc", _M, "mg", get_zinc_recommendation),
    "magnesium": MicronutrientEntry("Magnesium", _M, "mg", get_magnesium_recommendation),
    "selenium": MicronutrientEntry(
        "Selenium", _M, "mcg", get_selenium_recommendation, depends_on_patient=False
    ),
    "iodine": MicronutrientEntry("Iodine", _M, "mcg", get_iodine_recommendation),
    "potassium": MicronutrientEntry("Potassium", _M, "mg", get_potassium_recommendation),
    "sodium": MicronutrientEntry(
        "Sodium", _M, "mg", get_sodium_recommendation, depends_on_patient=False
    ),
    "phosphorus": MicronutrientEntry(
        "Phosphorus", _M, "mg", get_phosphorus_recommendation, depends_on_patient=False
    ),
    "copper": MicronutrientEntry(
        "Copper", _M, "mcg", get_copper_recommendation, depends_on_patient=False
    ),
    "chromium": MicronutrientEntry("Chromium", _M, "mcg", get_chromium_recommendation),
    "manganese": MicronutrientEntry("Manganese", _M, "mg", get_manganese_recommendation),
    "vitamin_a": MicronutrientEntry("Vitamin A", _V, "mcg RAE", get_vitamin_a_recommendation),
    "vitamin_d": MicronutrientEntry("Vitamin D", _V, "mcg", get_vitamin_d_recommendation),
    "vitamin_e": MicronutrientEntry(
        "Vitamin E", _V, "mg", get_vitamin_e_recommendation, depends_on_patient=False
    ),
    "vitamin_c": MicronutrientEntry("Vitamin C", _V, "mg", get_vitamin_c_recommendation),
    "vitamin_b1": MicronutrientEntry(
        "Thiamin (B1)", _V, "mg", get_thiamin_recommendation
    ),
    "vitamin_b2": MicronutrientEntry(
        "Riboflavin (B2)", _V, "mg", get_riboflavin_recommendation
    ),
    "vitamin_b3": MicronutrientEntry(
        "Niacin (B3)", _V, "mg NE", get_niacin_recommendation
    ),
    "vitamin_b5": MicronutrientEntry(
        "Pantothenic Acid (B5)",
        _V,
        "mg",
        get_pantothenic_acid_recommendation,
        depends_on_patient=False,
    ),
    "vitamin_b6": MicronutrientEntry(
        "Pyridoxine (B6)", _V, "mg", get_pyridoxine_recommendation
    ),
    "vitamin_b7": MicronutrientEntry(
        "Biotin (B7)", _V, "mcg", get_biotin_recommendation, depends_on_patient=False
    ),
    "vitamin_b9": MicronutrientEntry(
        "Folate (B9)", _V, "mcg DFE", get_folate_recommendation
    ),
    "vitamin_b12": MicronutrientEntry(
        "Cobalamin (B12)", _V, "mcg", get_cobalamin_recommendation, depends_on_patient=False
    ),
    "choline": MicronutrientEntry("Choline", _V, "mg", get_choline_recommendation),
}


def find_entry(nutrient: str) -> Optional[MicronutrientEntry]:
    """Look up a table row by key, case-insensitively."""
    return MICRONUTRIENT_TABLE.get(nutrient.strip().lower())
