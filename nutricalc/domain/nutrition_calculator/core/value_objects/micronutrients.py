"""Micronutrient value objects - DRI lookup input and panel rows."""

from dataclasses import dataclass
from enum import Enum

from ..exceptions.domain_errors import InvalidPatientDataError
from .gender import Gender


class NutrientCategory(str, Enum):
    """Micronutrient family."""

    MINERAL = "mineral"
    VITAMIN = "vitamin"


@dataclass(frozen=True)
class MicronutrientInput:
    """Patient data driving the DRI table lookups.

    Attributes:
        age: Age in completed years
        gender: Calculation gender
        is_pregnant: Pregnancy DRI applies
        is_lactating: Lactation DRI applies
    """

    age: int
    gender: Gender
    is_pregnant: bool = False
    is_lactating: bool = False

    def __post_init__(self) -> None:
        if self.age < 0:
            raise InvalidPatientDataError(f"Age must be non-negative, got {self.age}")


@dataclass(frozen=True)
class MicronutrientRecommendation:
    """One row of a micronutrient recommendation panel.

    Attributes:
        nutrient: Stable key (e.g. "iron", "vitamin_b12")
        display_name: Human-readable name
        category: Mineral or vitamin
        amount: Recommended daily amount
        unit: Unit of ``amount`` (mg, mcg, mcg RAE, ...)
    """

    nutrient: str
    display_name: str
    category: NutrientCategory
    amount: float
    unit: str

    def __str__(self) -> str:
        return f"{self.display_name}: {self.amount:g} {self.unit}/day"
