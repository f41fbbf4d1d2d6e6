"""Macronutrient value objects - targets, ranges and calculated amounts."""

from dataclasses import dataclass, field
from typing import Optional

from ..exceptions.domain_errors import InvalidPatientDataError

# Energy density in kcal per gram
CARBOHYDRATE_KCAL_PER_G = 4
PROTEIN_KCAL_PER_G = 4
LIPID_KCAL_PER_G = 9


@dataclass(frozen=True)
class PercentageRange:
    """Min/max fraction of total energy (0.45 means 45%)."""

    min: float
    max: float

    def __post_init__(self) -> None:
        if self.min < 0 or self.max < 0:
            raise InvalidPatientDataError(
                f"Percentage range must be non-negative, got {self.min}-{self.max}"
            )
        if self.min > self.max:
            raise InvalidPatientDataError(
                f"Percentage range min exceeds max: {self.min} > {self.max}"
            )


@dataclass(frozen=True)
class MacronutrientPercentageRanges:
    """Acceptable macronutrient distribution ranges as energy fractions.

    Defaults are the adult AMDR: carbohydrates 45-65%, proteins 10-35%,
    lipids 20-35%.
    """

    carbohydrates: PercentageRange = field(
        default_factory=lambda: PercentageRange(min=0.45, max=0.65)
    )
    proteins: PercentageRange = field(
        default_factory=lambda: PercentageRange(min=0.10, max=0.35)
    )
    lipids: PercentageRange = field(
        default_factory=lambda: PercentageRange(min=0.20, max=0.35)
    )


@dataclass(frozen=True)
class GramRange:
    """Min/max grams per day."""

    min_g: int
    max_g: int


@dataclass(frozen=True)
class RangedMacronutrientGrams:
    """Macronutrient ranges in grams per day."""

    carbohydrates: GramRange
    proteins: GramRange
    lipids: GramRange


@dataclass(frozen=True)
class TargetMacronutrientDistribution:
    """Single-point macronutrient targets as percentages (0-100) of energy.

    The three values are expected to add up to 100 but this is not
    enforced here; callers own that rule.
    """

    carbohydrate: float
    protein: float
    lipid: float

    def __post_init__(self) -> None:
        for name in ("carbohydrate", "protein", "lipid"):
            value = getattr(self, name)
            if not (0 <= value <= 100):
                raise InvalidPatientDataError(
                    f"{name.capitalize()} target must be 0-100%, got {value}"
                )

    def total_percentage(self) -> float:
        """Sum of the three targets."""
        return self.carbohydrate + self.protein + self.lipid


@dataclass(frozen=True)
class MacronutrientValues:
    """One value per macronutrient (carbohydrate, protein, lipid)."""

    cho: float
    ptn: float
    lip: float

    def total(self) -> float:
        return self.cho + self.ptn + self.lip


@dataclass(frozen=True)
class CalculatedMacronutrientValues:
    """Recommended macronutrient amounts derived from an energy target.

    Attributes:
        grams: Grams per day (1 decimal)
        kcal: Kilocalories per day (whole numbers)
        per_kg: Grams per kg of body weight (1 decimal), when weight is known
    """

    grams: MacronutrientValues
    kcal: MacronutrientValues
    per_kg: Optional[MacronutrientValues] = None
