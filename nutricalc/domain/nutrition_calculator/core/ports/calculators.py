"""Calculator ports - interfaces for energy and nutrient calculations."""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..value_objects.macronutrients import (
    CalculatedMacronutrientValues,
    MacronutrientPercentageRanges,
    RangedMacronutrientGrams,
    TargetMacronutrientDistribution,
)
from ..value_objects.micronutrients import (
    MicronutrientInput,
    MicronutrientRecommendation,
)
from ..value_objects.patient_info import BasicPatientInfo, GETCalculationParameters


class IGEBCalculator(ABC):
    """Port for basal energy expenditure (GEB) calculation."""

    @abstractmethod
    def calculate(self, info: BasicPatientInfo) -> float:
        """Calculate GEB in kcal/day."""
        pass


class IGETCalculator(ABC):
    """Port for total energy expenditure (GET/EER) calculation."""

    @abstractmethod
    def calculate(self, params: GETCalculationParameters) -> int:
        """Calculate GET in whole kcal/day."""
        pass


class IMacroCalculator(ABC):
    """Port for macronutrient distribution calculation."""

    @abstractmethod
    def calculate_ranges(
        self,
        vet: float,
        percentage_ranges: Optional[MacronutrientPercentageRanges] = None,
    ) -> RangedMacronutrientGrams:
        """Convert energy and percentage ranges into gram ranges."""
        pass

    @abstractmethod
    def calculate_recommended(
        self,
        total_kcal: float,
        targets: TargetMacronutrientDistribution,
        weight_kg: Optional[float] = None,
    ) -> CalculatedMacronutrientValues:
        """Convert single-point targets into grams, kcal and g/kg."""
        pass


class IMicronutrientCalculator(ABC):
    """Port for micronutrient DRI lookups."""

    @abstractmethod
    def recommend(
        self, nutrient: str, params: MicronutrientInput
    ) -> MicronutrientRecommendation:
        """Look up a single nutrient."""
        pass

    @abstractmethod
    def recommend_all(self, params: MicronutrientInput) -> List[MicronutrientRecommendation]:
        """Build the full recommendation panel."""
        pass
