"""MicronutrientService - DRI recommendation panel."""

from typing import List

from ..core.exceptions.domain_errors import UnknownNutrientError
from ..core.ports.calculators import IMicronutrientCalculator
from ..core.value_objects.micronutrients import (
    MicronutrientInput,
    MicronutrientRecommendation,
)
from .micronutrient_tables import MICRONUTRIENT_TABLE, MicronutrientEntry, find_entry


class MicronutrientService(IMicronutrientCalculator):
    """Build micronutrient recommendations from the DRI tables."""

    def recommend(
        self, nutrient: str, params: MicronutrientInput
    ) -> MicronutrientRecommendation:
        """Look up a single nutrient.

        Args:
            nutrient: Table key, e.g. "iron" or "vitamin_b12"
            params: Patient age, gender and condition flags

        Returns:
            MicronutrientRecommendation: Amount with unit and category

        Raises:
            UnknownNutrientError: If the key is not in the table
        """
        entry = find_entry(nutrient)
        if entry is None:
            raise UnknownNutrientError(nutrient)
        return _to_recommendation(nutrient.strip().lower(), entry, params)

    def recommend_all(self, params: MicronutrientInput) -> List[MicronutrientRecommendation]:
        """Build the full panel, minerals first then vitamins."""
        return [
            _to_recommendation(key, entry, params)
            for key, entry in MICRONUTRIENT_TABLE.items()
        ]


def _to_recommendation(
    key: str, entry: MicronutrientEntry, params: MicronutrientInput
) -> MicronutrientRecommendation:
    return MicronutrientRecommendation(
        nutrient=key,
        display_name=entry.display_name,
        category=entry.category,
        amount=entry.amount(params),
        unit=entry.unit,
    )
