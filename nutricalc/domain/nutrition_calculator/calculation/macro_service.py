"""MacroService - Macronutrient distribution calculation."""

import logging
from typing import Optional

from ..core.exceptions.domain_errors import InvalidPatientDataError
from ..core.ports.calculators import IMacroCalculator
from ..core.value_objects.macronutrients import (
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
from .rounding import round_half_up, round_to

logger = logging.getLogger(__name__)


class MacroService(IMacroCalculator):
    """Distribute a daily energy value across macronutrients.

    Calorie conversion:
        - Carbohydrates: 4 kcal/g
        - Protein: 4 kcal/g
        - Lipids: 9 kcal/g

    Percentage targets are not required to add up to 100; a warning is
    logged when they drift further than ``target_tolerance`` points.
    """

    def __init__(self, target_tolerance: float = 0.5) -> None:
        self._target_tolerance = target_tolerance

    def calculate_ranges(
        self,
        vet: float,
        percentage_ranges: Optional[MacronutrientPercentageRanges] = None,
    ) -> RangedMacronutrientGrams:
        """Convert total energy and AMDR fractions into gram ranges.

        Args:
            vet: Total energy value (kcal/day)
            percentage_ranges: Fractions of energy; adult AMDR when omitted

        Returns:
            RangedMacronutrientGrams: Whole-gram min/max per macronutrient

        Raises:
            InvalidPatientDataError: If ``vet`` is negative

        Example:
            >>> MacroService().calculate_ranges(2000).carbohydrates
            GramRange(min_g=225, max_g=325)
        """
        _check_energy(vet)
        ranges = percentage_ranges or MacronutrientPercentageRanges()

        return RangedMacronutrientGrams(
            carbohydrates=_gram_range(vet, ranges.carbohydrates, CARBOHYDRATE_KCAL_PER_G),
            proteins=_gram_range(vet, ranges.proteins, PROTEIN_KCAL_PER_G),
            lipids=_gram_range(vet, ranges.lipids, LIPID_KCAL_PER_G),
        )

    def calculate_recommended(
        self,
        total_kcal: float,
        targets: TargetMacronutrientDistribution,
        weight_kg: Optional[float] = None,
    ) -> CalculatedMacronutrientValues:
        """Convert percentage targets into grams, kcal and grams per kg.

        Args:
            total_kcal: Daily energy target
            targets: Percentage of energy per macronutrient (0-100)
            weight_kg: Body weight; g/kg values are added when positive

        Returns:
            CalculatedMacronutrientValues: grams (1 decimal), kcal (whole)
            and optional per_kg (1 decimal)

        Example:
            >>> result = MacroService().calculate_recommended(
            ...     2000, TargetMacronutrientDistribution(50, 20, 30)
            ... )
            >>> result.grams
            MacronutrientValues(cho=250.0, ptn=100.0, lip=66.7)
        """
        _check_energy(total_kcal)
        total = targets.total_percentage()
        if abs(total - 100) > self._target_tolerance:
            logger.warning(
                "Macronutrient targets add up to %.1f%% instead of 100%%", total
            )

        kcal_cho = total_kcal * targets.carbohydrate / 100
        kcal_ptn = total_kcal * targets.protein / 100
        kcal_lip = total_kcal * targets.lipid / 100

        grams_cho = kcal_cho / CARBOHYDRATE_KCAL_PER_G
        grams_ptn = kcal_ptn / PROTEIN_KCAL_PER_G
        grams_lip = kcal_lip / LIPID_KCAL_PER_G

        per_kg = None
        if weight_kg is not None and weight_kg > 0:
            per_kg = MacronutrientValues(
                cho=round_to(grams_cho / weight_kg, 1),
                ptn=round_to(grams_ptn / weight_kg, 1),
                lip=round_to(grams_lip / weight_kg, 1),
            )

        return CalculatedMacronutrientValues(
            grams=MacronutrientValues(
                cho=round_to(grams_cho, 1),
                ptn=round_to(grams_ptn, 1),
                lip=round_to(grams_lip, 1),
            ),
            kcal=MacronutrientValues(
                cho=round_to(kcal_cho, 0),
                ptn=round_to(kcal_ptn, 0),
                lip=round_to(kcal_lip, 0),
            ),
            per_kg=per_kg,
        )


def _check_energy(kcal: float) -> None:
    if kcal < 0:
        raise InvalidPatientDataError(f"Energy must be non-negative, got {kcal}")


def _gram_range(vet: float, fraction: PercentageRange, kcal_per_g: int) -> GramRange:
    return GramRange(
        min_g=round_half_up(vet * fraction.min / kcal_per_g),
        max_g=round_half_up(vet * fraction.max / kcal_per_g),
    )
