"""EnergyPlanOrchestrator - coordinates energy and macronutrient services."""

import logging
from dataclasses import dataclass
from typing import Optional

from nutricalc.domain.nutrition_calculator.calculation.geb_service import GEBService
from nutricalc.domain.nutrition_calculator.calculation.get_service import GETService
from nutricalc.domain.nutrition_calculator.calculation.macro_service import MacroService
from nutricalc.domain.nutrition_calculator.core.value_objects.macronutrients import (
    CalculatedMacronutrientValues,
    MacronutrientPercentageRanges,
    RangedMacronutrientGrams,
    TargetMacronutrientDistribution,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.patient_info import (
    GETCalculationParameters,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnergyPlan:
    """Result of the energy plan calculations."""

    geb: float
    get: int
    macronutrient_ranges: RangedMacronutrientGrams
    recommended_macronutrients: CalculatedMacronutrientValues


class EnergyPlanOrchestrator:
    """
    Orchestrates calculation services for a patient's energy plan.

    Flow:
    1. Calculate GEB from the patient's demographic data
    2. Calculate GET from activity level and special conditions
    3. Convert GET into AMDR gram ranges
    4. Convert GET and the target split into grams, kcal and g/kg
    """

    def __init__(
        self,
        geb_service: GEBService,
        get_service: GETService,
        macro_service: MacroService,
    ):
        self._geb_service = geb_service
        self._get_service = get_service
        self._macro_service = macro_service

    def calculate_plan(
        self,
        params: GETCalculationParameters,
        targets: TargetMacronutrientDistribution,
        percentage_ranges: Optional[MacronutrientPercentageRanges] = None,
    ) -> EnergyPlan:
        """
        Calculate a complete energy plan.

        Args:
            params: Patient data with activity level and conditions
            targets: Target macronutrient split (percent of energy)
            percentage_ranges: AMDR fractions; adult defaults when omitted

        Returns:
            EnergyPlan with all computed values

        Raises:
            UnsupportedAgeError: If GET has no formula for the patient's age
        """
        geb = self._geb_service.calculate(params.basic_info())

        get = self._get_service.calculate(params)

        ranges = self._macro_service.calculate_ranges(get, percentage_ranges)

        recommended = self._macro_service.calculate_recommended(
            total_kcal=get,
            targets=targets,
            weight_kg=params.weight_kg,
        )

        logger.info(
            "energy_plan.calculated",
            extra={"age": params.age, "gender": params.gender.value, "get": get},
        )

        return EnergyPlan(
            geb=geb,
            get=get,
            macronutrient_ranges=ranges,
            recommended_macronutrients=recommended,
        )
