"""GETService - Total Energy Expenditure (EER) calculation."""

import logging

from ..core.exceptions.domain_errors import UnsupportedAgeError
from ..core.ports.calculators import IGETCalculator
from ..core.value_objects.gender import Gender
from ..core.value_objects.patient_info import GETCalculationParameters, LactationPeriod
from .rounding import round_half_up

logger = logging.getLogger(__name__)

ADULT_MIN_AGE = 19
CHILD_MIN_AGE = 3

# Extra kcal/day by trimester; the first trimester needs no increment.
PREGNANCY_INCREMENTS = {1: 0, 2: 340, 3: 452}

LACTATION_INCREMENTS = {
    LactationPeriod.FIRST_6: 500,
    LactationPeriod.AFTER_6: 400,
}
LACTATION_DEFAULT_INCREMENT = 330


class GETService(IGETCalculator):
    """Calculate total energy expenditure as Estimated Energy Requirement.

    Uses the IOM 2005 EER equations, where PA is the physical activity
    coefficient for the patient's gender and activity level.

    Adults (19+):
        Men:   662 - 9.53 × age + PA × (15.91 × weight + 539.6 × height)
        Women: 354 - 6.91 × age + PA × (9.36 × weight + 726 × height)
               + pregnancy increment (trimester 2: +340, 3: +452)
               + lactation increment (first 6 months: +500, after: +400)

    Children and adolescents (3-18):
        Boys:        88.5 - 61.9 × age + PA × (26.7 × weight + 903 × height) + 25
        Obese boys:  114 - 50.9 × age + PA × (19.5 × weight + 1161.4 × height)
        Girls:       135.3 - 30.8 × age + PA × (10.0 × weight + 934 × height) + 20
        Obese girls: 389 - 41.2 × age + PA × (15.0 × weight + 701.6 × height)

    Weight in kg, height in meters.
    """

    def calculate(self, params: GETCalculationParameters) -> int:
        """Calculate GET from patient data and activity level.

        Args:
            params: Patient data, activity level and special conditions

        Returns:
            int: GET in kcal/day, rounded to the nearest whole kcal

        Raises:
            UnsupportedAgeError: If the patient is younger than 3 years
        """
        if params.age >= ADULT_MIN_AGE:
            eer = self._adult_eer(params)
        elif params.age >= CHILD_MIN_AGE:
            eer = self._child_eer(params)
        else:
            raise UnsupportedAgeError(params.age, "GET")

        return round_half_up(eer)

    def _adult_eer(self, params: GETCalculationParameters) -> float:
        pa = params.activity_level.pa_coefficient(params.gender)
        weight = params.weight_kg
        height = params.height_m

        if params.gender == Gender.MALE:
            return 662 - 9.53 * params.age + pa * (15.91 * weight + 539.6 * height)

        eer = 354 - 6.91 * params.age + pa * (9.36 * weight + 726 * height)

        if params.is_pregnant and params.is_lactating:
            logger.warning(
                "GET requested for a patient both pregnant and lactating; "
                "adding both energy increments"
            )

        if params.is_pregnant and params.pregnancy_trimester is not None:
            eer += PREGNANCY_INCREMENTS[params.pregnancy_trimester]

        if params.is_lactating:
            eer += LACTATION_INCREMENTS.get(
                params.lactation_period, LACTATION_DEFAULT_INCREMENT
            )

        return eer

    def _child_eer(self, params: GETCalculationParameters) -> float:
        pa = params.activity_level.pa_coefficient(params.gender)
        age = params.age
        weight = params.weight_kg
        height = params.height_m
        obese = params.is_obese_child_or_adolescent

        if params.gender == Gender.MALE:
            if obese:
                return 114 - 50.9 * age + pa * (19.5 * weight + 1161.4 * height)
            return 88.5 - 61.9 * age + pa * (26.7 * weight + 903 * height) + 25

        if obese:
            return 389 - 41.2 * age + pa * (15.0 * weight + 701.6 * height)
        return 135.3 - 30.8 * age + pa * (10.0 * weight + 934 * height) + 20
