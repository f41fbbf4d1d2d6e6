"""GetMicronutrientRecommendationsQuery - DRI panel for a patient."""

from dataclasses import dataclass
from datetime import date as DateType
from typing import List, Optional

from nutricalc.domain.nutrition_calculator.core.exceptions.domain_errors import (
    InvalidPatientDataError,
)
from nutricalc.domain.nutrition_calculator.core.ports.calculators import (
    IMicronutrientCalculator,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.gender import Gender
from nutricalc.domain.nutrition_calculator.core.value_objects.micronutrients import (
    MicronutrientInput,
    MicronutrientRecommendation,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.patient_info import (
    calculate_age,
)


@dataclass(frozen=True)
class GetMicronutrientRecommendationsQuery:
    """Query for a patient's micronutrient recommendations.

    Either ``age`` or ``date_of_birth`` must be given; the birth date wins
    when both are present.

    Attributes:
        gender: Patient-record gender ("male", "female" or "other")
        age: Age in completed years
        date_of_birth: Birth date, used to derive the age
        is_pregnant: Pregnancy DRI applies
        is_lactating: Lactation DRI applies
        reference_date: Date the age is computed at (defaults to today)
        nutrients: Restrict the panel to these keys
    """

    gender: str
    age: Optional[int] = None
    date_of_birth: Optional[DateType] = None
    is_pregnant: bool = False
    is_lactating: bool = False
    reference_date: Optional[DateType] = None
    nutrients: Optional[List[str]] = None


class GetMicronutrientRecommendationsQueryHandler:
    """Handler for GetMicronutrientRecommendationsQuery."""

    def __init__(self, calculator: IMicronutrientCalculator):
        self._calculator = calculator

    async def handle(
        self, query: GetMicronutrientRecommendationsQuery
    ) -> List[MicronutrientRecommendation]:
        """
        Handle micronutrient recommendations query.

        Args:
            query: Patient data and optional nutrient filter

        Returns:
            List[MicronutrientRecommendation]: Panel rows in table order,
                or in the requested order when ``nutrients`` is given

        Raises:
            InvalidPatientDataError: If neither age nor date of birth is set
            UnknownNutrientError: If a requested nutrient is not in the table
        """
        if query.date_of_birth is not None:
            age = calculate_age(query.date_of_birth, today=query.reference_date)
        elif query.age is not None:
            age = query.age
        else:
            raise InvalidPatientDataError("Either age or date_of_birth is required")

        params = MicronutrientInput(
            age=age,
            gender=Gender.from_patient_gender(query.gender),
            is_pregnant=query.is_pregnant,
            is_lactating=query.is_lactating,
        )

        if query.nutrients:
            return [self._calculator.recommend(key, params) for key in query.nutrients]

        return self._calculator.recommend_all(params)
