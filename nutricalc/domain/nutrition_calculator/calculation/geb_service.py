"""GEBService - Basal Energy Expenditure calculation."""

from ..core.ports.calculators import IGEBCalculator
from ..core.value_objects.gender import Gender
from ..core.value_objects.patient_info import BasicPatientInfo


class GEBService(IGEBCalculator):
    """Calculate basal energy expenditure (GEB) with the IOM 2002 equations.

    Formula:
        Men:   GEB = 662 - 9.53 × age + 15.91 × weight(kg) + 539.6 × height(m)
        Women: GEB = 354 - 6.91 × age + 9.36 × weight(kg) + 726 × height(m)

    The equations are defined for adults; no child variant is provided.

    References:
        Institute of Medicine. Dietary Reference Intakes for Energy,
        Carbohydrate, Fiber, Fat, Fatty Acids, Cholesterol, Protein, and
        Amino Acids. Washington, DC: National Academies Press; 2002/2005.
    """

    def calculate(self, info: BasicPatientInfo) -> float:
        """Calculate GEB from patient data.

        Args:
            info: Patient age, gender, weight and height

        Returns:
            float: GEB in kcal/day (unrounded)

        Example:
            >>> service = GEBService()
            >>> info = BasicPatientInfo(
            ...     age=30, gender=Gender.MALE, weight_kg=70.0, height_cm=175.0
            ... )
            >>> round(service.calculate(info), 2)
            2434.1
        """
        if info.gender == Gender.MALE:
            return 662 - 9.53 * info.age + 15.91 * info.weight_kg + 539.6 * info.height_m

        return 354 - 6.91 * info.age + 9.36 * info.weight_kg + 726 * info.height_m
