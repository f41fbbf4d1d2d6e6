"""Query resolvers for the nutrition calculator domain.

- geb: Basal energy expenditure
- get: Total energy expenditure (EER)
- macronutrientRanges: AMDR gram ranges for an energy value
- recommendedMacronutrients: Grams/kcal/g-per-kg for a target split
- energyPlan: All of the above in one call
- micronutrients: DRI recommendation panel
"""

import logging
from typing import TYPE_CHECKING, List, Optional

import strawberry
from graphql import GraphQLError

from nutricalc.application.nutrition_calculator.queries.get_micronutrient_recommendations import (  # noqa: E501
    GetMicronutrientRecommendationsQuery,
)
from nutricalc.domain.nutrition_calculator.core.exceptions.domain_errors import (
    CalculatorDomainError,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.activity_level import (
    ActivityLevel,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.gender import Gender
from nutricalc.domain.nutrition_calculator.core.value_objects.macronutrients import (
    MacronutrientPercentageRanges,
    PercentageRange,
    TargetMacronutrientDistribution,
)
from nutricalc.domain.nutrition_calculator.core.value_objects.patient_info import (
    BasicPatientInfo,
    GETCalculationParameters,
    LactationPeriod,
)
from nutricalc.graphql.types_nutrition_calculator import (
    EnergyParametersInput,
    EnergyPlanType,
    GramRangeType,
    MacronutrientRangesInput,
    MacronutrientRangesType,
    MacronutrientTargetsInput,
    MacronutrientValuesType,
    MicronutrientQueryInput,
    MicronutrientRecommendationType,
    NutrientCategoryEnum,
    PatientInput,
    PercentageRangeInput,
    RecommendedMacronutrientsType,
)

if TYPE_CHECKING:
    from nutricalc.domain.nutrition_calculator.core.value_objects.macronutrients import (  # noqa: E501
        CalculatedMacronutrientValues,
        MacronutrientValues,
        RangedMacronutrientGrams,
    )

logger = logging.getLogger(__name__)


# ============================================
# HELPER FUNCTIONS
# ============================================


def map_patient_input(patient: PatientInput) -> BasicPatientInfo:
    """Map GraphQL PatientInput to domain BasicPatientInfo."""
    return BasicPatientInfo(
        age=patient.age,
        gender=Gender.from_patient_gender(patient.gender.value),
        weight_kg=patient.weight_kg,
        height_cm=patient.height_cm,
    )


def map_energy_parameters_input(
    parameters: EnergyParametersInput,
) -> GETCalculationParameters:
    """Map GraphQL EnergyParametersInput to domain GETCalculationParameters."""
    lactation_period = (
        LactationPeriod(parameters.lactation_period.value)
        if parameters.lactation_period is not None
        else None
    )
    return GETCalculationParameters(
        age=parameters.age,
        gender=Gender.from_patient_gender(parameters.gender.value),
        weight_kg=parameters.weight_kg,
        height_cm=parameters.height_cm,
        activity_level=ActivityLevel(parameters.activity_level.value),
        is_obese_child_or_adolescent=parameters.is_obese_child_or_adolescent,
        is_pregnant=parameters.is_pregnant,
        pregnancy_trimester=parameters.pregnancy_trimester,
        is_lactating=parameters.is_lactating,
        lactation_period=lactation_period,
    )


def map_ranges_input(
    ranges: Optional[MacronutrientRangesInput],
) -> Optional[MacronutrientPercentageRanges]:
    """Map GraphQL ranges override, keeping defaults for omitted entries."""
    if ranges is None:
        return None

    defaults = MacronutrientPercentageRanges()

    return MacronutrientPercentageRanges(
        carbohydrates=_to_range(ranges.carbohydrates, defaults.carbohydrates),
        proteins=_to_range(ranges.proteins, defaults.proteins),
        lipids=_to_range(ranges.lipids, defaults.lipids),
    )


def _to_range(
    value: Optional[PercentageRangeInput], default: PercentageRange
) -> PercentageRange:
    if value is None:
        return default
    return PercentageRange(min=value.min, max=value.max)


def map_targets_input(targets: MacronutrientTargetsInput) -> TargetMacronutrientDistribution:
    """Map GraphQL targets to domain TargetMacronutrientDistribution."""
    return TargetMacronutrientDistribution(
        carbohydrate=targets.carbohydrate,
        protein=targets.protein,
        lipid=targets.lipid,
    )


def map_ranges_to_graphql(ranges: "RangedMacronutrientGrams") -> MacronutrientRangesType:
    """Map domain RangedMacronutrientGrams to GraphQL type."""
    return MacronutrientRangesType(
        carbohydrates=GramRangeType(
            min_g=ranges.carbohydrates.min_g, max_g=ranges.carbohydrates.max_g
        ),
        proteins=GramRangeType(min_g=ranges.proteins.min_g, max_g=ranges.proteins.max_g),
        lipids=GramRangeType(min_g=ranges.lipids.min_g, max_g=ranges.lipids.max_g),
    )


def _map_values(values: "MacronutrientValues") -> MacronutrientValuesType:
    return MacronutrientValuesType(cho=values.cho, ptn=values.ptn, lip=values.lip)


def map_recommended_to_graphql(
    result: "CalculatedMacronutrientValues",
) -> RecommendedMacronutrientsType:
    """Map domain CalculatedMacronutrientValues to GraphQL type."""
    return RecommendedMacronutrientsType(
        grams=_map_values(result.grams),
        kcal=_map_values(result.kcal),
        per_kg=_map_values(result.per_kg) if result.per_kg is not None else None,
    )


def _domain_error(exc: CalculatorDomainError) -> GraphQLError:
    logger.info("nutrition_calculator.rejected", extra={"reason": str(exc)})
    return GraphQLError(f"DOMAIN_ERROR: {exc}")


# ============================================
# QUERY RESOLVERS
# ============================================


@strawberry.type
class NutritionCalculatorQueries:
    """GraphQL queries for the nutrition calculator domain."""

    @strawberry.field
    def geb(self, info: strawberry.types.Info, patient: PatientInput) -> float:
        """Basal energy expenditure (kcal/day).

        Example:
            query {
              nutritionCalculator {
                geb(patient: {age: 30, gender: MALE, weightKg: 70, heightCm: 175})
              }
            }
        """
        calculator = info.context.get("geb_calculator")
        try:
            return calculator.calculate(map_patient_input(patient))
        except CalculatorDomainError as e:
            raise _domain_error(e) from e

    @strawberry.field
    def get(self, info: strawberry.types.Info, parameters: EnergyParametersInput) -> int:
        """Total energy expenditure (kcal/day, rounded)."""
        calculator = info.context.get("get_calculator")
        try:
            return calculator.calculate(map_energy_parameters_input(parameters))
        except CalculatorDomainError as e:
            raise _domain_error(e) from e

    @strawberry.field
    def macronutrient_ranges(
        self,
        info: strawberry.types.Info,
        vet: float,
        ranges: Optional[MacronutrientRangesInput] = None,
    ) -> MacronutrientRangesType:
        """AMDR gram ranges for an energy value."""
        calculator = info.context.get("macro_calculator")
        try:
            result = calculator.calculate_ranges(vet, map_ranges_input(ranges))
        except CalculatorDomainError as e:
            raise _domain_error(e) from e
        return map_ranges_to_graphql(result)

    @strawberry.field
    def recommended_macronutrients(
        self,
        info: strawberry.types.Info,
        total_kcal: float,
        targets: MacronutrientTargetsInput,
        weight_kg: Optional[float] = None,
    ) -> RecommendedMacronutrientsType:
        """Grams, kcal and g/kg for a target macronutrient split."""
        calculator = info.context.get("macro_calculator")
        try:
            result = calculator.calculate_recommended(
                total_kcal, map_targets_input(targets), weight_kg
            )
        except CalculatorDomainError as e:
            raise _domain_error(e) from e
        return map_recommended_to_graphql(result)

    @strawberry.field
    def energy_plan(
        self,
        info: strawberry.types.Info,
        parameters: EnergyParametersInput,
        targets: MacronutrientTargetsInput,
        ranges: Optional[MacronutrientRangesInput] = None,
    ) -> EnergyPlanType:
        """GEB, GET and the derived macronutrient plan in one call.

        Example:
            query {
              nutritionCalculator {
                energyPlan(
                  parameters: {age: 30, gender: FEMALE, weightKg: 60,
                               heightCm: 165, activityLevel: ACTIVE}
                  targets: {carbohydrate: 50, protein: 20, lipid: 30}
                ) { get recommendedMacronutrients { grams { cho } } }
              }
            }
        """
        orchestrator = info.context.get("energy_plan_orchestrator")
        try:
            plan = orchestrator.calculate_plan(
                params=map_energy_parameters_input(parameters),
                targets=map_targets_input(targets),
                percentage_ranges=map_ranges_input(ranges),
            )
        except CalculatorDomainError as e:
            raise _domain_error(e) from e

        return EnergyPlanType(
            geb=plan.geb,
            get=plan.get,
            macronutrient_ranges=map_ranges_to_graphql(plan.macronutrient_ranges),
            recommended_macronutrients=map_recommended_to_graphql(
                plan.recommended_macronutrients
            ),
        )

    @strawberry.field
    async def micronutrients(
        self, info: strawberry.types.Info, input: MicronutrientQueryInput
    ) -> List[MicronutrientRecommendationType]:
        """Micronutrient DRI panel for a patient."""
        handler = info.context.get("micronutrient_handler")
        query = GetMicronutrientRecommendationsQuery(
            gender=input.gender.value,
            age=input.age,
            date_of_birth=input.date_of_birth,
            is_pregnant=input.is_pregnant,
            is_lactating=input.is_lactating,
            nutrients=input.nutrients,
        )
        try:
            recommendations = await handler.handle(query)
        except CalculatorDomainError as e:
            raise _domain_error(e) from e

        return [
            MicronutrientRecommendationType(
                nutrient=r.nutrient,
                display_name=r.display_name,
                category=NutrientCategoryEnum(r.category.value),
                amount=r.amount,
                unit=r.unit,
            )
            for r in recommendations
        ]
