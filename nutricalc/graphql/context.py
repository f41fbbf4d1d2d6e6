"""GraphQL context factory for dependency injection.

Resolvers access services through ``info.context.get("service_name")``.
"""

from typing import Any, Optional

from fastapi import Request
from strawberry.fastapi import BaseContext

from nutricalc.application.nutrition_calculator.orchestrators.energy_plan_orchestrator import (  # noqa: E501
    EnergyPlanOrchestrator,
)
from nutricalc.application.nutrition_calculator.queries.get_micronutrient_recommendations import (  # noqa: E501
    GetMicronutrientRecommendationsQueryHandler,
)
from nutricalc.domain.nutrition_calculator.core.ports.calculators import (
    IGEBCalculator,
    IGETCalculator,
    IMacroCalculator,
)


class GraphQLContext(BaseContext):
    """GraphQL context with all calculator dependencies.

    Attributes:
        geb_calculator: Basal energy expenditure service
        get_calculator: Total energy expenditure service
        macro_calculator: Macronutrient distribution service
        energy_plan_orchestrator: GEB -> GET -> macros workflow
        micronutrient_handler: DRI panel query handler
        request: FastAPI request object
    """

    def __init__(
        self,
        geb_calculator: IGEBCalculator,
        get_calculator: IGETCalculator,
        macro_calculator: IMacroCalculator,
        energy_plan_orchestrator: EnergyPlanOrchestrator,
        micronutrient_handler: GetMicronutrientRecommendationsQueryHandler,
        request: Optional[Request] = None,
    ) -> None:
        super().__init__()
        self.geb_calculator = geb_calculator
        self.get_calculator = get_calculator
        self.macro_calculator = macro_calculator
        self.energy_plan_orchestrator = energy_plan_orchestrator
        self.micronutrient_handler = micronutrient_handler
        self.request = request

    def get(self, key: str) -> Any:
        """Get dependency by name, or None if not found.

        Example:
            >>> calculator = info.context.get("get_calculator")
        """
        return getattr(self, key, None)
