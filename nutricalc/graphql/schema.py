"""Main GraphQL schema factory.

Usage:
    from nutricalc.graphql.schema import create_schema
    schema = create_schema()
"""

import datetime

import strawberry

from nutricalc.graphql.resolvers.nutrition_calculator import NutritionCalculatorQueries


@strawberry.type
class Query:
    @strawberry.field
    def server_time(self) -> str:
        return datetime.datetime.now(datetime.timezone.utc).isoformat()

    @strawberry.field
    def health(self) -> str:
        return "ok"

    @strawberry.field(description="Energy, macronutrient and micronutrient calculations")  # type: ignore[misc]
    def nutrition_calculator(self) -> NutritionCalculatorQueries:
        """Nutrition calculator queries.

        Example:
            query {
              nutritionCalculator {
                get(parameters: {age: 40, gender: MALE, weightKg: 80,
                                 heightCm: 180, activityLevel: LOW_ACTIVE})
                micronutrients(input: {age: 40, gender: MALE}) { nutrient amount unit }
              }
            }
        """
        return NutritionCalculatorQueries()


def create_schema() -> strawberry.Schema:
    """Create the Strawberry schema with all resolvers.

    Returns:
        Configured Strawberry Schema instance
    """
    return strawberry.Schema(query=Query)
