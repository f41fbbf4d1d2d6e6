"""Nutrition calculator GraphQL resolvers."""

from nutricalc.graphql.resolvers.nutrition_calculator.queries import (
    NutritionCalculatorQueries,
)

__all__ = ["NutritionCalculatorQueries"]
