"""Queries for the nutrition calculator."""

from .get_micronutrient_recommendations import (
    GetMicronutrientRecommendationsQuery,
    GetMicronutrientRecommendationsQueryHandler,
)

__all__ = [
    "GetMicronutrientRecommendationsQuery",
    "GetMicronutrientRecommendationsQueryHandler",
]
