"""Domain exceptions for the nutrition calculator."""

from .domain_errors import (
    CalculatorDomainError,
    InvalidPatientDataError,
    UnknownNutrientError,
    UnsupportedAgeError,
)

__all__ = [
    "CalculatorDomainError",
    "InvalidPatientDataError",
    "UnsupportedAgeError",
    "UnknownNutrientError",
]
