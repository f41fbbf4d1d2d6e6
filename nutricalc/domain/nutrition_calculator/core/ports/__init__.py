"""Ports (interfaces) for the nutrition calculator domain."""

from .calculators import (
    IGEBCalculator,
    IGETCalculator,
    IMacroCalculator,
    IMicronutrientCalculator,
)

__all__ = [
    "IGEBCalculator",
    "IGETCalculator",
    "IMacroCalculator",
    "IMicronutrientCalculator",
]
