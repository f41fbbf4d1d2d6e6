"""Calculation services for the nutrition calculator."""

from .geb_service import GEBService
from .get_service import GETService
from .macro_service import MacroService
from .micronutrient_service import MicronutrientService

__all__ = [
    "GEBService",
    "GETService",
    "MacroService",
    "MicronutrientService",
]
