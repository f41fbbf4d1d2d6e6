"""Domain exceptions for the nutrition calculator."""


class CalculatorDomainError(Exception):
    """Base exception for nutrition calculator domain errors."""

    pass


class InvalidPatientDataError(CalculatorDomainError):
    """Raised when patient data validation fails."""

    pass


class UnsupportedAgeError(CalculatorDomainError):
    """Raised when no formula covers the patient's age bracket."""

    def __init__(self, age: int, calculation: str):
        super().__init__(
            f"No {calculation} formula for age {age} (supported: 3 years and older)"
        )
        self.age = age
        self.calculation = calculation


class UnknownNutrientError(CalculatorDomainError):
    """Raised when a micronutrient key is not in the DRI table."""

    def __init__(self, nutrient: str):
        super().__init__(f"Unknown micronutrient: {nutrient}")
        self.nutrient = nutrient
