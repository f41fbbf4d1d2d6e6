"""Patient input value objects for energy expenditure calculations."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional

from ..exceptions.domain_errors import InvalidPatientDataError
from .activity_level import ActivityLevel
from .gender import Gender


class LactationPeriod(str, Enum):
    """Lactation period used for the EER energy increment."""

    FIRST_6 = "first6"  # first 6 months postpartum
    AFTER_6 = "after6"  # after 6 months postpartum


@dataclass(frozen=True)
class BasicPatientInfo:
    """Demographic and anthropometric data for a single calculation.

    Built fresh from the patient's latest record for each call; never
    persisted by the calculator.

    Attributes:
        age: Age in completed years (>= 0)
        gender: Calculation gender
        weight_kg: Body weight in kilograms (> 0)
        height_cm: Height in centimeters (> 0)
    """

    age: int
    gender: Gender
    weight_kg: float
    height_cm: float

    def __post_init__(self) -> None:
        """Validate patient data constraints.

        Raises:
            InvalidPatientDataError: If any constraint is violated
        """
        if self.age < 0:
            raise InvalidPatientDataError(f"Age must be non-negative, got {self.age}")

        if self.weight_kg <= 0:
            raise InvalidPatientDataError(
                f"Weight must be positive, got {self.weight_kg}"
            )

        if self.height_cm <= 0:
            raise InvalidPatientDataError(
                f"Height must be positive, got {self.height_cm}"
            )

        if not isinstance(self.gender, Gender):
            raise InvalidPatientDataError(
                f"Gender must be a Gender, got {self.gender!r}"
            )

    @property
    def height_m(self) -> float:
        """Height in meters."""
        return self.height_cm / 100


@dataclass(frozen=True)
class GETCalculationParameters(BasicPatientInfo):
    """Inputs for total energy expenditure (EER) calculation.

    Attributes:
        activity_level: Physical activity category
        is_obese_child_or_adolescent: Use the overweight formulas (3-18 years)
        is_pregnant: Add the pregnancy increment (adult women)
        pregnancy_trimester: 1, 2 or 3
        is_lactating: Add the lactation increment (adult women)
        lactation_period: Months postpartum bracket
    """

    activity_level: ActivityLevel
    is_obese_child_or_adolescent: bool = False
    is_pregnant: bool = False
    pregnancy_trimester: Optional[int] = None
    is_lactating: bool = False
    lactation_period: Optional[LactationPeriod] = None

    def __post_init__(self) -> None:
        super().__post_init__()

        if self.pregnancy_trimester is not None and self.pregnancy_trimester not in (
            1,
            2,
            3,
        ):
            raise InvalidPatientDataError(
                f"Pregnancy trimester must be 1, 2 or 3, got {self.pregnancy_trimester}"
            )

        if self.lactation_period is not None and not isinstance(
            self.lactation_period, LactationPeriod
        ):
            raise InvalidPatientDataError(
                f"Unknown lactation period: {self.lactation_period!r}"
            )

    def basic_info(self) -> BasicPatientInfo:
        """Strip the activity and condition fields."""
        return BasicPatientInfo(
            age=self.age,
            gender=self.gender,
            weight_kg=self.weight_kg,
            height_cm=self.height_cm,
        )


def calculate_age(date_of_birth: date, today: Optional[date] = None) -> int:
    """Age in completed years on ``today`` (defaults to the current date).

    Raises:
        InvalidPatientDataError: If the birth date is in the future

    Example:
        >>> calculate_age(date(1990, 6, 15), today=date(2024, 6, 14))
        33
    """
    reference = today or date.today()
    if date_of_birth > reference:
        raise InvalidPatientDataError(
            f"Date of birth {date_of_birth.isoformat()} is in the future"
        )
    age = reference.year - date_of_birth.year
    if (reference.month, reference.day) < (date_of_birth.month, date_of_birth.day):
        age -= 1
    return age
