"""ActivityLevel value object - physical activity level for EER."""

from enum import Enum

from .gender import Gender


class ActivityLevel(str, Enum):
    """Physical Activity (PA) category for EER calculation (IOM 2005).

    - SEDENTARY: Typical daily living activities only
    - LOW_ACTIVE: Daily living + 30-60 min moderate activity
    - ACTIVE: Daily living + at least 60 min moderate activity
    - VERY_ACTIVE: Daily living + 60 min moderate + 60 min vigorous activity
    """

    SEDENTARY = "sedentary"
    LOW_ACTIVE = "low_active"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    def pa_coefficient(self, gender: Gender) -> float:
        """Get the PA coefficient applied to the weight/height term.

        Args:
            gender: Calculation gender

        Returns:
            float: PA coefficient (1.0 for sedentary)

        Example:
            >>> ActivityLevel.ACTIVE.pa_coefficient(Gender.MALE)
            1.25
        """
        return _PA_COEFFICIENTS[(gender, self)]

    def description(self) -> str:
        """Get human-readable description."""
        descriptions = {
            ActivityLevel.SEDENTARY: "Typical daily living activities",
            ActivityLevel.LOW_ACTIVE: "Daily living + 30-60 min moderate activity",
            ActivityLevel.ACTIVE: "Daily living + 60 min moderate activity",
            ActivityLevel.VERY_ACTIVE: "Daily living + 60 min moderate + 60 min vigorous",
        }
        return descriptions[self]


_PA_COEFFICIENTS = {
    (Gender.MALE, ActivityLevel.SEDENTARY): 1.0,
    (Gender.MALE, ActivityLevel.LOW_ACTIVE): 1.11,
    (Gender.MALE, ActivityLevel.ACTIVE): 1.25,
    (Gender.MALE, ActivityLevel.VERY_ACTIVE): 1.48,
    (Gender.FEMALE, ActivityLevel.SEDENTARY): 1.0,
    (Gender.FEMALE, ActivityLevel.LOW_ACTIVE): 1.12,
    (Gender.FEMALE, ActivityLevel.ACTIVE): 1.27,
    (Gender.FEMALE, ActivityLevel.VERY_ACTIVE): 1.45,
}
