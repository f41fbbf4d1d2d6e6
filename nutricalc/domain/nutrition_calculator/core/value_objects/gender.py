"""Gender value object - sex used by the reference formulas."""

from enum import Enum
from typing import Optional


class Gender(str, Enum):
    """Sex selector for the IOM energy formulas and DRI tables.

    Patient records may carry a third value ("other"); the formulas only
    know two, so every non-male value is calculated as female.
    """

    MALE = "male"
    FEMALE = "female"

    @classmethod
    def from_patient_gender(cls, value: Optional[str]) -> "Gender":
        """Map a patient-record gender to the calculation gender.

        Example:
            >>> Gender.from_patient_gender("other")
            <Gender.FEMALE: 'female'>
        """
        if value is not None and value.strip().lower() == cls.MALE.value:
            return cls.MALE
        return cls.FEMALE
