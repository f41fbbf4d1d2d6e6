"""Unit tests for GEBService."""

import pytest

from nutricalc.domain.nutrition_calculator.calculation.geb_service import GEBService
from nutricalc.domain.nutrition_calculator.core.value_objects import (
    BasicPatientInfo,
    Gender,
)


class TestGEBService:
    """Test GEB calculation using the IOM 2002 equations."""

    def setup_method(self):
        """Set up test fixtures."""
        self.service = GEBService()

    def test_calculate_geb_male(self):
        """Test GEB calculation for male."""
        info = BasicPatientInfo(age=30, gender=Gender.MALE, weight_kg=70.0, height_cm=175.0)

        geb = self.service.calculate(info)

        # Expected: 662 - 9.53*30 + 15.91*70 + 539.6*1.75 = 2434.1
        assert geb == pytest.approx(2434.1)

    def test_calculate_geb_female(self):
        """Test GEB calculation for female."""
        info = BasicPatientInfo(age=25, gender=Gender.FEMALE, weight_kg=60.0, height_cm=165.0)

        geb = self.service.calculate(info)

        # Expected: 354 - 6.91*25 + 9.36*60 + 726*1.65 = 1940.75
        assert geb == pytest.approx(1940.75)

    def test_calculate_geb_different_ages(self):
        """Test that age lowers GEB by 9.53 kcal/year for men."""
        young = BasicPatientInfo(age=25, gender=Gender.MALE, weight_kg=70.0, height_cm=170.0)
        older = BasicPatientInfo(age=35, gender=Gender.MALE, weight_kg=70.0, height_cm=170.0)

        difference = self.service.calculate(young) - self.service.calculate(older)

        assert difference == pytest.approx(95.3)

    def test_calculate_geb_different_weights(self):
        """Test that weight adds 9.36 kcal/kg for women."""
        lighter = BasicPatientInfo(age=30, gender=Gender.FEMALE, weight_kg=60.0, height_cm=165.0)
        heavier = BasicPatientInfo(age=30, gender=Gender.FEMALE, weight_kg=70.0, height_cm=165.0)

        difference = self.service.calculate(heavier) - self.service.calculate(lighter)

        assert difference == pytest.approx(93.6)

    def test_calculate_geb_different_heights(self):
        """Test that height adds 539.6 kcal/m for men."""
        shorter = BasicPatientInfo(age=30, gender=Gender.MALE, weight_kg=70.0, height_cm=160.0)
        taller = BasicPatientInfo(age=30, gender=Gender.MALE, weight_kg=70.0, height_cm=180.0)

        difference = self.service.calculate(taller) - self.service.calculate(shorter)

        assert difference == pytest.approx(107.92)

    def test_calculate_geb_sex_difference(self):
        """Test that the same body gives a higher GEB for men."""
        male = BasicPatientInfo(age=30, gender=Gender.MALE, weight_kg=70.0, height_cm=170.0)
        female = BasicPatientInfo(age=30, gender=Gender.FEMALE, weight_kg=70.0, height_cm=170.0)

        assert self.service.calculate(male) > self.service.calculate(female)

    def test_calculate_geb_is_unrounded(self):
        """Test that GEB keeps its decimals."""
        info = BasicPatientInfo(age=31, gender=Gender.MALE, weight_kg=70.3, height_cm=175.0)

        geb = self.service.calculate(info)

        assert isinstance(geb, float)
        assert geb != round(geb)

    def test_calculate_geb_no_age_bracket_check(self):
        """Test that GEB applies the adult formula at any age."""
        info = BasicPatientInfo(age=10, gender=Gender.FEMALE, weight_kg=35.0, height_cm=140.0)

        # 354 - 69.1 + 327.6 + 1016.4
        assert self.service.calculate(info) == pytest.approx(1628.9)
