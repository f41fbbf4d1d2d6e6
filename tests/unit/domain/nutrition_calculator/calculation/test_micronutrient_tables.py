"""Unit tests for the micronutrient DRI lookups."""

import pytest

from nutricalc.domain.nutrition_calculator.calculation import micronutrient_tables as tables
from nutricalc.domain.nutrition_calculator.core.value_objects import (
    Gender,
    MicronutrientInput,
    NutrientCategory,
)


def _patient(age: int, gender: Gender = Gender.FEMALE, **flags) -> MicronutrientInput:
    return MicronutrientInput(age=age, gender=gender, **flags)


class TestCalcium:
    """Calcium brackets."""

    @pytest.mark.parametrize(
        "patient, expected",
        [
            (_patient(25), 1000),
            (_patient(60), 1200),
            (_patient(60, Gender.MALE), 1000),
            (_patient(75, Gender.MALE), 1200),
            (_patient(17, is_pregnant=True), 1300),
            (_patient(17, is_lactating=True), 1300),
            (_patient(30, is_pregnant=True), 1000),
        ],
    )
    def test_calcium(self, patient, expected):
        assert tables.get_calcium_recommendation(patient) == expected


class TestIron:
    """Iron brackets."""

    @pytest.mark.parametrize(
        "patient, expected",
        [
            (_patient(30), 18),
            (_patient(19), 18),
            (_patient(50), 18),
            (_patient(55), 8),
            (_patient(16), 8),
            (_patient(30, is_pregnant=True), 27),
            (_patient(30, Gender.MALE), 8),
        ],
    )
    def test_iron(self, patient, expected):
        assert tables.get_iron_recommendation(patient) == expected


class TestMagnesium:
    """Magnesium brackets."""

    @pytest.mark.parametrize(
        "patient, expected",
        [
            (_patient(25, Gender.MALE), 400),
            (_patient(40, Gender.MALE), 420),
            (_patient(25), 310),
            (_patient(40), 320),
        ],
    )
    def test_magnesium(self, patient, expected):
        assert tables.get_magnesium_recommendation(patient) == expected


class TestGenderDependentValues:
    """Lookups that only switch on gender."""

    @pytest.mark.parametrize(
        "lookup, male, female",
        [
            (tables.get_zinc_recommendation, 11, 8),
            (tables.get_potassium_recommendation, 3400, 2600),
            (tables.get_chromium_recommendation, 35, 25),
            (tables.get_manganese_recommendation, 2.3, 1.8),
            (tables.get_vitamin_a_recommendation, 900, 700),
            (tables.get_vitamin_c_recommendation, 90, 75),
            (tables.get_thiamin_recommendation, 1.2, 1.1),
            (tables.get_riboflavin_recommendation, 1.3, 1.1),
            (tables.get_niacin_recommendation, 16, 14),
            (tables.get_choline_recommendation, 550, 425),
        ],
    )
    def test_gender_split(self, lookup, male, female):
        assert lookup(_patient(35, Gender.MALE)) == male
        assert lookup(_patient(35, Gender.FEMALE)) == female


class TestConditionDependentValues:
    """Pregnancy-driven lookups."""

    def test_zinc_pregnant(self):
        assert tables.get_zinc_recommendation(_patient(30, is_pregnant=True)) == 11

    def test_iodine(self):
        assert tables.get_iodine_recommendation(_patient(30)) == 150
        assert tables.get_iodine_recommendation(_patient(30, is_pregnant=True)) == 220

    def test_folate(self):
        assert tables.get_folate_recommendation(_patient(30)) == 400
        assert tables.get_folate_recommendation(_patient(30, is_pregnant=True)) == 600


class TestAgeDependentValues:
    """Lookups with age brackets."""

    @pytest.mark.parametrize(
        "patient, expected",
        [
            (_patient(30, Gender.MALE), 1.3),
            (_patient(30), 1.3),
            (_patient(60, Gender.MALE), 1.7),
            (_patient(60), 1.5),
            (_patient(15), 1.3),
        ],
    )
    def test_pyridoxine(self, patient, expected):
        assert tables.get_pyridoxine_recommendation(patient) == expected

    @pytest.mark.parametrize("age, expected", [(30, 15), (70, 15), (71, 20)])
    def test_vitamin_d(self, age, expected):
        assert tables.get_vitamin_d_recommendation(_patient(age)) == expected


class TestFixedValues:
    """Zero-argument lookups."""

    @pytest.mark.parametrize(
        "lookup, expected",
        [
            (tables.get_selenium_recommendation, 55),
            (tables.get_sodium_recommendation, 1500),
            (tables.get_phosphorus_recommendation, 700),
            (tables.get_copper_recommendation, 900),
            (tables.get_vitamin_e_recommendation, 15),
            (tables.get_pantothenic_acid_recommendation, 5),
            (tables.get_biotin_recommendation, 30),
            (tables.get_cobalamin_recommendation, 2.4),
        ],
    )
    def test_fixed(self, lookup, expected):
        assert lookup() == expected


class TestMicronutrientTable:
    """Table layout."""

    def test_panel_size_and_order(self):
        keys = list(tables.MICRONUTRIENT_TABLE)
        categories = [entry.category for entry in tables.MICRONUTRIENT_TABLE.values()]

        assert len(keys) == 25
        assert categories.count(NutrientCategory.MINERAL) == 12
        assert categories.count(NutrientCategory.VITAMIN) == 13
        assert categories == sorted(
            categories, key=lambda c: c != NutrientCategory.MINERAL
        )
        assert keys[0] == "calcium"
        assert keys[-1] == "choline"

    def test_find_entry_case_insensitive(self):
        assert tables.find_entry(" Vitamin_B12 ") is tables.MICRONUTRIENT_TABLE["vitamin_b12"]

    def test_find_entry_unknown(self):
        assert tables.find_entry("unobtainium") is None

    def test_entry_amount_ignores_patient_for_fixed_values(self):
        entry = tables.MICRONUTRIENT_TABLE["selenium"]

        assert entry.amount(_patient(30)) == 55

    def test_every_entry_resolves(self):
        patient = _patient(40, Gender.MALE)

        for entry in tables.MICRONUTRIENT_TABLE.values():
            assert entry.amount(patient) > 0
