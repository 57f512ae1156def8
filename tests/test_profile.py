"""Tests for profile and constraint models."""

import pytest

from nutrition_planner.domain.errors import InvalidProfileError, UnknownEnumValueError
from nutrition_planner.domain.profile import (
    ActivityLevel,
    DietaryConstraints,
    HealthGoal,
    Sex,
    UserProfile,
    parse_enum,
    parse_sex,
)
from tests.conftest import make_profile


def test_from_units_converts_imperial() -> None:
    profile = UserProfile.from_units(
        age=40,
        sex="female",
        height=5.5,
        weight=150,
        activity_level="light",
        health_goal="weight_loss",
        height_unit="ft",
        weight_unit="lb",
    )

    assert profile.height_cm == pytest.approx(167.64)
    assert profile.weight_kg == pytest.approx(68.0388)
    assert profile.activity_level == ActivityLevel.LIGHT
    assert profile.health_goal == HealthGoal.WEIGHT_LOSS


def test_from_units_rejects_unknown_unit() -> None:
    with pytest.raises(UnknownEnumValueError):
        UserProfile.from_units(
            age=40,
            sex="male",
            height=180,
            weight=12,
            activity_level="light",
            health_goal="maintenance",
            weight_unit="stone",
        )


def test_from_units_rejects_unknown_goal() -> None:
    with pytest.raises(UnknownEnumValueError) as excinfo:
        UserProfile.from_units(
            age=40,
            sex="male",
            height=180,
            weight=80,
            activity_level="light",
            health_goal="get_famous",
        )

    assert excinfo.value.field == "health_goal"


@pytest.mark.parametrize(
    ("field", "value"), [("age", -1), ("height_cm", 0.0), ("weight_kg", -3.0)]
)
def test_profile_rejects_out_of_range_numbers(field: str, value: float) -> None:
    with pytest.raises(InvalidProfileError) as excinfo:
        make_profile(**{field: value})

    assert excinfo.value.field == field


def test_parse_sex_maps_unknown_to_other() -> None:
    assert parse_sex("Male") == Sex.MALE
    assert parse_sex("non-binary") == Sex.OTHER


def test_parse_enum_is_case_insensitive() -> None:
    assert parse_enum(ActivityLevel, "activity_level", " Moderate ") == (
        ActivityLevel.MODERATE
    )


def test_constraints_lowercase_and_union() -> None:
    constraints = DietaryConstraints(
        excluded_ingredients=frozenset({"Peanuts"}),
        allergies=frozenset({" Shellfish"}),
        intolerances=frozenset({"LACTOSE"}),
    )

    assert constraints.blocked_ingredients() == {"peanuts", "shellfish", "lactose"}
