"""Tests for candidate filtering."""

from nutrition_planner.domain.profile import DietaryConstraints
from nutrition_planner.services.candidates import exclude_recipe_ids, filter_candidates
from tests.conftest import make_recipe


def _catalog():
    return [
        make_recipe("A", 400, ingredients=("Oats", "Milk")),
        make_recipe("B", 500, ingredients=("Chicken", "Rice")),
        make_recipe("C", 450, ingredients=("peanuts", "noodles")),
        make_recipe("D", 300, ingredients=("Shrimp ", "garlic")),
        make_recipe("E", 200),
    ]


def test_filter_removes_excluded_allergen_and_intolerance() -> None:
    constraints = DietaryConstraints(
        excluded_ingredients=frozenset({"peanuts"}),
        allergies=frozenset({"shrimp"}),
        intolerances=frozenset({"milk"}),
    )

    filtered = filter_candidates(_catalog(), constraints)

    assert [recipe.id for recipe in filtered] == ["B", "E"]


def test_filter_is_idempotent_and_does_not_mutate() -> None:
    catalog = _catalog()
    constraints = DietaryConstraints(allergies=frozenset({"RICE"}))

    once = filter_candidates(catalog, constraints)
    twice = filter_candidates(once, constraints)

    assert once == twice
    assert len(catalog) == 5


def test_filter_without_exclusions_keeps_everything() -> None:
    catalog = _catalog()

    assert filter_candidates(catalog, DietaryConstraints()) == catalog


def test_filtered_recipes_never_contain_blocked_ingredients() -> None:
    constraints = DietaryConstraints(
        excluded_ingredients=frozenset({"garlic", "oats"}),
    )

    for recipe in filter_candidates(_catalog(), constraints):
        names = {ingredient.strip().lower() for ingredient in recipe.ingredients}
        assert not names & constraints.blocked_ingredients()


def test_exclude_recipe_ids_keeps_order() -> None:
    remaining = exclude_recipe_ids(_catalog(), {"B", "D"})

    assert [recipe.id for recipe in remaining] == ["A", "C", "E"]
