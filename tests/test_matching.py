import pytest

from receipt_recipes.recipes.catalog import all_recipes
from receipt_recipes.recipes.matching import (
    matches,
    primary_ingredients,
    score_recipe,
    score_recipes,
)
from receipt_recipes.recipes.models import Recipe, ScoredRecipe

RICE_EGG = Recipe("Egg rice", ("rice", "egg"))
BRAISED_POTATO = Recipe("감자조림", ("감자", "양파", "간장", "설탕"))


@pytest.mark.parametrize(
    "ingredients, need, expected",
    [
        ({"rice"}, "rice", True),
        ({"Rice"}, "rice", True),
        ({"TOMATO"}, "Tomato Sauce", True),
        ({"tomato"}, "tomato sauce", True),
        ({"tomato sauce"}, "tomato", True),
        ({"tomatoes"}, "tomato", True),
        ({"대파"}, "대파 1단", True),
        ({"carrot"}, "rice", False),
        (set(), "rice", False),
    ],
)
def test_matches(ingredients, need, expected):
    """Test exact, case-insensitive, and two-way substring matching."""
    assert matches(ingredients, need) is expected


@pytest.mark.parametrize(
    "ingredients, expected",
    [
        ((), ()),
        (("a",), ("a",)),
        (("a", "b"), ("a", "b")),
        (("a", "b", "c"), ("a", "b")),
    ],
)
def test_primary_ingredients(ingredients, expected):
    assert primary_ingredients(ingredients) == expected


def test_score_base_plus_primary_boost():
    assert score_recipes(("rice",), [RICE_EGG]) == [ScoredRecipe(RICE_EGG, 3)]


def test_score_recipes_excludes_zero_scores():
    assert score_recipes(("carrot",), [RICE_EGG]) == []


def test_score_recipes_without_ingredients():
    assert score_recipes((), [RICE_EGG]) == []


def test_score_two_primary_ingredients():
    # 양파 earns the base point and the primary boost; 사과 matches nothing
    assert score_recipes(("사과", "양파"), [BRAISED_POTATO]) == [
        ScoredRecipe(BRAISED_POTATO, 3)
    ]


def test_non_primary_ingredient_gets_base_weight_only():
    recipe = Recipe("김치전", ("김치",))
    ingredients = ("rice", "egg", "김치")
    assert score_recipes(ingredients, [recipe]) == [ScoredRecipe(recipe, 1)]
    assert score_recipes(ingredients, [recipe], primary_count=3) == [
        ScoredRecipe(recipe, 3)
    ]


def test_repeated_need_counts_twice():
    recipe = Recipe("Double rice", ("rice", "rice"))
    assert score_recipe(recipe, {"rice"}, {"rice"}) == 6


def test_custom_weights():
    assert score_recipe(RICE_EGG, {"rice", "egg"}, {"rice"}, base_weight=5, primary_weight=0) == 10


def test_score_recipes_keeps_catalog_order():
    recipes = [
        Recipe("a", ("egg",)),
        Recipe("b", ("carrot",)),
        Recipe("c", ("rice", "egg")),
    ]
    scored = score_recipes(("egg", "rice"), recipes)
    assert [(s.recipe.name, s.score) for s in scored] == [("a", 3), ("c", 6)]


def test_score_recipes_uses_bundled_catalog_by_default():
    scored = score_recipes(("사과", "양파"))
    by_name = {s.recipe.name: s.score for s in scored}
    assert by_name["감자조림"] == 3
    assert len(scored) < len(all_recipes())
