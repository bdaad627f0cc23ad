"""Recipe scoring against an extracted ingredient list."""

from typing import Collection, List, Optional, Sequence, Tuple

from receipt_recipes.config import (
    BASE_MATCH_WEIGHT,
    PRIMARY_INGREDIENT_COUNT,
    PRIMARY_MATCH_WEIGHT,
)

from .catalog import all_recipes
from .models import Recipe, ScoredRecipe


def primary_ingredients(
    ingredients: Sequence[str], count: int = PRIMARY_INGREDIENT_COUNT
) -> Tuple[str, ...]:
    """Return the leading ingredients that receive the primary boost.

    The first extracted ingredients are the most likely to be intentional
    purchases. Shorter lists are returned whole.
    """
    return tuple(ingredients[:count])


def matches(ingredients: Collection[str], need: str) -> bool:
    """Check whether any ingredient satisfies a recipe need token.

    A need matches on exact membership, on case-insensitive equality, or when
    either string contains the other ignoring case. The containment rule lets
    "대파" satisfy "대파 1단" and "tomatoes" satisfy "tomato".

    Args:
        ingredients: Extracted ingredient tokens.
        need: One entry of a recipe's need list.

    Returns:
        True if at least one ingredient matches.
    """
    if need in ingredients:
        return True
    need_lower = need.lower()
    for ingredient in ingredients:
        ingredient_lower = ingredient.lower()
        if (
            ingredient_lower == need_lower
            or ingredient_lower in need_lower
            or need_lower in ingredient_lower
        ):
            return True
    return False


def score_recipe(
    recipe: Recipe,
    ingredients: Collection[str],
    primary: Collection[str],
    base_weight: int = BASE_MATCH_WEIGHT,
    primary_weight: int = PRIMARY_MATCH_WEIGHT,
) -> int:
    """Score one recipe.

    Every need token matched by the full ingredient set adds ``base_weight``;
    every need token matched by the primary set adds ``primary_weight`` on
    top. Repeated need tokens count each time.
    """
    base = 0
    boost = 0
    for need in recipe.need:
        if matches(ingredients, need):
            base += base_weight
        if matches(primary, need):
            boost += primary_weight
    return base + boost


def score_recipes(
    ingredients: Sequence[str],
    recipes: Optional[Sequence[Recipe]] = None,
    primary_count: int = PRIMARY_INGREDIENT_COUNT,
    base_weight: int = BASE_MATCH_WEIGHT,
    primary_weight: int = PRIMARY_MATCH_WEIGHT,
) -> List[ScoredRecipe]:
    """Score every recipe against the ingredient list.

    Args:
        ingredients: Ordered, deduplicated ingredient tokens.
        recipes: Recipes to score. Defaults to the bundled catalog.
        primary_count: Number of leading ingredients treated as primary.
        base_weight: Points per need matched by any ingredient.
        primary_weight: Extra points per need matched by a primary ingredient.

    Returns:
        ScoredRecipe for each recipe scoring at least 1, in input order.
    """
    if recipes is None:
        recipes = all_recipes()
    ingredient_set = frozenset(ingredients)
    primary = frozenset(primary_ingredients(ingredients, primary_count))

    scored = []
    for recipe in recipes:
        score = score_recipe(recipe, ingredient_set, primary, base_weight, primary_weight)
        if score > 0:
            scored.append(ScoredRecipe(recipe, score))
    return scored
