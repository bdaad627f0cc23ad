"""Recipe catalog, scoring, and ranking utilities."""

from .catalog import all_recipes, load_catalog
from .matching import matches, primary_ingredients, score_recipe, score_recipes
from .models import RankedResult, Recipe, ScoredRecipe
from .ranking import rank_recipes
from .sources import MealDbRecipeSource, RecipeSource
from .translation import to_korean, to_query_term

__all__ = [
    "Recipe",
    "ScoredRecipe",
    "RankedResult",
    "all_recipes",
    "load_catalog",
    "matches",
    "primary_ingredients",
    "score_recipe",
    "score_recipes",
    "rank_recipes",
    "RecipeSource",
    "MealDbRecipeSource",
    "to_korean",
    "to_query_term",
]
