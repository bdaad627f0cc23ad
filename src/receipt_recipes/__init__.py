"""Receipt Recipes - Ingredient extraction from receipts and recipe ranking."""

__version__ = "0.1.0"

from . import ingredients, recipes
from .pipeline import RecipeRecommender, recommend

__all__ = ["ingredients", "recipes", "RecipeRecommender", "recommend"]
