import dataclasses
from typing import Tuple


@dataclasses.dataclass(frozen=True)
class Recipe:
    """Dataclass for holding a catalog recipe."""

    name: str
    need: Tuple[str, ...]
    desc: str = ""


@dataclasses.dataclass(frozen=True)
class ScoredRecipe:
    recipe: Recipe
    score: int

    def to_dict(self) -> dict:
        return {
            "name": self.recipe.name,
            "need": list(self.recipe.need),
            "desc": self.recipe.desc,
            "matchCount": self.score,
        }


@dataclasses.dataclass(frozen=True)
class RankedResult:
    """Extracted ingredients together with the best matching recipes."""

    ingredients: Tuple[str, ...]
    recipes: Tuple[ScoredRecipe, ...]
    source: str  # provenance of the ingredient list: 'llm', 'keyword'

    def to_dict(self) -> dict:
        """Build the response payload with ``ingredients`` and ``recipes`` keys."""
        return {
            "ingredients": list(self.ingredients),
            "recipes": [scored.to_dict() for scored in self.recipes],
        }
