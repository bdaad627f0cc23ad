"""Recipe ranking."""

from typing import Iterable, Tuple

from receipt_recipes.config import TOP_N_RECIPES

from .models import ScoredRecipe


def rank_recipes(
    scored: Iterable[ScoredRecipe], top_n: int = TOP_N_RECIPES
) -> Tuple[ScoredRecipe, ...]:
    """Order scored recipes by descending score and keep the best ``top_n``.

    The sort is stable, so equal scores keep their incoming (catalog) order.

    Examples:
        Scores [3, 3, 1, 5] in catalog order rank as [5, 3, 3, 1].
    """
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    return tuple(ranked[:top_n])
