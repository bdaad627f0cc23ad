from receipt_recipes.recipes.models import Recipe, ScoredRecipe
from receipt_recipes.recipes.ranking import rank_recipes


def _scored(*scores):
    return [ScoredRecipe(Recipe(f"recipe {i}", ("rice",)), s) for i, s in enumerate(scores)]


def test_rank_recipes_sorts_descending_and_keeps_ties_stable():
    ranked = rank_recipes(_scored(3, 3, 1, 5))
    assert [s.score for s in ranked] == [5, 3, 3, 1]
    assert [s.recipe.name for s in ranked] == [
        "recipe 3",
        "recipe 0",
        "recipe 1",
        "recipe 2",
    ]


def test_rank_recipes_truncates_to_five():
    ranked = rank_recipes(_scored(1, 2, 3, 4, 5, 6, 7))
    assert [s.score for s in ranked] == [7, 6, 5, 4, 3]


def test_rank_recipes_returns_all_when_fewer_qualify():
    assert len(rank_recipes(_scored(2, 1))) == 2


def test_rank_recipes_empty():
    assert rank_recipes([]) == ()


def test_rank_recipes_custom_top_n():
    assert [s.score for s in rank_recipes(_scored(1, 9, 4), top_n=1)] == [9]
