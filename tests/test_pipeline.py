import pytest

from receipt_recipes.ingredients.llm import IngredientExtractionError
from receipt_recipes.pipeline import RecipeRecommender, recommend
from receipt_recipes.recipes.models import RankedResult, Recipe, ScoredRecipe
from receipt_recipes.recipes.sources import RecipeSource


@pytest.fixture
def extractor(mocker):
    return mocker.Mock()


class FixedRecipeSource(RecipeSource):
    def __init__(self, recipes=None, error=None):
        self.recipes = recipes or []
        self.error = error

    @property
    def name(self) -> str:
        return "fixed"

    def fetch_recipes(self, ingredients):
        if self.error:
            raise self.error
        return list(self.recipes)


def test_recommend_with_llm_ingredients(extractor):
    extractor.extract_ingredients.return_value = "사과, 양파"
    result = recommend("사과 양파 영수증", extractor=extractor)

    assert result.source == "llm"
    assert result.ingredients == ("사과", "양파")
    assert [s.recipe.name for s in result.recipes] == [
        "감자조림",
        "된장찌개",
        "참치김치찌개",
        "치즈 오믈렛",
        "감자전",
    ]
    assert all(s.score == 3 for s in result.recipes)
    extractor.extract_ingredients.assert_called_once_with("사과 양파 영수증")


def test_recommend_falls_back_to_keywords_on_error(extractor):
    extractor.extract_ingredients.side_effect = IngredientExtractionError("down")
    result = recommend("계란 두 개 구매", extractor=extractor)

    assert result.source == "keyword"
    assert result.ingredients == ("계란",)
    assert result.recipes
    assert result.recipes[0].score == 3


@pytest.mark.parametrize("answer", ["", " ,\n ", None, ["사과"]])
def test_recommend_falls_back_on_unusable_answer(extractor, answer):
    extractor.extract_ingredients.return_value = answer
    result = recommend("계란 두 개 구매", extractor=extractor)

    assert result.source == "keyword"
    assert result.ingredients == ("계란",)


def test_recommend_without_extractor():
    result = recommend("국산 양파 1.5kg\n서울우유 1L")
    assert result.source == "keyword"
    assert result.ingredients == ("양파", "우유")


@pytest.mark.parametrize("raw_text", [None, "", "   \n"])
def test_recommend_empty_input(extractor, raw_text):
    result = recommend(raw_text, extractor=extractor)

    assert result == RankedResult((), (), "keyword")
    extractor.extract_ingredients.assert_not_called()


def test_recommend_no_match(extractor):
    extractor.extract_ingredients.return_value = "세제"
    result = recommend("세제 4,500", extractor=extractor)

    assert result.ingredients == ("세제",)
    assert result.recipes == ()
    assert result.source == "llm"


def test_recommend_is_idempotent(extractor):
    extractor.extract_ingredients.return_value = "감자, 치즈, 우유"
    recommender = RecipeRecommender(extractor=extractor)
    assert recommender.recommend("영수증") == recommender.recommend("영수증")


def test_primary_count_changes_scores(extractor):
    recipe = Recipe("김치전", ("김치",))
    extractor.extract_ingredients.return_value = "사과, 양파, 김치"

    two = RecipeRecommender(extractor=extractor, recipes=[recipe]).recommend("x")
    three = RecipeRecommender(
        extractor=extractor, recipes=[recipe], primary_count=3
    ).recommend("x")

    assert two.recipes == (ScoredRecipe(recipe, 1),)
    assert three.recipes == (ScoredRecipe(recipe, 3),)


def test_recipe_source_recipes_ranked_after_catalog(extractor):
    local = Recipe("양파전", ("양파",))
    remote = Recipe("원격 양파 요리", ("양파 1개",))
    extractor.extract_ingredients.return_value = "양파"
    recommender = RecipeRecommender(
        extractor=extractor,
        recipes=[local],
        recipe_source=FixedRecipeSource([remote]),
    )

    result = recommender.recommend("양파")
    assert [s.recipe.name for s in result.recipes] == ["양파전", "원격 양파 요리"]


def test_failing_recipe_source_uses_catalog_only(extractor):
    local = Recipe("양파전", ("양파",))
    extractor.extract_ingredients.return_value = "양파"
    recommender = RecipeRecommender(
        extractor=extractor,
        recipes=[local],
        recipe_source=FixedRecipeSource(error=RuntimeError("boom")),
    )

    assert recommender.recommend("양파").recipes == (ScoredRecipe(local, 3),)


def test_recommend_batch_keeps_input_order():
    recommender = RecipeRecommender()
    results = recommender.recommend_batch(
        ["계란 두 개 구매", "", "국산 양파 1.5kg"], max_concurrent=2
    )

    assert [r.ingredients for r in results] == [("계란",), (), ("양파",)]


def test_to_dict_payload(extractor):
    extractor.extract_ingredients.return_value = "감자"
    recipe = Recipe("감자전", ("감자", "양파", "소금"), "부칩니다.")
    result = RecipeRecommender(extractor=extractor, recipes=[recipe]).recommend("감자")

    assert result.to_dict() == {
        "ingredients": ["감자"],
        "recipes": [
            {
                "name": "감자전",
                "need": ["감자", "양파", "소금"],
                "desc": "부칩니다.",
                "matchCount": 3,
            }
        ],
    }
