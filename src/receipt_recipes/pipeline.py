"""Receipt text to ranked recipe recommendations."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional, Sequence

from tqdm import tqdm

from receipt_recipes.config import PRIMARY_INGREDIENT_COUNT, TOP_N_RECIPES
from receipt_recipes.ingredients import (
    SOURCE_KEYWORD,
    SOURCE_LLM,
    ExtractionResult,
    extract_keyword_ingredients,
    normalize_ingredient_list,
)
from receipt_recipes.recipes import (
    RankedResult,
    Recipe,
    RecipeSource,
    all_recipes,
    rank_recipes,
    score_recipes,
)

logger = logging.getLogger(__name__)


class RecipeRecommender:
    """Extract ingredients from receipt text and rank recipes for them.

    Ingredient extraction first asks the configured extractor, any object
    with an ``extract_ingredients(text) -> str`` method returning a comma
    separated line. When there is no extractor, or it fails or answers with
    nothing usable, the keyword scanner runs on the raw text instead. The
    extractor is called once per receipt with no retries.

    Attributes:
        extractor: Language model ingredient extractor, or None.
        recipes: Recipes to rank. Defaults to the bundled catalog.
        recipe_source: Optional remote source whose recipes are ranked after
            the catalog ones.
        top_n (int): Number of recipes returned.
        primary_count (int): Number of leading ingredients given the primary boost.
    """

    def __init__(
        self,
        extractor=None,
        recipes: Optional[Sequence[Recipe]] = None,
        recipe_source: Optional[RecipeSource] = None,
        top_n: int = TOP_N_RECIPES,
        primary_count: int = PRIMARY_INGREDIENT_COUNT,
    ):
        self.extractor = extractor
        self.recipes = tuple(recipes) if recipes is not None else all_recipes()
        self.recipe_source = recipe_source
        self.top_n = top_n
        self.primary_count = primary_count

    def _extract_with_llm(self, raw_text: str) -> Optional[ExtractionResult]:
        if self.extractor is None:
            return None
        try:
            answer = self.extractor.extract_ingredients(raw_text)
        except Exception as e:
            logger.warning(f"Ingredient extractor unavailable, using keywords: {e}")
            return None

        if not isinstance(answer, str):
            logger.warning(
                f"Ingredient extractor returned {type(answer).__name__}, using keywords"
            )
            return None
        ingredients = normalize_ingredient_list(answer)
        if not ingredients:
            logger.warning("Ingredient extractor returned no ingredients, using keywords")
            return None
        return ExtractionResult(ingredients, SOURCE_LLM)

    def extract(self, raw_text: Optional[str]) -> ExtractionResult:
        """Extract the ingredient list from raw OCR text.

        Returns:
            ExtractionResult tagged with the strategy that produced it.
        """
        if not raw_text or not raw_text.strip():
            return ExtractionResult((), SOURCE_KEYWORD)

        result = self._extract_with_llm(raw_text)
        if result is None:
            result = ExtractionResult(
                extract_keyword_ingredients(raw_text), SOURCE_KEYWORD
            )
        logger.debug(f"Extracted ingredients via {result.source}: {result.ingredients}")
        return result

    def _candidate_recipes(self, ingredients: Sequence[str]) -> Sequence[Recipe]:
        if self.recipe_source is None or not ingredients:
            return self.recipes
        try:
            remote = self.recipe_source.fetch_recipes(ingredients)
        except Exception as e:
            logger.warning(
                f"Recipe source {self.recipe_source.name} failed, using catalog only: {e}"
            )
            return self.recipes
        return self.recipes + tuple(remote)

    def recommend(self, raw_text: Optional[str]) -> RankedResult:
        """Recommend recipes for one receipt.

        Args:
            raw_text: OCR text of the receipt. None or blank text yields an
                empty result.

        Returns:
            RankedResult with the ingredient list and at most ``top_n`` recipes.
        """
        extraction = self.extract(raw_text)
        if not extraction.ingredients:
            return RankedResult((), (), extraction.source)

        scored = score_recipes(
            extraction.ingredients,
            self._candidate_recipes(extraction.ingredients),
            primary_count=self.primary_count,
        )
        ranked = rank_recipes(scored, top_n=self.top_n)
        return RankedResult(extraction.ingredients, ranked, extraction.source)

    def recommend_batch(
        self, raw_texts: Sequence[Optional[str]], max_concurrent: int = 4
    ) -> List[RankedResult]:
        """Recommend recipes for many receipts in parallel.

        Args:
            raw_texts: OCR texts, one per receipt.
            max_concurrent: Maximum number of parallel workers.

        Returns:
            One RankedResult per input text, in input order.
        """
        with ThreadPoolExecutor(max_workers=max_concurrent) as executor:
            return list(
                tqdm(
                    executor.map(self.recommend, raw_texts),
                    total=len(raw_texts),
                    desc="Recommending recipes",
                )
            )


def recommend(
    raw_text: Optional[str],
    extractor=None,
    recipes: Optional[Sequence[Recipe]] = None,
    recipe_source: Optional[RecipeSource] = None,
    top_n: int = TOP_N_RECIPES,
    primary_count: int = PRIMARY_INGREDIENT_COUNT,
) -> RankedResult:
    """Recommend recipes for one receipt; see RecipeRecommender.recommend."""
    recommender = RecipeRecommender(
        extractor=extractor,
        recipes=recipes,
        recipe_source=recipe_source,
        top_n=top_n,
        primary_count=primary_count,
    )
    return recommender.recommend(raw_text)
