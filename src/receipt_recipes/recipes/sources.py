"""Remote recipe sources that extend the static catalog."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Sequence
from urllib.parse import quote

import requests

from receipt_recipes.config import (
    HTTP_TIMEOUT,
    MEALDB_BASE_URL,
    MEALDB_LOOKUP_LIMIT,
    MEALDB_MAX_INGREDIENTS,
    PRIMARY_INGREDIENT_COUNT,
)
from receipt_recipes.retry import retry_on_connection_error

from .matching import primary_ingredients
from .models import Recipe
from .translation import to_korean, to_query_term

logger = logging.getLogger(__name__)


class RecipeSource(ABC):
    """Abstract base class for recipe sources."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this recipe source."""
        pass

    @abstractmethod
    def fetch_recipes(self, ingredients: Sequence[str]) -> List[Recipe]:
        """Fetch candidate recipes for an extracted ingredient list.

        Args:
            ingredients: Ordered, deduplicated ingredient tokens

        Returns:
            List of recipes to score alongside the catalog
        """
        pass


def _text_field(meal: Dict, field: str) -> Optional[str]:
    value = meal.get(field)
    if value is None:
        return None
    value = str(value).strip()
    return value or None


class MealDbRecipeSource(RecipeSource):
    """Recipes from TheMealDB, looked up by the primary ingredients.

    Each primary ingredient is searched with the ``filter.php`` endpoint and
    the matching meals are fetched one by one with ``lookup.php``. Names and
    ingredient lists are localised to Korean; instructions are kept as is.

    Attributes:
        session: The underlying requests session
        base_url: API root ending with a slash
        lookup_limit: Maximum number of meals fetched in detail
        primary_count: Number of leading ingredients used as search terms
        timeout: Per-request timeout in seconds
    """

    def __init__(
        self,
        base_url: str = MEALDB_BASE_URL,
        session: Optional[requests.Session] = None,
        lookup_limit: int = MEALDB_LOOKUP_LIMIT,
        primary_count: int = PRIMARY_INGREDIENT_COUNT,
        timeout: float = HTTP_TIMEOUT,
    ):
        self.session = session or requests.Session()
        self.base_url = base_url
        self.lookup_limit = lookup_limit
        self.primary_count = primary_count
        self.timeout = timeout

    @property
    def name(self) -> str:
        return "themealdb"

    @retry_on_connection_error()
    def _get_json(self, url: str) -> Dict:
        response = self.session.get(url, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def _fetch_meals(self, endpoint: str, value: str) -> List[Dict]:
        url = f"{self.base_url}{endpoint}?i={quote(value)}"
        try:
            payload = self._get_json(url)
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.warning(f"Skipping {url}: {e}")
            return []
        meals = payload.get("meals") if isinstance(payload, dict) else None
        return meals if isinstance(meals, list) else []

    def find_meal_ids(self, ingredients: Sequence[str]) -> List[str]:
        """Collect meal ids for the primary ingredients, first seen first."""
        meal_ids = {}
        for ingredient in primary_ingredients(ingredients, self.primary_count):
            query = to_query_term(ingredient).strip()
            if not query:
                continue
            for meal in self._fetch_meals("filter.php", query):
                meal_id = meal.get("idMeal")
                if meal_id is not None:
                    meal_ids[str(meal_id)] = None
        return list(meal_ids)

    def parse_meal(self, meal: Dict) -> Optional[Recipe]:
        """Convert a TheMealDB meal object into a Korean-localised Recipe."""
        name = _text_field(meal, "strMeal")
        if not name:
            return None

        need = []
        for i in range(1, MEALDB_MAX_INGREDIENTS + 1):
            ingredient = _text_field(meal, f"strIngredient{i}")
            if not ingredient:
                continue
            measure = _text_field(meal, f"strMeasure{i}")
            entry = f"{ingredient} {measure}" if measure else ingredient
            need.append(to_korean(entry))
        if not need:
            return None

        return Recipe(
            name=to_korean(name),
            need=tuple(need),
            desc=_text_field(meal, "strInstructions") or "",
        )

    def fetch_recipes(self, ingredients: Sequence[str]) -> List[Recipe]:
        if not ingredients:
            return []

        recipes = []
        for meal_id in self.find_meal_ids(ingredients)[: self.lookup_limit]:
            meals = self._fetch_meals("lookup.php", meal_id)
            if not meals:
                continue
            recipe = self.parse_meal(meals[0])
            if recipe:
                recipes.append(recipe)

        logger.info(f"Fetched {len(recipes)} recipes from {self.name}")
        return recipes
