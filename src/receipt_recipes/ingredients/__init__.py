"""Ingredient extraction and normalization utilities."""

from .keywords import KeywordGroup, extract_keyword_ingredients, load_keyword_groups
from .llm import BedrockIngredientExtractor, IngredientExtractionError
from .models import SOURCE_KEYWORD, SOURCE_LLM, ExtractionResult
from .normalization import (
    ingredient_key,
    normalize_ingredient_list,
    split_ingredient_text,
)

__all__ = [
    "ingredient_key",
    "normalize_ingredient_list",
    "split_ingredient_text",
    "KeywordGroup",
    "extract_keyword_ingredients",
    "load_keyword_groups",
    "BedrockIngredientExtractor",
    "IngredientExtractionError",
    "ExtractionResult",
    "SOURCE_LLM",
    "SOURCE_KEYWORD",
]
