"""Configuration constants for ingredient extraction and recipe ranking."""

import os

# --- Scoring ---

# Added once per recipe need matched by any extracted ingredient
BASE_MATCH_WEIGHT = 1
# Added on top of the base weight when a primary ingredient matches the need
PRIMARY_MATCH_WEIGHT = 2
# Leading ingredients of the extracted list treated as primary
PRIMARY_INGREDIENT_COUNT = 2
# Number of recipes returned by the ranker
TOP_N_RECIPES = 5

# --- AI ingredient extraction (AWS Bedrock) ---

DEFAULT_MODEL_ID = os.environ.get(
    "RECEIPT_RECIPES_MODEL_ID", "anthropic.claude-3-5-haiku-20241022-v1:0"
)
DEFAULT_REGION = os.environ.get("AWS_REGION", "us-east-1")
LLM_MAX_TOKENS = 512

# --- Remote recipe source (TheMealDB) ---

MEALDB_BASE_URL = "https://www.themealdb.com/api/json/v1/1/"
# Maximum number of meals looked up in detail per request
MEALDB_LOOKUP_LIMIT = 15
# TheMealDB exposes strIngredient1..strIngredient20
MEALDB_MAX_INGREDIENTS = 20
HTTP_TIMEOUT = 10
