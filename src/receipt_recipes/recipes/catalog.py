"""Static recipe catalog loading."""

import functools
import json
import logging
import os
from typing import Tuple

from .models import Recipe

logger = logging.getLogger(__name__)

RECIPE_CATALOG_FILE = os.path.join(
    os.path.dirname(__file__), "data", "recipe_catalog.json"
)


def load_catalog(path: str) -> Tuple[Recipe, ...]:
    """Load recipes from a JSON catalog file.

    Args:
        path: Path to a JSON list of ``{"name", "need", "desc"}`` objects.

    Returns:
        Tuple of Recipe objects in file order.

    Raises:
        ValueError: If an entry has no name, no need list, or a blank need token.
    """
    with open(path, "r", encoding="utf-8") as f:
        entries = json.load(f)

    recipes = []
    for entry in entries:
        name = (entry.get("name") or "").strip()
        need = entry.get("need") or []
        if not name or not need:
            raise ValueError(f"Recipe entry without name or need list in {path}: {entry!r}")
        if any(not isinstance(token, str) or not token.strip() for token in need):
            raise ValueError(f"Recipe '{name}' has a blank need token")
        recipes.append(
            Recipe(
                name=name,
                need=tuple(token.strip() for token in need),
                desc=entry.get("desc") or "",
            )
        )

    logger.debug("Loaded %d recipes from %s", len(recipes), path)
    return tuple(recipes)


@functools.lru_cache(maxsize=None)
def all_recipes() -> Tuple[Recipe, ...]:
    """Return the bundled recipe catalog, loaded once per process."""
    return load_catalog(RECIPE_CATALOG_FILE)
