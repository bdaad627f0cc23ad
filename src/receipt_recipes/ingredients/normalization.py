"""Ingredient list normalization utilities."""

import re
from typing import List, Optional, Tuple

# Any run of line breaks acts as a single comma separator
LINE_BREAKS = re.compile(r"[\r\n]+")


def ingredient_key(token: str) -> str:
    """Return the case-insensitive comparison key for an ingredient token.

    Examples:
        >>> ingredient_key("  Tomato ")
        "tomato"
    """
    return token.strip().lower()


def split_ingredient_text(text: Optional[str]) -> List[str]:
    """Split comma or line separated text into trimmed, non-empty pieces.

    Args:
        text: Raw text, e.g. a language model answer like "사과, 양파\\n햄".

    Returns:
        List of pieces in their original order, duplicates included.
    """
    if not text:
        return []
    text = LINE_BREAKS.sub(",", text)
    return [piece.strip() for piece in text.split(",") if piece.strip()]


def normalize_ingredient_list(text: Optional[str]) -> Tuple[str, ...]:
    """Turn separated ingredient text into an ordered list of unique tokens.

    Deduplication is case-insensitive. The first occurrence of each token
    keeps its original casing and position.

    Args:
        text: Raw text using commas and/or line breaks as separators. None or
            empty text yields an empty result.

    Returns:
        Tuple of unique ingredient tokens in first-seen order.

    Examples:
        >>> normalize_ingredient_list("A,a,B")
        ("A", "B")
        >>> normalize_ingredient_list("")
        ()
    """
    seen = set()
    ingredients = []
    for piece in split_ingredient_text(text):
        key = ingredient_key(piece)
        if key in seen:
            continue
        seen.add(key)
        ingredients.append(piece)
    return tuple(ingredients)
