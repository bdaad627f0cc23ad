"""Term tables for moving ingredient names between Korean and English."""

import re
from typing import List, Tuple

# Korean staples mapped to the English search terms TheMealDB understands
QUERY_TERMS = {
    "계란": "egg",
    "달걀": "egg",
    "밥": "rice",
    "쌀": "rice",
    "김치": "kimchi",
    "양파": "onion",
    "감자": "potato",
    "당근": "carrot",
    "사과": "apple",
    "치즈": "cheese",
    "베이컨": "bacon",
    "빵": "bread",
    "토마토": "tomato",
    "참치": "tuna",
    "요거트": "yogurt",
    "우유": "milk",
}

# English words replaced with Korean ones; multi-word terms come first so
# "green onion" is not consumed by "onion".
KOREAN_TERMS: List[Tuple[str, str]] = [
    (r"soy sauce", "간장"),
    (r"sesame oil", "참기름"),
    (r"green onions?", "대파"),
    (r"spring onions?", "대파"),
    (r"eggs?", "계란"),
    (r"onions?", "양파"),
    (r"garlic", "마늘"),
    (r"chicken", "닭고기"),
    (r"beef", "소고기"),
    (r"pork", "돼지고기"),
    (r"rice", "밥"),
    (r"noodles?", "면"),
    (r"tomato(?:es)?", "토마토"),
    (r"potato(?:es)?", "감자"),
    (r"carrots?", "당근"),
    (r"salt", "소금"),
    (r"pepper", "후추"),
    (r"sugar", "설탕"),
    (r"milk", "우유"),
    (r"butter", "버터"),
    (r"cheese", "치즈"),
    (r"yogh?urt", "요거트"),
    (r"tuna", "참치"),
    (r"bread", "빵"),
    (r"water", "물"),
    (r"oil", "기름"),
    # Dish names
    (r"bulgogi", "불고기"),
    (r"kimchi", "김치"),
    (r"kimbap|gimbap", "김밥"),
    (r"ramen|ramyeon", "라면"),
    (r"bibimbap", "비빔밥"),
    (r"tteokbokki|topokki", "떡볶이"),
]

_KOREAN_PATTERNS = [
    (re.compile(r"\b(?:" + pattern + r")\b", re.IGNORECASE), korean)
    for pattern, korean in KOREAN_TERMS
]


def to_query_term(ingredient: str) -> str:
    """Map a Korean ingredient to its English search term.

    Unknown ingredients are returned unchanged, original casing included.

    Examples:
        >>> to_query_term(" 계란 ")
        "egg"
        >>> to_query_term("Chicken")
        "Chicken"
    """
    if ingredient is None:
        return ""
    return QUERY_TERMS.get(ingredient.strip().lower(), ingredient)


def to_korean(text: str) -> str:
    """Replace known English food words with Korean ones.

    Only whole words are replaced, ignoring case; everything else is kept.

    Examples:
        >>> to_korean("Chicken Fried Rice")
        "닭고기 Fried 밥"
    """
    if not text or not text.strip():
        return text
    for pattern, korean in _KOREAN_PATTERNS:
        text = pattern.sub(korean, text)
    return text
