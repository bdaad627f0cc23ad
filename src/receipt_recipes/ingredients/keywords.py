"""Keyword-based ingredient extraction used when no language model is available."""

import dataclasses
import functools
import json
import os
from typing import Optional, Sequence, Tuple

KEYWORD_GROUPS_FILE = os.path.join(
    os.path.dirname(__file__), "data", "keyword_groups.json"
)


@dataclasses.dataclass(frozen=True)
class KeywordGroup:
    """A canonical ingredient token and the receipt words that indicate it."""

    canonical: str
    synonyms: Tuple[str, ...]


@functools.lru_cache(maxsize=None)
def load_keyword_groups(path: str = KEYWORD_GROUPS_FILE) -> Tuple[KeywordGroup, ...]:
    """Load synonym groups from a JSON file.

    The file holds a list of ``{"canonical": str, "synonyms": [str]}`` objects.
    Results are cached, so the bundled vocabulary is read once per process.

    Args:
        path: Path to the keyword group file. Defaults to the bundled file.

    Returns:
        Tuple of KeywordGroup in file order.

    Raises:
        ValueError: If a group has no canonical token or no synonyms.
    """
    with open(path, "r", encoding="utf-8") as f:
        raw_groups = json.load(f)

    groups = []
    for entry in raw_groups:
        canonical = (entry.get("canonical") or "").strip()
        synonyms = tuple(s.strip() for s in entry.get("synonyms", []) if s.strip())
        if not canonical or not synonyms:
            raise ValueError(f"Invalid keyword group in {path}: {entry!r}")
        groups.append(KeywordGroup(canonical, synonyms))
    return tuple(groups)


def extract_keyword_ingredients(
    text: Optional[str], groups: Optional[Sequence[KeywordGroup]] = None
) -> Tuple[str, ...]:
    """Scan raw receipt text for known ingredient keywords.

    Each group contributes its canonical token at most once, as soon as any
    of its synonyms appears anywhere in the lowercased text. Matching is a
    plain substring test, so "eggs" hits the "egg" synonym.

    Args:
        text: Raw OCR text. None or empty text yields an empty result.
        groups: Vocabulary to scan with. Defaults to the bundled groups.

    Returns:
        Canonical tokens in group definition order.

    Examples:
        >>> extract_keyword_ingredients("계란 두 개 구매")
        ("계란",)
    """
    if not text:
        return ()
    if groups is None:
        groups = load_keyword_groups()

    lowered = text.lower()
    found = {}
    for group in groups:
        if group.canonical in found:
            continue
        for synonym in group.synonyms:
            if synonym.lower() in lowered:
                found[group.canonical] = None
                break
    return tuple(found)
