import dataclasses
from typing import Tuple

SOURCE_LLM = "llm"
SOURCE_KEYWORD = "keyword"


@dataclasses.dataclass(frozen=True)
class ExtractionResult:
    ingredients: Tuple[str, ...]
    source: str  # 'llm', 'keyword'
