"""Tabular export of recommendation results."""

import logging
from typing import List, Optional, Sequence

import pandas as pd

from receipt_recipes.recipes import RankedResult

logger = logging.getLogger(__name__)

COLUMNS = ["receipt", "source", "ingredients", "rank", "recipe", "score", "need"]


def recommendations_dataframe(
    results: Sequence[RankedResult], labels: Optional[Sequence[str]] = None
) -> pd.DataFrame:
    """Flatten results into one row per (receipt, ranked recipe).

    Receipts without any recipe still get a single row with empty recipe
    columns so that their extracted ingredients are not lost.

    Args:
        results: Recommendation results
        labels: Receipt labels such as file names. Defaults to "0", "1", ...

    Returns:
        DataFrame with the columns in COLUMNS
    """
    if labels is None:
        labels = [str(i) for i in range(len(results))]
    if len(labels) != len(results):
        raise ValueError(
            f"Got {len(labels)} labels for {len(results)} recommendation results"
        )

    rows: List[dict] = []
    for label, result in zip(labels, results):
        base = {
            "receipt": label,
            "source": result.source,
            "ingredients": ", ".join(result.ingredients),
        }
        if not result.recipes:
            rows.append({**base, "rank": None, "recipe": "", "score": None, "need": ""})
            continue
        for rank, scored in enumerate(result.recipes, start=1):
            rows.append(
                {
                    **base,
                    "rank": rank,
                    "recipe": scored.recipe.name,
                    "score": scored.score,
                    "need": ", ".join(scored.recipe.need),
                }
            )
    return pd.DataFrame(rows, columns=COLUMNS)


def write_recommendations_csv(
    results: Sequence[RankedResult],
    output_file: str,
    labels: Optional[Sequence[str]] = None,
) -> None:
    """Write recommendation results to a CSV file.

    Args:
        results: Recommendation results
        output_file: Path to output CSV file
        labels: Receipt labels, one per result
    """
    df = recommendations_dataframe(results, labels)
    df.to_csv(output_file, index=False)
    logger.info(f"Wrote {len(df)} recommendation rows to {output_file}")
