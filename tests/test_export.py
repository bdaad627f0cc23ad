import pandas as pd
import pytest

from receipt_recipes.export import recommendations_dataframe, write_recommendations_csv
from receipt_recipes.recipes.models import RankedResult, Recipe, ScoredRecipe

RESULTS = [
    RankedResult(
        ("계란", "밥"),
        (
            ScoredRecipe(Recipe("계란볶음밥", ("밥", "계란", "대파", "간장")), 6),
            ScoredRecipe(Recipe("계란말이", ("계란", "당근", "대파", "소금")), 3),
        ),
        "llm",
    ),
    RankedResult(("세제",), (), "keyword"),
]


def test_recommendations_dataframe():
    df = recommendations_dataframe(RESULTS, labels=["a.txt", "b.txt"])

    assert len(df) == 3
    assert list(df["recipe"]) == ["계란볶음밥", "계란말이", ""]
    assert list(df["receipt"]) == ["a.txt", "a.txt", "b.txt"]
    assert df.iloc[0]["ingredients"] == "계란, 밥"
    assert df.iloc[1]["rank"] == 2


def test_recommendations_dataframe_label_mismatch():
    with pytest.raises(ValueError):
        recommendations_dataframe(RESULTS, labels=["only-one"])


def test_write_recommendations_csv(tmp_path):
    output_file = tmp_path / "recommendations.csv"
    write_recommendations_csv(RESULTS, str(output_file))

    df = pd.read_csv(output_file)
    assert list(df.columns) == [
        "receipt",
        "source",
        "ingredients",
        "rank",
        "recipe",
        "score",
        "need",
    ]
    assert list(df["score"].iloc[:2]) == [6, 3]
    assert pd.isna(df.iloc[2]["rank"])
    assert df.iloc[2]["source"] == "keyword"
