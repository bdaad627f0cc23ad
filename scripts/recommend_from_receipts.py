#!/usr/bin/env python3
"""
Recommend recipes for receipts that have already been through OCR.

Reads one OCR text file per receipt, extracts ingredients (with an AWS Bedrock
model when --use-llm is given, keyword matching otherwise) and prints the top
recipes for each receipt.

Usage:
    python recommend_from_receipts.py receipts/
    python recommend_from_receipts.py receipt1.txt receipt2.txt --use-llm --output-csv out.csv
"""

import argparse
import glob
import json
import logging
import os
from typing import List

from receipt_recipes import RecipeRecommender
from receipt_recipes.config import DEFAULT_MODEL_ID, DEFAULT_REGION, TOP_N_RECIPES
from receipt_recipes.export import write_recommendations_csv
from receipt_recipes.ingredients import BedrockIngredientExtractor
from receipt_recipes.recipes import MealDbRecipeSource


def find_receipt_files(paths: List[str]) -> List[str]:
    """Expand directories into their .txt files, keeping file arguments as given."""
    files = []
    for path in paths:
        if os.path.isdir(path):
            files.extend(sorted(glob.glob(os.path.join(path, "*.txt"))))
        else:
            files.append(path)
    return files


def read_receipt(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def main():
    """Run recommendations for every receipt text file given on the command line."""
    parser_args = argparse.ArgumentParser(
        description="Recommend recipes from OCR receipt text files"
    )
    parser_args.add_argument(
        "paths", nargs="+", help="Receipt text files or directories of .txt files"
    )
    parser_args.add_argument(
        "--use-llm",
        action="store_true",
        help="Extract ingredients with an AWS Bedrock model before falling back to keywords",
    )
    parser_args.add_argument(
        "--model-id",
        type=str,
        default=DEFAULT_MODEL_ID,
        help=f"Bedrock model ID (default: {DEFAULT_MODEL_ID})",
    )
    parser_args.add_argument(
        "--region",
        type=str,
        default=DEFAULT_REGION,
        help=f"AWS region for Bedrock (default: {DEFAULT_REGION})",
    )
    parser_args.add_argument(
        "--use-mealdb",
        action="store_true",
        help="Also rank recipes fetched from TheMealDB",
    )
    parser_args.add_argument(
        "--top-n",
        type=int,
        default=TOP_N_RECIPES,
        help=f"Number of recipes per receipt (default: {TOP_N_RECIPES})",
    )
    parser_args.add_argument(
        "--max-workers",
        type=int,
        default=4,
        help="Maximum number of receipts processed in parallel (default: 4)",
    )
    parser_args.add_argument(
        "--output-csv", type=str, default=None, help="Write all results to this CSV file"
    )
    parser_args.add_argument(
        "--json", action="store_true", help="Print results as JSON payloads"
    )
    parser_args.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser_args.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    receipt_files = find_receipt_files(args.paths)
    if not receipt_files:
        print("No receipt text files found.")
        exit(1)

    extractor = (
        BedrockIngredientExtractor(model_id=args.model_id, region_name=args.region)
        if args.use_llm
        else None
    )
    recommender = RecipeRecommender(
        extractor=extractor,
        recipe_source=MealDbRecipeSource() if args.use_mealdb else None,
        top_n=args.top_n,
    )

    try:
        texts = [read_receipt(path) for path in receipt_files]
        results = recommender.recommend_batch(texts, max_concurrent=args.max_workers)

        for path, result in zip(receipt_files, results):
            if args.json:
                print(json.dumps({path: result.to_dict()}, ensure_ascii=False, indent=2))
                continue
            print(f"\n{path} ({result.source})")
            print(f"  Ingredients: {', '.join(result.ingredients) or '-'}")
            if not result.recipes:
                print("  No matching recipes.")
            for rank, scored in enumerate(result.recipes, start=1):
                print(f"  {rank}. {scored.recipe.name} (score {scored.score})")

        if args.output_csv:
            write_recommendations_csv(results, args.output_csv, labels=receipt_files)

        print(f"\nSummary:")
        print(f"  Receipts processed: {len(results)}")
        print(
            f"  With recommendations: {sum(1 for r in results if r.recipes)}"
        )

    except KeyboardInterrupt:
        print("\nProcessing interrupted by user")
    except Exception as e:
        print(f"\nError during processing: {e}")
        raise


if __name__ == "__main__":
    main()
