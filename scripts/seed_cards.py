#!/usr/bin/env python3
"""Add word/definition pairs from a CSV file to the review set.

CSV schema (header required):
word,definition

Usage:
    python scripts/seed_cards.py data/words.csv [--db data/cards.db]
"""
from __future__ import annotations

import argparse
import asyncio
import csv
import logging
from pathlib import Path
from typing import Iterable

from leitnerbox.config import DB_PATH, LOG_LEVEL
from leitnerbox.leitner import open_box

REQUIRED_HEADER = ["word", "definition"]


async def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("csv_path", type=Path, help="Path to word/definition CSV file")
    parser.add_argument("--db", type=Path, default=DB_PATH, help="Card database path")
    args = parser.parse_args()
    logging.basicConfig(level=LOG_LEVEL)

    pairs = list(parse_seed_csv(args.csv_path))
    async with open_box(args.db) as box:
        for word, definition in pairs:
            await box.add(word, definition)
    print(f"Added {len(pairs)} cards to {args.db}.")


def parse_seed_csv(path: Path) -> Iterable[tuple[str, str]]:
    """Yield validated (word, definition) pairs from the seed CSV.

    Duplicate words are kept; each row becomes its own card.
    """
    with path.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        header = reader.fieldnames or []
        if header != REQUIRED_HEADER:
            raise SystemExit(
                f"Invalid header. Expected {REQUIRED_HEADER}, got {header}"
            )
        for i, row in enumerate(reader, start=2):
            word = (row.get("word") or "").strip()
            definition = (row.get("definition") or "").strip()
            if not word or not definition:
                raise SystemExit(f"Row {i}: empty word or definition")
            yield word, definition


if __name__ == "__main__":
    asyncio.run(main())
