#!/usr/bin/env python3
"""Export the review set from SQLite to CSV.

Usage:
    python scripts/export_cards.py data/export_cards.csv [--db data/cards.db]
"""
from __future__ import annotations

import argparse
import asyncio
import csv
from pathlib import Path

import aiosqlite

from leitnerbox.config import DB_PATH
from leitnerbox.db import fetch_all_cards, get_db, init_db, normalize_definition

EXPORT_HEADER = ["word", "definition", "box", "next_review", "attempts"]


def rows_for_export(rows: list[aiosqlite.Row]) -> list[tuple[str, str, int, str, int]]:
    return [
        (
            str(r["word"]),
            normalize_definition(str(r["definition"])),
            int(r["box"]),
            str(r["next_review"]),
            int(r["attempts"]),
        )
        for r in rows
    ]


async def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("csv_path", type=Path, help="Output CSV path")
    parser.add_argument("--db", type=Path, default=DB_PATH, help="Card database path")
    args = parser.parse_args()

    async with get_db(args.db) as db:
        await init_db(db)
        rows_out = rows_for_export(await fetch_all_cards(db))
    with args.csv_path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.writer(f, quoting=csv.QUOTE_MINIMAL)
        writer.writerow(EXPORT_HEADER)
        writer.writerows(rows_out)
    print(f"Exported {len(rows_out)} cards to {args.csv_path}")


if __name__ == "__main__":
    asyncio.run(main())
