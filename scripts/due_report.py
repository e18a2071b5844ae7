#!/usr/bin/env python3
"""Print the review index with box glyphs and due labels, then box statistics.

Usage:
    python scripts/due_report.py [--db data/cards.db]
"""
from __future__ import annotations

import argparse
import asyncio
import logging
from datetime import date
from pathlib import Path

from leitnerbox.config import DB_PATH, LOG_LEVEL, today
from leitnerbox.formatters import format_index_row, format_stats
from leitnerbox.leitner import Leitner, open_box


def build_report(box: Leitner, on: date) -> str:
    box.advance_to_due(on)
    lines: list[str] = []
    for i, word in enumerate(box.words):
        marker = ">" if i == box.cursor else " "
        lines.append(f"{marker} {format_index_row(word, box.boxes[i], box.due_dates[i], on)}")
    if lines:
        lines.append("")
    lines.append(format_stats(box.stats(on)))
    return "\n".join(lines)


async def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--db", type=Path, default=DB_PATH, help="Card database path")
    args = parser.parse_args()
    logging.basicConfig(level=LOG_LEVEL)

    async with open_box(args.db) as box:
        print(build_report(box, today()))


if __name__ == "__main__":
    asyncio.run(main())
