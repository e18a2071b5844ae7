from __future__ import annotations

from datetime import date
from pathlib import Path

import pytest

from leitnerbox.db import fetch_all_cards, get_db
from leitnerbox.leitner import open_box
from scripts.export_cards import EXPORT_HEADER, rows_for_export
from scripts.seed_cards import parse_seed_csv


def write_csv(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_seed_csv_yields_pairs(tmp_path: Path) -> None:
    path = write_csv(
        tmp_path / "words.csv",
        "word,definition\nhuis,house\n  boom , tree \nhuis,home\n",
    )
    rows = list(parse_seed_csv(path))
    # duplicates are kept as distinct cards, whitespace is trimmed
    assert rows == [("huis", "house"), ("boom", "tree"), ("huis", "home")]


def test_seed_csv_rejects_bad_header(tmp_path: Path) -> None:
    path = write_csv(tmp_path / "words.csv", "term,meaning\nhuis,house\n")
    with pytest.raises(SystemExit):
        list(parse_seed_csv(path))


def test_seed_csv_rejects_empty_definition(tmp_path: Path) -> None:
    path = write_csv(tmp_path / "words.csv", "word,definition\nhuis,\n")
    with pytest.raises(SystemExit):
        list(parse_seed_csv(path))


@pytest.mark.asyncio
async def test_seeded_cards_export_with_schedule(tmp_path: Path) -> None:
    db_file = tmp_path / "cards.db"
    path = write_csv(tmp_path / "words.csv", "word,definition\nhuis,\"house\rhome\"\nboom,tree\n")
    async with open_box(db_file) as box:
        for word, definition in parse_seed_csv(path):
            await box.add(word, definition, today=date(2024, 1, 1))

    async with get_db(db_file) as db:
        rows = rows_for_export(await fetch_all_cards(db))
    assert EXPORT_HEADER == ["word", "definition", "box", "next_review", "attempts"]
    assert rows == [
        ("huis", "house\nhome", 1, "2024-01-02", 0),
        ("boom", "tree", 1, "2024-01-02", 0),
    ]
