from __future__ import annotations

from datetime import date

import pytest

from leitnerbox.db import get_db, init_db
from leitnerbox.leitner import open_box
from scripts.due_report import build_report


@pytest.mark.asyncio
async def test_report_marks_first_due_card(tmp_path):
    db_file = tmp_path / "cards.db"
    async with get_db(db_file) as db:
        await init_db(db)
        await db.executemany(
            "INSERT INTO cards (word, definition, box, next_review, attempts) VALUES (?, ?, ?, ?, ?)",
            [
                ("huis", "house", 2, "2024-01-02", 0),
                ("boom", "tree", 3, "2024-01-01", 1),
            ],
        )
        await db.commit()

    async with open_box(db_file) as box:
        report = build_report(box, date(2024, 1, 1))

    lines = report.splitlines()
    assert lines[0] == "  huis  ★★☆☆☆  Tomorrow"
    assert lines[1] == "> boom  ★★★☆☆  Today"
    assert lines[2] == ""
    assert lines[3] == "Cards: 2, due today: 1"


@pytest.mark.asyncio
async def test_report_on_empty_store(tmp_path):
    async with open_box(tmp_path / "cards.db") as box:
        report = build_report(box, date(2024, 1, 1))
    assert report.splitlines()[0] == "Cards: 0, due today: 0"
