from __future__ import annotations

from datetime import date, timedelta

from leitnerbox.formatters import box_symbol, format_index_row, format_stats, relative_date
from leitnerbox.models import BoxStats

MONDAY = date(2024, 1, 1)
FRIDAY = date(2024, 1, 5)


def test_box_symbol_levels():
    assert box_symbol(1) == "★☆☆☆☆"
    assert box_symbol(3) == "★★★☆☆"
    assert box_symbol(5) == "★★★★★"


def test_box_symbol_unknown_levels_are_empty():
    assert box_symbol(0) == "☆☆☆☆☆"
    assert box_symbol(6) == "☆☆☆☆☆"


def test_relative_date_labels_from_monday():
    def label(days: int) -> str:
        return relative_date(MONDAY + timedelta(days=days), MONDAY)

    assert label(-1) == ""
    assert label(0) == "Today"
    assert label(1) == "Tomorrow"
    assert label(2) == "Wed"
    assert label(6) == "Sun"
    assert label(7) == "Next week"
    assert label(9) == "In 9 days"
    assert label(10) == "In 10 days"
    assert label(11) == ""


def test_relative_date_crosses_week_boundary():
    # Monday after a Friday is in the next ISO week
    assert relative_date(FRIDAY + timedelta(days=2), FRIDAY) == "Sun"
    assert relative_date(FRIDAY + timedelta(days=3), FRIDAY) == "Next week"
    assert relative_date(FRIDAY + timedelta(days=8), FRIDAY) == "In 8 days"


def test_format_index_row():
    assert format_index_row("huis", 2, MONDAY, MONDAY) == "huis  ★★☆☆☆  Today"
    # no trailing label for far-off dates
    assert format_index_row("boom", 5, MONDAY + timedelta(days=30), MONDAY) == "boom  ★★★★★"


def test_format_stats():
    text = format_stats(BoxStats(total=3, due=1, per_box={1: 2, 2: 1}))
    lines = text.splitlines()
    assert lines[0] == "Cards: 3, due today: 1"
    assert lines[1] == "★☆☆☆☆  2"
    assert lines[2] == "★★☆☆☆  1"
