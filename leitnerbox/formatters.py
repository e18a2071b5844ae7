from __future__ import annotations

from datetime import date

from leitnerbox import config
from leitnerbox.models import BoxStats

BOX_SYMBOLS: dict[int, str] = {
    1: "★☆☆☆☆",
    2: "★★☆☆☆",
    3: "★★★☆☆",
    4: "★★★★☆",
    5: "★★★★★",
}
EMPTY_BOX_SYMBOL = "☆☆☆☆☆"

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def box_symbol(box: int) -> str:
    """Five-star progress glyph for a box level; unknown levels render empty."""
    return BOX_SYMBOLS.get(box, EMPTY_BOX_SYMBOL)


def relative_date(d: date, today: date | None = None) -> str:
    """Short label for a review date relative to today.

    - Past dates and dates more than 10 days out render as "".
    - "Today", "Tomorrow", then the weekday name within the current ISO week.
    - "Next week" up to 7 days away, "In N days" up to 10.
    """
    today = today or config.today()
    days = (d - today).days
    if days < 0:
        return ""
    if days == 0:
        return "Today"
    if days == 1:
        return "Tomorrow"
    if d.isocalendar()[:2] == today.isocalendar()[:2]:
        return WEEKDAYS[d.weekday()]
    if days <= 7:
        return "Next week"
    if days <= 10:
        return f"In {days} days"
    return ""


def format_index_row(word: str, box: int, due: date, today: date | None = None) -> str:
    """One line of the review index: word, box glyph and relative due label."""
    label = relative_date(due, today)
    row = f"{word}  {box_symbol(box)}"
    return f"{row}  {label}" if label else row


def format_stats(stats: BoxStats) -> str:
    lines = [f"Cards: {stats.total}, due today: {stats.due}"]
    for box in sorted(stats.per_box):
        lines.append(f"{box_symbol(box)}  {stats.per_box[box]}")
    return "\n".join(lines)
