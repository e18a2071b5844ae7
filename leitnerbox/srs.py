from __future__ import annotations

from dataclasses import dataclass
from datetime import date, timedelta

from leitnerbox.config import BOX_INTERVALS, DEMOTE_AFTER_FAILURES, GRADUATION_BOX


def next_due_for_box(box: int, base_date: date) -> date:
    """Return the next review date for a card that just landed in `box`.

    Box must be in 1..5. The base_date is the reference (usually today).
    """
    return base_date + timedelta(days=BOX_INTERVALS[box])


@dataclass(frozen=True)
class Transition:
    box: int
    attempts: int

    @property
    def graduated(self) -> bool:
        return self.box >= GRADUATION_BOX


def on_review(box: int, attempts: int, success: bool) -> Transition:
    """Apply Leitner rules for one review outcome.

      - Success: promote one box, reset attempts.
      - Repeated failure above box 1: demote one box, reset attempts.
      - Otherwise: stay in the box and count the failure.

    A resulting box of 6 means the card is mastered and should be removed.
    """
    if success:
        return Transition(box + 1, 0)
    if attempts + 1 >= DEMOTE_AFTER_FAILURES and box > 1:
        return Transition(box - 1, 0)
    return Transition(box, attempts + 1)
