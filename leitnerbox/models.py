from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass
class Card:
    id: int
    word: str
    definition: str
    box: int
    next_review: date
    attempts: int


@dataclass(frozen=True)
class ReviewResult:
    card_id: int
    word: str
    old_box: int
    new_box: int
    attempts: int
    next_review: Optional[date]  # None once graduated
    applied: bool = True
    graduated: bool = False


@dataclass
class BoxStats:
    total: int = 0
    due: int = 0
    per_box: dict[int, int] = field(default_factory=dict)
