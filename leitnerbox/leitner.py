"""Leitner card store: an in-memory review index kept in lockstep with SQLite.

Position ``i`` of ``ids``, ``words``, ``due_dates`` and ``boxes`` always
describes the same card. Cards are loaded once on open; afterwards every
change goes through ``add`` or ``review``, which write to the database first
and mirror into the lists only after the transaction commits.
"""
from __future__ import annotations

import contextlib
import logging
from datetime import date, timedelta
from pathlib import Path
from typing import AsyncIterator, Optional

import aiosqlite

from leitnerbox import config
from leitnerbox.db import (
    connect,
    delete_card,
    fetch_card,
    fetch_definition,
    fetch_index,
    fetch_review_state,
    init_db,
    insert_card,
    normalize_definition,
    parse_date,
    transaction,
    update_review_state,
)
from leitnerbox.errors import (
    CardNotFoundError,
    CursorOutOfRangeError,
    StoreUnavailableError,
    StoreWriteError,
)
from leitnerbox.models import BoxStats, Card, ReviewResult
from leitnerbox.srs import next_due_for_box, on_review

logger = logging.getLogger(__name__)

NOT_FOUND = "Not found!"


class Leitner:
    """Owns one database connection and the aligned review index."""

    def __init__(
        self,
        db: aiosqlite.Connection,
        ids: list[int],
        words: list[str],
        due_dates: list[date],
        boxes: list[int],
    ) -> None:
        self._db = db
        self.ids = ids
        self.words = words
        self.due_dates = due_dates
        self.boxes = boxes
        self.cursor = 0

    @classmethod
    async def open(cls, db_path: Path | str = config.DB_PATH) -> "Leitner":
        """Open the store, create the schema if needed and load every card."""
        try:
            db = await connect(db_path)
        except (aiosqlite.Error, OSError) as exc:
            raise StoreUnavailableError(f"Cannot open card store {db_path}: {exc}") from exc
        try:
            await init_db(db)
            rows = await fetch_index(db)
            ids: list[int] = []
            words: list[str] = []
            due_dates: list[date] = []
            boxes: list[int] = []
            for row in rows:
                card_id = int(row["id"])
                due_dates.append(parse_date(card_id, row["next_review"]))
                ids.append(card_id)
                words.append(str(row["word"]))
                boxes.append(int(row["box"]))
        except aiosqlite.Error as exc:
            await db.close()
            raise StoreUnavailableError(f"Cannot initialize card store {db_path}: {exc}") from exc
        except Exception:
            await db.close()
            raise
        logger.info("Loaded %d cards from %s", len(ids), db_path)
        return cls(db, ids, words, due_dates, boxes)

    async def close(self) -> None:
        await self._db.close()

    async def __aenter__(self) -> "Leitner":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    def __len__(self) -> int:
        return len(self.words)

    @property
    def is_empty(self) -> bool:
        return not self.words

    def current(self) -> Optional[tuple[str, date, int]]:
        """(word, next_review, box) of the card under the cursor, if any."""
        if not 0 <= self.cursor < len(self.words):
            return None
        i = self.cursor
        return self.words[i], self.due_dates[i], self.boxes[i]

    def is_due(self, position: int, today: date | None = None) -> bool:
        if not 0 <= position < len(self.due_dates):
            return False
        return self.due_dates[position] <= (today or config.today())

    def due_count(self, today: date | None = None) -> int:
        today = today or config.today()
        return sum(1 for d in self.due_dates if d <= today)

    def stats(self, today: date | None = None) -> BoxStats:
        per_box = {b: 0 for b in range(1, config.MAX_BOX + 1)}
        for b in self.boxes:
            per_box[b] = per_box.get(b, 0) + 1
        return BoxStats(total=len(self.words), due=self.due_count(today), per_box=per_box)

    def advance_to_due(self, today: date | None = None) -> None:
        """Move forward from the cursor to the first due card, stopping at the last card.

        The scan never wraps; review order is load order, not due-date order.
        """
        if not self.words:
            return
        today = today or config.today()
        while self.cursor < len(self.words) - 1:
            if self.due_dates[self.cursor] <= today:
                break
            self.cursor += 1

    def move_by(self, delta: int) -> None:
        if not self.words:
            return
        self.cursor = max(0, min(self.cursor + delta, len(self.words) - 1))

    async def add(self, word: str, definition: str, today: date | None = None) -> Card:
        """Persist a new card in box 1 due tomorrow, then append it to the index."""
        if not word.strip() or not definition.strip():
            raise ValueError("word and definition must be non-empty")
        next_review = (today or config.today()) + timedelta(days=1)
        try:
            async with transaction(self._db):
                card_id = await insert_card(self._db, word, definition, next_review)
        except aiosqlite.Error as exc:
            raise StoreWriteError(f"Could not add card {word!r}: {exc}") from exc

        self.ids.append(card_id)
        self.words.append(word)
        self.due_dates.append(next_review)
        self.boxes.append(1)
        logger.info("Added card %d %r, due %s", card_id, word, next_review)
        return Card(card_id, word, definition, 1, next_review, 0)

    def _identity(self, position: int) -> Optional[int]:
        if 0 <= position < len(self.ids):
            return self.ids[position]
        return None

    async def get_definition(self, position: int) -> str:
        """Definition of the card at `position`, read from the store, or NOT_FOUND."""
        card_id = self._identity(position)
        if card_id is None:
            return NOT_FOUND
        definition = await fetch_definition(self._db, card_id)
        if definition is None:
            return NOT_FOUND
        return normalize_definition(definition)

    async def card(self, position: int) -> Optional[Card]:
        card_id = self._identity(position)
        if card_id is None:
            return None
        row = await fetch_card(self._db, card_id)
        if row is None:
            return None
        return Card(
            id=int(row["id"]),
            word=str(row["word"]),
            definition=normalize_definition(str(row["definition"])),
            box=int(row["box"]),
            next_review=parse_date(card_id, row["next_review"]),
            attempts=int(row["attempts"]),
        )

    async def review(self, success: bool, today: date | None = None) -> ReviewResult:
        """Apply one review outcome to the card under the cursor.

        The card's state is re-read from the store. A card that is not due yet
        is left untouched (``applied`` is False). A success from box 5
        graduates the card: its row and index position are removed and the
        cursor is clamped to the shrunk index.
        """
        if not 0 <= self.cursor < len(self.words):
            raise CursorOutOfRangeError(
                f"Cursor {self.cursor} does not point at any of {len(self.words)} cards"
            )
        today = today or config.today()
        position = self.cursor
        card_id = self.ids[position]
        word = self.words[position]
        next_review: Optional[date] = None

        try:
            async with transaction(self._db):
                row = await fetch_review_state(self._db, card_id)
                if row is None:
                    raise CardNotFoundError(f"Card {card_id} ({word!r}) is missing from the store")
                due = parse_date(card_id, row["next_review"])
                old_box = int(row["box"])
                attempts = int(row["attempts"])
                if due > today:
                    result = ReviewResult(card_id, word, old_box, old_box, attempts, due, applied=False)
                else:
                    step = on_review(old_box, attempts, success)
                    if step.graduated:
                        await delete_card(self._db, card_id)
                        result = ReviewResult(
                            card_id, word, old_box, step.box, step.attempts, None, graduated=True
                        )
                    else:
                        next_review = next_due_for_box(step.box, today)
                        await update_review_state(
                            self._db, card_id, step.box, next_review, step.attempts
                        )
                        result = ReviewResult(
                            card_id, word, old_box, step.box, step.attempts, next_review
                        )
        except aiosqlite.Error as exc:
            raise StoreWriteError(f"Could not review card {card_id} ({word!r}): {exc}") from exc

        if not result.applied:
            logger.debug("Card %d %r not due until %s; review skipped", card_id, word, due)
            return result

        if next_review is None:
            del self.ids[position]
            del self.words[position]
            del self.due_dates[position]
            del self.boxes[position]
            if self.cursor >= len(self.words):
                self.cursor = max(0, len(self.words) - 1)
            logger.info("Card %d %r mastered and removed", card_id, word)
        else:
            self.due_dates[position] = next_review
            self.boxes[position] = result.new_box
            logger.info(
                "Card %d %r: box %d -> %d, attempts %d, next review %s",
                card_id,
                word,
                result.old_box,
                result.new_box,
                result.attempts,
                result.next_review,
            )
        return result


@contextlib.asynccontextmanager
async def open_box(db_path: Path | str = config.DB_PATH) -> AsyncIterator[Leitner]:
    box = await Leitner.open(db_path)
    try:
        yield box
    finally:
        await box.close()
