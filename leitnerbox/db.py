from __future__ import annotations

import contextlib
import logging
from datetime import date, datetime
from pathlib import Path
from typing import AsyncIterator

import aiosqlite

from leitnerbox.config import DATE_FORMAT, DB_PATH
from leitnerbox.errors import MalformedDateError

logger = logging.getLogger(__name__)


async def connect(db_path: Path | str = DB_PATH) -> aiosqlite.Connection:
    """Open a connection with Row access; parent directories are created for Path targets."""
    if isinstance(db_path, Path):
        db_path.parent.mkdir(parents=True, exist_ok=True)
        target = db_path.as_posix()
    else:
        target = db_path
    db = await aiosqlite.connect(target)
    db.row_factory = aiosqlite.Row
    return db


@contextlib.asynccontextmanager
async def get_db(db_path: Path | str = DB_PATH) -> AsyncIterator[aiosqlite.Connection]:
    db = await connect(db_path)
    try:
        yield db
    finally:
        await db.close()


async def init_db(db: aiosqlite.Connection) -> None:
    await db.executescript(
        """
        CREATE TABLE IF NOT EXISTS cards (
            id INTEGER PRIMARY KEY,
            word TEXT NOT NULL,
            definition TEXT NOT NULL,
            box INTEGER NOT NULL DEFAULT 1,
            next_review DATE NOT NULL DEFAULT CURRENT_DATE,
            attempts INTEGER NOT NULL DEFAULT 0
        );
        """
    )
    await db.commit()


@contextlib.asynccontextmanager
async def transaction(db: aiosqlite.Connection) -> AsyncIterator[aiosqlite.Connection]:
    """Run the block in one write transaction; commit on success, roll back on any error."""
    await db.execute("BEGIN IMMEDIATE")
    try:
        yield db
    except BaseException as exc:
        logger.debug("Rolling back transaction: %r", exc)
        await db.rollback()
        raise
    await db.commit()


def parse_date(card_id: int, raw: object) -> date:
    """Parse a stored next_review value. Anything but YYYY-MM-DD text is an error."""
    if not isinstance(raw, str):
        raise MalformedDateError(card_id, raw)
    try:
        return datetime.strptime(raw, DATE_FORMAT).date()
    except ValueError as exc:
        raise MalformedDateError(card_id, raw) from exc


def format_date(d: date) -> str:
    return d.strftime(DATE_FORMAT)


def normalize_definition(text: str) -> str:
    return text.replace("\r", "\n")


async def fetch_index(db: aiosqlite.Connection) -> list[aiosqlite.Row]:
    """All cards in persisted order, with only the columns the index mirrors."""
    cur = await db.execute("SELECT id, word, next_review, box FROM cards ORDER BY id")
    return list(await cur.fetchall())


async def fetch_all_cards(db: aiosqlite.Connection) -> list[aiosqlite.Row]:
    cur = await db.execute(
        "SELECT id, word, definition, box, next_review, attempts FROM cards ORDER BY id"
    )
    return list(await cur.fetchall())


async def fetch_card(db: aiosqlite.Connection, card_id: int) -> aiosqlite.Row | None:
    cur = await db.execute(
        "SELECT id, word, definition, box, next_review, attempts FROM cards WHERE id=?",
        (card_id,),
    )
    return await cur.fetchone()


async def fetch_definition(db: aiosqlite.Connection, card_id: int) -> str | None:
    cur = await db.execute("SELECT definition FROM cards WHERE id=?", (card_id,))
    row = await cur.fetchone()
    return str(row[0]) if row else None


async def fetch_review_state(db: aiosqlite.Connection, card_id: int) -> aiosqlite.Row | None:
    cur = await db.execute(
        "SELECT next_review, box, attempts FROM cards WHERE id=?",
        (card_id,),
    )
    return await cur.fetchone()


async def insert_card(
    db: aiosqlite.Connection,
    word: str,
    definition: str,
    next_review: date,
) -> int:
    cur = await db.execute(
        "INSERT INTO cards (word, definition, box, next_review, attempts) VALUES (?, ?, 1, ?, 0)",
        (word, definition, format_date(next_review)),
    )
    if cur.lastrowid is None:
        raise aiosqlite.DatabaseError("Could not insert card.")
    return int(cur.lastrowid)


async def update_review_state(
    db: aiosqlite.Connection,
    card_id: int,
    box: int,
    next_review: date,
    attempts: int,
) -> None:
    await db.execute(
        "UPDATE cards SET box=?, next_review=?, attempts=? WHERE id=?",
        (box, format_date(next_review), attempts, card_id),
    )


async def delete_card(db: aiosqlite.Connection, card_id: int) -> None:
    await db.execute("DELETE FROM cards WHERE id=?", (card_id,))
