from __future__ import annotations

import os
from datetime import date
from pathlib import Path
from typing import Final

from dotenv import load_dotenv


load_dotenv()

ROOT_DIR: Final[Path] = Path(__file__).resolve().parents[1]
DATA_DIR: Final[Path] = Path(os.getenv("DATA_DIR", str(ROOT_DIR / "data")))
DB_PATH: Final[Path] = Path(os.getenv("LEITNER_DB", str(DATA_DIR / "cards.db")))

LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

# Leitner intervals in days for boxes 1..5
BOX_INTERVALS: Final[dict[int, int]] = {
    1: 1,
    2: 2,
    3: 4,
    4: 6,
    5: 10,
}

MAX_BOX: Final[int] = 5
GRADUATION_BOX: Final[int] = MAX_BOX + 1
DEMOTE_AFTER_FAILURES: Final[int] = 2

DATE_FORMAT: Final[str] = "%Y-%m-%d"


def today() -> date:
    """Current local calendar date; review gating ignores time of day."""
    return date.today()
