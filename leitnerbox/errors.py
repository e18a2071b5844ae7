"""
Exceptions raised by the Leitner card store.
"""


class LeitnerError(Exception):
    """Base exception for all card store errors."""
    pass


class StoreUnavailableError(LeitnerError):
    """Raised when the backing database cannot be opened or initialized."""
    pass


class MalformedDateError(LeitnerError):
    """Raised when a persisted next_review value is not a YYYY-MM-DD date."""

    def __init__(self, card_id: int, raw: object) -> None:
        super().__init__(f"Card {card_id}: malformed next_review {raw!r}")
        self.card_id = card_id
        self.raw = raw


class CursorOutOfRangeError(LeitnerError):
    """Raised when a review is requested while the cursor points at no card."""
    pass


class CardNotFoundError(LeitnerError):
    """Raised when the card under the cursor has no row in the store."""
    pass


class StoreWriteError(LeitnerError):
    """Raised when adding or reviewing a card fails to persist."""
    pass
