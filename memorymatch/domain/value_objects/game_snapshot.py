"""Render-facing snapshot value objects."""

from dataclasses import dataclass
from typing import Any

from memorymatch.domain.value_objects.game_state import GameState


@dataclass(frozen=True)
class CardView:
    """Immutable view of one card as a UI should draw it."""

    index: int
    id: int
    symbol: str
    matched: bool
    face_up: bool


@dataclass(frozen=True)
class GameSnapshot:
    """Immutable view of a whole game.

    Produced after every state change; a UI renders it and keeps no state of
    its own.
    """

    state: GameState
    pair_count: int
    cards: tuple[CardView, ...]
    elapsed_seconds: int
    is_active: bool
    is_won: bool
    attempts: int
    matched_pairs: int

    @property
    def face_up_indices(self) -> list[int]:
        """Indices of cards currently showing their symbol."""
        return [c.index for c in self.cards if c.face_up]

    @property
    def remaining_pairs(self) -> int:
        """Pairs still to be found."""
        return self.pair_count - self.matched_pairs if self.cards else 0

    def to_dict(self) -> dict[str, Any]:
        """Convert snapshot to dictionary for serialization."""
        return {
            "state": self.state.value,
            "pair_count": self.pair_count,
            "cards": [
                {
                    "index": c.index,
                    "id": c.id,
                    "symbol": c.symbol,
                    "matched": c.matched,
                    "face_up": c.face_up,
                }
                for c in self.cards
            ],
            "elapsed_seconds": self.elapsed_seconds,
            "is_active": self.is_active,
            "is_won": self.is_won,
            "attempts": self.attempts,
            "matched_pairs": self.matched_pairs,
            "remaining_pairs": self.remaining_pairs,
        }
