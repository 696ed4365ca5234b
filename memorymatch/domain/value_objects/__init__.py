"""Domain value objects - immutable objects without identity."""

from .game_snapshot import CardView, GameSnapshot
from .game_state import GameState
from .game_timing import GameTiming
from .match_outcome import MatchOutcome

__all__ = [
    "CardView",
    "GameSnapshot",
    "GameState",
    "GameTiming",
    "MatchOutcome",
]
