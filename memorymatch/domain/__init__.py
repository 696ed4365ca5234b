# Domain layer - Business logic (NO external dependencies)

from .entities import Card, Game
from .value_objects import (
    CardView,
    GameSnapshot,
    GameState,
    GameTiming,
    MatchOutcome,
)

__all__ = [
    "Card",
    "CardView",
    "Game",
    "GameSnapshot",
    "GameState",
    "GameTiming",
    "MatchOutcome",
]
