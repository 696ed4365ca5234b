"""Domain services - orchestration and business logic."""

from .deck_generator import (
    DeckGenerator,
    InvalidConfigurationError,
)
from .game_manager import (
    GameExpiredError,
    GameLimitError,
    GameManager,
    GameManagerStats,
    GameNotFoundError,
)
from .game_session import (
    GameSession,
    SnapshotListener,
)
from .snapshot import project_snapshot

__all__ = [
    "DeckGenerator",
    "InvalidConfigurationError",
    "GameSession",
    "SnapshotListener",
    "project_snapshot",
    "GameManager",
    "GameManagerStats",
    "GameNotFoundError",
    "GameExpiredError",
    "GameLimitError",
]
