"""API layer - FastAPI routes and dependencies."""

from .dependencies import (
    GameManagerDep,
    cleanup_dependencies,
    get_game_manager,
    init_dependencies,
)
from .routes import games_router

__all__ = [
    # Routes
    "games_router",
    # Dependencies
    "init_dependencies",
    "cleanup_dependencies",
    "get_game_manager",
    # Type aliases
    "GameManagerDep",
]
