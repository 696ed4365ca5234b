"""FastAPI dependency injection module.

Provides the singleton GameManager for API routes.
Uses lifespan events for initialization and cleanup.
"""

import logging
from typing import Annotated

from fastapi import Depends

from memorymatch.composition import create_game_manager
from memorymatch.config import get_prune_interval_seconds
from memorymatch.domain.services.game_manager import GameManager

logger = logging.getLogger(__name__)


# Singletons stored at module level
_game_manager: GameManager | None = None


async def init_dependencies() -> None:
    """Initialize all singleton dependencies.

    Called during FastAPI lifespan startup, inside the running event loop the
    game timers will use.
    """
    global _game_manager

    _game_manager = create_game_manager()
    _game_manager.start_sweeper(get_prune_interval_seconds())
    mode = "internal" if _game_manager.auto_tick else "external"
    logger.info(f"Game manager ready (timer mode: {mode})")


async def cleanup_dependencies() -> None:
    """Cleanup dependencies on shutdown.

    Called during FastAPI lifespan shutdown.
    Stops the expiry sweep and cancels every game's timers.
    """
    global _game_manager

    if _game_manager is not None:
        _game_manager.stop_sweeper()
        ended = _game_manager.end_all_games()
        logger.info(f"Ended {ended} games on shutdown")
        _game_manager = None


def get_game_manager() -> GameManager:
    """Dependency: Get GameManager instance."""
    if _game_manager is None:
        raise RuntimeError("Dependencies not initialized. Call init_dependencies first.")
    return _game_manager


# Type aliases for dependency injection
GameManagerDep = Annotated[GameManager, Depends(get_game_manager)]
