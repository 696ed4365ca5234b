"""
Composition Root.

Centralized dependency wiring for the application.
All factory functions that instantiate adapters belong here to maintain
hexagonal architecture (domain NEVER imports from adapters).
"""

import random

from memorymatch.adapters.asyncio_scheduler import AsyncioScheduler
from memorymatch.config import (
    get_flip_back_delay,
    get_game_timeout_minutes,
    get_match_evaluation_delay,
    get_max_games,
    get_tick_interval,
    get_timer_mode,
)
from memorymatch.domain.services.deck_generator import DeckGenerator
from memorymatch.domain.services.game_manager import GameManager
from memorymatch.domain.value_objects.game_timing import GameTiming
from memorymatch.ports.scheduler import Scheduler


def create_game_timing() -> GameTiming:
    """Create GameTiming from environment configuration."""
    return GameTiming(
        match_evaluation_delay=get_match_evaluation_delay(),
        flip_back_delay=get_flip_back_delay(),
        tick_interval=get_tick_interval(),
    )


def create_game_manager(
    scheduler: Scheduler | None = None,
    rng: random.Random | None = None,
) -> GameManager:
    """Create GameManager with its deck generator and scheduler.

    Args:
        scheduler: Scheduler port (AsyncioScheduler if omitted)
        rng: Random source for deck shuffling (unseeded if omitted)

    Returns:
        GameManager configured from environment

    Raises:
        ValueError: If GAME_TIMER_MODE is not 'internal' or 'external'
    """
    timer_mode = get_timer_mode()
    if timer_mode not in ("internal", "external"):
        raise ValueError(
            f"Invalid GAME_TIMER_MODE: '{timer_mode}'. " "Valid options: 'internal', 'external'"
        )

    return GameManager(
        deck_generator=DeckGenerator(rng=rng),
        scheduler=scheduler or AsyncioScheduler(),
        timing=create_game_timing(),
        auto_tick=timer_mode == "internal",
        timeout_minutes=get_game_timeout_minutes(),
        max_games=get_max_games(),
    )
