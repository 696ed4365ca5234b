"""Application configuration loaded from environment variables.

Provides type-safe access to configuration with sensible defaults.
Game timing defaults come from the domain constants.
"""

import os

from memorymatch.domain.constants import (
    DEFAULT_PAIR_COUNT,
    FLIP_BACK_DELAY_SECONDS,
    MATCH_EVALUATION_DELAY_SECONDS,
    TICK_INTERVAL_SECONDS,
)


def get_cors_origins() -> list[str]:
    """Get allowed CORS origins from environment.

    Environment variable: CORS_ORIGINS (comma-separated)
    Default: localhost ports 3000-3001 for development
    """
    default_origins = "http://localhost:3000,http://localhost:3001"
    origins_str = os.getenv("CORS_ORIGINS", default_origins)
    return [origin.strip() for origin in origins_str.split(",") if origin.strip()]


def get_cors_allow_credentials() -> bool:
    """Get CORS allow_credentials setting.

    Environment variable: CORS_ALLOW_CREDENTIALS
    Default: false (the API uses no cookies)
    """
    return os.getenv("CORS_ALLOW_CREDENTIALS", "false").lower() == "true"


# Restricted HTTP methods - only what the API actually uses
CORS_ALLOWED_METHODS = ["GET", "POST", "DELETE", "OPTIONS"]

# Restricted headers - only what's needed for the API
CORS_ALLOWED_HEADERS = [
    "Accept",
    "Accept-Language",
    "Content-Type",
]


def is_production() -> bool:
    """Check if running in production environment."""
    return os.getenv("ENVIRONMENT", "development").lower() == "production"


def get_default_pair_count() -> int:
    """Get pair count used when a client does not choose one.

    Environment variable: DEFAULT_PAIR_COUNT
    Default: 3
    """
    return int(os.getenv("DEFAULT_PAIR_COUNT", str(DEFAULT_PAIR_COUNT)))


def get_match_evaluation_delay() -> float:
    """Get seconds between the second pick and the match decision.

    Environment variable: MATCH_EVALUATION_DELAY_SECONDS
    Default: 0.5
    """
    return float(os.getenv("MATCH_EVALUATION_DELAY_SECONDS", str(MATCH_EVALUATION_DELAY_SECONDS)))


def get_flip_back_delay() -> float:
    """Get seconds a mismatched pair stays face-up.

    Environment variable: FLIP_BACK_DELAY_SECONDS
    Default: 1.0
    """
    return float(os.getenv("FLIP_BACK_DELAY_SECONDS", str(FLIP_BACK_DELAY_SECONDS)))


def get_tick_interval() -> float:
    """Get period of the elapsed-time timer in seconds.

    Environment variable: TICK_INTERVAL_SECONDS
    Default: 1.0
    """
    return float(os.getenv("TICK_INTERVAL_SECONDS", str(TICK_INTERVAL_SECONDS)))


def get_timer_mode() -> str:
    """Get who drives the elapsed-time timer.

    Options:
        - 'internal': each game runs its own one-second timer (default)
        - 'external': the client calls POST /api/games/{id}/tick
    """
    return os.getenv("GAME_TIMER_MODE", "internal").lower()


def get_game_timeout_minutes() -> int:
    """Get inactivity timeout after which a game is discarded.

    Environment variable: GAME_TIMEOUT_MINUTES
    Default: 5 in development, 30 in production
    """
    default = "30" if is_production() else "5"
    return int(os.getenv("GAME_TIMEOUT_MINUTES", default))


def get_max_games() -> int:
    """Get maximum number of concurrent games.

    Environment variable: MAX_GAMES
    Default: 1000
    """
    return int(os.getenv("MAX_GAMES", "1000"))


def get_prune_interval_seconds() -> float:
    """Get period of the sweep that ends expired games.

    Environment variable: GAME_PRUNE_INTERVAL_SECONDS
    Default: 60
    """
    return float(os.getenv("GAME_PRUNE_INTERVAL_SECONDS", "60"))
