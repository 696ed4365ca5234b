"""
Memory Match Backend - FastAPI Application

Single-screen memory card game served to a browser or native UI.
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
# Must happen before importing modules that use environment variables
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(env_path)

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402

from memorymatch.api.dependencies import (  # noqa: E402
    GameManagerDep,
    cleanup_dependencies,
    init_dependencies,
)
from memorymatch.api.routes import games_router  # noqa: E402
from memorymatch.config import (  # noqa: E402
    CORS_ALLOWED_HEADERS,
    CORS_ALLOWED_METHODS,
    get_cors_allow_credentials,
    get_cors_origins,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan manager for startup/shutdown events.

    Startup:
    - Initialize the game manager on the serving event loop

    Shutdown:
    - End all games (cancel their timers)
    """
    logger.info("Starting Memory Match backend...")

    await init_dependencies()
    logger.info("Dependencies initialized")

    yield

    logger.info("Shutting down Memory Match backend...")
    await cleanup_dependencies()
    logger.info("Shutdown complete")


app = FastAPI(
    title="Memory Match API",
    description="Single-screen memory card game",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration - loaded from environment with restrictive defaults
app.add_middleware(
    CORSMiddleware,
    allow_origins=get_cors_origins(),
    allow_credentials=get_cors_allow_credentials(),
    allow_methods=CORS_ALLOWED_METHODS,
    allow_headers=CORS_ALLOWED_HEADERS,
)

# Register API routers
app.include_router(games_router)


@app.get("/health")
async def health(game_manager: GameManagerDep) -> dict[str, str | int]:
    """Health check endpoint."""
    stats = game_manager.get_stats()
    return {
        "status": "healthy",
        "service": "memorymatch-backend",
        "version": "0.1.0",
        "active_games": stats.active_games,
        "games_created": stats.games_created,
        "games_won": stats.games_won,
    }
