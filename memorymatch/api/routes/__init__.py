"""API routes module."""

from .games import router as games_router

__all__ = ["games_router"]
