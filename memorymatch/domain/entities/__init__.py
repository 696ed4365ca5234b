"""Domain entities - objects with identity."""

from .card import Card
from .game import Game

__all__ = ["Card", "Game"]
