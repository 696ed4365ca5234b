"""
Shared Domain Constants.

Central location for game configuration constants used across domain services.
All timing values are in seconds.
"""

# =============================================================================
# Deck Configuration
# =============================================================================

SUPPORTED_PAIR_COUNTS = (3, 6, 10)
DEFAULT_PAIR_COUNT = 3

# Card faces. Must hold at least max(SUPPORTED_PAIR_COUNTS) symbols so every
# symbol appears exactly twice in a default deck.
SYMBOL_ALPHABET = (
    "😃",
    "🐶",
    "🚀",
    "🍕",
    "🎉",
    "🌟",
    "🍎",
    "🎈",
    "🐢",
    "🌈",
    "⚽",
    "🎸",
)

CARD_BACK = "🃏"


# =============================================================================
# Timing (seconds)
# =============================================================================
# - 0.5s after the second pick → evaluate the pair (both faces visible first)
# - 1.0s after a mismatch → flip the pair back face-down
# - 1.0s → elapsed-time tick

MATCH_EVALUATION_DELAY_SECONDS = 0.5
FLIP_BACK_DELAY_SECONDS = 1.0
TICK_INTERVAL_SECONDS = 1.0


# =============================================================================
# Selection Rules
# =============================================================================

MAX_SELECTION_SIZE = 2


# =============================================================================
# Messages (Single Source of Truth)
# =============================================================================


class GameMessages:
    """Centralized user-facing messages.

    Kept here so every surface (API, scripted drivers) phrases outcomes the same way.
    """

    TITLE = "Memory Card Game"

    @classmethod
    def won(cls, elapsed_seconds: int) -> str:
        """Get the win message for a finished game."""
        return f"You won in {elapsed_seconds} seconds!"

    @classmethod
    def pair_count_label(cls, pair_count: int) -> str:
        """Get the picker label for a pair count."""
        return f"{pair_count} Pairs"
