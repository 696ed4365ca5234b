"""Game state value object for the memory game lifecycle."""

from enum import StrEnum


class GameState(StrEnum):
    """Game lifecycle states.

    State machine:
        IDLE -> READY -> ACTIVE -> WON
                  ^        |        |
                  +--------+--------+  (setup / reset)

    States:
        IDLE: No deck generated yet
        READY: Deck generated, timer not running
        ACTIVE: Timer running, accepting selections
        WON: All pairs found, timer stopped (terminal until reset)
    """

    IDLE = "idle"
    READY = "ready"
    ACTIVE = "active"
    WON = "won"

    def can_start(self) -> bool:
        """Check if the timer may be (re)started from this state."""
        return self in (GameState.READY, GameState.ACTIVE)

    def accepts_selections(self) -> bool:
        """Check if card taps are accepted."""
        return self is GameState.ACTIVE
