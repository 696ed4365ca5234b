"""Match outcome value object."""

from enum import StrEnum


class MatchOutcome(StrEnum):
    """Result of evaluating the current selection.

    - SKIPPED: evaluation preconditions no longer held (stale callback)
    - MATCH: both cards share a symbol and stay revealed
    - MISMATCH: symbols differ, the pair flips back after a delay
    - WON: the match completed the board
    """

    SKIPPED = "skipped"
    MATCH = "match"
    MISMATCH = "mismatch"
    WON = "won"
