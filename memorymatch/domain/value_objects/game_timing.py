"""Game timing value object."""

from dataclasses import dataclass

from memorymatch.domain.constants import (
    FLIP_BACK_DELAY_SECONDS,
    MATCH_EVALUATION_DELAY_SECONDS,
    TICK_INTERVAL_SECONDS,
)


@dataclass(frozen=True)
class GameTiming:
    """Immutable delays (seconds) a session schedules its callbacks with.

    - match_evaluation_delay: second pick → pair is evaluated
    - flip_back_delay: mismatch → revealed pair turns face-down
    - tick_interval: period of the elapsed-time timer
    """

    match_evaluation_delay: float = MATCH_EVALUATION_DELAY_SECONDS
    flip_back_delay: float = FLIP_BACK_DELAY_SECONDS
    tick_interval: float = TICK_INTERVAL_SECONDS

    def __post_init__(self) -> None:
        if self.match_evaluation_delay < 0 or self.flip_back_delay < 0:
            raise ValueError("Delays must be non-negative")
        if self.tick_interval <= 0:
            raise ValueError("Tick interval must be positive")
