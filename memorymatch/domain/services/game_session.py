"""Game session service: the memory-game state machine plus its timers."""

import logging
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from uuid import uuid4

from memorymatch.domain.entities.card import Card
from memorymatch.domain.entities.game import Game
from memorymatch.domain.services.deck_generator import DeckGenerator
from memorymatch.domain.services.snapshot import project_snapshot
from memorymatch.domain.value_objects.game_snapshot import GameSnapshot
from memorymatch.domain.value_objects.game_state import GameState
from memorymatch.domain.value_objects.game_timing import GameTiming
from memorymatch.domain.value_objects.match_outcome import MatchOutcome
from memorymatch.ports.scheduler import CancelHandle, Scheduler

logger = logging.getLogger(__name__)

SnapshotListener = Callable[[GameSnapshot], None]


class GameSession:
    """One playthrough of the memory game, driven by a single UI.

    Responsibilities:
    - Deck (re)generation through the DeckGenerator
    - Applying taps and ticks to the Game entity
    - Owning every scheduled callback: the elapsed-time timer, the pending
      match evaluation and the pending flip-back
    - Notifying listeners with a fresh snapshot after each change

    Each handle is cancelled on every transition that makes it stale, so no
    callback ever lands on a deck it was not scheduled for.
    """

    def __init__(
        self,
        deck_generator: DeckGenerator,
        scheduler: Scheduler,
        timing: GameTiming | None = None,
        auto_tick: bool = True,
        game_id: str | None = None,
    ):
        """Initialize game session in IDLE state.

        Args:
            deck_generator: Source of shuffled decks
            scheduler: Port for delayed and recurring callbacks
            timing: Callback delays (defaults from domain constants)
            auto_tick: Run an internal one-second timer after start(); when
                False the UI must call on_tick() itself
            game_id: Identifier (UUID v4 generated if omitted)
        """
        self.id = game_id or str(uuid4())
        self._deck_generator = deck_generator
        self._scheduler = scheduler
        self._timing = timing or GameTiming()
        self._auto_tick = auto_tick
        self._game = Game()
        self._listeners: list[SnapshotListener] = []

        self._timer: CancelHandle | None = None
        self._pending_evaluation: CancelHandle | None = None
        self._pending_flip_back: CancelHandle | None = None

        self.last_activity = datetime.now(UTC)

    # -------------------------------------------------------------------------
    # Read-only state
    # -------------------------------------------------------------------------

    @property
    def state(self) -> GameState:
        return self._game.state

    @property
    def pair_count(self) -> int:
        return self._game.pair_count

    @property
    def elapsed_seconds(self) -> int:
        return self._game.elapsed_seconds

    @property
    def is_active(self) -> bool:
        return self._game.is_active

    @property
    def is_won(self) -> bool:
        return self._game.is_won

    @property
    def selection(self) -> tuple[int, ...]:
        """Indices currently selected, in tap order."""
        return tuple(self._game.selection)

    @property
    def cards(self) -> tuple[Card, ...]:
        """The card sequence (read-only access for inspection)."""
        return tuple(self._game.cards)

    @property
    def timer_running(self) -> bool:
        return self._timer is not None

    @property
    def evaluation_pending(self) -> bool:
        return self._pending_evaluation is not None

    @property
    def flip_back_pending(self) -> bool:
        return self._pending_flip_back is not None

    def snapshot(self) -> GameSnapshot:
        """Get the render-facing view of the game."""
        return project_snapshot(self._game)

    # -------------------------------------------------------------------------
    # Operations driven by the UI
    # -------------------------------------------------------------------------

    def configure(self, pair_count: int) -> None:
        """Generate a fresh deck and return to READY, discarding progress.

        Args:
            pair_count: Number of pairs for the new deck

        Raises:
            InvalidConfigurationError: If pair_count is unsupported (game unchanged)
        """
        cards = self._deck_generator.generate(pair_count)
        self._cancel_all()
        self._game.setup(pair_count, cards)
        self.touch()
        logger.info(f"Game {self.id} configured with {pair_count} pairs")
        self._notify()

    setup = configure

    def reset(self) -> None:
        """Reconfigure with the previously chosen pair count."""
        self.configure(self._game.pair_count)

    def start(self) -> bool:
        """Start (or restart) the game clock.

        Returns:
            True if the game is ACTIVE with elapsed time reset; False if
            ignored (no deck yet, or already won)
        """
        self.touch()
        if not self._game.start():
            logger.debug(f"Game {self.id}: start ignored in state {self.state}")
            return False

        self._cancel_timer()
        if self._auto_tick:
            self._timer = self._scheduler.call_every(self._timing.tick_interval, self.on_tick)
        logger.info(f"Game {self.id} started")
        self._notify()
        return True

    def on_tick(self) -> bool:
        """Count one elapsed second while ACTIVE.

        Returns:
            True if the counter advanced
        """
        if not self._game.tick():
            return False
        self._notify()
        return True

    tick = on_tick

    def select_card(self, index: int) -> bool:
        """Flip the card at index face-up.

        Ignored when the game is not ACTIVE, the index is out of range,
        already selected or matched, or two cards are already selected.
        Completing a pair schedules its evaluation after the match delay.

        Returns:
            True if the tap was accepted
        """
        self.touch()
        if not self._game.select_card(index):
            logger.debug(f"Game {self.id}: selection of {index} ignored")
            return False

        # The tap already hid any revealed mismatch
        self._cancel_flip_back()
        if self._game.selection_full:
            self._pending_evaluation = self._scheduler.call_later(
                self._timing.match_evaluation_delay, self.evaluate_match
            )
        self._notify()
        return True

    def evaluate_match(self) -> MatchOutcome:
        """Evaluate the selected pair (normally run by the scheduler).

        Returns:
            Outcome; SKIPPED when the selection is no longer a full pair
        """
        self._cancel_evaluation()
        outcome = self._game.evaluate_match()

        if outcome is MatchOutcome.SKIPPED:
            return outcome

        if outcome is MatchOutcome.MISMATCH:
            self._pending_flip_back = self._scheduler.call_later(
                self._timing.flip_back_delay, self._flip_back
            )
        elif outcome is MatchOutcome.WON:
            self._cancel_timer()
            logger.info(f"Game {self.id} won in {self.elapsed_seconds} seconds")

        self._notify()
        return outcome

    def close(self) -> None:
        """Cancel every callback this session owns."""
        self._cancel_all()

    # -------------------------------------------------------------------------
    # Listeners
    # -------------------------------------------------------------------------

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        """Register a listener called with a snapshot after each change.

        Returns:
            Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)

    # -------------------------------------------------------------------------
    # Activity tracking
    # -------------------------------------------------------------------------

    def touch(self) -> None:
        """Update last activity timestamp."""
        self.last_activity = datetime.now(UTC)

    def is_timed_out(self, timeout_minutes: int = 30) -> bool:
        """Check if the game has been idle longer than timeout_minutes."""
        return datetime.now(UTC) - self.last_activity > timedelta(minutes=timeout_minutes)

    # -------------------------------------------------------------------------
    # Scheduled callbacks
    # -------------------------------------------------------------------------

    def _flip_back(self) -> None:
        self._pending_flip_back = None
        if self._game.flip_back():
            self._notify()

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _cancel_flip_back(self) -> None:
        if self._pending_flip_back is not None:
            self._pending_flip_back.cancel()
            self._pending_flip_back = None

    def _cancel_evaluation(self) -> None:
        if self._pending_evaluation is not None:
            self._pending_evaluation.cancel()
            self._pending_evaluation = None

    def _cancel_all(self) -> None:
        self._cancel_timer()
        self._cancel_flip_back()
        self._cancel_evaluation()
