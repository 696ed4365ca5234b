"""Game manager service for the lifecycle of independent game sessions."""

import logging
from dataclasses import dataclass

from memorymatch.domain.constants import DEFAULT_PAIR_COUNT
from memorymatch.domain.services.deck_generator import DeckGenerator
from memorymatch.domain.services.game_session import GameSession
from memorymatch.domain.value_objects.game_snapshot import GameSnapshot
from memorymatch.domain.value_objects.game_timing import GameTiming
from memorymatch.ports.scheduler import CancelHandle, Scheduler

logger = logging.getLogger(__name__)


class GameNotFoundError(Exception):
    """Raised when no game exists for the given id."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id} not found")


class GameExpiredError(Exception):
    """Raised when a game has timed out due to inactivity."""

    def __init__(self, game_id: str):
        self.game_id = game_id
        super().__init__(f"Game {game_id} has timed out due to inactivity")


class GameLimitError(Exception):
    """Raised when creating a game would exceed the concurrent game limit."""

    def __init__(self, max_games: int):
        self.max_games = max_games
        super().__init__(f"Game limit of {max_games} reached")


@dataclass
class GameManagerStats:
    """Counters for the health endpoint."""

    active_games: int
    games_created: int
    games_won: int


class GameManager:
    """Manages game session lifecycle.

    Responsibilities:
    - Creating sessions wired to the shared scheduler and deck generator
    - Lookup by id with inactivity timeout detection
    - Releasing every session's timers when it ends

    Each session belongs to the single client that created it; the manager
    only keys them, it never lets two clients share one.
    """

    def __init__(
        self,
        deck_generator: DeckGenerator,
        scheduler: Scheduler,
        timing: GameTiming | None = None,
        auto_tick: bool = True,
        timeout_minutes: int = 30,
        max_games: int = 1000,
    ):
        """Initialize game manager.

        Args:
            deck_generator: Deck source shared by every session
            scheduler: Port for session timers
            timing: Callback delays for new sessions
            auto_tick: Whether sessions run their own elapsed-time timer
            timeout_minutes: Game inactivity timeout
            max_games: Maximum number of concurrent games
        """
        self._deck_generator = deck_generator
        self._scheduler = scheduler
        self._timing = timing or GameTiming()
        self._auto_tick = auto_tick
        self._timeout_minutes = timeout_minutes
        self._max_games = max_games
        self._games: dict[str, GameSession] = {}
        self._games_created = 0
        self._games_won = 0
        self._sweeper: CancelHandle | None = None

    @property
    def supported_pair_counts(self) -> tuple[int, ...]:
        return self._deck_generator.supported_pair_counts

    @property
    def auto_tick(self) -> bool:
        return self._auto_tick

    @property
    def sweeper_running(self) -> bool:
        return self._sweeper is not None

    @property
    def game_count(self) -> int:
        return len(self._games)

    def get_game_ids(self) -> list[str]:
        """Get IDs of all live games."""
        return list(self._games)

    def create_game(self, pair_count: int = DEFAULT_PAIR_COUNT) -> GameSession:
        """Create a new game in READY state.

        Args:
            pair_count: Number of pairs for the first deck

        Returns:
            Configured GameSession

        Raises:
            InvalidConfigurationError: If pair_count is unsupported
            GameLimitError: If too many games are live
        """
        self._deck_generator.validate(pair_count)

        if len(self._games) >= self._max_games:
            self.prune_expired()
            if len(self._games) >= self._max_games:
                raise GameLimitError(self._max_games)

        session = GameSession(
            deck_generator=self._deck_generator,
            scheduler=self._scheduler,
            timing=self._timing,
            auto_tick=self._auto_tick,
        )
        session.configure(pair_count)
        session.subscribe(self._count_win)
        self._games[session.id] = session
        self._games_created += 1
        logger.info(f"Created game {session.id} ({pair_count} pairs)")
        return session

    def get_game(self, game_id: str) -> GameSession:
        """Get a live game.

        Args:
            game_id: Game identifier

        Returns:
            The game session

        Raises:
            GameNotFoundError: If no matching game
            GameExpiredError: If the game timed out (it is ended first)
        """
        session = self._games.get(game_id)
        if session is None:
            raise GameNotFoundError(game_id)

        if session.is_timed_out(self._timeout_minutes):
            self.end_game(game_id)
            raise GameExpiredError(game_id)

        session.touch()
        return session

    def end_game(self, game_id: str) -> None:
        """End a game and cancel its timers.

        Raises:
            GameNotFoundError: If no matching game
        """
        session = self._games.pop(game_id, None)
        if session is None:
            raise GameNotFoundError(game_id)
        session.close()
        logger.info(f"Ended game {game_id}")

    def prune_expired(self) -> int:
        """End every game idle longer than the timeout.

        Returns:
            Number of games ended
        """
        expired = [
            game_id
            for game_id, session in self._games.items()
            if session.is_timed_out(self._timeout_minutes)
        ]
        for game_id in expired:
            self.end_game(game_id)
        if expired:
            logger.info(f"Pruned {len(expired)} expired games")
        return len(expired)

    def start_sweeper(self, interval_seconds: float) -> None:
        """Prune expired games every interval_seconds until stopped.

        Restarting replaces the previous sweep.
        """
        self.stop_sweeper()
        self._sweeper = self._scheduler.call_every(interval_seconds, self.prune_expired)

    def stop_sweeper(self) -> None:
        """Stop the periodic prune."""
        if self._sweeper is not None:
            self._sweeper.cancel()
            self._sweeper = None

    def end_all_games(self) -> int:
        """End all games (for graceful shutdown).

        Returns:
            Number of games ended
        """
        count = 0
        for game_id in list(self._games):
            self.end_game(game_id)
            count += 1
        return count

    def get_stats(self) -> GameManagerStats:
        """Get manager counters."""
        return GameManagerStats(
            active_games=len(self._games),
            games_created=self._games_created,
            games_won=self._games_won,
        )

    def _count_win(self, snapshot: GameSnapshot) -> None:
        # A won game emits no further snapshots until it is reconfigured
        if snapshot.is_won:
            self._games_won += 1
