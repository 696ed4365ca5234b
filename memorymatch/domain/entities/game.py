"""Game entity holding the pure memory-game state machine."""

from dataclasses import dataclass, field

from memorymatch.domain.constants import DEFAULT_PAIR_COUNT, MAX_SELECTION_SIZE
from memorymatch.domain.entities.card import Card
from memorymatch.domain.value_objects.game_state import GameState
from memorymatch.domain.value_objects.match_outcome import MatchOutcome


@dataclass
class Game:
    """Memory game entity.

    Pure state: no timers, no scheduling, no I/O. Every mutator either applies
    fully or leaves the game untouched and returns a falsy result, so callers
    can absorb UI misuse without exceptions.

    Attributes:
        pair_count: Pair count of the current (or next) deck
        state: Current lifecycle state
        cards: Card sequence; never shrinks during a game
        selection: Indices face-up pending evaluation (at most 2)
        revealed: Indices of the last mismatch, face-up until flip-back
        elapsed_seconds: Seconds counted since start
        attempts: Number of evaluated pairs
    """

    pair_count: int = DEFAULT_PAIR_COUNT
    state: GameState = GameState.IDLE
    cards: list[Card] = field(default_factory=list)
    selection: list[int] = field(default_factory=list)
    revealed: tuple[int, ...] = ()
    elapsed_seconds: int = 0
    attempts: int = 0

    @property
    def is_active(self) -> bool:
        """Whether the timer is running and selections are accepted."""
        return self.state is GameState.ACTIVE

    @property
    def is_won(self) -> bool:
        """Whether every pair has been found."""
        return self.state is GameState.WON

    @property
    def matched_pairs(self) -> int:
        """Number of pairs found so far."""
        return sum(1 for c in self.cards if c.matched) // 2

    def all_matched(self) -> bool:
        """Check if every card is matched (False for an empty deck)."""
        return bool(self.cards) and all(c.matched for c in self.cards)

    def is_face_up(self, index: int) -> bool:
        """Check if the card at index shows its symbol."""
        return (
            self.cards[index].matched
            or index in self.selection
            or index in self.revealed
        )

    def setup(self, pair_count: int, cards: list[Card]) -> None:
        """Install a fresh deck and return to READY, discarding progress.

        Args:
            pair_count: Pair count the deck was generated for
            cards: Freshly generated cards
        """
        self.pair_count = pair_count
        self.cards = list(cards)
        self.selection.clear()
        self.revealed = ()
        self.elapsed_seconds = 0
        self.attempts = 0
        self.transition_to(GameState.READY)

    def start(self) -> bool:
        """Start (or restart) the clock.

        Returns:
            True if the game is now ACTIVE with elapsed time reset
        """
        if not self.cards or not self.state.can_start():
            return False
        self.elapsed_seconds = 0
        self.transition_to(GameState.ACTIVE)
        return True

    def tick(self) -> bool:
        """Count one elapsed second.

        Returns:
            True if the counter advanced
        """
        if not self.is_active:
            return False
        self.elapsed_seconds += 1
        return True

    def can_select(self, index: int) -> bool:
        """Check if a tap on index would be accepted."""
        return (
            self.state.accepts_selections()
            and 0 <= index < len(self.cards)
            and len(self.selection) < MAX_SELECTION_SIZE
            and index not in self.selection
            and not self.cards[index].matched
        )

    def select_card(self, index: int) -> bool:
        """Flip a card face-up.

        Hides a still-revealed mismatch first, so at most one pair is ever
        face-up besides matched cards.

        Returns:
            True if the index was added to the selection
        """
        if not self.can_select(index):
            return False
        self.revealed = ()
        self.selection.append(index)
        return True

    @property
    def selection_full(self) -> bool:
        """Whether the selection holds a pair awaiting evaluation."""
        return len(self.selection) == MAX_SELECTION_SIZE

    def evaluate_match(self) -> MatchOutcome:
        """Compare the two selected cards and clear the selection.

        Returns:
            Outcome of the evaluation; SKIPPED if there was no full selection
        """
        if not self.is_active or not self.selection_full:
            return MatchOutcome.SKIPPED

        first_index, second_index = self.selection
        first, second = self.cards[first_index], self.cards[second_index]
        self.attempts += 1
        self.selection.clear()

        if not first.pairs_with(second):
            self.revealed = (first_index, second_index)
            return MatchOutcome.MISMATCH

        first.mark_matched()
        second.mark_matched()
        if self.all_matched():
            self.transition_to(GameState.WON)
            return MatchOutcome.WON
        return MatchOutcome.MATCH

    def flip_back(self) -> bool:
        """Turn the revealed mismatch face-down.

        Returns:
            True if a revealed pair was hidden
        """
        if not self.revealed:
            return False
        self.revealed = ()
        return True

    def transition_to(self, new_state: GameState) -> None:
        """Transition game to a new state.

        Args:
            new_state: Target state

        Raises:
            ValueError: If transition is invalid
        """
        valid_transitions = {
            GameState.IDLE: {GameState.READY},
            GameState.READY: {GameState.READY, GameState.ACTIVE},
            GameState.ACTIVE: {GameState.READY, GameState.ACTIVE, GameState.WON},
            GameState.WON: {GameState.READY},
        }

        allowed = valid_transitions.get(self.state, set())
        if new_state not in allowed:
            raise ValueError(
                f"Invalid transition from {self.state} to {new_state}. " f"Allowed: {allowed}"
            )

        self.state = new_state
