"""Deck generator service for building shuffled, paired decks."""

import logging
import random
from collections.abc import Sequence

from memorymatch.domain.constants import SUPPORTED_PAIR_COUNTS, SYMBOL_ALPHABET
from memorymatch.domain.entities.card import Card

logger = logging.getLogger(__name__)


class InvalidConfigurationError(ValueError):
    """Raised when a deck is requested for an unsupported pair count."""

    def __init__(self, pair_count: object, supported: Sequence[int] = SUPPORTED_PAIR_COUNTS):
        self.pair_count = pair_count
        self.supported = tuple(supported)
        super().__init__(
            f"Unsupported pair count {pair_count!r}. Supported: {list(self.supported)}"
        )


class DeckGenerator:
    """Builds decks of paired cards in random order.

    The generator has no state besides its random source; pass a seeded
    ``random.Random`` for reproducible decks.
    """

    def __init__(
        self,
        rng: random.Random | None = None,
        alphabet: Sequence[str] = SYMBOL_ALPHABET,
        supported_pair_counts: Sequence[int] = SUPPORTED_PAIR_COUNTS,
    ):
        """Initialize deck generator.

        Args:
            rng: Random source used for shuffling (module-level random if None)
            alphabet: Card faces; reused cyclically when shorter than a deck needs
            supported_pair_counts: Pair counts accepted by generate()
        """
        if not alphabet:
            raise ValueError("Symbol alphabet must not be empty")
        self._rng = rng or random.Random()
        self._alphabet = tuple(alphabet)
        self._supported = tuple(supported_pair_counts)

    @property
    def supported_pair_counts(self) -> tuple[int, ...]:
        """Pair counts this generator accepts."""
        return self._supported

    def validate(self, pair_count: int) -> None:
        """Check a pair count without generating anything.

        Raises:
            InvalidConfigurationError: If pair_count is not supported
        """
        # bool is an int subclass; True must not pass for 1
        if isinstance(pair_count, bool) or pair_count not in self._supported:
            raise InvalidConfigurationError(pair_count, self._supported)

    def symbols_for(self, pair_count: int) -> list[str]:
        """Pick the symbols for a deck, cycling through the alphabet."""
        return [self._alphabet[i % len(self._alphabet)] for i in range(pair_count)]

    def generate(self, pair_count: int) -> list[Card]:
        """Generate a shuffled deck.

        Args:
            pair_count: Number of pairs (one of the supported counts)

        Returns:
            2 * pair_count unmatched cards with ids 0..2n-1, in random order

        Raises:
            InvalidConfigurationError: If pair_count is not supported
        """
        self.validate(pair_count)

        cards: list[Card] = []
        for i, symbol in enumerate(self.symbols_for(pair_count)):
            cards.append(Card(id=2 * i, symbol=symbol))
            cards.append(Card(id=2 * i + 1, symbol=symbol))

        self._rng.shuffle(cards)
        logger.debug(f"Generated deck of {len(cards)} cards for {pair_count} pairs")
        return cards
