import random

from memorymatch.domain.entities.card import Card
from memorymatch.domain.services.deck_generator import DeckGenerator


class FixedDeckGenerator(DeckGenerator):
    """Deals a known card order for the matching pair count."""

    def __init__(self, symbols):
        pair_count = len(symbols) // 2
        super().__init__(
            rng=random.Random(0),
            supported_pair_counts=sorted({pair_count, 3, 6, 10}),
        )
        self._symbols = list(symbols)
        self._pair_count = pair_count

    def generate(self, pair_count):
        self.validate(pair_count)
        if pair_count != self._pair_count:
            return super().generate(pair_count)
        return [Card(id=i, symbol=s) for i, s in enumerate(self._symbols)]


def pair_indices(cards):
    """Group card indices by symbol, in order of first appearance."""
    groups = {}
    for index, card in enumerate(cards):
        groups.setdefault(card.symbol, []).append(index)
    return list(groups.values())


def play_to_win(session, scheduler, delay=0.5):
    for first, second in pair_indices(session.cards):
        assert session.select_card(first)
        assert session.select_card(second)
        scheduler.advance(delay)
