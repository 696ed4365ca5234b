"""Card entity representing one face of the memory board."""

from dataclasses import dataclass


@dataclass
class Card:
    """Memory card entity.

    Identity (``id`` and ``symbol``) is fixed at deck generation. Only
    ``matched`` changes, and only once, from False to True.

    Attributes:
        id: Position-derived identifier, unique within a deck
        symbol: Face symbol shared with exactly one partner card
        matched: Whether the card's pair has been found
    """

    id: int
    symbol: str
    matched: bool = False

    def pairs_with(self, other: "Card") -> bool:
        """Check if two distinct cards form a pair."""
        return self.id != other.id and self.symbol == other.symbol

    def mark_matched(self) -> None:
        """Mark card as matched. Has no effect if already matched."""
        self.matched = True
