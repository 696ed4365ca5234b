"""Projection of game state into the render-facing snapshot."""

from memorymatch.domain.entities.game import Game
from memorymatch.domain.value_objects.game_snapshot import CardView, GameSnapshot


def project_snapshot(game: Game) -> GameSnapshot:
    """Build an immutable snapshot of a game.

    A card is face-up when it is matched, selected, or part of a mismatch
    still waiting to flip back.
    """
    cards = tuple(
        CardView(
            index=index,
            id=card.id,
            symbol=card.symbol,
            matched=card.matched,
            face_up=game.is_face_up(index),
        )
        for index, card in enumerate(game.cards)
    )
    return GameSnapshot(
        state=game.state,
        pair_count=game.pair_count,
        cards=cards,
        elapsed_seconds=game.elapsed_seconds,
        is_active=game.is_active,
        is_won=game.is_won,
        attempts=game.attempts,
        matched_pairs=game.matched_pairs,
    )
