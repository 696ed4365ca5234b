from datetime import UTC, datetime, timedelta

import pytest

from memorymatch.domain.services.deck_generator import InvalidConfigurationError
from memorymatch.domain.services.game_manager import (
    GameExpiredError,
    GameLimitError,
    GameManager,
    GameNotFoundError,
)
from memorymatch.domain.value_objects.game_state import GameState
from tests.helpers import play_to_win


def expire(session, minutes=31):
    session.last_activity = datetime.now(UTC) - timedelta(minutes=minutes)


def test_create_game_is_ready(manager):
    session = manager.create_game(6)

    assert session.state is GameState.READY
    assert len(session.cards) == 12
    assert manager.get_game(session.id) is session
    assert manager.game_count == 1


def test_create_game_rejects_unsupported_pair_count(manager):
    with pytest.raises(InvalidConfigurationError):
        manager.create_game(5)

    assert manager.game_count == 0


def test_games_are_independent(manager):
    first = manager.create_game(3)
    second = manager.create_game(3)

    first.start()

    assert first.id != second.id
    assert first.is_active
    assert second.state is GameState.READY


def test_get_unknown_game_raises(manager):
    with pytest.raises(GameNotFoundError) as exc_info:
        manager.get_game("missing")

    assert exc_info.value.game_id == "missing"


def test_get_expired_game_raises_and_discards(manager):
    session = manager.create_game()
    expire(session)

    with pytest.raises(GameExpiredError):
        manager.get_game(session.id)

    with pytest.raises(GameNotFoundError):
        manager.get_game(session.id)


def test_end_game_cancels_timers(manager, scheduler):
    session = manager.create_game()
    session.start()
    session.select_card(0)
    session.select_card(1)

    manager.end_game(session.id)

    assert scheduler.pending_count == 0
    with pytest.raises(GameNotFoundError):
        manager.end_game(session.id)


def test_prune_expired_only_removes_idle_games(manager):
    stale = manager.create_game()
    fresh = manager.create_game()
    expire(stale)

    assert manager.prune_expired() == 1
    assert manager.get_game_ids() == [fresh.id]


def test_game_limit(generator, scheduler):
    manager = GameManager(generator, scheduler, max_games=1)
    first = manager.create_game()

    with pytest.raises(GameLimitError) as exc_info:
        manager.create_game()
    assert exc_info.value.max_games == 1

    expire(first)
    second = manager.create_game()
    assert manager.get_game_ids() == [second.id]


def test_end_all_games(manager, scheduler):
    for _ in range(3):
        manager.create_game().start()

    assert manager.end_all_games() == 3
    assert manager.game_count == 0
    assert scheduler.pending_count == 0


def test_stats_count_created_and_won_games(manager, scheduler):
    won = manager.create_game(3)
    manager.create_game(3)
    won.start()
    play_to_win(won, scheduler)

    stats = manager.get_stats()

    assert stats.active_games == 2
    assert stats.games_created == 2
    assert stats.games_won == 1


def test_manager_sessions_follow_timer_mode(generator, scheduler):
    manager = GameManager(generator, scheduler, auto_tick=True)
    session = manager.create_game()
    session.start()

    scheduler.advance(2)

    assert session.elapsed_seconds == 2


def test_sweeper_ends_abandoned_games_and_their_timers(generator, scheduler):
    manager = GameManager(generator, scheduler, auto_tick=True, timeout_minutes=30)
    manager.start_sweeper(60)
    abandoned = manager.create_game()
    abandoned.start()
    expire(abandoned, minutes=120)

    scheduler.advance(60)

    assert manager.game_count == 0
    assert not abandoned.timer_running
    manager.stop_sweeper()
    assert scheduler.pending_count == 0


def test_sweeper_keeps_active_games(generator, scheduler):
    manager = GameManager(generator, scheduler, auto_tick=True, timeout_minutes=30)
    manager.start_sweeper(60)
    session = manager.create_game()
    session.start()

    scheduler.advance(180)

    assert manager.get_game_ids() == [session.id]
    assert session.elapsed_seconds == 180


def test_restarting_sweeper_replaces_previous_one(manager, scheduler):
    manager.start_sweeper(60)
    manager.start_sweeper(30)

    assert scheduler.pending_count == 1
    manager.stop_sweeper()
    manager.stop_sweeper()
    assert scheduler.pending_count == 0
