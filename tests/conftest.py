import random

import pytest
from fastapi.testclient import TestClient

from memorymatch.adapters.manual_scheduler import ManualScheduler
from memorymatch.api.dependencies import get_game_manager
from memorymatch.app import app
from memorymatch.domain.services.deck_generator import DeckGenerator
from memorymatch.domain.services.game_manager import GameManager
from memorymatch.domain.services.game_session import GameSession
from tests.helpers import FixedDeckGenerator


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def generator():
    return DeckGenerator(rng=random.Random(1234))


@pytest.fixture
def abab_generator():
    return FixedDeckGenerator(["A", "B", "A", "B"])


@pytest.fixture
def session(abab_generator, scheduler):
    """Two-pair game [A, B, A, B], configured and READY."""
    game = GameSession(abab_generator, scheduler)
    game.configure(2)
    return game


@pytest.fixture
def manager(generator, scheduler):
    return GameManager(
        deck_generator=generator,
        scheduler=scheduler,
        auto_tick=False,
        timeout_minutes=30,
        max_games=10,
    )


@pytest.fixture
def client(manager):
    app.dependency_overrides[get_game_manager] = lambda: manager
    yield TestClient(app)
    app.dependency_overrides.clear()
