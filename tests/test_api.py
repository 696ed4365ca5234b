from datetime import UTC, datetime, timedelta

import pytest

from tests.helpers import pair_indices


def create(client, **body):
    response = client.post("/api/games", json=body)
    assert response.status_code == 201
    return response.json()


def select(client, game_id, index):
    return client.post(f"/api/games/{game_id}/select", json={"index": index}).json()


def test_health(client):
    create(client)

    response = client.get("/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["active_games"] == 1


def test_options_lists_supported_pair_counts(client):
    response = client.get("/api/games/options")

    assert response.status_code == 200
    body = response.json()
    assert [o["pair_count"] for o in body["options"]] == [3, 6, 10]
    assert body["options"][0]["label"] == "3 Pairs"
    assert body["default_pair_count"] == 3
    assert body["timer_mode"] == "external"


def test_create_game_defaults_to_three_pairs(client):
    game = create(client)

    assert game["state"] == "ready"
    assert game["pair_count"] == 3
    assert len(game["cards"]) == 6
    assert game["elapsed_seconds"] == 0
    assert game["matched_pairs"] == 0
    assert game["remaining_pairs"] == 3
    assert game["is_active"] is False
    assert game["message"] is None


def test_face_down_cards_hide_symbols(client):
    game = create(client, pair_count=10)

    assert all(card["symbol"] is None for card in game["cards"])
    assert all(card["face_up"] is False for card in game["cards"])


@pytest.mark.parametrize("pair_count", [0, 4, 12])
def test_create_game_rejects_unsupported_pair_count(client, pair_count):
    response = client.post("/api/games", json={"pair_count": pair_count})

    assert response.status_code == 422
    error = response.json()["detail"]["error"]
    assert error["code"] == "INVALID_CONFIGURATION"
    assert error["details"] == {"pair_count": pair_count, "supported": [3, 6, 10]}


def test_unknown_game_is_404(client):
    response = client.get("/api/games/nope")

    assert response.status_code == 404
    assert response.json()["detail"]["error"]["code"] == "GAME_NOT_FOUND"


def test_expired_game_is_410(client, manager):
    game = create(client)
    session = manager.get_game(game["game_id"])
    session.last_activity = datetime.now(UTC) - timedelta(hours=1)

    response = client.get(f"/api/games/{game['game_id']}")

    assert response.status_code == 410
    assert response.json()["detail"]["error"]["code"] == "GAME_EXPIRED"


def test_start_and_tick(client):
    game_id = create(client)["game_id"]

    started = client.post(f"/api/games/{game_id}/start").json()
    ticked = client.post(f"/api/games/{game_id}/tick").json()

    assert started["state"] == "active"
    assert started["is_active"] is True
    assert started["elapsed_seconds"] == 0
    assert ticked["elapsed_seconds"] == 1


def test_select_before_start_is_ignored(client):
    game_id = create(client)["game_id"]

    body = select(client, game_id, 0)

    assert body["accepted"] is False
    assert body["cards"][0]["face_up"] is False


def test_select_reveals_symbol(client):
    game_id = create(client)["game_id"]
    client.post(f"/api/games/{game_id}/start")

    body = select(client, game_id, 0)

    assert body["accepted"] is True
    assert body["cards"][0]["face_up"] is True
    assert body["cards"][0]["symbol"] is not None


def test_mismatch_flips_back_after_delay(client, manager, scheduler):
    game_id = create(client)["game_id"]
    client.post(f"/api/games/{game_id}/start")
    groups = pair_indices(manager.get_game(game_id).cards)
    first, second = groups[0][0], groups[1][0]

    select(client, game_id, first)
    select(client, game_id, second)
    scheduler.advance(0.5)
    revealed = client.get(f"/api/games/{game_id}").json()
    scheduler.advance(1.0)
    hidden = client.get(f"/api/games/{game_id}").json()

    assert revealed["cards"][first]["face_up"] is True
    assert revealed["attempts"] == 1
    assert hidden["cards"][first]["face_up"] is False
    assert hidden["cards"][second]["symbol"] is None


def test_full_game_reports_win(client, manager, scheduler):
    game_id = create(client, pair_count=6)["game_id"]
    client.post(f"/api/games/{game_id}/start")
    for _ in range(4):
        client.post(f"/api/games/{game_id}/tick")

    for first, second in pair_indices(manager.get_game(game_id).cards):
        select(client, game_id, first)
        select(client, game_id, second)
        scheduler.advance(0.5)

    body = client.get(f"/api/games/{game_id}").json()
    assert body["state"] == "won"
    assert body["is_won"] is True
    assert body["is_active"] is False
    assert body["matched_pairs"] == 6
    assert body["remaining_pairs"] == 0
    assert body["message"] == "You won in 4 seconds!"
    assert all(card["face_up"] and card["symbol"] for card in body["cards"])

    after_tick = client.post(f"/api/games/{game_id}/tick").json()
    assert after_tick["elapsed_seconds"] == 4


def test_configure_changes_deck_and_resets(client):
    game_id = create(client)["game_id"]
    client.post(f"/api/games/{game_id}/start")
    client.post(f"/api/games/{game_id}/tick")

    body = client.post(f"/api/games/{game_id}/configure", json={"pair_count": 10}).json()

    assert body["state"] == "ready"
    assert body["pair_count"] == 10
    assert len(body["cards"]) == 20
    assert body["elapsed_seconds"] == 0


def test_configure_rejects_unsupported_pair_count(client):
    game_id = create(client)["game_id"]

    response = client.post(f"/api/games/{game_id}/configure", json={"pair_count": 7})

    assert response.status_code == 422
    assert client.get(f"/api/games/{game_id}").json()["pair_count"] == 3


def test_reset_keeps_pair_count(client):
    game_id = create(client, pair_count=6)["game_id"]
    client.post(f"/api/games/{game_id}/start")

    body = client.post(f"/api/games/{game_id}/reset").json()

    assert body["state"] == "ready"
    assert body["pair_count"] == 6
    assert body["is_active"] is False


def test_delete_game(client, scheduler):
    game_id = create(client)["game_id"]
    client.post(f"/api/games/{game_id}/start")

    response = client.delete(f"/api/games/{game_id}")

    assert response.status_code == 204
    assert client.get(f"/api/games/{game_id}").status_code == 404
    assert client.delete(f"/api/games/{game_id}").status_code == 404
