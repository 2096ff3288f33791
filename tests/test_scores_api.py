"""Tests for the score and leaderboard endpoints."""

import pytest


def _submit(client, user_id, score, time, game_id=1, control_id=1):
    return client.post(
        "/scores",
        json={
            "userId": user_id,
            "gameId": game_id,
            "controlId": control_id,
            "score": score,
            "time": time,
        },
    )


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"ok": True}


def test_submit_score_returns_201_then_200(client):
    created = _submit(client, 1, 5, 3)
    assert created.status_code == 201
    assert created.json()["score"] == {
        "id": created.json()["score"]["id"],
        "userId": 1,
        "gameId": 1,
        "controlId": 1,
        "score": 5,
        "time": 3.0,
    }

    updated = _submit(client, 1, 8, 2.5)
    assert updated.status_code == 200
    body = updated.json()["score"]
    assert body["id"] == created.json()["score"]["id"]
    assert body["score"] == 8
    assert body["time"] == 2.5


def test_submit_score_accepts_legacy_field_names(client):
    response = client.post(
        "/registrar-pontuacao",
        json={"pontuacao": 12, "tempo": 40, "id_usuario": 3, "id_controle": 2, "id_jogo": 1},
    )
    assert response.status_code == 201
    assert response.json()["score"]["controlId"] == 2


@pytest.mark.parametrize("missing", ["userId", "gameId", "controlId", "score", "time"])
def test_submit_score_missing_field_returns_400(client, missing):
    payload = {"userId": 1, "gameId": 1, "controlId": 1, "score": 5, "time": 3}
    payload.pop(missing)
    response = client.post("/scores", json=payload)
    assert response.status_code == 400
    assert "error" in response.json()


def test_top_rankings_best_scores_among_fastest(client, register):
    players = [
        register(name=name, email=f"{name}@example.com")
        for name in ("ana", "bruno", "carla", "davi")
    ]
    for player, (time, score) in zip(players, [(10, 50), (12, 90), (15, 70), (20, 99)]):
        assert _submit(client, player["id"], score, time).status_code == 201

    response = client.get("/scores/top", params={"gameId": 1, "controlId": 1})

    assert response.status_code == 200
    rankings = response.json()["rankings"]
    assert [entry["playerName"] for entry in rankings] == ["bruno", "carla", "ana"]
    assert [entry["score"] for entry in rankings] == [90, 70, 50]


def test_top_rankings_legacy_route_and_unknown_player(client):
    _submit(client, 99, 10, 1)

    response = client.get("/maiores-pontuacoes", params={"id_jogo": 1, "id_controle": 1})

    assert response.status_code == 200
    assert response.json()["rankings"][0]["playerName"] == "Desconhecido"


@pytest.mark.parametrize(
    "params",
    [{"gameId": 1}, {"controlId": 1}, {}, {"gameId": str(10**20), "controlId": 1}],
)
def test_top_rankings_bad_parameters_return_400(client, params):
    response = client.get("/scores/top", params=params)
    assert response.status_code == 400
    assert "error" in response.json()


def test_top_rankings_ignores_limit_query_parameter(client):
    for user_id in range(1, 6):
        _submit(client, user_id, user_id, user_id)

    response = client.get("/scores/top", params={"gameId": 1, "controlId": 1, "limit": 1})

    assert len(response.json()["rankings"]) == 3


@pytest.mark.parametrize(
    "overrides",
    [{"score": 10**20}, {"score": -(10**20)}, {"userId": 2**63}, {"gameId": str(10**20)}],
)
def test_submit_score_out_of_range_numbers_return_400(client, overrides):
    payload = {"userId": 1, "gameId": 1, "controlId": 1, "score": 5, "time": 3}
    payload.update(overrides)
    response = client.post("/scores", json=payload)
    assert response.status_code == 400
    assert "error" in response.json()


def test_submit_score_without_body_returns_400(client):
    response = client.post("/scores")
    assert response.status_code == 400
    assert "error" in response.json()


def test_submit_score_with_list_body_returns_400(client):
    response = client.post("/registrar-pontuacao", json=[1, 2, 3])
    assert response.status_code == 400
    assert "error" in response.json()


def test_register_without_body_returns_400(client):
    response = client.post("/users/register")
    assert response.status_code == 400
    assert "error" in response.json()
