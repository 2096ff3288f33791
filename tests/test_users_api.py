"""Tests for the account and profile endpoints."""

import pytest

from scoreboard.core.security import hash_password, verify_password


def test_password_hashing_roundtrip():
    hashed = hash_password("Password123")
    assert hashed.startswith("$argon2id")
    assert verify_password("Password123", hashed)
    assert not verify_password("wrong-password", hashed)
    assert not verify_password("Password123", "not-a-hash")


def test_register_returns_public_fields(client, register):
    user = register()
    assert user["name"] == "alice"
    assert user["email"] == "alice@example.com"
    assert user["birthDate"] == "2000-05-17"
    assert "password" not in user
    assert "password_hash" not in user


def test_register_legacy_route(client):
    response = client.post(
        "/registrar",
        json={
            "nome": "joao",
            "email": "joao@example.com",
            "senha": "segredo123",
            "dataNascimento": "1995-02-01",
            "controle": 2,
        },
    )
    assert response.status_code == 201
    assert response.json()["user"]["name"] == "joao"


@pytest.mark.parametrize(
    "overrides",
    [
        {"name": ""},
        {"email": "not-an-email"},
        {"password": "short"},
        {"birthDate": "17/05/2000"},
        {"controlId": None},
    ],
)
def test_register_validation_errors(client, overrides):
    payload = {
        "name": "alice",
        "email": "alice@example.com",
        "password": "Password123",
        "birthDate": "2000-05-17",
        "controlId": 1,
    }
    payload.update(overrides)
    response = client.post("/users/register", json=payload)
    assert response.status_code == 400


def test_register_rejects_duplicate_name_and_email(client, register):
    register()
    same_name = client.post(
        "/users/register",
        json={
            "name": "alice",
            "email": "other@example.com",
            "password": "Password123",
            "birthDate": "2000-05-17",
            "controlId": 1,
        },
    )
    assert same_name.status_code == 400
    assert "name" in same_name.json()["error"]

    same_email = client.post(
        "/users/register",
        json={
            "name": "other",
            "email": "alice@example.com",
            "password": "Password123",
            "birthDate": "2000-05-17",
            "controlId": 1,
        },
    )
    assert same_email.status_code == 400
    assert "email" in same_email.json()["error"]


def test_login(client, register):
    user = register(control=3)

    ok = client.post("/users/login", json={"email": "alice@example.com", "password": "Password123"})
    assert ok.status_code == 200
    assert ok.json()["user"]["id"] == user["id"]
    assert ok.json()["controlId"] == 3

    wrong = client.post("/login", json={"email": "alice@example.com", "senha": "nope-nope"})
    assert wrong.status_code == 401

    unknown = client.post("/users/login", json={"email": "ghost@example.com", "password": "x"})
    assert unknown.status_code == 400

    missing = client.post("/users/login", json={"email": "alice@example.com"})
    assert missing.status_code == 400


def test_reset_password(client, register):
    register()

    mismatch = client.post(
        "/users/reset-password",
        json={"email": "alice@example.com", "password": "NewPassword1", "birthDate": "1990-01-01"},
    )
    assert mismatch.status_code == 400

    unknown = client.post(
        "/users/reset-password",
        json={"email": "ghost@example.com", "password": "NewPassword1", "birthDate": "2000-05-17"},
    )
    assert unknown.status_code == 404

    ok = client.post(
        "/redefinir-senha",
        json={"email": "alice@example.com", "senha": "NewPassword1", "dataNascimento": "2000-05-17"},
    )
    assert ok.status_code == 200

    login = client.post("/users/login", json={"email": "alice@example.com", "password": "NewPassword1"})
    assert login.status_code == 200


def test_get_user(client, register):
    user = register(control=4)

    response = client.get(f"/users/{user['id']}")
    assert response.status_code == 200
    assert response.json()["name"] == "alice"
    assert response.json()["controlId"] == 4

    assert client.get("/usuario/999").status_code == 404
    assert client.get("/users/abc").status_code == 400


def test_update_profile(client, register):
    alice = register()
    register(name="bob", email="bob@example.com")

    taken = client.put(
        f"/users/{alice['id']}",
        json={"name": "bob", "email": "alice@example.com", "birthDate": "2000-05-17", "controlId": 1},
    )
    assert taken.status_code == 400

    response = client.put(
        f"/atualizar-dados/{alice['id']}",
        json={"nome": "alicia", "email": "alicia@example.com", "dataNascimento": "2001-01-01", "controle": 5},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["user"]["name"] == "alicia"
    assert body["user"]["birthDate"] == "2001-01-01"
    assert body["controlId"] == 5

    # Keeping one's own name and email is not a conflict.
    same = client.put(
        f"/users/{alice['id']}",
        json={"name": "alicia", "email": "alicia@example.com", "birthDate": "2001-01-01", "controlId": 5},
    )
    assert same.status_code == 200

    missing = client.put(f"/users/{alice['id']}", json={"name": "alicia"})
    assert missing.status_code == 400

    unknown = client.put(
        "/users/999",
        json={"name": "x", "email": "x@example.com", "birthDate": "2001-01-01", "controlId": 1},
    )
    assert unknown.status_code == 404


def test_delete_user_cascades_scores(client, register):
    user = register()
    client.post(
        "/scores",
        json={"userId": user["id"], "gameId": 1, "controlId": 1, "score": 10, "time": 5},
    )
    client.post(
        "/scores",
        json={"userId": user["id"], "gameId": 2, "controlId": 1, "score": 10, "time": 5},
    )

    response = client.delete(f"/users/{user['id']}")
    assert response.status_code == 200
    assert response.json()["deletedScores"] == 2

    assert client.get(f"/users/{user['id']}").status_code == 404
    rankings = client.get("/scores/top", params={"gameId": 1, "controlId": 1}).json()["rankings"]
    assert rankings == []
    assert client.delete(f"/deletar-usuario/{user['id']}").status_code == 404
