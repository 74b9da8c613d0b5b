"""Tests for the users API — registration rules, login, profile management."""
from __future__ import annotations

import pytest


# ── Registration ─────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_register_returns_user_without_password(client):
    resp = await client.post("/api/register", json={
        "username": "alice", "email": "a@x.com", "password": "secret1", "name": "Alice",
    })
    assert resp.status_code == 201
    data = resp.json()
    assert data["username"] == "alice"
    assert data["email"] == "a@x.com"
    assert isinstance(data["id"], int)
    assert "password" not in data
    assert "password_hash" not in data


@pytest.mark.asyncio
async def test_duplicate_username_any_case_rejected(client, make_user):
    await make_user("alice")
    resp = await client.post("/api/register", json={
        "username": "ALICE", "email": "other@mail.com", "password": "secret1", "name": "A",
    })
    assert resp.status_code == 400
    assert resp.json()["message"] == "Username is already taken."


@pytest.mark.asyncio
async def test_duplicate_email_any_case_rejected(client, make_user):
    await make_user("alice", email="alice@mail.com")
    resp = await client.post("/api/register", json={
        "username": "bob", "email": "Alice@Mail.com", "password": "secret1", "name": "Bob",
    })
    assert resp.status_code == 400
    assert resp.json()["message"] == "Email is already in use."


@pytest.mark.asyncio
async def test_short_password_rejected(client):
    resp = await client.post("/api/register", json={
        "username": "carol", "email": "carol@mail.com", "password": "12345", "name": "Carol",
    })
    assert resp.status_code == 400
    assert resp.json()["message"] == "Password must be at least 6 characters long."


@pytest.mark.asyncio
async def test_malformed_email_rejected(client):
    resp = await client.post("/api/register", json={
        "username": "dave", "email": "not-an-email", "password": "secret1", "name": "Dave",
    })
    assert resp.status_code == 400
    data = resp.json()
    assert data["error"] == "validation_error"
    assert any(d["field"] == "email" for d in data["details"])


# ── Login ────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_login_returns_token_and_user(client, make_user):
    await make_user("alice", email="a@x.com", password="secret1")
    resp = await client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["token"]
    assert data["user"]["username"] == "alice"
    assert "password" not in data["user"]
    assert "password_hash" not in data["user"]


@pytest.mark.asyncio
async def test_login_wrong_password_fails(client, make_user):
    await make_user("alice", email="a@x.com", password="secret1")
    resp = await client.post("/api/login", json={"email": "a@x.com", "password": "wrong-one"})
    assert resp.status_code == 401
    assert resp.json()["error"] == "unauthorized"


@pytest.mark.asyncio
async def test_login_unknown_email_fails(client):
    resp = await client.post("/api/login", json={"email": "ghost@mail.com", "password": "secret1"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_me_resolves_bearer_token(client, make_user):
    await make_user("alice", email="a@x.com")
    login = await client.post("/api/login", json={"email": "a@x.com", "password": "secret1"})
    token = login.json()["token"]

    resp = await client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert resp.status_code == 200
    assert resp.json()["email"] == "a@x.com"


@pytest.mark.asyncio
async def test_me_requires_token(client):
    resp = await client.get("/api/users/me")
    assert resp.status_code == 401
    resp = await client.get("/api/users/me", headers={"Authorization": "Bearer garbage"})
    assert resp.status_code == 401


# ── Profiles ─────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_and_list_users(client, make_user):
    alice = await make_user("alice")
    await make_user("bob")

    resp = await client.get(f"/api/users/{alice['id']}")
    assert resp.status_code == 200
    assert resp.json()["username"] == "alice"

    resp = await client.get("/api/users")
    assert [u["username"] for u in resp.json()] == ["alice", "bob"]


@pytest.mark.asyncio
async def test_get_missing_user_404(client):
    resp = await client.get("/api/users/9999")
    assert resp.status_code == 404
    assert resp.json()["message"] == "User not found"


@pytest.mark.asyncio
async def test_update_overwrites_fields_and_password(client, make_user):
    alice = await make_user("alice", email="a@x.com")
    resp = await client.put(f"/api/users/{alice['id']}", json={
        "username": "alice2", "email": "new@x.com", "password": "newpass1",
        "name": "Alice Two", "bio": "Pastry nerd",
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["username"] == "alice2"
    assert data["bio"] == "Pastry nerd"

    old = await client.post("/api/login", json={"email": "new@x.com", "password": "secret1"})
    assert old.status_code == 401
    new = await client.post("/api/login", json={"email": "new@x.com", "password": "newpass1"})
    assert new.status_code == 200


@pytest.mark.asyncio
async def test_update_keeps_own_username(client, make_user):
    alice = await make_user("alice", email="a@x.com")
    resp = await client.put(f"/api/users/{alice['id']}", json={
        "username": "Alice", "email": "a@x.com", "password": "secret1", "name": "Alice",
    })
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_update_to_taken_username_rejected(client, make_user):
    alice = await make_user("alice")
    await make_user("bob")
    resp = await client.put(f"/api/users/{alice['id']}", json={
        "username": "bob", "email": "alice@mail.com", "password": "secret1", "name": "Alice",
    })
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_delete_user(client, make_user):
    alice = await make_user("alice")
    resp = await client.delete(f"/api/users/{alice['id']}")
    assert resp.status_code == 204
    assert (await client.get(f"/api/users/{alice['id']}")).status_code == 404
    assert (await client.delete(f"/api/users/{alice['id']}")).status_code == 404


# ── Search & lookups ─────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_search_is_case_insensitive_across_fields(client):
    await client.post("/api/register", json={
        "username": "bakerbob", "email": "bob@mail.com", "password": "secret1",
        "name": "Bob", "bio": "Sourdough every weekend",
    })
    await client.post("/api/register", json={
        "username": "carol", "email": "carol@mail.com", "password": "secret1", "name": "Carol",
    })

    resp = await client.get("/api/users/search", params={"term": "SOURDOUGH"})
    assert [u["username"] for u in resp.json()] == ["bakerbob"]

    resp = await client.get("/api/users/search", params={"term": "car", "field": "username"})
    assert [u["username"] for u in resp.json()] == ["carol"]

    resp = await client.get("/api/users/search", params={"term": "car", "field": "bio"})
    assert resp.json() == []


@pytest.mark.asyncio
async def test_search_rejects_unknown_field(client):
    resp = await client.get("/api/users/search", params={"term": "x", "field": "password"})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_recent_returns_newest_ten(client, make_user):
    for i in range(12):
        await make_user(f"user{i}")
    resp = await client.get("/api/users/recent")
    names = [u["username"] for u in resp.json()]
    assert len(names) == 10
    assert names[0] == "user11"
    assert "user0" not in names


@pytest.mark.asyncio
async def test_availability_checks(client, make_user):
    await make_user("alice", email="a@x.com")

    resp = await client.get("/api/users/check-username", params={"username": "ALICE"})
    assert resp.json() == {"available": False}
    resp = await client.get("/api/users/check-username", params={"username": "zoe"})
    assert resp.json() == {"available": True}
    resp = await client.get("/api/users/check-email", params={"email": "A@X.com"})
    assert resp.json() == {"available": False}


@pytest.mark.asyncio
async def test_find_by_username(client, make_user):
    await make_user("alice")
    resp = await client.get("/api/users/username/alice")
    assert resp.status_code == 200
    assert (await client.get("/api/users/username/nobody")).status_code == 404
