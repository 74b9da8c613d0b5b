"""Tests for friendships — request/accept flow, symmetry, blocking."""
from __future__ import annotations

import pytest
from sqlalchemy import func, select

from src.db.social_tables import FriendRow
from tests.conftest import get_test_session


async def _request(client, a, b):
    return await client.post("/api/friends/request", json={"user_id": a, "friend_id": b})


async def _rows():
    async with get_test_session() as session:
        result = await session.execute(select(FriendRow).order_by(FriendRow.id))
        return list(result.scalars().all())


@pytest.mark.asyncio
async def test_request_creates_pending(client):
    resp = await _request(client, 1, 2)
    assert resp.status_code == 201
    assert resp.json()["status"] == "PENDING"

    assert [f["friend_id"] for f in (await client.get("/api/friends/users/1/sent")).json()] == [2]
    assert [f["user_id"] for f in (await client.get("/api/friends/users/2/pending")).json()] == [1]
    assert (await client.get("/api/friends/users/1")).json() == []


@pytest.mark.asyncio
async def test_counter_request_accepts_single_row(client):
    first = (await _request(client, 1, 2)).json()
    resp = await _request(client, 2, 1)
    assert resp.status_code == 200
    second = resp.json()

    assert second["id"] == first["id"]
    assert second["status"] == "ACCEPTED"
    rows = await _rows()
    assert len(rows) == 1
    assert rows[0].status.value == "ACCEPTED"

    for user in (1, 2):
        friends = (await client.get(f"/api/friends/users/{user}")).json()
        assert [f["id"] for f in friends] == [first["id"]]


@pytest.mark.asyncio
async def test_repeat_request_returns_existing(client):
    first = (await _request(client, 1, 2)).json()
    resp = await _request(client, 1, 2)
    assert resp.status_code == 200
    assert resp.json()["id"] == first["id"]
    assert len(await _rows()) == 1


@pytest.mark.asyncio
async def test_self_request_rejected(client):
    resp = await _request(client, 3, 3)
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_accept_by_id_and_by_users(client):
    req = (await _request(client, 1, 2)).json()
    resp = await client.put(f"/api/friends/accept/{req['id']}")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ACCEPTED"

    await _request(client, 3, 4)
    resp = await client.put("/api/friends/users/4/accept/3")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ACCEPTED"

    assert (await client.put("/api/friends/accept/999")).status_code == 404
    assert (await client.put("/api/friends/users/3/accept/4")).status_code == 404


@pytest.mark.asyncio
async def test_reject_by_id_and_by_users(client):
    req = (await _request(client, 1, 2)).json()
    assert (await client.delete(f"/api/friends/{req['id']}")).status_code == 204

    await _request(client, 3, 4)
    assert (await client.delete("/api/friends/users/4/reject/3")).status_code == 204
    assert await _rows() == []


@pytest.mark.asyncio
async def test_are_friends_in_both_directions(client):
    await _request(client, 1, 2)
    assert (await client.get("/api/friends/users/1/is-friend/2")).json() == {"are_friends": False}
    await _request(client, 2, 1)
    assert (await client.get("/api/friends/users/1/is-friend/2")).json() == {"are_friends": True}
    assert (await client.get("/api/friends/users/2/is-friend/1")).json() == {"are_friends": True}


@pytest.mark.asyncio
async def test_remove_deletes_both_directions(client):
    await _request(client, 1, 2)
    await _request(client, 2, 1)
    assert (await client.delete("/api/friends/users/2/remove/1")).status_code == 204
    assert await _rows() == []


@pytest.mark.asyncio
async def test_block_replaces_relationship(client):
    await _request(client, 2, 1)
    await client.put("/api/friends/users/1/accept/2")

    resp = await client.post("/api/friends/users/1/block/2")
    assert resp.status_code == 201
    assert resp.json()["status"] == "BLOCKED"

    rows = await _rows()
    assert len(rows) == 1
    assert (rows[0].user_id, rows[0].friend_id) == (1, 2)
    assert [f["friend_id"] for f in (await client.get("/api/friends/users/1/blocked")).json()] == [2]
    assert (await client.get("/api/friends/users/1")).json() == []

    # the blocked user cannot send a request back
    assert (await _request(client, 2, 1)).status_code == 400


@pytest.mark.asyncio
async def test_self_block_rejected(client):
    assert (await client.post("/api/friends/users/1/block/1")).status_code == 400


@pytest.mark.asyncio
async def test_unblock_only_removes_blocked_rows(client):
    await _request(client, 1, 2)
    assert (await client.delete("/api/friends/users/1/unblock/2")).status_code == 204
    assert len(await _rows()) == 1

    await client.post("/api/friends/users/1/block/2")
    assert (await client.delete("/api/friends/users/1/unblock/2")).status_code == 204
    async with get_test_session() as session:
        count = await session.scalar(select(func.count(FriendRow.id)))
    assert count == 0
