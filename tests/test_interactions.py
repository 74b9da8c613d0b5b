"""Tests for interactions — idempotent likes/favorites, repeatable comments."""
from __future__ import annotations

import pytest


async def _interact(client, user, recipe, kind, content=None):
    body = {"content": content} if content is not None else None
    return await client.post(
        f"/api/interactions/users/{user}/recipes/{recipe}",
        params={"type": kind},
        json=body,
    )


@pytest.mark.asyncio
async def test_like_twice_returns_same_row(client):
    first = await _interact(client, 1, 10, "LIKE")
    second = await _interact(client, 1, 10, "LIKE")
    assert first.status_code == 201
    assert second.status_code == 200
    assert first.json()["id"] == second.json()["id"]

    count = await client.get("/api/interactions/recipes/10/type/LIKE/count")
    assert count.json() == {"count": 1}


@pytest.mark.asyncio
async def test_favorite_is_idempotent_per_type(client):
    like = (await _interact(client, 1, 10, "LIKE")).json()
    fav = (await _interact(client, 1, 10, "FAVORITE")).json()
    fav_again = (await _interact(client, 1, 10, "FAVORITE")).json()
    assert fav["id"] != like["id"]
    assert fav_again["id"] == fav["id"]


@pytest.mark.asyncio
async def test_comment_twice_creates_two_rows(client):
    first = await _interact(client, 1, 10, "COMMENT", "Yum")
    second = await _interact(client, 1, 10, "COMMENT", "Yum")
    assert first.status_code == second.status_code == 201
    assert first.json()["id"] != second.json()["id"]

    rows = (await client.get("/api/interactions/recipes/10/type/COMMENT")).json()
    assert len(rows) == 2


@pytest.mark.asyncio
async def test_unknown_type_rejected(client):
    resp = await _interact(client, 1, 10, "SHARE")
    assert resp.status_code == 400
    assert (await client.get("/api/interactions/recipes/10/type/SHARE")).status_code == 400


@pytest.mark.asyncio
async def test_listing_and_exists(client):
    await _interact(client, 1, 10, "LIKE")
    await _interact(client, 2, 10, "LIKE")
    await _interact(client, 1, 11, "LIKE")
    await _interact(client, 1, 10, "COMMENT", "Great")

    assert len((await client.get("/api/interactions/recipes/10")).json()) == 3
    assert len((await client.get("/api/interactions/users/1/type/LIKE")).json()) == 2

    check = await client.get("/api/interactions/users/2/recipes/10/type/LIKE/check")
    assert check.json() == {"exists": True}
    check = await client.get("/api/interactions/users/2/recipes/11/type/LIKE/check")
    assert check.json() == {"exists": False}


@pytest.mark.asyncio
async def test_update_content(client):
    row = (await _interact(client, 1, 10, "COMMENT", "Nice")).json()
    resp = await client.put(f"/api/interactions/{row['id']}", json={"content": "Very nice"})
    assert resp.status_code == 200
    assert resp.json()["content"] == "Very nice"
    assert (await client.put("/api/interactions/999", json={"content": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_delete_variants(client):
    like = (await _interact(client, 1, 10, "LIKE")).json()
    assert (await client.delete(f"/api/interactions/{like['id']}")).status_code == 204
    assert (await client.delete(f"/api/interactions/{like['id']}")).status_code == 404

    await _interact(client, 1, 10, "LIKE")
    await _interact(client, 2, 10, "LIKE")
    resp = await client.delete("/api/interactions/users/1/recipes/10/type/LIKE")
    assert resp.status_code == 204
    assert (await client.get("/api/interactions/recipes/10/type/LIKE/count")).json() == {"count": 1}

    resp = await client.delete("/api/interactions/recipes/10/type/LIKE")
    assert resp.status_code == 204
    assert (await client.get("/api/interactions/recipes/10/type/LIKE/count")).json() == {"count": 0}
