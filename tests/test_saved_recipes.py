"""Tests for saved recipes — one save per user and post, notes, counts."""
from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_save_and_duplicate(client):
    resp = await client.post("/api/saved-recipes", json={"user_id": 1, "post_id": 5, "note": "Try on Sunday"})
    assert resp.status_code == 201
    assert resp.json()["note"] == "Try on Sunday"

    again = await client.post("/api/saved-recipes/users/1/recipes/5")
    assert again.status_code == 400


@pytest.mark.asyncio
async def test_save_by_path_with_optional_note(client):
    resp = await client.post("/api/saved-recipes/users/1/recipes/5")
    assert resp.status_code == 201
    assert resp.json()["note"] is None

    resp = await client.post("/api/saved-recipes/users/1/recipes/6", json={"note": "Spicy"})
    assert resp.json()["note"] == "Spicy"


@pytest.mark.asyncio
async def test_note_length_limit(client):
    resp = await client.post("/api/saved-recipes", json={"user_id": 1, "post_id": 5, "note": "x" * 256})
    assert resp.status_code == 400


@pytest.mark.asyncio
async def test_list_check_and_count(client):
    await client.post("/api/saved-recipes/users/1/recipes/5")
    await client.post("/api/saved-recipes/users/1/recipes/6")
    await client.post("/api/saved-recipes/users/2/recipes/5")

    assert len((await client.get("/api/saved-recipes/users/1")).json()) == 2
    assert (await client.get("/api/saved-recipes/users/2/recipes/5/check")).json() == {"saved": True}
    assert (await client.get("/api/saved-recipes/users/2/recipes/6/check")).json() == {"saved": False}
    assert (await client.get("/api/saved-recipes/recipes/5/count")).json() == {"count": 2}


@pytest.mark.asyncio
async def test_get_update_delete(client):
    saved = (await client.post("/api/saved-recipes/users/1/recipes/5")).json()

    assert (await client.get(f"/api/saved-recipes/{saved['id']}")).status_code == 200
    resp = await client.put(f"/api/saved-recipes/{saved['id']}", json={"note": "Double the garlic"})
    assert resp.json()["note"] == "Double the garlic"

    assert (await client.delete(f"/api/saved-recipes/{saved['id']}")).status_code == 204
    assert (await client.get(f"/api/saved-recipes/{saved['id']}")).status_code == 404
    assert (await client.put(f"/api/saved-recipes/{saved['id']}", json={"note": "x"})).status_code == 404


@pytest.mark.asyncio
async def test_unsave_by_user_and_post(client):
    await client.post("/api/saved-recipes/users/1/recipes/5")
    assert (await client.delete("/api/saved-recipes/users/1/recipes/5")).status_code == 204
    assert (await client.delete("/api/saved-recipes/users/1/recipes/5")).status_code == 404
