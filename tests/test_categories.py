"""Tests for categories — case-insensitive names, lookups, updates."""
from __future__ import annotations

import pytest


@pytest.mark.asyncio
async def test_same_name_different_case_rejected(client):
    resp = await client.post("/api/categories", json={"name": "Desserts"})
    assert resp.status_code == 201
    resp = await client.post("/api/categories", json={"name": "desserts"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "A category with this name already exists"


@pytest.mark.asyncio
async def test_name_length_bounds(client):
    assert (await client.post("/api/categories", json={"name": "D"})).status_code == 400
    assert (await client.post("/api/categories", json={"name": "x" * 51})).status_code == 400


@pytest.mark.asyncio
async def test_lookup_by_name_and_search(client):
    await client.post("/api/categories", json={"name": "Desserts", "description": "Sweet things"})
    await client.post("/api/categories", json={"name": "Dinner"})
    await client.post("/api/categories", json={"name": "Breakfast"})

    resp = await client.get("/api/categories/name/DESSERTS")
    assert resp.status_code == 200
    assert resp.json()["description"] == "Sweet things"
    assert (await client.get("/api/categories/name/Snacks")).status_code == 404

    resp = await client.get("/api/categories/search", params={"name": "d"})
    assert [c["name"] for c in resp.json()] == ["Desserts", "Dinner"]


@pytest.mark.asyncio
async def test_update_name_clash_and_rename(client):
    desserts = (await client.post("/api/categories", json={"name": "Desserts"})).json()
    await client.post("/api/categories", json={"name": "Dinner"})

    resp = await client.put(f"/api/categories/{desserts['id']}", json={"name": "DINNER"})
    assert resp.status_code == 400

    resp = await client.put(f"/api/categories/{desserts['id']}", json={"name": "Sweets", "image_url": "/x.png"})
    assert resp.status_code == 200
    assert resp.json()["name"] == "Sweets"
    assert resp.json()["image_url"] == "/x.png"

    resp = await client.put(f"/api/categories/{desserts['id']}", json={"name": "sweets"})
    assert resp.status_code == 200


@pytest.mark.asyncio
async def test_delete_category(client):
    cat = (await client.post("/api/categories", json={"name": "Soups"})).json()
    assert (await client.delete(f"/api/categories/{cat['id']}")).status_code == 204
    assert (await client.get(f"/api/categories/{cat['id']}")).status_code == 404
    assert (await client.delete(f"/api/categories/{cat['id']}")).status_code == 404


@pytest.mark.asyncio
async def test_padded_name_checked_after_trimming(client):
    resp = await client.post("/api/categories", json={"name": "   a   "})
    assert resp.status_code == 400
    assert resp.json()["details"][0]["field"] == "name"

    resp = await client.post("/api/categories", json={"name": "  Soups  "})
    assert resp.status_code == 201
    assert resp.json()["name"] == "Soups"

    resp = await client.put(f"/api/categories/{resp.json()['id']}", json={"name": " b "})
    assert resp.status_code == 400
