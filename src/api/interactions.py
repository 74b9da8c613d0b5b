"""Interactions API — likes, favorites and comment-interactions on recipes."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends, Query
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.models.enums import InteractionType
from src.models.social import InteractionContent, InteractionOut
from src.services.interactions import InteractionService

router = APIRouter(prefix="/api/interactions", tags=["interactions"])


def get_interaction_service(session: AsyncSession = Depends(get_session)) -> InteractionService:
    return InteractionService(session)


@router.post("/users/{user_id}/recipes/{recipe_id}", response_model=InteractionOut)
async def create_interaction(
    user_id: int,
    recipe_id: int,
    type: InteractionType = Query(...),
    req: Optional[InteractionContent] = Body(None),
    interactions: InteractionService = Depends(get_interaction_service),
):
    """201 for a new row; 200 with the existing row for a repeated LIKE/FAVORITE."""
    content = req.content if req else None
    row, created = await interactions.create(user_id, recipe_id, type, content)
    body = InteractionOut.model_validate(row).model_dump(mode="json")
    return JSONResponse(status_code=201 if created else 200, content=body)


@router.get("/recipes/{recipe_id}", response_model=list[InteractionOut])
async def recipe_interactions(recipe_id: int, interactions: InteractionService = Depends(get_interaction_service)):
    return await interactions.for_recipe(recipe_id)


@router.get("/recipes/{recipe_id}/type/{type}", response_model=list[InteractionOut])
async def recipe_interactions_by_type(
    recipe_id: int, type: InteractionType,
    interactions: InteractionService = Depends(get_interaction_service),
):
    return await interactions.for_recipe(recipe_id, type)


@router.get("/recipes/{recipe_id}/type/{type}/count")
async def count_interactions(
    recipe_id: int, type: InteractionType,
    interactions: InteractionService = Depends(get_interaction_service),
):
    return {"count": await interactions.count(recipe_id, type)}


@router.get("/users/{user_id}/type/{type}", response_model=list[InteractionOut])
async def user_interactions(
    user_id: int, type: InteractionType,
    interactions: InteractionService = Depends(get_interaction_service),
):
    return await interactions.for_user(user_id, type)


@router.get("/users/{user_id}/recipes/{recipe_id}/type/{type}/check")
async def check_interaction(
    user_id: int, recipe_id: int, type: InteractionType,
    interactions: InteractionService = Depends(get_interaction_service),
):
    return {"exists": await interactions.exists(user_id, recipe_id, type)}


@router.put("/{interaction_id}", response_model=InteractionOut)
async def update_interaction(
    interaction_id: int, req: InteractionContent,
    interactions: InteractionService = Depends(get_interaction_service),
):
    return await interactions.update_content(interaction_id, req.content)


@router.delete("/{interaction_id}", status_code=204)
async def delete_interaction(interaction_id: int, interactions: InteractionService = Depends(get_interaction_service)):
    await interactions.delete(interaction_id)


@router.delete("/users/{user_id}/recipes/{recipe_id}/type/{type}", status_code=204)
async def delete_user_interaction(
    user_id: int, recipe_id: int, type: InteractionType,
    interactions: InteractionService = Depends(get_interaction_service),
):
    await interactions.delete_for_user(user_id, recipe_id, type)


@router.delete("/recipes/{recipe_id}/type/{type}", status_code=204)
async def delete_recipe_interactions(
    recipe_id: int, type: InteractionType,
    interactions: InteractionService = Depends(get_interaction_service),
):
    await interactions.delete_for_recipe(recipe_id, type)
