"""Saved recipes API — bookmarks with personal notes."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.models.recipe import SavedNote, SavedRecipeIn, SavedRecipeOut
from src.services.saved_recipes import SavedRecipeService

router = APIRouter(prefix="/api/saved-recipes", tags=["saved-recipes"])


def get_saved_service(session: AsyncSession = Depends(get_session)) -> SavedRecipeService:
    return SavedRecipeService(session)


@router.post("", response_model=SavedRecipeOut, status_code=201)
async def save_recipe(req: SavedRecipeIn, saved: SavedRecipeService = Depends(get_saved_service)):
    return await saved.save(req.user_id, req.post_id, req.note)


@router.post("/users/{user_id}/recipes/{post_id}", response_model=SavedRecipeOut, status_code=201)
async def save_recipe_for_user(
    user_id: int, post_id: int,
    req: Optional[SavedNote] = Body(None),
    saved: SavedRecipeService = Depends(get_saved_service),
):
    return await saved.save(user_id, post_id, req.note if req else None)


@router.get("/users/{user_id}", response_model=list[SavedRecipeOut])
async def saved_by_user(user_id: int, saved: SavedRecipeService = Depends(get_saved_service)):
    return await saved.by_user(user_id)


@router.get("/users/{user_id}/recipes/{post_id}/check")
async def check_saved(user_id: int, post_id: int, saved: SavedRecipeService = Depends(get_saved_service)):
    return {"saved": await saved.is_saved(user_id, post_id)}


@router.delete("/users/{user_id}/recipes/{post_id}", status_code=204)
async def unsave_recipe(user_id: int, post_id: int, saved: SavedRecipeService = Depends(get_saved_service)):
    await saved.unsave(user_id, post_id)


@router.get("/recipes/{post_id}/count")
async def save_count(post_id: int, saved: SavedRecipeService = Depends(get_saved_service)):
    return {"count": await saved.count_for_post(post_id)}


@router.get("/{saved_id}", response_model=SavedRecipeOut)
async def get_saved(saved_id: int, saved: SavedRecipeService = Depends(get_saved_service)):
    return await saved.get_or_404(saved_id)


@router.put("/{saved_id}", response_model=SavedRecipeOut)
async def update_note(saved_id: int, req: SavedNote, saved: SavedRecipeService = Depends(get_saved_service)):
    return await saved.update_note(saved_id, req.note)


@router.delete("/{saved_id}", status_code=204)
async def delete_saved(saved_id: int, saved: SavedRecipeService = Depends(get_saved_service)):
    await saved.delete(saved_id)
