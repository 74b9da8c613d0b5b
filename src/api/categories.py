"""Categories API."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.models.recipe import CategoryIn, CategoryOut
from src.services.categories import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


def get_category_service(session: AsyncSession = Depends(get_session)) -> CategoryService:
    return CategoryService(session)


@router.get("", response_model=list[CategoryOut])
async def list_categories(categories: CategoryService = Depends(get_category_service)):
    return await categories.list_all()


@router.post("", response_model=CategoryOut, status_code=201)
async def create_category(req: CategoryIn, categories: CategoryService = Depends(get_category_service)):
    return await categories.create(req)


@router.get("/search", response_model=list[CategoryOut])
async def search_categories(
    name: str = Query(..., min_length=1),
    categories: CategoryService = Depends(get_category_service),
):
    return await categories.search(name)


@router.get("/name/{name}", response_model=CategoryOut)
async def category_by_name(name: str, categories: CategoryService = Depends(get_category_service)):
    return await categories.by_name(name)


@router.get("/{category_id}", response_model=CategoryOut)
async def get_category(category_id: int, categories: CategoryService = Depends(get_category_service)):
    return await categories.get_or_404(category_id)


@router.put("/{category_id}", response_model=CategoryOut)
async def update_category(
    category_id: int, req: CategoryIn, categories: CategoryService = Depends(get_category_service),
):
    return await categories.update(category_id, req)


@router.delete("/{category_id}", status_code=204)
async def delete_category(category_id: int, categories: CategoryService = Depends(get_category_service)):
    await categories.delete(category_id)
