"""Recipe categories."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import func, select

from src.db.repository import Repository, contains
from src.db.tables import CategoryRow
from src.models.recipe import CategoryIn

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "A category with this name already exists"


class CategoryService(Repository):
    model = CategoryRow
    not_found = "Category not found"

    async def _named(self, name: str) -> Optional[CategoryRow]:
        return await self._first(
            select(CategoryRow).where(func.lower(CategoryRow.name) == name.strip().lower())
        )

    async def create(self, data: CategoryIn) -> CategoryRow:
        if await self._named(data.name) is not None:
            raise HTTPException(400, DUPLICATE_NAME)
        category = CategoryRow(
            name=data.name.strip(),
            description=data.description,
            image_url=data.image_url,
        )
        self.session.add(category)
        await self._commit(DUPLICATE_NAME)
        logger.info("Created category %r", category.name)
        return category

    async def by_name(self, name: str) -> CategoryRow:
        category = await self._named(name)
        if category is None:
            raise HTTPException(404, self.not_found)
        return category

    async def search(self, name: str) -> list[CategoryRow]:
        return await self._all(
            select(CategoryRow).where(contains(CategoryRow.name, name)).order_by(CategoryRow.name)
        )

    async def update(self, category_id: int, data: CategoryIn) -> CategoryRow:
        category = await self.get_or_404(category_id)
        clash = await self._named(data.name)
        if clash is not None and clash.id != category.id:
            raise HTTPException(400, DUPLICATE_NAME)
        category.name = data.name.strip()
        category.description = data.description
        category.image_url = data.image_url
        await self._commit(DUPLICATE_NAME)
        return category

    async def delete(self, category_id: int) -> None:
        category = await self.get_or_404(category_id)
        await self._delete(category)
