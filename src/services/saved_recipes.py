"""Saved (bookmarked) recipes."""
from __future__ import annotations

from typing import Optional

from fastapi import HTTPException
from sqlalchemy import func, select

from src.db.repository import Repository
from src.db.user_tables import SavedRecipeRow

ALREADY_SAVED = "Recipe is already saved by this user"


class SavedRecipeService(Repository):
    model = SavedRecipeRow
    not_found = "Saved recipe not found"

    async def find(self, user_id: int, post_id: int) -> Optional[SavedRecipeRow]:
        return await self._first(select(SavedRecipeRow).where(
            SavedRecipeRow.user_id == user_id,
            SavedRecipeRow.post_id == post_id,
        ))

    async def save(self, user_id: int, post_id: int, note: Optional[str] = None) -> SavedRecipeRow:
        if await self.find(user_id, post_id) is not None:
            raise HTTPException(400, ALREADY_SAVED)
        row = SavedRecipeRow(user_id=user_id, post_id=post_id, note=note)
        self.session.add(row)
        await self._commit(ALREADY_SAVED)
        return row

    async def by_user(self, user_id: int) -> list[SavedRecipeRow]:
        return await self._all(select(SavedRecipeRow).where(
            SavedRecipeRow.user_id == user_id,
        ).order_by(SavedRecipeRow.saved_at.desc(), SavedRecipeRow.id.desc()))

    async def is_saved(self, user_id: int, post_id: int) -> bool:
        return await self.find(user_id, post_id) is not None

    async def update_note(self, saved_id: int, note: Optional[str]) -> SavedRecipeRow:
        row = await self.get_or_404(saved_id)
        row.note = note
        await self.session.commit()
        return row

    async def delete(self, saved_id: int) -> None:
        await self._delete(await self.get_or_404(saved_id))

    async def unsave(self, user_id: int, post_id: int) -> None:
        row = await self.find(user_id, post_id)
        if row is None:
            raise HTTPException(404, self.not_found)
        await self._delete(row)

    async def count_for_post(self, post_id: int) -> int:
        return await self._scalar(select(func.count(SavedRecipeRow.id)).where(
            SavedRecipeRow.post_id == post_id,
        ))
