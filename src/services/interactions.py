"""Likes, favorites and comment-interactions on recipes."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from src.db.repository import Repository
from src.db.social_tables import InteractionRow
from src.models.enums import InteractionType

logger = logging.getLogger(__name__)


class InteractionService(Repository):
    model = InteractionRow
    not_found = "Interaction not found"

    async def find(self, user_id: int, recipe_id: int, kind: InteractionType) -> Optional[InteractionRow]:
        return await self._first(select(InteractionRow).where(
            InteractionRow.user_id == user_id,
            InteractionRow.recipe_id == recipe_id,
            InteractionRow.interaction_type == kind,
        ).order_by(InteractionRow.id))

    async def create(
        self,
        user_id: int,
        recipe_id: int,
        kind: InteractionType,
        content: Optional[str] = None,
    ) -> tuple[InteractionRow, bool]:
        """Returns (row, created). LIKE/FAVORITE hand back an existing row."""
        if kind.is_idempotent:
            existing = await self.find(user_id, recipe_id, kind)
            if existing is not None:
                return existing, False

        row = InteractionRow(
            user_id=user_id, recipe_id=recipe_id, interaction_type=kind, content=content,
        )
        self.session.add(row)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            existing = await self.find(user_id, recipe_id, kind)
            if existing is None:
                raise
            return existing, False
        return row, True

    async def for_recipe(self, recipe_id: int, kind: Optional[InteractionType] = None) -> list[InteractionRow]:
        stmt = select(InteractionRow).where(InteractionRow.recipe_id == recipe_id)
        if kind is not None:
            stmt = stmt.where(InteractionRow.interaction_type == kind)
        return await self._all(stmt.order_by(InteractionRow.id))

    async def for_user(self, user_id: int, kind: InteractionType) -> list[InteractionRow]:
        return await self._all(select(InteractionRow).where(
            InteractionRow.user_id == user_id,
            InteractionRow.interaction_type == kind,
        ).order_by(InteractionRow.id))

    async def count(self, recipe_id: int, kind: InteractionType) -> int:
        return await self._scalar(select(func.count(InteractionRow.id)).where(
            InteractionRow.recipe_id == recipe_id,
            InteractionRow.interaction_type == kind,
        ))

    async def exists(self, user_id: int, recipe_id: int, kind: InteractionType) -> bool:
        return await self.find(user_id, recipe_id, kind) is not None

    async def update_content(self, interaction_id: int, content: Optional[str]) -> InteractionRow:
        row = await self.get_or_404(interaction_id)
        row.content = content
        await self.session.commit()
        return row

    async def delete(self, interaction_id: int) -> None:
        await self._delete(await self.get_or_404(interaction_id))

    async def delete_for_user(self, user_id: int, recipe_id: int, kind: InteractionType) -> None:
        await self.session.execute(delete(InteractionRow).where(
            InteractionRow.user_id == user_id,
            InteractionRow.recipe_id == recipe_id,
            InteractionRow.interaction_type == kind,
        ))
        await self.session.commit()

    async def delete_for_recipe(self, recipe_id: int, kind: InteractionType) -> None:
        await self.session.execute(delete(InteractionRow).where(
            InteractionRow.recipe_id == recipe_id,
            InteractionRow.interaction_type == kind,
        ))
        await self.session.commit()
        logger.info("Cleared %s interactions on recipe %s", kind.value, recipe_id)
