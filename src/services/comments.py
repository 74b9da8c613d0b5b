"""Comments on posts and events."""
from __future__ import annotations

from fastapi import HTTPException
from sqlalchemy import select

from src.db.comment_tables import CommentRow
from src.db.repository import Repository
from src.models.recipe import CommentIn


class CommentService(Repository):
    model = CommentRow
    not_found = "Comment not found"

    async def create(self, data: CommentIn) -> CommentRow:
        content = data.content.strip()
        if not content:
            raise HTTPException(400, "Content is required")
        # a comment belongs to exactly one post or one event
        if (data.post_id is None) == (data.event_id is None):
            raise HTTPException(400, "Exactly one of post_id or event_id must be set")
        comment = CommentRow(
            user_id=data.user_id,
            post_id=data.post_id,
            event_id=data.event_id,
            content=content,
        )
        self.session.add(comment)
        await self.session.commit()
        return comment

    async def _where(self, clause) -> list[CommentRow]:
        return await self._all(select(CommentRow).where(clause).order_by(CommentRow.id))

    async def by_user(self, user_id: int) -> list[CommentRow]:
        return await self._where(CommentRow.user_id == user_id)

    async def by_post(self, post_id: int) -> list[CommentRow]:
        return await self._where(CommentRow.post_id == post_id)

    async def by_event(self, event_id: int) -> list[CommentRow]:
        return await self._where(CommentRow.event_id == event_id)

    async def update(self, comment_id: int, content: str) -> CommentRow:
        comment = await self.get_or_404(comment_id)
        if not content.strip():
            raise HTTPException(400, "Content is required")
        comment.content = content.strip()
        await self.session.commit()
        return comment

    async def delete(self, comment_id: int) -> None:
        comment = await self.get_or_404(comment_id)
        await self._delete(comment)
