"""Recipe posts, including multipart creation with image/video uploads."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException, UploadFile
from sqlalchemy import select

from src.db.repository import Repository
from src.db.tables import PostRow
from src.models.recipe import PostIn
from src.services.storage import MediaStorage

logger = logging.getLogger(__name__)


def validate_post(data: PostIn) -> list[str]:
    """Every rule a post breaks, in field order."""
    errors: list[str] = []
    if data.user_id is None:
        errors.append("UserID is required")
    title = (data.title or "").strip()
    if not title:
        errors.append("Title is required")
    elif len(title) < 3:
        errors.append("Title must be at least 3 characters long")
    description = (data.description or "").strip()
    if not description:
        errors.append("Description is required")
    elif len(description) < 10:
        errors.append("Description must be at least 10 characters long")
    if not (data.category or "").strip():
        errors.append("Category is required")
    if not (data.steps or "").strip():
        errors.append("Steps are required")
    return errors


def _is_upload(upload: Optional[UploadFile]) -> bool:
    return upload is not None and bool(upload.filename)


class PostService(Repository):
    model = PostRow
    not_found = "Post not found"

    def __init__(self, session, storage: MediaStorage):
        super().__init__(session)
        self.storage = storage

    @staticmethod
    def _apply(row: PostRow, data: PostIn) -> None:
        row.user_id = data.user_id
        row.title = data.title.strip()
        row.description = data.description.strip()
        row.category = data.category.strip()
        row.image = data.image or None
        row.video = data.video or None
        row.steps = data.steps
        row.tags = data.tags

    async def create(self, data: PostIn) -> PostRow:
        errors = validate_post(data)
        if errors:
            raise HTTPException(400, errors)
        post = PostRow()
        self._apply(post, data)
        self.session.add(post)
        await self.session.commit()
        logger.info("Created post %s by user %s", post.id, post.user_id)
        return post

    async def create_with_media(
        self,
        data: PostIn,
        image_file: Optional[UploadFile] = None,
        video_file: Optional[UploadFile] = None,
    ) -> PostRow:
        """Validate, store the uploads, then insert. Stored files are
        removed again if the insert does not go through."""
        errors = validate_post(data)
        if errors:
            raise HTTPException(400, errors)

        stored: list[str] = []
        try:
            if _is_upload(image_file):
                data.image = await self.storage.save(image_file, "images")
                stored.append(data.image)
            if _is_upload(video_file):
                data.video = await self.storage.save(video_file, "videos")
                stored.append(data.video)
            return await self.create(data)
        except Exception:
            for url in stored:
                self.storage.delete(url)
            raise

    async def by_user(self, user_id: int) -> list[PostRow]:
        return await self._all(
            select(PostRow).where(PostRow.user_id == user_id).order_by(PostRow.id)
        )

    async def update(self, post_id: int, data: PostIn) -> PostRow:
        post = await self.get_or_404(post_id)
        errors = validate_post(data)
        if errors:
            raise HTTPException(400, errors)
        self._apply(post, data)
        await self.session.commit()
        return post

    async def delete(self, post_id: int) -> None:
        post = await self.get_or_404(post_id)
        image, video = post.image, post.video
        await self._delete(post)
        self.storage.delete(image)
        self.storage.delete(video)
        logger.info("Deleted post %s", post_id)

    async def delete_media(self, post_id: int) -> dict:
        """Remove a post's uploaded files but keep the post."""
        post = await self.get_or_404(post_id)
        return {
            "success": True,
            "image_deleted": self.storage.delete(post.image),
            "video_deleted": self.storage.delete(post.video),
        }

    async def media_urls(self) -> list[str]:
        result = await self.session.execute(select(PostRow.image, PostRow.video))
        return [url for row in result.all() for url in row if url]
