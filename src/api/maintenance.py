"""Maintenance API — upload housekeeping and storage status."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.services.events import EventService
from src.services.posts import PostService
from src.services.storage import MediaStorage, get_storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["maintenance"])


@router.delete("/maintenance/files/orphaned")
async def sweep_orphaned_files(
    session: AsyncSession = Depends(get_session),
    storage: MediaStorage = Depends(get_storage),
):
    """Delete uploads that no post or event points at."""
    referenced = await PostService(session, storage).media_urls()
    referenced += await EventService(session, storage).media_urls()
    removed = storage.sweep_orphans(referenced)
    return {
        "success": True,
        "images_removed": removed["images"],
        "videos_removed": removed["videos"],
    }


@router.delete("/maintenance/files/{post_id}")
async def delete_post_files(
    post_id: int,
    session: AsyncSession = Depends(get_session),
    storage: MediaStorage = Depends(get_storage),
):
    return await PostService(session, storage).delete_media(post_id)


@router.get("/uploads/status")
async def upload_status(storage: MediaStorage = Depends(get_storage)):
    return storage.status()
