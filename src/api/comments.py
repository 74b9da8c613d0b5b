"""Comments API — remarks on posts and events."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.models.recipe import CommentIn, CommentOut, CommentUpdate
from src.services.comments import CommentService

router = APIRouter(prefix="/api/comments", tags=["comments"])


def get_comment_service(session: AsyncSession = Depends(get_session)) -> CommentService:
    return CommentService(session)


@router.get("", response_model=list[CommentOut])
async def list_comments(comments: CommentService = Depends(get_comment_service)):
    return await comments.list_all()


@router.post("", response_model=CommentOut, status_code=201)
async def create_comment(req: CommentIn, comments: CommentService = Depends(get_comment_service)):
    return await comments.create(req)


@router.get("/user/{user_id}", response_model=list[CommentOut])
async def comments_by_user(user_id: int, comments: CommentService = Depends(get_comment_service)):
    return await comments.by_user(user_id)


@router.get("/post/{post_id}", response_model=list[CommentOut])
async def comments_on_post(post_id: int, comments: CommentService = Depends(get_comment_service)):
    return await comments.by_post(post_id)


@router.get("/event/{event_id}", response_model=list[CommentOut])
async def comments_on_event(event_id: int, comments: CommentService = Depends(get_comment_service)):
    return await comments.by_event(event_id)


@router.get("/{comment_id}", response_model=CommentOut)
async def get_comment(comment_id: int, comments: CommentService = Depends(get_comment_service)):
    return await comments.get_or_404(comment_id)


@router.put("/{comment_id}", response_model=CommentOut)
async def update_comment(
    comment_id: int, req: CommentUpdate, comments: CommentService = Depends(get_comment_service),
):
    return await comments.update(comment_id, req.content)


@router.delete("/{comment_id}", status_code=204)
async def delete_comment(comment_id: int, comments: CommentService = Depends(get_comment_service)):
    await comments.delete(comment_id)
