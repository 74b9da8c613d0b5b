"""Posts API — recipe posts with optional image/video uploads."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.models.recipe import PostIn, PostOut
from src.services.posts import PostService
from src.services.storage import MediaStorage, get_storage

router = APIRouter(prefix="/api/posts", tags=["posts"])


def get_post_service(
    session: AsyncSession = Depends(get_session),
    storage: MediaStorage = Depends(get_storage),
) -> PostService:
    return PostService(session, storage)


@router.get("", response_model=list[PostOut])
async def list_posts(posts: PostService = Depends(get_post_service)):
    return await posts.list_all()


@router.post("", response_model=PostOut, status_code=201)
async def create_post(req: PostIn, posts: PostService = Depends(get_post_service)):
    return await posts.create(req)


@router.post("/upload", response_model=PostOut, status_code=201)
async def upload_post(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    steps: Optional[str] = Form(None),
    tags: Optional[str] = Form(None),
    user_id: Optional[int] = Form(None),
    image_file: Optional[UploadFile] = File(None),
    video_file: Optional[UploadFile] = File(None),
    image_file_camel: Optional[UploadFile] = File(None, alias="imageFile"),
    video_file_camel: Optional[UploadFile] = File(None, alias="videoFile"),
    posts: PostService = Depends(get_post_service),
):
    """Create a post from a multipart form; files are stored under uploads/.

    File parts may be named image_file/video_file or imageFile/videoFile.
    """
    data = PostIn(
        user_id=user_id, title=title, description=description,
        category=category, steps=steps, tags=tags,
    )
    return await posts.create_with_media(data, image_file or image_file_camel, video_file or video_file_camel)


@router.get("/user/{user_id}", response_model=list[PostOut])
async def posts_by_user(user_id: int, posts: PostService = Depends(get_post_service)):
    return await posts.by_user(user_id)


@router.get("/{post_id}", response_model=PostOut)
async def get_post(post_id: int, posts: PostService = Depends(get_post_service)):
    return await posts.get_or_404(post_id)


@router.put("/{post_id}", response_model=PostOut)
async def update_post(post_id: int, req: PostIn, posts: PostService = Depends(get_post_service)):
    return await posts.update(post_id, req)


@router.delete("/{post_id}", status_code=204)
async def delete_post(post_id: int, posts: PostService = Depends(get_post_service)):
    await posts.delete(post_id)
