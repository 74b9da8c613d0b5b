"""Recipe content schemas: posts, categories, events, comments, saved recipes."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ── Posts ─────────────────────────────────────────────────────────────────────
# Field rules for posts and events are checked in the services so that every
# problem is reported at once, for JSON and multipart requests alike.


class PostIn(BaseModel):
    user_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    video: Optional[str] = None
    steps: Optional[str] = None
    tags: Optional[str] = None


class PostOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: Optional[int] = None
    title: str
    description: str
    category: str
    image: Optional[str] = None
    video: Optional[str] = None
    steps: str
    tags: Optional[str] = None
    created_at: Optional[datetime] = None


# ── Categories ────────────────────────────────────────────────────────────────


class CategoryIn(BaseModel):
    name: str = Field(..., min_length=2, max_length=50)
    description: Optional[str] = Field(None, max_length=500)
    image_url: Optional[str] = None

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        return v.strip() if isinstance(v, str) else v


class CategoryOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    image_url: Optional[str] = None
    created_at: Optional[datetime] = None


# ── Events ────────────────────────────────────────────────────────────────────


class EventIn(BaseModel):
    id: Optional[int] = None  # only read by PUT /api/events
    user_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None
    date: Optional[str] = None
    location: Optional[str] = None
    time: Optional[str] = None


class EventOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    description: str
    image: Optional[str] = None
    date: str
    location: str
    time: str


# ── Comments ──────────────────────────────────────────────────────────────────


class CommentIn(BaseModel):
    user_id: int
    post_id: Optional[int] = None
    event_id: Optional[int] = None
    content: str = Field(..., min_length=1, max_length=5000)


class CommentUpdate(BaseModel):
    content: str = Field(..., min_length=1, max_length=5000)


class CommentOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    post_id: Optional[int] = None
    event_id: Optional[int] = None
    content: str
    created_at: str


# ── Saved recipes ─────────────────────────────────────────────────────────────


class SavedRecipeIn(BaseModel):
    user_id: int
    post_id: int
    note: Optional[str] = Field(None, max_length=255)


class SavedNote(BaseModel):
    note: Optional[str] = Field(None, max_length=255)


class SavedRecipeOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    post_id: int
    note: Optional[str] = None
    saved_at: Optional[datetime] = None
