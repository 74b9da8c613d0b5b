"""SQLAlchemy ORM models for recipe content: posts, categories, events."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Index, Integer, String, Text, func
from sqlalchemy.orm import DeclarativeBase


def _now() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class PostRow(Base):
    """A shared recipe. Media fields hold /uploads/... URLs or external links."""
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    image = Column(String(2000), nullable=True)
    video = Column(String(2000), nullable=True)
    steps = Column(Text, nullable=False)
    tags = Column(String(1000), nullable=True)
    created_at = Column(DateTime, default=_now)


class CategoryRow(Base):
    __tablename__ = "categories"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False, unique=True)
    description = Column(String(500), nullable=True)
    image_url = Column(String(2000), nullable=True)
    created_at = Column(DateTime, default=_now)


# "Desserts" and "desserts" are the same category
Index("uq_categories_name_lower", func.lower(CategoryRow.name), unique=True)


class EventRow(Base):
    """A cooking event. Date and time are kept as the text the organizer typed."""
    __tablename__ = "events"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image = Column(String(2000), nullable=True)
    date = Column(String(50), nullable=False)
    location = Column(String(255), nullable=False)
    time = Column(String(50), nullable=False)
