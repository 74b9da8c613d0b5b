"""User-related database tables: accounts and saved recipes."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column, String, Integer, DateTime, Index, UniqueConstraint, func,
)

from src.db.tables import Base


class UserRow(Base):
    """Registered account. Username and email are unique ignoring case."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), nullable=False, unique=True)
    email = Column(String(320), nullable=False, unique=True)
    password_hash = Column(String(256), nullable=False)  # PBKDF2-SHA256
    name = Column(String(100), nullable=True)
    bio = Column(String(500), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))


Index("uq_users_username_lower", func.lower(UserRow.username), unique=True)
Index("uq_users_email_lower", func.lower(UserRow.email), unique=True)


class SavedRecipeRow(Base):
    """A post bookmarked by a user, with an optional personal note."""
    __tablename__ = "saved_recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    post_id = Column(Integer, nullable=False, index=True)
    note = Column(String(255), nullable=True)
    saved_at = Column(DateTime, default=lambda: datetime.now(timezone.utc))

    __table_args__ = (
        UniqueConstraint("user_id", "post_id", name="uq_saved_user_post"),
    )
