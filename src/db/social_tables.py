"""Social tables: friendships and recipe interactions."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, DateTime, Enum as SAEnum,
    Index, UniqueConstraint, text,
)

from src.db.tables import Base
from src.models.enums import FriendshipStatus, InteractionType


def _now() -> datetime:
    return datetime.now(timezone.utc)


class FriendRow(Base):
    """Directed friendship edge: user_id asked friend_id (or blocked them)."""
    __tablename__ = "friends"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    friend_id = Column(Integer, nullable=False, index=True)
    status = Column(SAEnum(FriendshipStatus), nullable=False, default=FriendshipStatus.PENDING)
    created_at = Column(DateTime, default=_now)
    updated_at = Column(DateTime, default=_now, onupdate=_now)

    __table_args__ = (
        UniqueConstraint("user_id", "friend_id", name="uq_friend_pair"),
        Index("ix_friend_target_status", "friend_id", "status"),
    )


_NOT_COMMENT = text("interaction_type != 'COMMENT'")


class InteractionRow(Base):
    """Like, favorite or comment left by a user on a post."""
    __tablename__ = "interactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    recipe_id = Column(Integer, nullable=False, index=True)
    interaction_type = Column(SAEnum(InteractionType), nullable=False)
    content = Column(String(1000), nullable=True)
    created_at = Column(DateTime, default=_now)
    updated_at = Column(DateTime, default=_now, onupdate=_now)

    __table_args__ = (
        # one LIKE / FAVORITE per user and recipe; comments may repeat
        Index(
            "uq_interaction_single",
            "user_id", "recipe_id", "interaction_type",
            unique=True,
            sqlite_where=_NOT_COMMENT,
            postgresql_where=_NOT_COMMENT,
        ),
        Index("ix_interaction_recipe_type", "recipe_id", "interaction_type"),
    )
