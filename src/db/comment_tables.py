"""Comment table — remarks on a post or on an event."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import Column, Integer, String, Text, Index

from src.db.tables import Base

COMMENT_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def comment_timestamp() -> str:
    return datetime.now().strftime(COMMENT_TIME_FORMAT)


class CommentRow(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)
    post_id = Column(Integer, nullable=True)
    event_id = Column(Integer, nullable=True)
    content = Column(Text, nullable=False)
    created_at = Column(String(19), nullable=False, default=comment_timestamp)

    __table_args__ = (
        Index("ix_comment_post", "post_id"),
        Index("ix_comment_event", "event_id"),
    )
