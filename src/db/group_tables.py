"""Recipe group tables: groups and their memberships."""
from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import (
    Column, Integer, String, DateTime, Enum as SAEnum,
    Index, UniqueConstraint, func,
)

from src.db.tables import Base
from src.models.enums import GroupPrivacy, MemberRole, MembershipStatus


def _now() -> datetime:
    return datetime.now(timezone.utc)


class RecipeGroupRow(Base):
    __tablename__ = "recipe_groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False, unique=True)
    description = Column(String(500), nullable=True)
    creator_id = Column(Integer, nullable=False, index=True)
    image_url = Column(String(2000), nullable=True)
    privacy = Column(SAEnum(GroupPrivacy), nullable=False, default=GroupPrivacy.PUBLIC)
    created_at = Column(DateTime, default=_now)
    updated_at = Column(DateTime, default=_now, onupdate=_now)


Index("uq_recipe_groups_name_lower", func.lower(RecipeGroupRow.name), unique=True)


class RecipeGroupMemberRow(Base):
    __tablename__ = "recipe_group_members"

    id = Column(Integer, primary_key=True, autoincrement=True)
    group_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    role = Column(SAEnum(MemberRole), nullable=False, default=MemberRole.MEMBER)
    status = Column(SAEnum(MembershipStatus), nullable=False, default=MembershipStatus.ACTIVE)
    joined_at = Column(DateTime, default=_now)
    updated_at = Column(DateTime, default=_now, onupdate=_now)

    __table_args__ = (
        UniqueConstraint("group_id", "user_id", name="uq_group_member"),
        Index("ix_group_member_status", "group_id", "status"),
    )
