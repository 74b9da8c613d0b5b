"""Social schemas: friendships, interactions, recipe groups."""
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.models.enums import (
    FriendshipStatus,
    GroupPrivacy,
    InteractionType,
    MemberRole,
    MembershipStatus,
)


class FriendRequestIn(BaseModel):
    user_id: int
    friend_id: int


class FriendOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    friend_id: int
    status: FriendshipStatus
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class InteractionContent(BaseModel):
    content: Optional[str] = Field(None, max_length=1000)


class InteractionOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    recipe_id: int
    interaction_type: InteractionType
    content: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GroupIn(BaseModel):
    name: str = Field(..., min_length=3, max_length=50)
    description: Optional[str] = Field(None, max_length=500)
    creator_id: int
    image_url: Optional[str] = None
    privacy: GroupPrivacy = GroupPrivacy.PUBLIC

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v):
        """Length limits apply to the name as stored."""
        return v.strip() if isinstance(v, str) else v


class GroupUpdate(GroupIn):
    creator_id: Optional[int] = None


class GroupOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: Optional[str] = None
    creator_id: int
    image_url: Optional[str] = None
    privacy: GroupPrivacy
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class MemberIn(BaseModel):
    user_id: int
    role: MemberRole = MemberRole.MEMBER


class MemberRoleIn(BaseModel):
    role: MemberRole


class MemberStatusIn(BaseModel):
    status: MembershipStatus


class MemberOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    group_id: int
    user_id: int
    role: MemberRole
    status: MembershipStatus
    joined_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
