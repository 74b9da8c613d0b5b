"""Status and type enums shared by tables and API schemas.

Values equal names so the stored text is the same on every backend.
"""
from __future__ import annotations

from enum import Enum


class FriendshipStatus(str, Enum):
    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    BLOCKED = "BLOCKED"


class InteractionType(str, Enum):
    LIKE = "LIKE"
    FAVORITE = "FAVORITE"
    COMMENT = "COMMENT"

    @property
    def is_idempotent(self) -> bool:
        """LIKE and FAVORITE exist at most once per (user, recipe)."""
        return self is not InteractionType.COMMENT


class GroupPrivacy(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


class MemberRole(str, Enum):
    MEMBER = "MEMBER"
    MODERATOR = "MODERATOR"
    ADMIN = "ADMIN"


class MembershipStatus(str, Enum):
    PENDING = "PENDING"
    ACTIVE = "ACTIVE"
    BANNED = "BANNED"
