"""Recipe groups and their memberships."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import delete, func, select

from src.db.group_tables import RecipeGroupMemberRow, RecipeGroupRow
from src.db.repository import Repository, contains
from src.models.enums import GroupPrivacy, MemberRole, MembershipStatus
from src.models.social import GroupIn, GroupUpdate

logger = logging.getLogger(__name__)

DUPLICATE_NAME = "A group with this name already exists"
DUPLICATE_MEMBER = "User is already a member of this group"


class RecipeGroupService(Repository):
    model = RecipeGroupRow
    not_found = "Recipe group not found"

    async def _named(self, name: str) -> Optional[RecipeGroupRow]:
        return await self._first(
            select(RecipeGroupRow).where(func.lower(RecipeGroupRow.name) == name.strip().lower())
        )

    # ── Groups ────────────────────────────────────────────────────────────

    async def create(self, data: GroupIn) -> RecipeGroupRow:
        if await self._named(data.name) is not None:
            raise HTTPException(400, DUPLICATE_NAME)
        group = RecipeGroupRow(
            name=data.name.strip(),
            description=data.description,
            creator_id=data.creator_id,
            image_url=data.image_url,
            privacy=data.privacy,
        )
        self.session.add(group)
        await self._flush(DUPLICATE_NAME)
        self.session.add(RecipeGroupMemberRow(
            group_id=group.id,
            user_id=data.creator_id,
            role=MemberRole.ADMIN,
            status=MembershipStatus.ACTIVE,
        ))
        # group and creator membership land together or not at all
        await self._commit(DUPLICATE_NAME)
        logger.info("Created recipe group %s (%r) for user %s", group.id, group.name, group.creator_id)
        return group

    async def by_creator(self, creator_id: int) -> list[RecipeGroupRow]:
        return await self._all(select(RecipeGroupRow).where(
            RecipeGroupRow.creator_id == creator_id,
        ).order_by(RecipeGroupRow.id))

    async def search(self, name: str) -> list[RecipeGroupRow]:
        return await self._all(select(RecipeGroupRow).where(
            contains(RecipeGroupRow.name, name),
        ).order_by(RecipeGroupRow.name))

    async def public(self) -> list[RecipeGroupRow]:
        return await self._all(select(RecipeGroupRow).where(
            RecipeGroupRow.privacy == GroupPrivacy.PUBLIC,
        ).order_by(RecipeGroupRow.id))

    async def update(self, group_id: int, data: GroupUpdate) -> RecipeGroupRow:
        group = await self.get_or_404(group_id)
        if data.name.strip().lower() != group.name.lower():
            if await self._named(data.name) is not None:
                raise HTTPException(400, DUPLICATE_NAME)
        group.name = data.name.strip()
        group.description = data.description
        group.image_url = data.image_url
        group.privacy = data.privacy
        await self._commit(DUPLICATE_NAME)
        return group

    async def delete(self, group_id: int) -> None:
        group = await self.get_or_404(group_id)
        await self.session.execute(
            delete(RecipeGroupMemberRow).where(RecipeGroupMemberRow.group_id == group.id)
        )
        await self.session.delete(group)
        await self.session.commit()
        logger.info("Deleted recipe group %s with its memberships", group_id)

    # ── Members ───────────────────────────────────────────────────────────

    async def membership(self, group_id: int, user_id: int) -> Optional[RecipeGroupMemberRow]:
        return await self._first(select(RecipeGroupMemberRow).where(
            RecipeGroupMemberRow.group_id == group_id,
            RecipeGroupMemberRow.user_id == user_id,
        ))

    async def _membership_or_404(self, group_id: int, user_id: int) -> RecipeGroupMemberRow:
        member = await self.membership(group_id, user_id)
        if member is None:
            raise HTTPException(404, "Member not found")
        return member

    async def add_member(
        self, group_id: int, user_id: int, role: MemberRole = MemberRole.MEMBER,
    ) -> RecipeGroupMemberRow:
        await self.get_or_404(group_id)
        if await self.membership(group_id, user_id) is not None:
            raise HTTPException(400, DUPLICATE_MEMBER)
        member = RecipeGroupMemberRow(
            group_id=group_id, user_id=user_id, role=role, status=MembershipStatus.ACTIVE,
        )
        self.session.add(member)
        await self._commit(DUPLICATE_MEMBER)
        return member

    async def members(
        self, group_id: int, status: Optional[MembershipStatus] = None,
    ) -> list[RecipeGroupMemberRow]:
        stmt = select(RecipeGroupMemberRow).where(RecipeGroupMemberRow.group_id == group_id)
        if status is not None:
            stmt = stmt.where(RecipeGroupMemberRow.status == status)
        return await self._all(stmt.order_by(RecipeGroupMemberRow.id))

    async def admins(self, group_id: int) -> list[RecipeGroupMemberRow]:
        return await self._all(select(RecipeGroupMemberRow).where(
            RecipeGroupMemberRow.group_id == group_id,
            RecipeGroupMemberRow.role == MemberRole.ADMIN,
        ).order_by(RecipeGroupMemberRow.id))

    async def update_role(self, group_id: int, user_id: int, role: MemberRole) -> RecipeGroupMemberRow:
        member = await self._membership_or_404(group_id, user_id)
        member.role = role
        await self.session.commit()
        return member

    async def update_status(
        self, group_id: int, user_id: int, status: MembershipStatus,
    ) -> RecipeGroupMemberRow:
        member = await self._membership_or_404(group_id, user_id)
        member.status = status
        await self.session.commit()
        return member

    async def remove_member(self, group_id: int, user_id: int) -> None:
        await self.session.execute(delete(RecipeGroupMemberRow).where(
            RecipeGroupMemberRow.group_id == group_id,
            RecipeGroupMemberRow.user_id == user_id,
        ))
        await self.session.commit()

    async def memberships(self, user_id: int) -> list[RecipeGroupMemberRow]:
        return await self._all(select(RecipeGroupMemberRow).where(
            RecipeGroupMemberRow.user_id == user_id,
        ).order_by(RecipeGroupMemberRow.id))

    async def is_member(self, group_id: int, user_id: int) -> bool:
        return await self.membership(group_id, user_id) is not None

    async def is_admin(self, group_id: int, user_id: int) -> bool:
        member = await self.membership(group_id, user_id)
        return member is not None and member.role == MemberRole.ADMIN

    async def active_count(self, group_id: int) -> int:
        return await self._scalar(select(func.count(RecipeGroupMemberRow.id)).where(
            RecipeGroupMemberRow.group_id == group_id,
            RecipeGroupMemberRow.status == MembershipStatus.ACTIVE,
        ))
