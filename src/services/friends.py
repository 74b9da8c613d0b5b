"""Friendships.

Rows are directed (user_id sent to friend_id) but a friendship is symmetric:
a request answered by a counter-request becomes a single ACCEPTED row, and
friend lists look at both directions. Blocking wipes whatever existed
between the pair and leaves one BLOCKED row owned by the blocker.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import and_, delete, or_, select
from sqlalchemy.exc import IntegrityError

from src.db.repository import Repository
from src.db.social_tables import FriendRow
from src.models.enums import FriendshipStatus

logger = logging.getLogger(__name__)


def _pair(a: int, b: int):
    """Rows between a and b in either direction."""
    return or_(
        and_(FriendRow.user_id == a, FriendRow.friend_id == b),
        and_(FriendRow.user_id == b, FriendRow.friend_id == a),
    )


class FriendService(Repository):
    model = FriendRow
    not_found = "Friendship not found"

    async def _edge(self, user_id: int, friend_id: int) -> Optional[FriendRow]:
        return await self._first(
            select(FriendRow).where(FriendRow.user_id == user_id, FriendRow.friend_id == friend_id)
        )

    async def send_request(self, user_id: int, friend_id: int) -> tuple[FriendRow, bool]:
        """Returns (row, created). Only a fresh PENDING row counts as created."""
        if user_id == friend_id:
            raise HTTPException(400, "Cannot send a friend request to yourself")

        existing = await self._edge(user_id, friend_id)
        if existing is not None:
            return existing, False

        reverse = await self._edge(friend_id, user_id)
        if reverse is not None:
            if reverse.status == FriendshipStatus.BLOCKED:
                raise HTTPException(400, "Cannot send a friend request to this user")
            if reverse.status == FriendshipStatus.PENDING:
                reverse.status = FriendshipStatus.ACCEPTED
                await self.session.commit()
                logger.info("Friend request %s auto-accepted by counter-request", reverse.id)
            return reverse, False

        row = FriendRow(user_id=user_id, friend_id=friend_id, status=FriendshipStatus.PENDING)
        self.session.add(row)
        try:
            await self.session.commit()
        except IntegrityError:
            # concurrent identical request won the insert
            await self.session.rollback()
            existing = await self._edge(user_id, friend_id)
            if existing is None:
                raise HTTPException(400, "Friend request conflicts with an existing one")
            return existing, False
        logger.info("Friend request %s: %s -> %s", row.id, user_id, friend_id)
        return row, True

    async def _accept(self, row: FriendRow) -> FriendRow:
        if row.status == FriendshipStatus.BLOCKED:
            raise HTTPException(400, "Cannot accept a blocked relationship")
        row.status = FriendshipStatus.ACCEPTED
        await self.session.commit()
        logger.info("Friendship %s accepted", row.id)
        return row

    async def accept(self, friendship_id: int) -> FriendRow:
        return await self._accept(await self.get_or_404(friendship_id))

    async def accept_between(self, user_id: int, friend_id: int) -> FriendRow:
        """user_id accepts the request friend_id sent them."""
        row = await self._edge(friend_id, user_id)
        if row is None:
            raise HTTPException(404, "Friend request not found")
        return await self._accept(row)

    async def reject(self, friendship_id: int) -> None:
        await self._delete(await self.get_or_404(friendship_id))

    async def reject_between(self, user_id: int, friend_id: int) -> None:
        row = await self._edge(friend_id, user_id)
        if row is None:
            raise HTTPException(404, "Friend request not found")
        await self._delete(row)

    async def remove(self, user_id: int, friend_id: int, commit: bool = True) -> None:
        await self.session.execute(delete(FriendRow).where(_pair(user_id, friend_id)))
        if commit:
            await self.session.commit()

    async def block(self, user_id: int, blocked_id: int) -> FriendRow:
        if user_id == blocked_id:
            raise HTTPException(400, "Cannot block yourself")
        await self.remove(user_id, blocked_id, commit=False)
        row = FriendRow(user_id=user_id, friend_id=blocked_id, status=FriendshipStatus.BLOCKED)
        self.session.add(row)
        await self._commit("Relationship changed concurrently, try again")
        logger.info("User %s blocked %s", user_id, blocked_id)
        return row

    async def unblock(self, user_id: int, blocked_id: int) -> None:
        row = await self._edge(user_id, blocked_id)
        if row is not None and row.status == FriendshipStatus.BLOCKED:
            await self._delete(row)

    # ── Queries ───────────────────────────────────────────────────────────

    async def friends(self, user_id: int) -> list[FriendRow]:
        stmt = select(FriendRow).where(
            FriendRow.status == FriendshipStatus.ACCEPTED,
            or_(FriendRow.user_id == user_id, FriendRow.friend_id == user_id),
        ).order_by(FriendRow.id)
        return await self._all(stmt)

    async def pending_received(self, user_id: int) -> list[FriendRow]:
        return await self._all(select(FriendRow).where(
            FriendRow.friend_id == user_id, FriendRow.status == FriendshipStatus.PENDING,
        ).order_by(FriendRow.id))

    async def pending_sent(self, user_id: int) -> list[FriendRow]:
        return await self._all(select(FriendRow).where(
            FriendRow.user_id == user_id, FriendRow.status == FriendshipStatus.PENDING,
        ).order_by(FriendRow.id))

    async def blocked(self, user_id: int) -> list[FriendRow]:
        return await self._all(select(FriendRow).where(
            FriendRow.user_id == user_id, FriendRow.status == FriendshipStatus.BLOCKED,
        ).order_by(FriendRow.id))

    async def are_friends(self, a: int, b: int) -> bool:
        row = await self._first(select(FriendRow).where(
            _pair(a, b), FriendRow.status == FriendshipStatus.ACCEPTED,
        ))
        return row is not None
