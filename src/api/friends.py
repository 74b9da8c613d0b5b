"""Friends API — requests, acceptance, blocking, friend lists."""
from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.models.social import FriendOut, FriendRequestIn
from src.services.friends import FriendService

router = APIRouter(prefix="/api/friends", tags=["friends"])


def get_friend_service(session: AsyncSession = Depends(get_session)) -> FriendService:
    return FriendService(session)


# ── Requests ──────────────────────────────────────────────────────────────────


@router.post("/request", response_model=FriendOut, status_code=201)
async def send_request(req: FriendRequestIn, friends: FriendService = Depends(get_friend_service)):
    """201 for a new request; 200 when an existing row answers it (a counter-request accepts it)."""
    row, created = await friends.send_request(req.user_id, req.friend_id)
    body = FriendOut.model_validate(row).model_dump(mode="json")
    return JSONResponse(status_code=201 if created else 200, content=body)


@router.put("/accept/{friendship_id}", response_model=FriendOut)
async def accept(friendship_id: int, friends: FriendService = Depends(get_friend_service)):
    return await friends.accept(friendship_id)


@router.put("/users/{user_id}/accept/{friend_id}", response_model=FriendOut)
async def accept_between(user_id: int, friend_id: int, friends: FriendService = Depends(get_friend_service)):
    return await friends.accept_between(user_id, friend_id)


@router.delete("/{friendship_id}", status_code=204)
async def reject(friendship_id: int, friends: FriendService = Depends(get_friend_service)):
    await friends.reject(friendship_id)


@router.delete("/users/{user_id}/reject/{friend_id}", status_code=204)
async def reject_between(user_id: int, friend_id: int, friends: FriendService = Depends(get_friend_service)):
    await friends.reject_between(user_id, friend_id)


@router.delete("/users/{user_id}/remove/{friend_id}", status_code=204)
async def remove_friend(user_id: int, friend_id: int, friends: FriendService = Depends(get_friend_service)):
    await friends.remove(user_id, friend_id)


# ── Blocking ──────────────────────────────────────────────────────────────────


@router.post("/users/{user_id}/block/{blocked_id}", response_model=FriendOut, status_code=201)
async def block(user_id: int, blocked_id: int, friends: FriendService = Depends(get_friend_service)):
    return await friends.block(user_id, blocked_id)


@router.delete("/users/{user_id}/unblock/{blocked_id}", status_code=204)
async def unblock(user_id: int, blocked_id: int, friends: FriendService = Depends(get_friend_service)):
    await friends.unblock(user_id, blocked_id)


# ── Lists ─────────────────────────────────────────────────────────────────────


@router.get("/users/{user_id}", response_model=list[FriendOut])
async def list_friends(user_id: int, friends: FriendService = Depends(get_friend_service)):
    return await friends.friends(user_id)


@router.get("/users/{user_id}/pending", response_model=list[FriendOut])
async def pending_requests(user_id: int, friends: FriendService = Depends(get_friend_service)):
    return await friends.pending_received(user_id)


@router.get("/users/{user_id}/sent", response_model=list[FriendOut])
async def sent_requests(user_id: int, friends: FriendService = Depends(get_friend_service)):
    return await friends.pending_sent(user_id)


@router.get("/users/{user_id}/blocked", response_model=list[FriendOut])
async def blocked_users(user_id: int, friends: FriendService = Depends(get_friend_service)):
    return await friends.blocked(user_id)


@router.get("/users/{user_id}/is-friend/{other_id}")
async def is_friend(user_id: int, other_id: int, friends: FriendService = Depends(get_friend_service)):
    return {"are_friends": await friends.are_friends(user_id, other_id)}
