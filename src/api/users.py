"""Users API — registration, login, profiles, search."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.auth import require_user
from src.db.engine import get_session
from src.db.user_tables import UserRow
from src.models.users import (
    AvailabilityResponse,
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserOut,
    UserUpdate,
)
from src.services.users import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["users"])


def get_user_service(session: AsyncSession = Depends(get_session)) -> UserService:
    return UserService(session)


# ── Auth ──────────────────────────────────────────────────────────────────────


@router.post("/register", response_model=UserOut, status_code=201)
async def register(req: UserCreate, users: UserService = Depends(get_user_service)):
    return await users.register(req)


@router.post("/login", response_model=LoginResponse)
async def login(req: LoginRequest, users: UserService = Depends(get_user_service)):
    result = await users.login(req.email, req.password)
    if result is None:
        raise HTTPException(401, "Invalid email or password")
    return result


# ── Profiles ──────────────────────────────────────────────────────────────────


@router.post("/users", response_model=UserOut, status_code=201)
async def create_user(req: UserCreate, users: UserService = Depends(get_user_service)):
    return await users.register(req)


@router.get("/users", response_model=list[UserOut])
async def list_users(users: UserService = Depends(get_user_service)):
    return await users.list_all()


@router.get("/users/me", response_model=UserOut)
async def current_user(user: UserRow = Depends(require_user)):
    return user


@router.get("/users/recent", response_model=list[UserOut])
async def recent_users(users: UserService = Depends(get_user_service)):
    """The 10 newest accounts."""
    return await users.recent()


@router.get("/users/search", response_model=list[UserOut])
async def search_users(
    term: str = Query(..., min_length=1),
    field: str = Query("all"),
    users: UserService = Depends(get_user_service),
):
    return await users.search(term, field)


@router.get("/users/check-username", response_model=AvailabilityResponse)
async def check_username(username: str = Query(..., min_length=1), users: UserService = Depends(get_user_service)):
    return {"available": await users.is_username_available(username)}


@router.get("/users/check-email", response_model=AvailabilityResponse)
async def check_email(email: str = Query(..., min_length=1), users: UserService = Depends(get_user_service)):
    return {"available": await users.is_email_available(email)}


@router.get("/users/username/{username}", response_model=UserOut)
async def get_by_username(username: str, users: UserService = Depends(get_user_service)):
    return await users.find_by_username(username)


@router.get("/users/{user_id}", response_model=UserOut)
async def get_user(user_id: int, users: UserService = Depends(get_user_service)):
    return await users.get_or_404(user_id)


@router.put("/users/{user_id}", response_model=UserOut)
async def update_user(user_id: int, req: UserUpdate, users: UserService = Depends(get_user_service)):
    return await users.update(user_id, req)


@router.delete("/users/{user_id}", status_code=204)
async def delete_user(user_id: int, users: UserService = Depends(get_user_service)):
    await users.delete(user_id)
