"""Recipe groups API — groups, members, roles."""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.models.enums import MembershipStatus
from src.models.social import (
    GroupIn,
    GroupOut,
    GroupUpdate,
    MemberIn,
    MemberOut,
    MemberRoleIn,
    MemberStatusIn,
)
from src.services.recipe_groups import RecipeGroupService

router = APIRouter(prefix="/api/recipe-groups", tags=["recipe-groups"])


def get_group_service(session: AsyncSession = Depends(get_session)) -> RecipeGroupService:
    return RecipeGroupService(session)


# ── Groups ────────────────────────────────────────────────────────────────────


@router.get("", response_model=list[GroupOut])
async def list_groups(groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.list_all()


@router.post("", response_model=GroupOut, status_code=201)
async def create_group(req: GroupIn, groups: RecipeGroupService = Depends(get_group_service)):
    """Create a group; the creator becomes its first ADMIN."""
    return await groups.create(req)


@router.get("/public", response_model=list[GroupOut])
async def public_groups(groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.public()


@router.get("/search", response_model=list[GroupOut])
async def search_groups(name: str = Query(..., min_length=1), groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.search(name)


@router.get("/creator/{creator_id}", response_model=list[GroupOut])
async def groups_by_creator(creator_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.by_creator(creator_id)


@router.get("/users/{user_id}/memberships", response_model=list[MemberOut])
async def user_memberships(user_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.memberships(user_id)


@router.get("/{group_id}", response_model=GroupOut)
async def get_group(group_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.get_or_404(group_id)


@router.put("/{group_id}", response_model=GroupOut)
async def update_group(group_id: int, req: GroupUpdate, groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.update(group_id, req)


@router.delete("/{group_id}", status_code=204)
async def delete_group(group_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    await groups.delete(group_id)


# ── Members ───────────────────────────────────────────────────────────────────


@router.post("/{group_id}/members", response_model=MemberOut, status_code=201)
async def add_member(group_id: int, req: MemberIn, groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.add_member(group_id, req.user_id, req.role)


@router.get("/{group_id}/members", response_model=list[MemberOut])
async def list_members(group_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.members(group_id)


@router.get("/{group_id}/members/active", response_model=list[MemberOut])
async def active_members(group_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.members(group_id, MembershipStatus.ACTIVE)


@router.get("/{group_id}/admins", response_model=list[MemberOut])
async def list_admins(group_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    return await groups.admins(group_id)


@router.get("/{group_id}/members/count")
async def member_count(group_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    """Active members only."""
    return {"count": await groups.active_count(group_id)}


@router.put("/{group_id}/members/{user_id}/role", response_model=MemberOut)
async def update_member_role(
    group_id: int, user_id: int, req: MemberRoleIn,
    groups: RecipeGroupService = Depends(get_group_service),
):
    return await groups.update_role(group_id, user_id, req.role)


@router.put("/{group_id}/members/{user_id}/status", response_model=MemberOut)
async def update_member_status(
    group_id: int, user_id: int, req: MemberStatusIn,
    groups: RecipeGroupService = Depends(get_group_service),
):
    return await groups.update_status(group_id, user_id, req.status)


@router.delete("/{group_id}/members/{user_id}", status_code=204)
async def remove_member(group_id: int, user_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    await groups.remove_member(group_id, user_id)


@router.get("/{group_id}/members/{user_id}/check")
async def check_member(group_id: int, user_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    return {"is_member": await groups.is_member(group_id, user_id)}


@router.get("/{group_id}/members/{user_id}/is-admin")
async def check_admin(group_id: int, user_id: int, groups: RecipeGroupService = Depends(get_group_service)):
    return {"is_admin": await groups.is_admin(group_id, user_id)}
