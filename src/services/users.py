"""User accounts: registration, login, profile edits, search."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy import func, or_, select

from src.auth import create_token, hash_password, verify_password
from src.db.repository import Repository, contains
from src.db.user_tables import UserRow
from src.models.users import UserCreate, UserOut, UserUpdate

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
RECENT_LIMIT = 10
SEARCH_FIELDS = ("all", "name", "username", "bio")


class UserService(Repository):
    model = UserRow
    not_found = "User not found"

    async def _username_owner(self, username: str) -> Optional[UserRow]:
        return await self._first(
            select(UserRow).where(func.lower(UserRow.username) == username.lower())
        )

    async def _email_owner(self, email: str) -> Optional[UserRow]:
        return await self._first(
            select(UserRow).where(func.lower(UserRow.email) == email.lower())
        )

    async def _check_unique(self, data: UserCreate, user_id: int | None = None) -> None:
        owner = await self._username_owner(data.username)
        if owner is not None and owner.id != user_id:
            raise HTTPException(400, "Username is already taken.")
        owner = await self._email_owner(data.email)
        if owner is not None and owner.id != user_id:
            raise HTTPException(400, "Email is already in use.")
        if len(data.password) < MIN_PASSWORD_LENGTH:
            raise HTTPException(400, "Password must be at least 6 characters long.")

    async def register(self, data: UserCreate) -> UserRow:
        await self._check_unique(data)
        user = UserRow(
            username=data.username,
            email=data.email,
            password_hash=hash_password(data.password),
            name=data.name,
            bio=data.bio,
        )
        self.session.add(user)
        await self._commit("Username or email is already in use.")
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return user

    async def login(self, email: str, password: str) -> Optional[dict]:
        """Token plus public user on success, None on any mismatch."""
        user = await self._email_owner(email)
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login for %s", email)
            return None
        return {"token": create_token(user.email), "user": UserOut.model_validate(user)}

    async def update(self, user_id: int, data: UserUpdate) -> UserRow:
        user = await self.get_or_404(user_id)
        await self._check_unique(data, user_id=user.id)
        user.username = data.username
        user.email = data.email
        user.password_hash = hash_password(data.password)
        user.name = data.name
        user.bio = data.bio
        await self._commit("Username or email is already in use.")
        return user

    async def delete(self, user_id: int) -> None:
        user = await self.get_or_404(user_id)
        await self._delete(user)
        logger.info("Deleted user %s", user_id)

    async def find_by_username(self, username: str) -> UserRow:
        user = await self._username_owner(username)
        if user is None:
            raise HTTPException(404, self.not_found)
        return user

    async def search(self, term: str, field: str = "all") -> list[UserRow]:
        if field not in SEARCH_FIELDS:
            raise HTTPException(400, f"field must be one of: {', '.join(SEARCH_FIELDS)}")
        columns = {
            "name": [UserRow.name],
            "username": [UserRow.username],
            "bio": [UserRow.bio],
        }.get(field, [UserRow.name, UserRow.username, UserRow.bio])
        stmt = (
            select(UserRow)
            .where(or_(*(contains(c, term) for c in columns)))
            .order_by(UserRow.id)
        )
        return await self._all(stmt)

    async def recent(self, limit: int = RECENT_LIMIT) -> list[UserRow]:
        return await self._all(select(UserRow).order_by(UserRow.id.desc()).limit(limit))

    async def is_username_available(self, username: str) -> bool:
        return await self._username_owner(username) is None

    async def is_email_available(self, email: str) -> bool:
        return await self._email_owner(email) is None
