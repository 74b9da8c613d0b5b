"""Shared repository plumbing for the async services."""
from __future__ import annotations

import logging
from typing import Any, Optional

from fastapi import HTTPException
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    """Escape LIKE wildcard characters in user input."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def contains(column, term: str):
    """Case-insensitive substring match on ``column``."""
    return column.ilike(f"%{_escape_like(term)}%", escape="\\")


class Repository:
    """Base class: a session plus the lookups every service repeats.

    Subclasses set ``model`` and ``not_found``.
    """

    model: Any = None
    not_found = "Not found"

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, row_id: int) -> Optional[Any]:
        return await self.session.get(self.model, row_id)

    async def get_or_404(self, row_id: int) -> Any:
        row = await self.get(row_id)
        if row is None:
            raise HTTPException(404, self.not_found)
        return row

    async def list_all(self) -> list:
        return await self._all(select(self.model).order_by(self.model.id))

    async def _all(self, stmt) -> list:
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def _first(self, stmt) -> Optional[Any]:
        result = await self.session.execute(stmt.limit(1))
        return result.scalars().first()

    async def _scalar(self, stmt) -> Any:
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def _commit(self, conflict: str) -> None:
        """Commit, turning a uniqueness violation into a 400."""
        try:
            await self.session.commit()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info("Constraint violation: %s", exc.orig)
            raise HTTPException(400, conflict)

    async def _flush(self, conflict: str) -> None:
        """Flush pending rows, with the same conflict handling as _commit."""
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            logger.info("Constraint violation: %s", exc.orig)
            raise HTTPException(400, conflict)

    async def _delete(self, row) -> None:
        await self.session.delete(row)
        await self.session.commit()
