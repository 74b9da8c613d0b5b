"""Cooking events."""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import HTTPException, UploadFile
from sqlalchemy import or_, select

from config.settings import settings
from src.db.repository import Repository, contains
from src.db.tables import EventRow
from src.models.recipe import EventIn
from src.services.storage import MediaStorage

logger = logging.getLogger(__name__)

MIN_FIELD_LENGTH = 6
_TEXT_FIELDS = ("title", "description", "date", "location", "time")


def validate_event(data: EventIn) -> list[str]:
    errors: list[str] = []
    for field in _TEXT_FIELDS:
        value = (getattr(data, field) or "").strip()
        if len(value) < MIN_FIELD_LENGTH:
            errors.append(f"{field.capitalize()} must be at least {MIN_FIELD_LENGTH} characters long.")
    if data.user_id is None:
        errors.append("UserId is required.")
    return errors


class EventService(Repository):
    model = EventRow
    not_found = "Event not found"

    def __init__(self, session, storage: MediaStorage):
        super().__init__(session)
        self.storage = storage

    @staticmethod
    def _apply(row: EventRow, data: EventIn) -> None:
        row.user_id = data.user_id
        row.title = data.title.strip()
        row.description = data.description.strip()
        row.date = data.date.strip()
        row.location = data.location.strip()
        row.time = data.time.strip()
        row.image = (data.image or "").strip() or settings.DEFAULT_EVENT_IMAGE

    def _check(self, data: EventIn) -> None:
        errors = validate_event(data)
        if errors:
            raise HTTPException(400, errors)

    async def create(self, data: EventIn) -> EventRow:
        self._check(data)
        event = EventRow()
        self._apply(event, data)
        self.session.add(event)
        await self.session.commit()
        logger.info("Created event %s by user %s", event.id, event.user_id)
        return event

    async def create_with_image(self, data: EventIn, image_file: Optional[UploadFile] = None) -> EventRow:
        self._check(data)
        if image_file is None or not image_file.filename:
            return await self.create(data)
        data.image = await self.storage.save(image_file, "images")
        try:
            return await self.create(data)
        except Exception:
            self.storage.delete(data.image)
            raise

    async def by_user(self, user_id: int) -> list[EventRow]:
        return await self._all(
            select(EventRow).where(EventRow.user_id == user_id).order_by(EventRow.id)
        )

    async def search(self, term: Optional[str]) -> list[EventRow]:
        if not term or not term.strip():
            return await self.list_all()
        term = term.strip()
        stmt = (
            select(EventRow)
            .where(or_(
                contains(EventRow.title, term),
                contains(EventRow.description, term),
                contains(EventRow.location, term),
            ))
            .order_by(EventRow.id)
        )
        return await self._all(stmt)

    async def update(self, event_id: Optional[int], data: EventIn) -> EventRow:
        if event_id is None:
            raise HTTPException(400, "Event id is required")
        event = await self.get_or_404(event_id)
        self._check(data)
        self._apply(event, data)
        await self.session.commit()
        return event

    async def delete(self, event_id: int) -> None:
        event = await self.get_or_404(event_id)
        image = event.image
        await self._delete(event)
        self.storage.delete(image)
        logger.info("Deleted event %s", event_id)

    async def media_urls(self) -> list[str]:
        result = await self.session.execute(select(EventRow.image))
        return [url for url in result.scalars().all() if url]
