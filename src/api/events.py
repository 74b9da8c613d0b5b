"""Events API — cooking events, searchable by title/description/location."""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Query, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from src.db.engine import get_session
from src.models.recipe import EventIn, EventOut
from src.services.events import EventService
from src.services.storage import MediaStorage, get_storage

router = APIRouter(prefix="/api/events", tags=["events"])


def get_event_service(
    session: AsyncSession = Depends(get_session),
    storage: MediaStorage = Depends(get_storage),
) -> EventService:
    return EventService(session, storage)


@router.get("", response_model=list[EventOut])
async def list_events(events: EventService = Depends(get_event_service)):
    return await events.list_all()


@router.post("", response_model=EventOut, status_code=201)
async def create_event(req: EventIn, events: EventService = Depends(get_event_service)):
    return await events.create(req)


@router.put("", response_model=EventOut)
async def update_event_from_body(req: EventIn, events: EventService = Depends(get_event_service)):
    """Update where the id travels in the body."""
    return await events.update(req.id, req)


@router.post("/upload", response_model=EventOut, status_code=201)
async def upload_event(
    title: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    date: Optional[str] = Form(None),
    location: Optional[str] = Form(None),
    time: Optional[str] = Form(None),
    user_id: Optional[int] = Form(None),
    image_file: Optional[UploadFile] = File(None),
    image_file_camel: Optional[UploadFile] = File(None, alias="imageFile"),
    events: EventService = Depends(get_event_service),
):
    data = EventIn(
        user_id=user_id, title=title, description=description,
        date=date, location=location, time=time,
    )
    return await events.create_with_image(data, image_file or image_file_camel)


@router.get("/search", response_model=list[EventOut])
async def search_events(term: Optional[str] = Query(None), events: EventService = Depends(get_event_service)):
    return await events.search(term)


@router.get("/user/{user_id}", response_model=list[EventOut])
async def events_by_user(user_id: int, events: EventService = Depends(get_event_service)):
    return await events.by_user(user_id)


@router.get("/{event_id}", response_model=EventOut)
async def get_event(event_id: int, events: EventService = Depends(get_event_service)):
    return await events.get_or_404(event_id)


@router.put("/{event_id}", response_model=EventOut)
async def update_event(event_id: int, req: EventIn, events: EventService = Depends(get_event_service)):
    return await events.update(event_id, req)


@router.delete("/{event_id}", status_code=204)
async def delete_event(event_id: int, events: EventService = Depends(get_event_service)):
    await events.delete(event_id)
