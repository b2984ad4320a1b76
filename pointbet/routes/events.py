from typing import Optional

from fastapi import APIRouter, Depends

from pointbet.core.supabase import get_supabase
from pointbet.models.enums import EventStatus
from pointbet.routes.dependencies import admin_only, get_current_user
from pointbet.schemas.event import EventCreate, EventResponse, EventSettle
from pointbet.services import event_service

router = APIRouter(prefix="/events", tags=["Events"])


@router.get("", response_model=list[EventResponse])
def list_events(
    status: Optional[EventStatus] = None,
    featured: Optional[bool] = None,
    _=Depends(get_current_user),
    db=Depends(get_supabase),
):
    return event_service.list_events(
        db, status=status.value if status else None, featured=featured
    )


@router.get("/{event_id}", response_model=EventResponse)
def get_event(event_id: str, _=Depends(get_current_user), db=Depends(get_supabase)):
    return event_service.get_event(db, event_id)


@router.post("", response_model=EventResponse, status_code=201)
def create_event(data: EventCreate, _=Depends(admin_only), db=Depends(get_supabase)):
    return event_service.create_event(db, data)


@router.post("/{event_id}/settle", response_model=EventResponse)
def settle_event(
    event_id: str,
    data: EventSettle,
    _=Depends(admin_only),
    db=Depends(get_supabase),
):
    return event_service.settle_event(db, event_id, data)
