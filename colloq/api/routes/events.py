"""Events router module."""

from datetime import date, datetime, time
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from ..deps import get_current_identity, get_database
from ..schemas import EventFormIn
from ...config.events import EVENT_FORMATS, EVENT_TYPES, PLATFORMS, TICKET_CURRENCY, TICKET_TYPES
from ...db import Database
from ...events import DateRange, FilterCriteria, collect_tags, filter_events
from ...new_event_handler import create_event, get_event, list_events
from ...security import SessionIdentity

router = APIRouter(tags=["events"])

@router.post("/events", status_code=201)
def submit_event(
    payload: EventFormIn,
    identity: SessionIdentity = Depends(get_current_identity),
    database: Database = Depends(get_database)
):
    """Create an event. Requires a session."""
    event = create_event(payload.to_form(), identity, database)
    return {"message": "Event created successfully", "event_id": event['id']}

@router.get("/events")
def browse_events(
    type: Optional[str] = None,
    event_format: Optional[str] = Query(None, alias="format"),
    ticket_type: Optional[str] = None,
    tags: List[str] = Query([]),
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    database: Database = Depends(get_database)
):
    """
    Get all events, newest first, narrowed by the given filters.
    
    start_date and end_date are calendar days; end_date includes the whole day.
    """
    criteria = FilterCriteria(
        type=type,
        event_format=event_format,
        ticket_type=ticket_type,
        tags=tuple(tags),
        date_range=DateRange(
            start=datetime.combine(start_date, time.min) if start_date else None,
            end=datetime.combine(end_date, time.max) if end_date else None,
        ),
    )
    return {"events": filter_events(list_events(database), criteria)}

@router.get("/events/tags")
def list_tags(database: Database = Depends(get_database)):
    """Get every tag used by any event."""
    return {"tags": collect_tags(list_events(database))}

@router.get("/events/options")
def form_options():
    """Get the choices offered by the create-event form."""
    return {
        "types": EVENT_TYPES,
        "formats": EVENT_FORMATS,
        "platforms": PLATFORMS,
        "ticket_types": TICKET_TYPES,
        "currency": TICKET_CURRENCY,
    }

@router.get("/events/{event_id}")
def event_detail(event_id: int, database: Database = Depends(get_database)):
    """Get a single event by ID."""
    return get_event(event_id, database)
