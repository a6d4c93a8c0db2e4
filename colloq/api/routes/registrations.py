"""Registration and dashboard routes."""

from fastapi import APIRouter, Depends

from ..deps import get_current_identity, get_database
from ..schemas import RegisterEventIn
from ...db import Database
from ...registrations import list_registered_events, register_for_event
from ...security import SessionIdentity

router = APIRouter(tags=["registrations"])

@router.post("/register-event", status_code=201)
def register_event(
    payload: RegisterEventIn,
    identity: SessionIdentity = Depends(get_current_identity),
    database: Database = Depends(get_database)
):
    """Register the current user for an event."""
    registration = register_for_event(payload.event_id, identity, database)
    return {"message": "Registered successfully", "registration_id": registration['id']}

@router.get("/dashboard")
def dashboard(
    identity: SessionIdentity = Depends(get_current_identity),
    database: Database = Depends(get_database)
):
    """Get the events the current user registered for."""
    return {"events": list_registered_events(identity, database)}
