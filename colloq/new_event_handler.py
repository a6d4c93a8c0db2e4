"""Handler for creating and reading user-submitted events."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from .db import Database, find_event, find_events, insert_event
from .errors import NotFoundError
from .events import EventForm, ensure_valid, assemble_event
from .security import SessionIdentity

logger = logging.getLogger(__name__)

def create_event(
    form: EventForm,
    identity: SessionIdentity,
    database: Database,
    now: Optional[datetime] = None
) -> Dict[str, Any]:
    """
    Validate a submitted form, assemble the record and store it.
    
    Nothing reaches storage unless every rule passes. Storage failures
    propagate unchanged; there is no retry.
    
    Args:
        form: The submitted form state
        identity: The authenticated creator
        database: Storage to write to
        now: Reference time for validation and the creation stamp
        
    Returns:
        The stored event, including its generated id
        
    Raises:
        ValidationError: If the form breaks a business rule
        DatabaseError: If storage fails
    """
    if now is None:
        now = datetime.now()

    ensure_valid(form, now)
    record = assemble_event(form, created_by=identity.email, now=now)

    logger.info(f"Creating event: {record.title}")
    event = insert_event(database, record.to_document())
    logger.info(f"Event created: {event['id']}")
    return event

def list_events(database: Database) -> List[Dict[str, Any]]:
    """Get all events, newest first."""
    return find_events(database)

def get_event(event_id: int, database: Database) -> Dict[str, Any]:
    """
    Get a single event.
    
    Raises:
        NotFoundError: If no event has the id
    """
    event = find_event(database, event_id)
    if not event:
        raise NotFoundError('Event not found')
    return event
