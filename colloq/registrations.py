"""Event registration and the user's registered-events dashboard."""

import logging
from typing import Any, Dict, List

from .db import (
    Database,
    DuplicateKeyError,
    find_event,
    find_events_by_ids,
    find_registrations,
    insert_registration,
)
from .errors import ConflictError, NotFoundError
from .security import SessionIdentity

logger = logging.getLogger(__name__)

def register_for_event(event_id: int, identity: SessionIdentity, database: Database) -> Dict[str, Any]:
    """
    Register the current user for an event.
    
    Uniqueness of (user_email, event_id) is left to the storage constraint,
    so a concurrent duplicate loses at commit instead of slipping through
    an existence check.
    
    Raises:
        NotFoundError: If the event does not exist
        ConflictError: If the user is already registered
    """
    if not find_event(database, event_id):
        raise NotFoundError('Event not found')

    try:
        registration = insert_registration(database, identity.email, event_id)
    except DuplicateKeyError as e:
        logger.info(f"{identity.email} already registered for event {event_id}")
        raise ConflictError('Already registered') from e

    logger.info(f"Registered {identity.email} for event {event_id}")
    return registration

def list_registered_events(identity: SessionIdentity, database: Database) -> List[Dict[str, Any]]:
    """
    Get the events the current user registered for, soonest first.
    
    Registrations are joined to events by the event's persisted id; each
    event carries the time the user registered.
    """
    registrations = find_registrations(database, identity.email)
    registered_at = {r['event_id']: r['registered_at'] for r in registrations}

    events = find_events_by_ids(database, registered_at)
    for event in events:
        event['registered_at'] = registered_at[event['id']]
    return events
