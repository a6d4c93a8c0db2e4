"""Database operations.

Thin find/insert helpers over the models. Every helper opens its own
session, so each call is one transaction. Results are returned as plain
dictionaries, never as attached ORM objects.
"""

from typing import Any, Dict, Iterable, List, Optional

from .db_core import Database
from ..models.event import Event
from ..models.registration import Registration
from ..models.user import User

def insert_event(database: Database, document: Dict[str, Any]) -> Dict[str, Any]:
    """Insert an assembled event document and return it with its generated id."""
    with database.session() as session:
        event = Event.from_document(document)
        session.add(event)
        session.flush()
        return event.to_dict()

def find_events(database: Database) -> List[Dict[str, Any]]:
    """Get all events, newest first."""
    with database.session() as session:
        events = session.query(Event).order_by(Event.created_at.desc(), Event.id.desc()).all()
        return [event.to_dict() for event in events]

def find_event(database: Database, event_id: int) -> Optional[Dict[str, Any]]:
    """Get a single event by id, or None."""
    with database.session() as session:
        event = session.query(Event).filter(Event.id == event_id).first()
        return event.to_dict() if event else None

def find_events_by_ids(database: Database, event_ids: Iterable[int]) -> List[Dict[str, Any]]:
    """Get the events whose id is in ``event_ids``, soonest first."""
    event_ids = list(event_ids)
    if not event_ids:
        return []
    with database.session() as session:
        events = (
            session.query(Event)
            .filter(Event.id.in_(event_ids))
            .order_by(Event.start_datetime)
            .all()
        )
        return [event.to_dict() for event in events]

def insert_registration(database: Database, user_email: str, event_id: int) -> Dict[str, Any]:
    """
    Insert a registration.
    
    Raises:
        DuplicateKeyError: If the user is already registered for the event
    """
    with database.session() as session:
        registration = Registration(user_email=user_email, event_id=event_id)
        session.add(registration)
        session.flush()
        return registration.to_dict()

def find_registrations(database: Database, user_email: str) -> List[Dict[str, Any]]:
    """Get all registrations of one user."""
    with database.session() as session:
        registrations = (
            session.query(Registration)
            .filter(Registration.user_email == user_email)
            .order_by(Registration.registered_at)
            .all()
        )
        return [registration.to_dict() for registration in registrations]

def insert_user(database: Database, name: str, email: str, password_hash: str) -> Dict[str, Any]:
    """
    Insert a user account.
    
    Raises:
        DuplicateKeyError: If an account with the email already exists
    """
    with database.session() as session:
        user = User(name=name, email=email, password_hash=password_hash)
        session.add(user)
        session.flush()
        return user.to_dict()

def find_user_by_email(database: Database, email: str) -> Optional[Dict[str, Any]]:
    """Get a user by email, including the password hash, or None."""
    with database.session() as session:
        user = session.query(User).filter(User.email == email).first()
        if not user:
            return None
        data = user.to_dict()
        data['password_hash'] = user.password_hash
        return data
