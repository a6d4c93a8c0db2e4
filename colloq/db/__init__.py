"""Database package initialization.

This module exposes the public interface of the database package.
"""

from .db_core import (
    Database,
    DatabaseConfig,
    DatabaseError,
    ConnectionError,
    SessionError,
    DuplicateKeyError,
    db
)
from .operations import (
    insert_event,
    find_events,
    find_event,
    find_events_by_ids,
    insert_registration,
    find_registrations,
    insert_user,
    find_user_by_email,
)

__all__ = [
    # Core database classes
    'Database',
    'DatabaseConfig',
    
    # Exceptions
    'DatabaseError',
    'ConnectionError',
    'SessionError',
    'DuplicateKeyError',
    
    # Global instance
    'db',
    
    # Operations
    'insert_event',
    'find_events',
    'find_event',
    'find_events_by_ids',
    'insert_registration',
    'find_registrations',
    'insert_user',
    'find_user_by_email',
]
