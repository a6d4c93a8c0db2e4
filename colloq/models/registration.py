"""Model linking a user to an event they registered for."""

from datetime import datetime
from typing import Dict, Any
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint

from .base import Base

class Registration(Base):
    """
    One user's registration for one event.
    
    The (user_email, event_id) pair is unique at the storage level, so two
    concurrent registrations for the same pair cannot both be committed.
    
    Fields:
        id: Unique identifier (auto-generated)
        user_email: Email of the registered user
        event_id: Persisted id of the event
        registered_at: When the registration was made
    """
    __tablename__ = 'registrations'
    __table_args__ = (
        UniqueConstraint('user_email', 'event_id', name='uq_registration_user_event'),
    )
    
    id = Column(Integer, primary_key=True, autoincrement=True)
    user_email = Column(String, nullable=False, index=True)
    event_id = Column(Integer, ForeignKey('events.id'), nullable=False, index=True)
    registered_at = Column(DateTime, nullable=False, default=datetime.now)
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'id': self.id,
            'user_email': self.user_email,
            'event_id': self.event_id,
            'registered_at': self.registered_at
        }
    
    def __str__(self) -> str:
        """String representation."""
        return f"Registration(id={self.id}, user_email={self.user_email}, event_id={self.event_id})"
