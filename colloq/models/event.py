"""Event model definition."""

from typing import Dict, Any, Optional
from sqlalchemy import Column, Integer, String, Text, DateTime, Float, JSON

from .base import Base
from ..config.events import LOCATION_FORMATS, ONLINE_FORMATS

class Event(Base):
    """
    Event model representing a user-created event.

    Location columns are only filled for in-person and hybrid events, online
    columns only for virtual and hybrid events. Ticket price and currency are
    only filled for paid events.

    Fields:
        id: Unique identifier (auto-generated)
        title: Event title
        description: Event description
        type: Event category (Meetup, Workshop, ...)
        tags: List of free-text tags
        event_format: 'in-person', 'virtual' or 'hybrid'
        venue: Venue name (in-person/hybrid)
        address: Venue address (in-person/hybrid)
        map_link: Link to a map of the venue (optional)
        platform: Online platform (virtual/hybrid)
        meeting_link: Link to join online (optional)
        notes: Notes for online attendees (optional)
        start_datetime: When the event starts
        end_datetime: When the event ends
        organizer_email: Contact email of the organizer
        organizer_social: Organizer's social link (optional)
        ticket_type: 'free' or 'paid'
        ticket_price: Price for paid events
        ticket_currency: Currency for paid events
        registration_deadline: Last moment to register (optional)
        created_by: Email of the user who created the event
        created_at: When the event was created
    """
    __tablename__ = 'events'

    # Required fields
    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    type = Column(String, nullable=False, index=True)
    tags = Column(JSON, nullable=False, default=list)
    event_format = Column(String, nullable=False)
    start_datetime = Column(DateTime, nullable=False, index=True)
    end_datetime = Column(DateTime, nullable=False)
    organizer_email = Column(String, nullable=False)
    ticket_type = Column(String, nullable=False)
    created_by = Column(String, nullable=False)
    created_at = Column(DateTime, nullable=False, index=True)

    # Format-dependent fields
    venue = Column(String)
    address = Column(String)
    map_link = Column(String)
    platform = Column(String)
    meeting_link = Column(String)
    notes = Column(Text)

    # Optional fields
    organizer_social = Column(String)
    ticket_price = Column(Float)
    ticket_currency = Column(String)
    registration_deadline = Column(DateTime)

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'Event':
        """Build an Event row from an assembled event document."""
        organizer = document['organizer']
        ticket = document['ticket']
        return cls(
            title=document['title'],
            description=document['description'],
            type=document['type'],
            tags=list(document['tags']),
            event_format=document['event_format'],
            venue=document.get('venue'),
            address=document.get('address'),
            map_link=document.get('map_link'),
            platform=document.get('platform'),
            meeting_link=document.get('meeting_link'),
            notes=document.get('notes'),
            start_datetime=document['start_datetime'],
            end_datetime=document['end_datetime'],
            organizer_email=organizer['email'],
            organizer_social=organizer.get('social'),
            ticket_type=ticket['type'],
            ticket_price=ticket.get('price'),
            ticket_currency=ticket.get('currency'),
            registration_deadline=document.get('registration_deadline'),
            created_by=document['created_by'],
            created_at=document['created_at'],
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary, leaving out fields that do not apply to the format."""
        data = {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'type': self.type,
            'tags': list(self.tags or []),
            'event_format': self.event_format,
            'start_datetime': self.start_datetime,
            'end_datetime': self.end_datetime,
            'organizer': {'email': self.organizer_email},
            'ticket': {'type': self.ticket_type},
            'created_by': self.created_by,
            'created_at': self.created_at,
        }
        if self.event_format in LOCATION_FORMATS:
            data.update(venue=self.venue, address=self.address)
            _set_if_present(data, 'map_link', self.map_link)
        if self.event_format in ONLINE_FORMATS:
            data['platform'] = self.platform
            _set_if_present(data, 'meeting_link', self.meeting_link)
            _set_if_present(data, 'notes', self.notes)
        if self.organizer_social:
            data['organizer']['social'] = self.organizer_social
        if self.ticket_type == 'paid':
            data['ticket'].update(price=self.ticket_price, currency=self.ticket_currency)
        if self.registration_deadline:
            data['registration_deadline'] = self.registration_deadline
        return data

    def __str__(self) -> str:
        """String representation."""
        return f"Event(id={self.id}, title={self.title}, start_datetime={self.start_datetime})"


def _set_if_present(data: Dict[str, Any], key: str, value: Optional[str]) -> None:
    if value:
        data[key] = value
