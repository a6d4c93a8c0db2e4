"""Build the persistence-ready event record from a validated form."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from .forms import EventForm
from ..config.events import TICKET_CURRENCY


@dataclass(frozen=True)
class LocationInfo:
    """Where an in-person event takes place."""
    venue: str
    address: str
    map_link: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        data = {'venue': self.venue, 'address': self.address}
        if self.map_link:
            data['map_link'] = self.map_link
        return data


@dataclass(frozen=True)
class OnlineInfo:
    """How to join a virtual event."""
    platform: str
    meeting_link: Optional[str] = None
    notes: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        data = {'platform': self.platform}
        if self.meeting_link:
            data['meeting_link'] = self.meeting_link
        if self.notes:
            data['notes'] = self.notes
        return data


@dataclass(frozen=True)
class HybridInfo:
    """A hybrid event has both a venue and an online platform."""
    location: LocationInfo
    online: OnlineInfo

    def to_document(self) -> Dict[str, Any]:
        return {**self.location.to_document(), **self.online.to_document()}


Venue = Union[LocationInfo, OnlineInfo, HybridInfo]


@dataclass(frozen=True)
class Organizer:
    email: str
    social: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        data = {'email': self.email}
        if self.social:
            data['social'] = self.social
        return data


@dataclass(frozen=True)
class Ticket:
    """Ticketing info. Price and currency are only set for paid events."""
    type: str
    price: Optional[float] = None
    currency: Optional[str] = None

    def to_document(self) -> Dict[str, Any]:
        data = {'type': self.type}
        if self.type == 'paid':
            data.update(price=self.price, currency=self.currency)
        return data


@dataclass(frozen=True)
class EventRecord:
    """An event ready to be handed to storage."""
    title: str
    description: str
    type: str
    tags: List[str]
    event_format: str
    venue: Venue
    start_datetime: datetime
    end_datetime: datetime
    organizer: Organizer
    ticket: Ticket
    created_by: str
    created_at: datetime
    registration_deadline: Optional[datetime] = None

    def to_document(self) -> Dict[str, Any]:
        """
        Flatten to the stored field set.

        Location keys appear only for in-person and hybrid events, online
        keys only for virtual and hybrid events.
        """
        document = {
            'title': self.title,
            'description': self.description,
            'type': self.type,
            'tags': list(self.tags),
            'event_format': self.event_format,
            **self.venue.to_document(),
            'start_datetime': self.start_datetime,
            'end_datetime': self.end_datetime,
            'organizer': self.organizer.to_document(),
            'ticket': self.ticket.to_document(),
            'created_by': self.created_by,
            'created_at': self.created_at,
        }
        if self.registration_deadline is not None:
            document['registration_deadline'] = self.registration_deadline
        return document


def _optional(value: str) -> Optional[str]:
    value = value.strip()
    return value or None


def build_venue(form: EventForm) -> Venue:
    """Pick the venue variant that matches the event format."""
    location = LocationInfo(
        venue=form.venue.strip(),
        address=form.address.strip(),
        map_link=_optional(form.map_link),
    )
    online = OnlineInfo(
        platform=form.platform,
        meeting_link=_optional(form.meeting_link),
        notes=_optional(form.notes),
    )
    if form.event_format == 'in-person':
        return location
    if form.event_format == 'virtual':
        return online
    if form.event_format == 'hybrid':
        return HybridInfo(location=location, online=online)
    raise ValueError(f"Unknown event format: {form.event_format}")


def assemble_event(form: EventForm, created_by: str, now: Optional[datetime] = None) -> EventRecord:
    """
    Build the record for a form that already passed validation.

    Args:
        form: Validated form state
        created_by: Email of the authenticated creator
        now: Creation timestamp, defaults to the local clock

    Returns:
        EventRecord with the venue variant for the form's format
    """
    if now is None:
        now = datetime.now()

    if form.ticket_type == 'paid':
        ticket = Ticket(type='paid', price=float(form.price), currency=TICKET_CURRENCY)
    else:
        ticket = Ticket(type=form.ticket_type)

    return EventRecord(
        title=form.title.strip(),
        description=form.description.strip(),
        type=form.type,
        tags=form.clean_tags(),
        event_format=form.event_format,
        venue=build_venue(form),
        start_datetime=form.start_instant(),
        end_datetime=form.end_instant(),
        organizer=Organizer(
            email=form.organizer_email.strip(),
            social=_optional(form.social_link),
        ),
        ticket=ticket,
        registration_deadline=form.registration_deadline,
        created_by=created_by,
        created_at=now,
    )
