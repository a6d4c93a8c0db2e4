"""Request bodies accepted by the API."""

from datetime import date, datetime, time
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator

from ..config.events import EVENT_FORMATS, TICKET_TYPES
from ..events import EventForm


class EventFormIn(BaseModel):
    """The create-event form as submitted by the client."""
    title: str = ""
    description: str = ""
    type: str = ""
    tags: List[str] = Field(default_factory=list)
    event_format: str = 'in-person'

    venue: str = ""
    address: str = ""
    map_link: str = ""

    platform: str = ""
    meeting_link: str = ""
    notes: str = ""

    start_date: Optional[date] = None
    start_time: Optional[time] = None
    end_date: Optional[date] = None
    end_time: Optional[time] = None

    organizer_email: str = ""
    social_link: str = ""

    ticket_type: str = 'free'
    price: Optional[float] = Field(default=None, allow_inf_nan=False)
    registration_deadline: Optional[datetime] = None

    @field_validator(
        'start_date', 'start_time', 'end_date', 'end_time', 'price', 'registration_deadline',
        mode='before'
    )
    @classmethod
    def blank_as_missing(cls, value):
        # Untouched date/number inputs are submitted as empty strings
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator('event_format')
    @classmethod
    def known_format(cls, value: str) -> str:
        if value not in EVENT_FORMATS:
            raise ValueError(f"must be one of: {', '.join(EVENT_FORMATS)}")
        return value

    @field_validator('ticket_type')
    @classmethod
    def known_ticket_type(cls, value: str) -> str:
        if value not in TICKET_TYPES:
            raise ValueError(f"must be one of: {', '.join(TICKET_TYPES)}")
        return value

    def to_form(self) -> EventForm:
        return EventForm(**self.model_dump())


class SignupIn(BaseModel):
    name: str = ""
    email: str = ""
    password: str = ""


class LoginIn(BaseModel):
    email: str = ""
    password: str = ""


class RegisterEventIn(BaseModel):
    event_id: int
