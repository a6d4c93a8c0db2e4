"""Event form handling: validation, record assembly and filtering."""

from .forms import EventForm
from .validation import validate_event_form, ensure_valid
from .submission import (
    LocationInfo,
    OnlineInfo,
    HybridInfo,
    Organizer,
    Ticket,
    EventRecord,
    build_venue,
    assemble_event,
)
from .filtering import DateRange, FilterCriteria, filter_events, collect_tags

__all__ = [
    'EventForm',
    'validate_event_form',
    'ensure_valid',
    'LocationInfo',
    'OnlineInfo',
    'HybridInfo',
    'Organizer',
    'Ticket',
    'EventRecord',
    'build_venue',
    'assemble_event',
    'DateRange',
    'FilterCriteria',
    'filter_events',
    'collect_tags',
]
