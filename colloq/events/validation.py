"""Business rules for the create-event form.

Rules run in a fixed priority order and the first failure wins, so the
order below decides which message a user sees when several rules are
broken at once.
"""

import math
from datetime import datetime
from typing import Optional

from .forms import EventForm
from ..config.events import EVENT_TYPES, LOCATION_FORMATS, ONLINE_FORMATS
from ..errors import ValidationError


def validate_event_form(form: EventForm, now: Optional[datetime] = None) -> Optional[str]:
    """
    Check a candidate event against the business rules.

    Args:
        form: The submitted form state
        now: Reference time for the "not in the past" rules, defaults to
            the local clock

    Returns:
        The message of the first violated rule, or None if the form is valid
    """
    if now is None:
        now = datetime.now()

    if not form.title.strip():
        return 'Title is required'
    if not form.description.strip():
        return 'Description is required'
    if not form.type:
        return 'Event type is required'
    if form.type not in EVENT_TYPES:
        return 'Invalid event type'
    if not form.clean_tags():
        return 'At least one tag is required'
    if form.start_date is None or form.start_time is None:
        return 'Start date and time are required'
    if form.end_time is None:
        return 'End time is required'

    start = form.start_instant()
    end = form.end_instant()

    if start < now:
        return 'Event start date/time cannot be in the past'
    if end <= start:
        return 'End time must be after start time'

    deadline = form.registration_deadline
    if deadline is not None:
        if deadline < now:
            return 'Registration deadline cannot be in the past'
        if deadline >= start:
            return 'Registration deadline must be before event start date'

    if form.event_format in LOCATION_FORMATS:
        if not form.venue.strip():
            return 'Venue is required for in-person/hybrid events'
        if not form.address.strip():
            return 'Address is required for in-person/hybrid events'

    if form.event_format in ONLINE_FORMATS:
        # meeting link and notes are optional
        if not form.platform:
            return 'Platform is required for virtual/hybrid events'

    if not form.organizer_email.strip():
        return 'Organizer email is required'

    if form.ticket_type == 'paid' and (form.price is None or not math.isfinite(form.price) or form.price <= 0):
        return 'Valid price is required for paid events'

    return None


def ensure_valid(form: EventForm, now: Optional[datetime] = None) -> None:
    """Raise ValidationError with the first violated rule, if any."""
    message = validate_event_form(form, now)
    if message:
        raise ValidationError(message)
