"""Builders for event forms and request bodies used across the tests."""

from datetime import date, datetime, time, timedelta

from colloq.events import EventForm

# Fixed reference time for rule checks
NOW = datetime(2026, 10, 19, 9, 0)
TOMORROW = NOW.date() + timedelta(days=1)


def make_form(**overrides) -> EventForm:
    """A valid in-person event for tomorrow, with selected fields replaced."""
    values = dict(
        title="Startup Founder Meetup",
        description="Founders sharing notes over coffee",
        type="Meetup",
        tags=["startups", "networking"],
        event_format="in-person",
        venue="Hub Cafe",
        address="12 MG Road, Bengaluru",
        start_date=TOMORROW,
        start_time=time(10, 0),
        end_time=time(12, 0),
        organizer_email="host@example.com",
        ticket_type="free",
    )
    values.update(overrides)
    return EventForm(**values)


def event_payload(**overrides) -> dict:
    """JSON body for POST /api/events, scheduled for tomorrow on the real clock."""
    tomorrow = date.today() + timedelta(days=1)
    payload = {
        "title": "Meetup",
        "description": "x",
        "type": "Meetup",
        "tags": ["tech"],
        "event_format": "virtual",
        "platform": "Zoom",
        "start_date": tomorrow.isoformat(),
        "start_time": "10:00",
        "end_time": "11:00",
        "organizer_email": "a@b.com",
        "ticket_type": "free",
    }
    payload.update(overrides)
    return payload
