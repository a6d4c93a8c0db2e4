from datetime import datetime, time, timedelta, timezone

import pytest

from colloq.errors import ValidationError
from colloq.events import ensure_valid, validate_event_form

from .helpers import NOW, TOMORROW, make_form


def test_well_formed_in_person_event_is_valid():
    assert validate_event_form(make_form(), now=NOW) is None


@pytest.mark.parametrize("start,end", [
    (time(10, 0), time(12, 0)),
    (time(0, 0), time(0, 1)),
    (time(18, 30), time(23, 59)),
])
def test_in_person_events_with_start_before_end_are_valid(start, end):
    assert validate_event_form(make_form(start_time=start, end_time=end), now=NOW) is None


@pytest.mark.parametrize("field,value,message", [
    ("title", "   ", "Title is required"),
    ("description", "", "Description is required"),
    ("type", "", "Event type is required"),
    ("type", "Party", "Invalid event type"),
    ("tags", [], "At least one tag is required"),
    ("tags", ["  "], "At least one tag is required"),
    ("start_date", None, "Start date and time are required"),
    ("start_time", None, "Start date and time are required"),
    ("end_time", None, "End time is required"),
    ("organizer_email", "", "Organizer email is required"),
])
def test_missing_fields(field, value, message):
    assert validate_event_form(make_form(**{field: value}), now=NOW) == message


def test_start_in_the_past():
    form = make_form(start_date=NOW.date(), start_time=time(8, 59), end_time=time(10, 0))
    assert validate_event_form(form, now=NOW) == "Event start date/time cannot be in the past"


def test_start_exactly_now_is_allowed():
    form = make_form(start_date=NOW.date(), start_time=time(9, 0), end_time=time(10, 0))
    assert validate_event_form(form, now=NOW) is None


@pytest.mark.parametrize("end_time", [time(10, 0), time(9, 0)])
def test_end_not_after_start(end_time):
    form = make_form(start_time=time(10, 0), end_time=end_time)
    assert validate_event_form(form, now=NOW) == "End time must be after start time"


def test_end_ordering_reported_before_later_rules():
    # venue, platform, email and price are all broken too
    form = make_form(
        start_time=time(10, 0), end_time=time(9, 0),
        event_format="hybrid", venue="", platform="",
        organizer_email="", ticket_type="paid", price=None,
    )
    assert validate_event_form(form, now=NOW) == "End time must be after start time"


def test_end_date_defaults_to_start_date():
    form = make_form(start_time=time(22, 0), end_time=time(1, 0))
    assert validate_event_form(form, now=NOW) == "End time must be after start time"

    overnight = make_form(start_time=time(22, 0), end_date=TOMORROW + timedelta(days=1), end_time=time(1, 0))
    assert validate_event_form(overnight, now=NOW) is None


def test_registration_deadline_in_the_past():
    form = make_form(registration_deadline=NOW - timedelta(minutes=1))
    assert validate_event_form(form, now=NOW) == "Registration deadline cannot be in the past"


def test_registration_deadline_not_before_start():
    start = datetime.combine(TOMORROW, time(10, 0))
    form = make_form(registration_deadline=start)
    assert validate_event_form(form, now=NOW) == "Registration deadline must be before event start date"


def test_registration_deadline_before_start_is_valid():
    form = make_form(registration_deadline=datetime.combine(TOMORROW, time(8, 0)))
    assert validate_event_form(form, now=NOW) is None


def test_in_person_event_without_venue():
    form = make_form(venue="")
    assert validate_event_form(form, now=NOW) == "Venue is required for in-person/hybrid events"


def test_hybrid_event_without_address():
    form = make_form(event_format="hybrid", platform="Zoom", address=" ")
    assert validate_event_form(form, now=NOW) == "Address is required for in-person/hybrid events"


def test_virtual_event_needs_platform_but_not_venue():
    form = make_form(event_format="virtual", venue="", address="", platform="")
    assert validate_event_form(form, now=NOW) == "Platform is required for virtual/hybrid events"

    form = make_form(event_format="virtual", venue="", address="", platform="Discord")
    assert validate_event_form(form, now=NOW) is None


@pytest.mark.parametrize("price", [None, 0, 0.0, -5, float("nan"), float("inf")])
def test_paid_event_needs_positive_price(price):
    form = make_form(ticket_type="paid", price=price)
    assert validate_event_form(form, now=NOW) == "Valid price is required for paid events"


def test_paid_event_with_price_is_valid():
    assert validate_event_form(make_form(ticket_type="paid", price=499.0), now=NOW) is None


def test_free_event_ignores_price():
    assert validate_event_form(make_form(ticket_type="free", price=-1), now=NOW) is None


def test_first_failure_wins():
    form = make_form(title="", description="", tags=[])
    assert validate_event_form(form, now=NOW) == "Title is required"


def test_ensure_valid_raises_with_message():
    with pytest.raises(ValidationError) as excinfo:
        ensure_valid(make_form(venue=""), now=NOW)
    assert excinfo.value.message == "Venue is required for in-person/hybrid events"
    assert excinfo.value.status_code == 400

    ensure_valid(make_form(), now=NOW)


def test_times_with_an_offset_are_converted_to_local_time():
    ist = timezone(timedelta(hours=5, minutes=30))
    offset_form = make_form(start_time=time(10, 0, tzinfo=ist), end_time=time(12, 0, tzinfo=ist))
    utc_form = make_form(start_time=time(4, 30, tzinfo=timezone.utc), end_time=time(6, 30, tzinfo=timezone.utc))

    expected = datetime.combine(TOMORROW, time(4, 30, tzinfo=timezone.utc)).astimezone().replace(tzinfo=None)
    assert offset_form.start_instant() == expected
    assert offset_form.start_instant() == utc_form.start_instant()
    assert offset_form.end_instant() - offset_form.start_instant() == timedelta(hours=2)
    assert offset_form.start_instant().tzinfo is None


def test_offset_times_and_deadline_are_compared_in_local_time():
    deadline = datetime.combine(TOMORROW, time(9, 0, tzinfo=timezone.utc))
    form = make_form(
        start_time=time(10, 0, tzinfo=timezone.utc),
        end_time=time(12, 0, tzinfo=timezone.utc),
        registration_deadline=deadline,
    )
    assert validate_event_form(form, now=NOW) is None

    late = make_form(
        start_time=time(10, 0, tzinfo=timezone.utc),
        end_time=time(12, 0, tzinfo=timezone.utc),
        registration_deadline=deadline + timedelta(hours=1),
    )
    assert validate_event_form(late, now=NOW) == "Registration deadline must be before event start date"
