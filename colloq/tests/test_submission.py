from datetime import datetime, time, timedelta

import pytest

from colloq.events import (
    HybridInfo,
    LocationInfo,
    OnlineInfo,
    assemble_event,
    build_venue,
    validate_event_form,
)

from .helpers import NOW, TOMORROW, make_form


def test_virtual_meetup_record_omits_location():
    form = make_form(
        title="Meetup", description="x", type="Meetup", tags=["tech"],
        event_format="virtual", venue="", address="", platform="Zoom",
        start_time=time(10, 0), end_time=time(11, 0),
        organizer_email="a@b.com", ticket_type="free",
    )
    assert validate_event_form(form, now=NOW) is None

    record = assemble_event(form, created_by="a@b.com", now=NOW)
    document = record.to_document()

    assert isinstance(record.venue, OnlineInfo)
    assert document["platform"] == "Zoom"
    assert "venue" not in document
    assert "address" not in document
    assert "map_link" not in document


def test_in_person_record_omits_online_fields():
    record = assemble_event(make_form(map_link="https://maps.example.com/hub"), created_by="host@example.com", now=NOW)
    document = record.to_document()

    assert record.venue == LocationInfo(
        venue="Hub Cafe", address="12 MG Road, Bengaluru", map_link="https://maps.example.com/hub"
    )
    assert document["venue"] == "Hub Cafe"
    assert document["map_link"] == "https://maps.example.com/hub"
    for key in ("platform", "meeting_link", "notes"):
        assert key not in document


def test_hybrid_record_has_both():
    form = make_form(event_format="hybrid", platform="Google Meet", meeting_link="https://meet.example.com/x", notes="")
    venue = build_venue(form)

    assert isinstance(venue, HybridInfo)
    assert venue.location.venue == "Hub Cafe"
    assert venue.online.platform == "Google Meet"

    document = assemble_event(form, created_by="host@example.com", now=NOW).to_document()
    assert document["venue"] == "Hub Cafe"
    assert document["platform"] == "Google Meet"
    assert document["meeting_link"] == "https://meet.example.com/x"
    assert "notes" not in document


def test_end_date_defaults_to_start_date():
    record = assemble_event(make_form(end_date=None), created_by="host@example.com", now=NOW)
    assert record.start_datetime == datetime.combine(TOMORROW, time(10, 0))
    assert record.end_datetime == datetime.combine(TOMORROW, time(12, 0))


def test_explicit_end_date_is_used():
    end_date = TOMORROW + timedelta(days=2)
    record = assemble_event(make_form(end_date=end_date), created_by="host@example.com", now=NOW)
    assert record.end_datetime == datetime.combine(end_date, time(12, 0))


def test_free_ticket_has_no_price_or_currency():
    document = assemble_event(make_form(price=100.0), created_by="host@example.com", now=NOW).to_document()
    assert document["ticket"] == {"type": "free"}


def test_paid_ticket_has_numeric_price_and_currency():
    document = assemble_event(
        make_form(ticket_type="paid", price=250), created_by="host@example.com", now=NOW
    ).to_document()
    assert document["ticket"] == {"type": "paid", "price": 250.0, "currency": "INR"}
    assert isinstance(document["ticket"]["price"], float)


def test_provenance_is_stamped():
    record = assemble_event(make_form(organizer_email="other@example.com"), created_by="creator@example.com", now=NOW)
    document = record.to_document()
    assert document["created_by"] == "creator@example.com"
    assert document["created_at"] == NOW
    assert document["organizer"] == {"email": "other@example.com"}


def test_optional_organizer_social_and_deadline():
    deadline = datetime.combine(TOMORROW, time(8, 0))
    document = assemble_event(
        make_form(social_link="https://x.com/host", registration_deadline=deadline),
        created_by="host@example.com", now=NOW,
    ).to_document()
    assert document["organizer"]["social"] == "https://x.com/host"
    assert document["registration_deadline"] == deadline

    document = assemble_event(make_form(), created_by="host@example.com", now=NOW).to_document()
    assert "registration_deadline" not in document


def test_tags_are_trimmed_and_deduplicated():
    record = assemble_event(make_form(tags=[" ai ", "ai", "", "ml"]), created_by="host@example.com", now=NOW)
    assert record.tags == ["ai", "ml"]


def test_unknown_format_is_rejected():
    with pytest.raises(ValueError):
        build_venue(make_form(event_format="hologram"))
