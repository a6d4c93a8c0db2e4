"""Narrow an event list down to the user's filter selection."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence


@dataclass(frozen=True)
class DateRange:
    """Inclusive bounds on an event's start. Either side may be open."""
    start: Optional[datetime] = None
    end: Optional[datetime] = None


@dataclass(frozen=True)
class FilterCriteria:
    """
    A filter selection from the Browse page.

    Every unset criterion lets all events through. Criteria are combined
    with AND; the tags criterion matches events that carry at least one of
    the selected tags.
    """
    type: Optional[str] = None
    event_format: Optional[str] = None
    ticket_type: Optional[str] = None
    tags: Sequence[str] = field(default_factory=tuple)
    date_range: DateRange = field(default_factory=DateRange)


def _start_of(event: Mapping[str, Any]) -> datetime:
    start = event['start_datetime']
    if isinstance(start, str):
        start = datetime.fromisoformat(start)
    return start


def filter_events(events: Iterable[Mapping[str, Any]], criteria: FilterCriteria) -> List[Mapping[str, Any]]:
    """
    Return the events matching every active criterion, in input order.

    Events are the dictionaries produced by ``Event.to_dict``. The whole
    list is scanned on every call.
    """
    filtered = list(events)

    if criteria.type:
        filtered = [event for event in filtered if event['type'] == criteria.type]

    if criteria.event_format:
        filtered = [event for event in filtered if event['event_format'] == criteria.event_format]

    if criteria.ticket_type:
        filtered = [event for event in filtered if event['ticket']['type'] == criteria.ticket_type]

    selected = {tag for tag in criteria.tags if tag.strip()}
    if selected:
        filtered = [event for event in filtered if selected.intersection(event['tags'])]

    if criteria.date_range.start:
        filtered = [event for event in filtered if _start_of(event) >= criteria.date_range.start]

    if criteria.date_range.end:
        filtered = [event for event in filtered if _start_of(event) <= criteria.date_range.end]

    return filtered


def collect_tags(events: Iterable[Mapping[str, Any]]) -> List[str]:
    """All distinct tags across the events, in first-seen order."""
    seen: Dict[str, None] = {}
    for event in events:
        for tag in event['tags']:
            seen.setdefault(tag, None)
    return list(seen)
