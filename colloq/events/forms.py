"""Event creation form state."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import List, Optional


def _to_local_naive(value: datetime) -> datetime:
    """Drop timezone info after converting to local time."""
    if value.tzinfo is None:
        return value
    return value.astimezone().replace(tzinfo=None)


@dataclass
class EventForm:
    """
    Everything the create-event form collects, section by section.

    Dates and times are kept as separate inputs; the start and end instants
    are combined on demand as local date-times. A time that carries an
    offset is converted to local time once combined with its date. Text
    fields default to empty strings the way an untouched form field does.
    """
    # Basic information
    title: str = ""
    description: str = ""
    type: str = ""
    tags: List[str] = field(default_factory=list)
    event_format: str = "in-person"

    # Location (in-person / hybrid)
    venue: str = ""
    address: str = ""
    map_link: str = ""

    # Online (virtual / hybrid)
    platform: str = ""
    meeting_link: str = ""
    notes: str = ""

    # Schedule
    start_date: Optional[date] = None
    start_time: Optional[time] = None
    end_date: Optional[date] = None
    end_time: Optional[time] = None

    # Organizer
    organizer_email: str = ""
    social_link: str = ""

    # Ticketing
    ticket_type: str = "free"
    price: Optional[float] = None
    registration_deadline: Optional[datetime] = None

    def __post_init__(self):
        if self.registration_deadline is not None:
            self.registration_deadline = _to_local_naive(self.registration_deadline)

    @property
    def effective_end_date(self) -> Optional[date]:
        """End date, falling back to the start date for single-day events."""
        return self.end_date or self.start_date

    def start_instant(self) -> Optional[datetime]:
        if self.start_date is None or self.start_time is None:
            return None
        return _to_local_naive(datetime.combine(self.start_date, self.start_time))

    def end_instant(self) -> Optional[datetime]:
        end_date = self.effective_end_date
        if end_date is None or self.end_time is None:
            return None
        return _to_local_naive(datetime.combine(end_date, self.end_time))

    def clean_tags(self) -> List[str]:
        """Trimmed tags with blanks and repeats removed, in entry order."""
        tags = []
        for tag in self.tags:
            tag = tag.strip()
            if tag and tag not in tags:
                tags.append(tag)
        return tags
