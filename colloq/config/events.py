"""Event form choices and ticketing defaults."""

import os

EVENT_TYPES = [
    "Meetup",
    "Workshop",
    "Conference",
    "Networking",
    "Panel Discussion",
    "Pitch Event",
    "Hackathon",
    "Other",
]

EVENT_FORMATS = ["in-person", "virtual", "hybrid"]

# Formats that need a physical venue / an online platform
LOCATION_FORMATS = {"in-person", "hybrid"}
ONLINE_FORMATS = {"virtual", "hybrid"}

PLATFORMS = [
    "Google Meet",
    "Zoom",
    "Microsoft Teams",
    "Discord",
    "YouTube Live",
    "Other",
]

TICKET_TYPES = ["free", "paid"]

TICKET_CURRENCY = os.environ.get('TICKET_CURRENCY', 'INR')
