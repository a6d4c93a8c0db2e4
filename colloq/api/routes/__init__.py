"""Routes package initialization."""

from . import (
    accounts,
    events,
    registrations,
    health
)

__all__ = [
    'accounts',
    'events',
    'registrations',
    'health'
]
