"""Models package initialization."""

from .base import Base
from .event import Event
from .registration import Registration
from .user import User

__all__ = ['Base', 'Event', 'Registration', 'User']
