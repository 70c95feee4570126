"""
Resource types of the API, declared on top of the core module.
"""

from .account import Account
from .calendar import Calendar, CalendarRestfulModelCollection
from .event import Event, EventParticipant

__all__ = [
    "Account",
    "Calendar",
    "CalendarRestfulModelCollection",
    "Event",
    "EventParticipant",
]
