"""
Client entry point.

    async with NylasClient(access_token) as client:
        async for event in client.events.stream({"calendar_id": calendar_id}):
            ...
"""

from nylas_calendar.core.collection import RestfulModelCollection, RestfulModelInstance
from nylas_calendar.core.connection import NylasConnection
from nylas_calendar.core.sentry import init_sentry
from nylas_calendar.resources import Account, CalendarRestfulModelCollection, Event


class NylasClient(NylasConnection):
    """A connection exposing the calendar resources"""

    def __init__(self, access_token=None, client_id=None, **kwargs):
        super().__init__(access_token, client_id, **kwargs)
        init_sentry()
        self.calendars = CalendarRestfulModelCollection(self)
        self.events = RestfulModelCollection(Event, self)
        self.account = RestfulModelInstance(Account, self)
