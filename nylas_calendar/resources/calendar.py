from typing import Any

from nylas_calendar.core.attributes import Attributes
from nylas_calendar.core.callbacks import supports_callback
from nylas_calendar.core.collection import RestfulModelCollection
from nylas_calendar.core.connection import NylasConnection
from nylas_calendar.core.restful_model import RestfulModel


class Calendar(RestfulModel):
    collection_name = "calendars"
    attributes = {
        **RestfulModel.attributes,
        "name": Attributes.String("name"),
        "description": Attributes.String("description"),
        "read_only": Attributes.Boolean("read_only"),
        "location": Attributes.String("location"),
        "timezone": Attributes.String("timezone"),
        "is_primary": Attributes.Boolean("is_primary"),
        "job_status_id": Attributes.String("job_status_id"),
    }

    async def save(self, params: dict[str, Any] | None = None, callback=None) -> "Calendar":
        return await self._save(params, callback=callback)

    def save_request_body(self) -> dict[str, Any]:
        # only these fields can be updated, the others are assigned by the server
        calendar_json = self.to_json()
        return {
            key: calendar_json[key]
            for key in ("name", "description", "location", "timezone")
            if calendar_json[key] is not None
        }


class CalendarRestfulModelCollection(RestfulModelCollection):
    def __init__(self, connection: NylasConnection):
        super().__init__(Calendar, connection)

    @supports_callback
    async def free_busy(
        self,
        emails: list[str],
        start_time: int | str | None = None,
        end_time: int | str | None = None,
    ) -> Any:
        """Busy time slots of the given email addresses between two epoch timestamps."""
        return await self.connection.request(
            method="POST",
            path="/calendars/free-busy",
            body={
                "start_time": start_time,
                "end_time": end_time,
                "emails": emails,
            },
        )
