from typing import Any

from nylas_calendar.core.attributes import Attributes
from nylas_calendar.core.callbacks import supports_callback
from nylas_calendar.core.restful_model import RestfulModel


class EventParticipant(RestfulModel):
    collection_name = "event-participants"
    attributes = {
        "name": Attributes.String("name"),
        "email": Attributes.String("email"),
        "status": Attributes.String("status"),
    }

    def to_json(self) -> dict[str, Any]:
        json = super().to_json()
        if not json["name"]:
            json["name"] = json["email"]
        del json["object"]
        return json


class Event(RestfulModel):
    """
    A calendar event.

    The event's time span lives in the `when` object, whose shape depends on
    the kind of event:
        - timespan: {"start_time": 1409594400, "end_time": 1409598000}
        - time: {"time": 1409594400}
        - datespan: {"start_date": "2014-09-01", "end_date": "2014-09-03"}
        - date: {"date": "2014-09-01"}
    `start` and `end` read and write it, numbers being epoch timestamps and
    strings ISO dates.
    """

    collection_name = "events"
    attributes = {
        **RestfulModel.attributes,
        "calendar_id": Attributes.String("calendar_id"),
        "master_event_id": Attributes.String("master_event_id"),
        "ical_uid": Attributes.String("ical_uid"),
        "message_id": Attributes.String("message_id"),
        "title": Attributes.String("title"),
        "description": Attributes.String("description"),
        "owner": Attributes.String("owner"),
        "participants": Attributes.Collection("participants", item_class=EventParticipant),
        "read_only": Attributes.Boolean("read_only"),
        "location": Attributes.String("location"),
        "when": Attributes.RawObject("when"),
        "busy": Attributes.Boolean("busy"),
        "status": Attributes.String("status"),
        "recurrence": Attributes.RawObject("recurrence"),
    }

    @property
    def start(self) -> int | str | None:
        when = self.when or {}
        return when.get("start_time") or when.get("start_date") or when.get("time") or when.get("date")

    @start.setter
    def start(self, val: int | str | None) -> None:
        self._set_bound(val, "start", "end")

    @property
    def end(self) -> int | str | None:
        when = self.when or {}
        return when.get("end_time") or when.get("end_date") or when.get("time") or when.get("date")

    @end.setter
    def end(self, val: int | str | None) -> None:
        self._set_bound(val, "end", "start")

    def _set_bound(self, val: int | str | None, side: str, other: str) -> None:
        if self.when is None:
            self.when = {}
        if isinstance(val, (int, float)) and not isinstance(val, bool):
            # a timespan whose bounds are equal is a single point in time
            if val == self.when.get(f"{other}_time"):
                self.when = {"time": val}
            else:
                for key in ("time", f"{side}_date", "date"):
                    self.when.pop(key, None)
                self.when[f"{side}_time"] = val
        elif isinstance(val, str):
            if val == self.when.get(f"{other}_date"):
                self.when = {"date": val}
            else:
                for key in ("date", "time", f"{side}_time"):
                    self.when.pop(key, None)
                self.when[f"{side}_date"] = val

    def delete_request_query_string(self, params: dict[str, Any]) -> dict[str, Any]:
        qs = {}
        if "notify_participants" in params:
            qs["notify_participants"] = params["notify_participants"]
        return qs

    async def save(self, params: dict[str, Any] | None = None, callback=None) -> "Event":
        return await self._save(params, callback=callback)

    @supports_callback
    async def rsvp(self, status: str, comment: str | None = None) -> "Event":
        json = await self.connection.request(
            method="POST",
            body={"event_id": self.id, "status": status, "comment": comment},
            path="/send-rsvp",
        )
        return self.from_json(json)
