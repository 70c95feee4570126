"""
Model attributes.

An Attribute describes a single model field, like `account_id`: the key it is
stored under on the model, the key it uses in the API's JSON, and how to
convert between the JSON representation and the Python one.
"""

from datetime import date, datetime, timezone
from typing import Any


class Attribute:
    def __init__(self, model_key: str, json_key: str | None = None):
        self.model_key = model_key
        self.json_key = json_key or model_key

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.model_key!r}, json_key={self.json_key!r})"

    def to_json(self, val: Any) -> Any:
        return val

    def from_json(self, val: Any, parent: Any) -> Any:
        return val


class AttributeNumber(Attribute):
    def from_json(self, val, parent):
        if isinstance(val, bool):
            return None
        if isinstance(val, (int, float)):
            return val
        if isinstance(val, str):
            for cast in (int, float):
                try:
                    return cast(val)
                except ValueError:
                    continue
        return None


class AttributeBoolean(Attribute):
    def from_json(self, val, parent):
        return val == "true" or val is True


class AttributeString(Attribute):
    def from_json(self, val, parent):
        return val or ""


class AttributeStringList(Attribute):
    def from_json(self, val, parent):
        return list(val) if val else []


class AttributeDate(Attribute):
    """ISO-8601 strings on the wire, `date` or `datetime` in Python"""

    def to_json(self, val):
        if not val:
            return val
        if not isinstance(val, date):
            raise TypeError(
                f"Attempting to serialize AttributeDate which is not a date: {self.model_key} = {val!r}"
            )
        return val.isoformat()

    def from_json(self, val, parent):
        if not val:
            return None
        if isinstance(val, date):
            return val
        if "T" in val:
            return datetime.fromisoformat(val)
        return date.fromisoformat(val)


class AttributeDateTime(Attribute):
    """Unix epoch seconds on the wire, timezone aware `datetime` in Python"""

    def to_json(self, val):
        if not val:
            return None
        if not isinstance(val, datetime):
            raise TypeError(
                f"Attempting to serialize AttributeDateTime which is not a datetime: {self.model_key} = {val!r}"
            )
        return val.timestamp()

    def from_json(self, val, parent):
        if val is None or val == "":
            return None
        return datetime.fromtimestamp(float(val), tz=timezone.utc)


class AttributeObject(Attribute):
    def __init__(self, model_key: str, json_key: str | None = None, item_class=None):
        super().__init__(model_key, json_key)
        self.item_class = item_class

    def to_json(self, val):
        if val is not None and hasattr(val, "to_json"):
            return val.to_json()
        return val

    def from_json(self, val, parent):
        if val is None:
            return None
        if self.item_class is not None and isinstance(val, dict):
            return self.item_class(parent.connection, val)
        return val


class AttributeRawObject(Attribute):
    """Plain JSON objects, kept as dicts"""

    def from_json(self, val, parent):
        if val is None:
            return None
        return dict(val) if isinstance(val, dict) else val


class AttributeCollection(Attribute):
    def __init__(self, model_key: str, json_key: str | None = None, item_class=None):
        super().__init__(model_key, json_key)
        if item_class is None:
            raise TypeError(f"AttributeCollection {model_key!r} requires an item_class")
        self.item_class = item_class

    def to_json(self, vals):
        if not vals:
            return []
        # collections may hold models or plain values
        return [val.to_json() if hasattr(val, "to_json") else val for val in vals]

    def from_json(self, json, parent):
        if not json or not isinstance(json, list):
            return []
        return [self.item_class(parent.connection, obj_json) for obj_json in json]


class Attributes:
    """Factory namespace, ie `Attributes.String("name")`"""

    Number = AttributeNumber
    String = AttributeString
    StringList = AttributeStringList
    Boolean = AttributeBoolean
    Date = AttributeDate
    DateTime = AttributeDateTime
    Object = AttributeObject
    RawObject = AttributeRawObject
    Collection = AttributeCollection
