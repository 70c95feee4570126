"""
Base record for API resources.

A RestfulModel subclass declares its fields once, as an ordered mapping of
attribute name to Attribute, and inherits generic JSON conversion and the
save/delete request shaping from this class.
"""

import json
from typing import Any

from .attributes import Attribute, Attributes
from .callbacks import supports_callback
from .connection import NylasConnection


class RestfulModel:
    endpoint_name = ""  # overridden in subclasses
    collection_name = ""  # overridden in subclasses
    attributes: dict[str, Attribute] = {
        "id": Attributes.String("id"),
        "object": Attributes.String("object"),
        "account_id": Attributes.String("account_id"),
    }

    # mutable records, compared by id
    __hash__ = None

    def __init__(self, connection: NylasConnection, json: dict[str, Any] | None = None):
        if not isinstance(connection, NylasConnection):
            raise TypeError("Connection object not provided")
        self.connection = connection
        # every record has an id, even those whose schema does not declare one
        self.id = None
        for attr_name in self.attributes:
            setattr(self, attr_name, None)
        if json:
            self.from_json(json)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} id={self.id!r}>"

    def __str__(self) -> str:
        return json.dumps(self.to_json(), default=str)

    def __eq__(self, other: object) -> bool:
        return self.is_equal(other)

    def is_equal(self, other: Any) -> bool:
        return type(other) is type(self) and getattr(other, "id", None) == self.id

    def from_json(self, json: dict[str, Any] | None = None) -> "RestfulModel":
        json = json or {}
        for attr_name, attr in self.attributes.items():
            # a missing key leaves the current value untouched, an explicit null does not
            if attr.json_key in json:
                setattr(self, attr_name, attr.from_json(json[attr.json_key], self))
        return self

    def to_json(self) -> dict[str, Any]:
        json = {}
        for attr_name, attr in self.attributes.items():
            json[attr.json_key] = attr.to_json(getattr(self, attr_name, None))
        json["object"] = type(self).__name__.lower()
        return json

    def path_prefix(self) -> str:
        return ""

    def save_endpoint(self) -> str:
        return f"{self.path_prefix()}/{self.collection_name}"

    def save_request_body(self) -> dict[str, Any]:
        """Fields sent by save(). Subclasses restrict this to what the API allows updating."""
        return self.to_json()

    def delete_request_query_string(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}

    def delete_request_body(self, params: dict[str, Any]) -> dict[str, Any]:
        return {}

    def delete_request_options(self, params: dict[str, Any]) -> dict[str, Any]:
        return {
            "body": self.delete_request_body(params),
            "qs": self.delete_request_query_string(params),
        }

    @supports_callback
    async def _save(self, params: dict[str, Any] | None = None) -> "RestfulModel":
        json = await self.connection.request(
            method="PUT" if self.id else "POST",
            body=self.save_request_body(),
            qs=params or {},
            path=f"{self.save_endpoint()}/{self.id}" if self.id else self.save_endpoint(),
        )
        return self.from_json(json)

    @supports_callback
    async def _get(self, params: dict[str, Any] | None = None, path_suffix: str = "") -> Any:
        return await self.connection.request(
            method="GET",
            path=f"/{self.collection_name}/{self.id}{path_suffix}",
            qs=params or {},
        )
