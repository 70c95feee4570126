"""
Collections of resources.

RestfulModelCollection queries a resource's listing endpoint in fixed-size
chunks and offers several ways to consume the results. RestfulModelInstance
fetches a resource that has a single instance per account.
"""

from __future__ import annotations

import logging
import math
from typing import Any, AsyncIterator, Callable

from .callbacks import supports_callback
from .connection import NylasConnection
from .exceptions import NylasUsageError
from .restful_model import RestfulModel

logger = logging.getLogger(__name__)

REQUEST_CHUNK_SIZE = 100


class RestfulModelCollection:
    """Query interface for one resource type, ie `client.events`"""

    def __init__(self, model_class: type[RestfulModel], connection: NylasConnection):
        if not isinstance(connection, NylasConnection):
            raise TypeError("Connection object not provided")
        if not model_class:
            raise TypeError("Model class not provided")
        self.model_class = model_class
        self.connection = connection

    def path(self) -> str:
        return f"/{self.model_class.collection_name}"

    async def stream(self, params: dict[str, Any] | None = None) -> AsyncIterator[Any]:
        """
        Yield every item of the collection, fetching one chunk at a time.

        Args:
            params: Filters and view, passed through as query parameters

        Yields:
            Model instances, or ids with the `ids` view
        """
        params = params or {}
        if params.get("view") == "count":
            raise NylasUsageError("stream() cannot be called with the count view")
        offset = 0
        while True:
            items = await self._get_items(params, offset, REQUEST_CHUNK_SIZE)
            for item in items:
                yield item
            # the server may return fewer items than requested
            offset += len(items)
            if len(items) < REQUEST_CHUNK_SIZE:
                return

    async def for_each(
        self,
        params: dict[str, Any] | None,
        each_callback: Callable[[Any], Any],
        complete_callback: Callable[[Exception | None], Any] | None = None,
    ) -> None:
        """
        Call `each_callback` on every item, then `complete_callback` once.

        Failures, including the ones raised by `each_callback`, are reported to
        `complete_callback` rather than raised. Only the count view is rejected
        with an exception, before any request is sent.
        """
        params = params or {}
        if params.get("view") == "count":
            err = NylasUsageError("for_each() cannot be called with the count view")
            if complete_callback:
                complete_callback(err)
            raise err

        try:
            async for item in self.stream(params):
                each_callback(item)
        except Exception as exc:
            if complete_callback:
                complete_callback(exc)
            else:
                logger.error("for_each() on %s failed: %s", self.path(), exc)
            return
        if complete_callback:
            complete_callback(None)

    @supports_callback
    async def count(self, params: dict[str, Any] | None = None) -> int:
        params = params or {}
        if params.get("view") not in (None, "count"):
            raise NylasUsageError(f"count() cannot be called with the {params['view']} view")
        json = await self.connection.request(
            method="GET",
            path=self.path(),
            qs={**params, "view": "count"},
        )
        return json["count"]

    @supports_callback
    async def first(self, params: dict[str, Any] | None = None) -> Any:
        params = params or {}
        if params.get("view") == "count":
            raise NylasUsageError("first() cannot be called with the count view")
        items = await self._get_items(params, 0, 1)
        return items[0] if items else None

    @supports_callback
    async def list(self, params: dict[str, Any] | None = None) -> list[Any]:
        params = params or {}
        if params.get("view") == "count":
            raise NylasUsageError("list() cannot be called with the count view")
        limit = params.get("limit") or math.inf
        offset = params.get("offset") or 0
        return await self._range(params, offset=offset, limit=limit)

    @supports_callback
    async def find(self, id: str, params: dict[str, Any] | None = None) -> RestfulModel:
        params = params or {}
        if not id:
            raise NylasUsageError("find() must be called with an item id")
        if params.get("view") in ("count", "ids"):
            raise NylasUsageError("find() cannot be called with the count or ids view")
        return await self._get_model(id, params)

    @supports_callback
    async def delete(self, item_or_id: RestfulModel | str, params: dict[str, Any] | None = None) -> Any:
        if not item_or_id:
            raise NylasUsageError("delete() requires an item or an id")
        item = self.build(id=item_or_id) if isinstance(item_or_id, str) else item_or_id
        options = item.delete_request_options(params or {})
        options["item"] = item
        return await self.delete_item(options)

    @supports_callback
    async def delete_item(self, options: dict[str, Any]) -> Any:
        item = options["item"]
        body = options["body"] if "body" in options else item.delete_request_body({})
        qs = options["qs"] if "qs" in options else item.delete_request_query_string({})
        return await self.connection.request(
            method="DELETE",
            qs=qs,
            body=body,
            path=f"{self.path()}/{item.id}",
        )

    def build(self, fields: dict[str, Any] | None = None, **kwargs) -> RestfulModel:
        model = self._create_model({})
        for key, val in {**(fields or {}), **kwargs}.items():
            setattr(model, key, val)
        return model

    async def _range(
        self,
        params: dict[str, Any],
        offset: int = 0,
        limit: float = REQUEST_CHUNK_SIZE,
        path: str | None = None,
    ) -> list[Any]:
        accumulated: list[Any] = []
        while True:
            chunk_offset = offset + len(accumulated)
            chunk_limit = min(REQUEST_CHUNK_SIZE, limit - len(accumulated))
            items = await self._get_items(params, chunk_offset, chunk_limit, path)
            accumulated.extend(items)
            if len(items) < REQUEST_CHUNK_SIZE or len(accumulated) >= limit:
                return accumulated

    async def _get_items(
        self, params: dict[str, Any], offset: int, limit: int, path: str | None = None
    ) -> list[Any]:
        # items are ids with the `ids` view, models otherwise
        path = path or self.path()
        if params.get("view") == "ids":
            return await self.connection.request(
                method="GET",
                path=path,
                qs={**params, "offset": offset, "limit": limit},
            )
        return await self._get_model_collection(params, offset, limit, path)

    def _create_model(self, json: dict[str, Any]) -> RestfulModel:
        return self.model_class(self.connection, json)

    async def _get_model(self, id: str, params: dict[str, Any]) -> RestfulModel:
        json = await self.connection.request(
            method="GET",
            path=f"{self.path()}/{id}",
            qs=params,
        )
        return self._create_model(json)

    async def _get_model_collection(
        self, params: dict[str, Any], offset: int, limit: int, path: str
    ) -> list[RestfulModel]:
        json_array = await self.connection.request(
            method="GET",
            path=path,
            qs={**params, "offset": offset, "limit": limit},
        )
        return [self._create_model(json) for json in json_array]


class RestfulModelInstance:
    """Accessor for a resource without id nor listing, ie `client.account`"""

    def __init__(self, model_class: type[RestfulModel], connection: NylasConnection):
        if not isinstance(connection, NylasConnection):
            raise TypeError("Connection object not provided")
        if not model_class:
            raise TypeError("Model class not provided")
        self.model_class = model_class
        self.connection = connection

    def path(self) -> str:
        return f"/{self.model_class.endpoint_name}"

    @supports_callback
    async def get(self, params: dict[str, Any] | None = None) -> RestfulModel:
        json = await self.connection.request(method="GET", path=self.path(), qs=params or {})
        return self.model_class(self.connection, json)
