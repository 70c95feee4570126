"""
Request dispatcher.

NylasConnection resolves a request (URL, credentials, headers, query string),
sends it through an aiohttp session and classifies the outcome.
"""

import asyncio
import json
import logging
from typing import Any

import aiohttp

from nylas_calendar import config

from .exceptions import NylasConnectionError, handle_exception
from .models import RequestOptions
from .utils import api_url, build_query_params, is_admin_path
from .version import get_warning_for_version

logger = logging.getLogger(__name__)

API_VERSION_HEADER = "Nylas-Api-Version"


def _parse_body(raw: bytes) -> Any:
    if not raw:
        return {}
    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text


class NylasConnection:
    """Holds the credentials of one API user and sends requests on their behalf."""

    def __init__(
        self,
        access_token: str | None = None,
        client_id: str | None = None,
        *,
        api_server: str | None = None,
        client_secret: str | None = None,
        sdk_name: str | None = None,
        sdk_version: str | None = None,
        api_version: str | None = None,
        timeout: float | None = None,
        session: aiohttp.ClientSession | None = None,
    ):
        self.access_token = access_token
        self.client_id = client_id if client_id is not None else (config.CLIENT_ID or None)
        self.api_server = (api_server or config.API_SERVER).rstrip("/")
        self.client_secret = client_secret if client_secret is not None else config.CLIENT_SECRET
        self.sdk_name = sdk_name or config.SDK_NAME
        self.sdk_version = sdk_version or config.SDK_VERSION
        self.api_version = api_version or config.SUPPORTED_API_VERSION
        self.timeout = timeout or config.REQUEST_TIMEOUT
        self._session = session
        self._own_session = session is None

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        await self.close()

    async def close(self) -> None:
        if self._own_session and self._session is not None:
            await self._session.close()
            self._session = None

    @property
    def session(self) -> aiohttp.ClientSession:
        if self._session is None:
            self._session = aiohttp.ClientSession()
        return self._session

    def request_options(
        self,
        method: str = "GET",
        path: str = "",
        qs: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
        download_request: bool = False,
    ) -> RequestOptions:
        headers = dict(headers or {})
        headers.setdefault("User-Agent", f"{self.sdk_name} v{self.sdk_version}")
        headers["Nylas-SDK-API-Version"] = self.api_version
        if self.client_id:
            headers["X-Nylas-Client-Id"] = self.client_id

        # admin endpoints authenticate with the application secret
        user = self.client_secret if is_admin_path(path) else self.access_token

        return RequestOptions(
            method=method.upper(),
            path=path,
            url=api_url(self.api_server, path),
            params=build_query_params(qs),
            body=body,
            headers=headers,
            auth_user=user or None,
            download_request=download_request,
        )

    def _warn_for_version(self, api_version: str | None) -> None:
        warning = get_warning_for_version(self.api_version, api_version)
        if warning:
            logger.warning(warning)

    async def request(
        self,
        method: str = "GET",
        path: str = "",
        qs: dict[str, Any] | None = None,
        body: Any = None,
        headers: dict[str, str] | None = None,
        download_request: bool = False,
    ) -> Any:
        """
        Send one request to the API.

        Returns:
            The parsed response body, or the response itself for download requests

        Raises:
            NylasConnectionError: If no response was received
            NylasApiError: If the response status is above 299
        """
        options = self.request_options(method, path, qs, body, headers, download_request)
        auth = aiohttp.BasicAuth(options.auth_user, "") if options.auth_user else None
        logger.debug("%s %s %s", options.method, options.url, options.params)
        try:
            async with self.session.request(
                options.method,
                options.url,
                params=options.params or None,
                json=options.body,
                headers=options.headers,
                auth=auth,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
            ) as res:
                raw = await res.read()
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise NylasConnectionError(str(exc) or "No response") from exc

        self._warn_for_version(res.headers.get(API_VERSION_HEADER))

        if res.status > 299:
            handle_exception(res.status, _parse_body(raw), options.path)
        if options.download_request:
            return res
        return _parse_body(raw)
