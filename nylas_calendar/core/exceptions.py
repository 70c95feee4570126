"""
Exception types for the core module.

Errors raised by the request dispatcher and by the collection operations all
derive from NylasError, so callers can catch a single type.
"""

from typing import Any

import sentry_sdk


class NylasError(Exception):
    """Base class for every error raised by this package"""


class NylasConnectionError(NylasError):
    """No response was received from the API server"""


class NylasUsageError(NylasError, ValueError):
    """An operation was called in a way it does not support"""


class NylasApiError(NylasError):
    """The API server answered with an error status"""

    def __init__(self, message: str, status_code: int | None = None, body: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.body = body


def build_error_message(body: Any) -> str:
    if not isinstance(body, dict):
        return str(body) if body else ""
    message = body.get("message") or ""
    if body.get("missing_fields"):
        missing = body["missing_fields"]
        if isinstance(missing, list):
            missing = ",".join(str(field) for field in missing)
        message = f"{message}: {missing}"
    if body.get("server_error"):
        message = f"{message} (Server Error: {body['server_error']})"
    return message


def handle_exception(status: int, body: Any, path: str | None = None):
    """Build an API error from a response, report it to Sentry and raise it."""
    error = NylasApiError(build_error_message(body), status_code=status, body=body)
    if sentry_sdk.get_client().is_active():
        with sentry_sdk.new_scope() as scope:
            sentry_tags: dict = {"status": status}
            if path:
                sentry_tags["path"] = path
            scope.set_tags(sentry_tags)
            sentry_sdk.capture_exception(error)
    raise error
