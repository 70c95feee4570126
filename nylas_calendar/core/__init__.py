"""
Core module for nylas_calendar.

This module contains the generic machinery the resources are built on:
attribute mapping, models, paginated collections and the request dispatcher.
"""

from .attributes import Attribute, Attributes
from .collection import REQUEST_CHUNK_SIZE, RestfulModelCollection, RestfulModelInstance
from .connection import NylasConnection
from .exceptions import (
    NylasApiError,
    NylasConnectionError,
    NylasError,
    NylasUsageError,
    handle_exception,
)
from .models import RequestOptions
from .restful_model import RestfulModel

__all__ = [
    "Attribute",
    "Attributes",
    "REQUEST_CHUNK_SIZE",
    "RestfulModelCollection",
    "RestfulModelInstance",
    "NylasConnection",
    "NylasApiError",
    "NylasConnectionError",
    "NylasError",
    "NylasUsageError",
    "handle_exception",
    "RequestOptions",
    "RestfulModel",
]
