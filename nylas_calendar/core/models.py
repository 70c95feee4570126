"""
Data models for the core module.

This module contains data classes used by the request dispatcher.
"""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RequestOptions:
    """Represents a fully resolved request, ready to be sent."""

    method: str
    path: str
    url: str
    params: list[tuple[str, str]] = field(default_factory=list)
    body: Any = None
    headers: dict[str, str] = field(default_factory=dict)
    auth_user: str | None = None
    download_request: bool = False
