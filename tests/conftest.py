import pytest
import pytest_asyncio
from aioresponses import aioresponses

from nylas_calendar.client import NylasClient
from nylas_calendar.core.connection import NylasConnection

API_SERVER = "https://api.example.com"
ACCESS_TOKEN = "access-token"
CLIENT_ID = "client-id"
CLIENT_SECRET = "client-secret"


def make_items(count: int, prefix: str = "evt") -> list[dict]:
    return [
        {"id": f"{prefix}-{i}", "object": "event", "account_id": "acc-1", "title": f"Event {i}"}
        for i in range(count)
    ]


class FakeConnection(NylasConnection):
    """Serves listing requests from an in-memory list of items and records every call"""

    def __init__(self, items=None, responses=None, fail_at_offset=None):
        super().__init__(ACCESS_TOKEN, CLIENT_ID, api_server=API_SERVER)
        self.items = items or []
        self.responses = responses or {}
        self.fail_at_offset = fail_at_offset
        self.calls = []

    async def request(
        self, method="GET", path="", qs=None, body=None, headers=None, download_request=False
    ):
        qs = dict(qs or {})
        self.calls.append({"method": method, "path": path, "qs": qs, "body": body})
        if (method, path) in self.responses:
            response = self.responses[(method, path)]
            if isinstance(response, Exception):
                raise response
            return response
        if qs.get("view") == "count":
            return {"count": len(self.items)}
        offset = qs.get("offset", 0)
        if self.fail_at_offset is not None and offset >= self.fail_at_offset:
            raise ConnectionResetError("connection dropped")
        chunk = self.items[offset : offset + qs.get("limit", len(self.items))]
        if qs.get("view") == "ids":
            return [item["id"] for item in chunk]
        return chunk

    @property
    def chunk_requests(self) -> list[dict]:
        return [call for call in self.calls if "offset" in call["qs"]]


@pytest.fixture
def rmock():
    with aioresponses() as m:
        yield m


@pytest_asyncio.fixture
async def client():
    async with NylasClient(
        ACCESS_TOKEN, CLIENT_ID, api_server=API_SERVER, client_secret=CLIENT_SECRET
    ) as client:
        yield client


@pytest.fixture
def fake_connection():
    return FakeConnection()
