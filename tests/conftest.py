"""Pytest configuration: import the package from src/ and provide a recording client."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

_SRC_ROOT = Path(__file__).resolve().parent.parent / "src"
if str(_SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(_SRC_ROOT))

from apollo_mcp.client import build_request  # noqa: E402
from apollo_mcp.tools import build_registry  # noqa: E402


class RecordingClient:
    """Stands in for ApolloClient: normalizes requests and records them."""

    def __init__(self, response=None, exc: Exception | None = None):
        self.response = response if response is not None else {"ok": True}
        self.exc = exc
        self.requests = []

    @property
    def last(self):
        return self.requests[-1]

    async def request(self, method, path, body=None, query_params=None):
        self.requests.append(build_request(method, path, body, query_params))
        if self.exc is not None:
            raise self.exc
        return self.response


@pytest.fixture
def client():
    return RecordingClient()


@pytest.fixture(scope="session")
def registry():
    return build_registry()
