"""
Apollo HTTP Client

Handles HTTP communication with the Apollo.io REST API. Every call produces
either the decoded JSON body or a uniform error result; network failures are
raised as ``TransportFault`` for the invocation layer to report.
"""

import asyncio
import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode

import aiohttp

from .config import DEFAULT_BASE_URL, config
from .errors import TransportFault, error_result

logger = logging.getLogger("apollo.client")

METHODS = ("GET", "POST", "PATCH", "PUT")
BODY_METHODS = ("POST", "PATCH", "PUT")


@dataclass(frozen=True)
class NormalizedRequest:
    """Fully resolved request about to be sent over the wire."""

    method: str
    path: str
    query: Dict[str, str] = field(default_factory=dict)
    body: Optional[Dict[str, Any]] = None

    def url(self, base_url: str) -> str:
        url = f"{base_url}{self.path}"
        if self.query:
            url += f"?{urlencode(self.query)}"
        return url


def build_request(
    method: str,
    path: str,
    body: Optional[Mapping[str, Any]] = None,
    query_params: Optional[Mapping[str, Optional[str]]] = None,
) -> NormalizedRequest:
    """Normalize request parts; empty or missing query values are dropped."""
    method = method.upper()
    if method not in METHODS:
        raise ValueError(f"Unsupported HTTP method: {method}")
    if not path or not path.startswith("/"):
        raise ValueError(f"Route must be a non-empty absolute path, got {path!r}")

    query = {
        key: value
        for key, value in (query_params or {}).items()
        if value is not None and value != ""
    }
    payload = dict(body) if body is not None and method in BODY_METHODS else None
    return NormalizedRequest(method, path, query, payload)


def decode_body(text: str) -> Any:
    """Decode a JSON body, wrapping undecodable text instead of failing."""
    try:
        return json.loads(text)
    except ValueError:
        return {"raw_response": text}


def _error_message(data: Any, reason: Optional[str]) -> Any:
    if isinstance(data, dict):
        return data.get("message") or data.get("error") or reason
    return reason


class ApolloClient:
    """Async client for the Apollo REST API."""

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        session: Optional[aiohttp.ClientSession] = None,
    ):
        self._api_key = api_key
        self.base_url = base_url.rstrip('/')
        self._session = session
        self._owns_session = session is None

    def __repr__(self) -> str:
        return f"ApolloClient(base_url={self.base_url!r})"

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "X-Api-Key": self._api_key,
        }

    async def initialize(self):
        """Open the underlying HTTP session."""
        if self._session is None:
            self._session = aiohttp.ClientSession()
            self._owns_session = True

    async def close(self):
        """Close the HTTP session if this client opened it."""
        if self._session is not None and self._owns_session:
            await self._session.close()
        self._session = None

    async def __aenter__(self):
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def get(self, path: str, query_params: Optional[Mapping[str, Optional[str]]] = None) -> Any:
        return await self.request("GET", path, query_params=query_params)

    async def post(self, path: str, body: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("POST", path, body=body)

    async def patch(self, path: str, body: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("PATCH", path, body=body)

    async def put(self, path: str, body: Optional[Mapping[str, Any]] = None) -> Any:
        return await self.request("PUT", path, body=body)

    async def request(
        self,
        method: str,
        path: str,
        body: Optional[Mapping[str, Any]] = None,
        query_params: Optional[Mapping[str, Optional[str]]] = None,
    ) -> Any:
        """
        Send a single request to Apollo.

        Returns:
            The decoded JSON body on a 2xx response, otherwise an error result
            ``{"error": True, "status", "message", "details"}``.

        Raises:
            TransportFault: On connection errors or timeouts.
        """
        req = build_request(method, path, body, query_params)
        return await self.send(req)

    async def send(self, req: NormalizedRequest) -> Any:
        await self.initialize()

        data = json.dumps(req.body) if req.body is not None else None
        try:
            async with self._session.request(
                req.method, req.url(self.base_url), data=data, headers=self.headers
            ) as response:
                raw = await response.read()
                status = response.status
                reason = response.reason
        except asyncio.TimeoutError as exc:
            logger.error(f"{req.method} {req.path} timed out")
            raise TransportFault("Request timed out", details={"method": req.method, "path": req.path}) from exc
        except aiohttp.ClientError as exc:
            logger.error(f"{req.method} {req.path} failed: {exc}")
            raise TransportFault(f"Connection error: {exc}", details={"method": req.method, "path": req.path}) from exc

        logger.debug(f"{req.method} {req.path} -> {status}")
        decoded = decode_body(raw.decode("utf-8", errors="replace"))

        if not 200 <= status < 300:
            return error_result(status, _error_message(decoded, reason), decoded)
        return decoded


# Global client instance
_client: Optional[ApolloClient] = None


def get_client() -> ApolloClient:
    """Get the global Apollo client instance."""
    global _client
    if _client is None:
        _client = ApolloClient(config.api_key, base_url=config.base_url)
    return _client


async def initialize_client():
    """Initialize the global client."""
    client = get_client()
    await client.initialize()


async def close_client():
    """Close the global client."""
    global _client
    if _client:
        await _client.close()
        _client = None
