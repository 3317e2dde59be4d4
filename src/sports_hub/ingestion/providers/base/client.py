from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from .errors import ParseError, RateLimitedError, TransportError

Json = dict[str, Any]


@dataclass
class BaseHttpClient:
    """
    Source-agnostic async HTTP client wrapper.

    - Uses a single underlying httpx.AsyncClient for connection pooling.
    - Provides consistent error handling.
    - Source-specific clients wrap this and add auth / convenience methods.
    """

    base_url: str
    timeout_s: float = 30.0
    connect_timeout_s: float = 10.0
    headers: Mapping[str, str] = field(default_factory=dict)

    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            base_url=self.base_url.rstrip("/") + "/",
            timeout=httpx.Timeout(self.timeout_s, connect=self.connect_timeout_s),
            headers=dict(self.headers),
            transport=self.transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> BaseHttpClient:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    async def request_json_value(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """
        Perform an HTTP request and return the parsed JSON value.
        Raises TransportError (including RateLimitedError) on transport issues / non-2xx,
        ParseError when the body is not JSON.
        """
        try:
            resp = await self._client.request(
                method=method,
                url=path.lstrip("/"),
                params=params,
                headers=headers,
            )
        except httpx.TransportError as e:
            raise TransportError(f"{type(e).__name__}: {e}") from e

        if resp.status_code == 429:
            raise RateLimitedError("Source rate limited the request (HTTP 429).")

        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(
                f"HTTP {resp.status_code} for {method} {resp.request.url}"
            ) from e

        try:
            return resp.json()
        except ValueError as e:
            raise ParseError("Response was not valid JSON.", {"url": str(resp.request.url)}) from e

    async def get_json(
        self,
        path: str,
        *,
        params: Mapping[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Json:
        data = await self.request_json_value("GET", path, params=params, headers=headers)
        if not isinstance(data, dict):
            raise ParseError(f"Expected JSON object, got {type(data).__name__}", {"path": path})
        return data
