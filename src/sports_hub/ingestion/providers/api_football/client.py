from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from sports_hub.ingestion.providers.base.client import BaseHttpClient
from sports_hub.ingestion.providers.base.errors import (
    EmptyResultError,
    ParseError,
    UpstreamResponseError,
)

logger = logging.getLogger(__name__)

API_FOOTBALL_HOST = "v3.football.api-sports.io"


@dataclass
class ApiFootballClient:
    """Thin api-football client; one HTTP request per call, no retries.

    Every request is metered against the daily quota by the caller, so a
    retry would silently double the spend.
    """

    http: BaseHttpClient
    api_key: str
    host: str = API_FOOTBALL_HOST

    def _headers(self) -> dict[str, str]:
        return {"x-rapidapi-host": self.host, "x-rapidapi-key": self.api_key}

    async def get(self, path: str, params: Mapping[str, Any] | None = None) -> dict[str, Any]:
        logger.debug("[API-FOOTBALL] GET %s %s", path, dict(params or {}))
        data = await self.http.get_json(path, params=params, headers=self._headers())

        # `errors` is [] on success and a dict or list of messages otherwise.
        errors = data.get("errors") or []
        if errors:
            raise UpstreamResponseError(f"api-football returned errors: {errors}")

        return data

    async def get_response_items(
        self, path: str, params: Mapping[str, Any] | None = None
    ) -> list[dict[str, Any]]:
        payload = await self.get(path, params=params)
        items = payload.get("response")
        if items is None:
            raise EmptyResultError(f"api-football {path}: no 'response' in payload")
        if not isinstance(items, list):
            raise ParseError(
                f"Expected 'response' list, got: {type(items).__name__}", {"path": path}
            )
        items = [i for i in items if isinstance(i, dict)]
        if not items:
            raise EmptyResultError(f"api-football {path}: empty response")
        return items
