"""ESPN public site API client.

Handles raw HTTP requests to ESPN endpoints. No auth, no data
transformation: fetch and return JSON.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sports_hub.ingestion.providers.base.client import BaseHttpClient

logger = logging.getLogger(__name__)

ESPN_BASE_URL = "https://site.api.espn.com/apis"

Json = dict[str, Any]


@dataclass
class EspnClient:
    http: BaseHttpClient

    async def _get(self, path: str) -> Json:
        logger.debug("[ESPN] GET %s", path)
        return await self.http.get_json(path)

    async def standings(self, sport: str, code: str) -> Json:
        return await self._get(f"v2/sports/{sport}/{code}/standings")

    async def scoreboard(self, sport: str, code: str) -> Json:
        return await self._get(f"site/v2/sports/{sport}/{code}/scoreboard")

    async def leaders(self, sport: str, code: str) -> Json:
        return await self._get(f"site/v2/sports/{sport}/{code}/leaders")
