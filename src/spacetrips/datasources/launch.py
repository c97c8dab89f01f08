"""
Launch catalog backed by the SpaceX REST API.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable
from typing import Any

import httpx

from ..config import settings
from ..logging import get_logger
from ..pagination import DEFAULT_PAGE_SIZE, LaunchPage, paginate_launches
from .models import Launch, Mission, Rocket

logger = get_logger(__name__)


def _launch_key(launch_id: Any) -> int | None:
    """Normalize a launch id (GraphQL IDs arrive as strings) to the flight number."""
    try:
        return int(launch_id)
    except (TypeError, ValueError):
        return None


class LaunchAPI:
    """
    Read-only access to launches.

    The full launch list is fetched once per instance and served from memory
    afterwards. Concurrent first calls wait on the same fetch instead of
    issuing their own request.
    """

    def __init__(self, client: httpx.AsyncClient, base_url: str | None = None):
        self.client = client
        self.base_url = base_url or settings.launch_api_url
        self._launches: list[Launch] | None = None
        self._lock = asyncio.Lock()

    async def get_all_launches(self) -> list[Launch]:
        """All launches in provider order (oldest first)."""
        if self._launches is not None:
            return self._launches

        async with self._lock:
            if self._launches is not None:
                return self._launches
            launches = await self._fetch_launches()
            if launches is None:
                return []
            self._launches = launches
        return launches

    async def get_launch_by_id(self, launch_id: Any) -> Launch | None:
        key = _launch_key(launch_id)
        if key is None:
            return None
        for launch in await self.get_all_launches():
            if launch.id == key:
                return launch
        return None

    async def get_launches_by_ids(self, launch_ids: Iterable[Any]) -> list[Launch]:
        """Launches in the order requested; unknown ids are left out."""
        by_id = {launch.id: launch for launch in await self.get_all_launches()}
        launches = []
        for launch_id in launch_ids:
            launch = by_id.get(_launch_key(launch_id))
            if launch is not None:
                launches.append(launch)
        return launches

    async def get_paginated_launches(
        self, after: str | None = None, page_size: int | None = DEFAULT_PAGE_SIZE
    ) -> LaunchPage:
        """Page through launches newest first (the provider lists them oldest first)."""
        launches = list(reversed(await self.get_all_launches()))
        return paginate_launches(launches, after=after, page_size=page_size)

    async def _fetch_launches(self) -> list[Launch] | None:
        """Fetch and reduce the launch list; None when the payload is not a list."""
        url = f"{self.base_url.rstrip('/')}/launches"
        try:
            response = await self.client.get(url)
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPError as e:
            logger.error("Failed to fetch launches", url=url, error=str(e))
            raise

        if not isinstance(payload, list):
            logger.warning("Unexpected launch payload", url=url, payload_type=type(payload).__name__)
            return None

        launches = [self.launch_reducer(raw) for raw in payload]
        logger.info("Fetched launches", count=len(launches))
        return launches

    @staticmethod
    def launch_reducer(raw: dict[str, Any]) -> Launch:
        """Normalize a raw provider record into a Launch."""
        links = raw.get("links") or {}
        site = raw.get("launch_site") or {}
        rocket = raw.get("rocket") or {}
        flight_number = raw.get("flight_number") or 0
        launch_date = raw.get("launch_date_unix")

        return Launch(
            id=flight_number,
            cursor=str(launch_date) if launch_date is not None else str(flight_number),
            site=site.get("site_name"),
            mission=Mission(
                name=raw.get("mission_name"),
                mission_patch_small=links.get("mission_patch_small"),
                mission_patch_large=links.get("mission_patch"),
            ),
            rocket=Rocket(
                id=rocket.get("rocket_id"),
                name=rocket.get("rocket_name"),
                type=rocket.get("rocket_type"),
            ),
        )
