"""Deals page Rolimons endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roli.models import DealsActivityResponse, PriceUpdate, RapUpdate

if TYPE_CHECKING:
    from roli.client import RoliClient

logger = logging.getLogger(__name__)

DEALS_ACTIVITY_PATH = "/api/activity2"


class DealsEndpoints:
    """Handles the endpoints behind the Rolimons deals page."""

    def __init__(self, client: RoliClient):
        self._client = client

    async def deals_activity(self) -> list[PriceUpdate | RapUpdate]:
        """Get the latest chunk of price and RAP updates.

        Each call only returns recent activity, so following deals over
        time needs a cache on the caller's side.

        Returns:
            Price and RAP updates in the order Rolimons sent them
        """
        response = await self._client.request("GET", DEALS_ACTIVITY_PATH)
        raw = self._client.decode(DealsActivityResponse, response)

        logger.debug("Retrieved %d deals activities", len(raw.activities))
        return raw.activities
