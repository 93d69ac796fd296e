"""Group-related Rolimons endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roli.models import GroupSearchResponse, GroupSearchResult

if TYPE_CHECKING:
    from roli.client import RoliClient

logger = logging.getLogger(__name__)

GROUP_SEARCH_PATH = "/groupapi/search"


class GroupsEndpoints:
    """Handles all group-related endpoints."""

    def __init__(self, client: RoliClient):
        self._client = client

    async def group_search(self, group_name: str) -> list[GroupSearchResult]:
        """Search for groups tracked by Rolimons.

        The name need not match exactly; Rolimons returns every close match.

        Args:
            group_name: Full or partial group name

        Returns:
            List of matching groups
        """
        response = await self._client.request(
            "GET", GROUP_SEARCH_PATH, params={"searchstring": group_name}
        )
        raw = self._client.decode(GroupSearchResponse, response)

        logger.debug(
            "Group search for %r returned %d results", group_name, len(raw.groups)
        )
        return raw.groups
