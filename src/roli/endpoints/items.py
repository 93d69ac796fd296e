"""Item-related Rolimons endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roli.models import AllItemDetailsResponse, ItemDetails

if TYPE_CHECKING:
    from roli.client import RoliClient

logger = logging.getLogger(__name__)

ITEM_DETAILS_PATH = "/itemapi/itemdetails"


class ItemsEndpoints:
    """Handles all item-related endpoints.

    Example:
        ```python
        client = RoliClient()
        items = await client.items.all_item_details()
        print(items[1028606].value)
        ```
    """

    def __init__(self, client: RoliClient):
        """Initialize item endpoints with the Rolimons client.

        Args:
            client: Rolimons client instance for HTTP operations
        """
        self._client = client

    async def all_item_details(self) -> dict[int, ItemDetails]:
        """Get details of every limited item tracked by Rolimons.

        This is a heavy endpoint. Rolimons may ban IP addresses that call
        it too often, so cache the result.

        Returns:
            Mapping of item id to validated ItemDetails

        Raises:
            RoliError: A subclass describing the failure
        """
        response = await self._client.request("GET", ITEM_DETAILS_PATH)
        raw = self._client.decode(AllItemDetailsResponse, response)

        logger.debug(
            "Retrieved %d item details (reported count %d)",
            len(raw.items),
            raw.item_count,
        )
        return raw.items
