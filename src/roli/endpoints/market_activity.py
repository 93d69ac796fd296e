"""Market activity Rolimons endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roli.models import RecentSalesResponse, Sale

if TYPE_CHECKING:
    from roli.client import RoliClient

logger = logging.getLogger(__name__)

RECENT_SALES_PATH = "/api/activity"


class MarketActivityEndpoints:
    """Handles the endpoints behind the Rolimons market activity page.

    Example:
        ```python
        client = RoliClient()
        for sale in await client.market_activity.recent_sales():
            print(sale.item_id, sale.sale_price)
        ```
    """

    def __init__(self, client: RoliClient):
        """Initialize market activity endpoints with the Rolimons client.

        Args:
            client: Rolimons client instance for HTTP operations
        """
        self._client = client

    async def recent_sales(self) -> list[Sale]:
        """Get the most recent limited item sales.

        The Rolimons site polls this roughly every 3 seconds.

        Returns:
            List of validated Sale models
        """
        response = await self._client.request("GET", RECENT_SALES_PATH)
        raw = self._client.decode(RecentSalesResponse, response)

        logger.debug("Retrieved %d recent sales", len(raw.activities))
        return raw.activities
