"""Trade ad Rolimons endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roli.models import CreateTradeAdParams, RecentTradeAdsResponse, TradeAd
from roli.utils.exceptions import (
    CooldownNotExpiredError,
    InvalidItemIdError,
    RateLimitExceededError,
    RoliVerificationInvalidOrExpiredError,
    TooManyRequestsError,
)

if TYPE_CHECKING:
    from roli.client import ErrorCodeTable, RoliClient, StatusErrorTable

logger = logging.getLogger(__name__)

RECENT_TRADE_ADS_PATH = "/tradeadsapi/getrecentads"
CREATE_TRADE_AD_PATH = "/tradeapi/create"

CREATE_TRADE_AD_STATUS_ERRORS: StatusErrorTable = {
    400: CooldownNotExpiredError,
    422: RoliVerificationInvalidOrExpiredError,
    429: TooManyRequestsError,
}

# Codes (or messages) Rolimons puts in a 2xx ``success: false`` body.
CREATE_TRADE_AD_ERROR_CODES: ErrorCodeTable = {
    "invalid_item_id": InvalidItemIdError,
    "invalid_item_ids": InvalidItemIdError,
    "Invalid item id": InvalidItemIdError,
    "Invalid item ids": InvalidItemIdError,
    "rate_limit_exceeded": RateLimitExceededError,
    "ad_limit_reached": RateLimitExceededError,
    "Trade ad limit reached": RateLimitExceededError,
}


class TradeAdsEndpoints:
    """Handles all trade ad endpoints.

    Example:
        ```python
        client = RoliClient(roli_verification="...")
        await client.trade_ads.create_trade_ad(
            CreateTradeAdParams(
                player_id=123456789,
                offer_item_ids=[564449640],
                request_tags=[RequestTag.ANY],
            )
        )
        ```
    """

    def __init__(self, client: RoliClient):
        """Initialize trade ad endpoints with the Rolimons client.

        Args:
            client: Rolimons client instance for HTTP operations
        """
        self._client = client

    async def recent_trade_ads(self) -> list[TradeAd]:
        """Get the most recently posted trade ads.

        Returns:
            List of validated TradeAd models, newest first as sent by Rolimons
        """
        response = await self._client.request("GET", RECENT_TRADE_ADS_PATH)
        raw = self._client.decode(RecentTradeAdsResponse, response)

        logger.debug(
            "Retrieved %d trade ads (reported count %d)",
            len(raw.trade_ads),
            raw.trade_ad_count,
        )
        return raw.trade_ads

    async def create_trade_ad(self, params: CreateTradeAdParams) -> None:
        """Post a trade ad.

        Requires authentication. Rolimons allows 55 ads per 24 hours with a
        15 minute cooldown between ads.

        Args:
            params: Validated details of the ad

        Raises:
            RoliVerificationNotSetError: If the client has no token
            RoliVerificationContainsInvalidCharactersError: If the token
                cannot be sent as a cookie
            CooldownNotExpiredError: If the previous ad was posted too recently
            RoliVerificationInvalidOrExpiredError: If Rolimons rejects the token
            InvalidItemIdError: If Rolimons rejects one of the item ids
        """
        headers = {
            "Connection": "keep-alive",
            "Content-Type": "application/json;charset=utf-8",
            **self._client.auth_headers(),
        }

        response = await self._client.request(
            "POST",
            CREATE_TRADE_AD_PATH,
            headers=headers,
            json_body=params.model_dump(mode="json"),
            status_errors=CREATE_TRADE_AD_STATUS_ERRORS,
        )

        # The created status usually comes with an empty or non-JSON body
        if response.content:
            try:
                body = response.json()
            except ValueError:
                body = None
            self._client.check_success(body, CREATE_TRADE_AD_ERROR_CODES)

        logger.info("Created trade ad for player %d", params.player_id)
