"""A low level async wrapper for the Rolimons.com API.

Rolimons limits how often its API may be called, so this package does no
caching: every client method makes exactly one request and callers keep
their own cache.

Quick start:
    ```python
    import asyncio

    from roli import RoliClient


    async def main() -> None:
        async with RoliClient() as client:
            items = await client.items.all_item_details()
            print(f"Item amount: {len(items)}")


    asyncio.run(main())
    ```
"""

from .client import RoliClient
from .models import (
    CreateTradeAdParams,
    Demand,
    Game,
    GroupSearchResult,
    InventoryItem,
    ItemDetails,
    PlayerProfile,
    PlayerSearchResult,
    PriceUpdate,
    RapUpdate,
    RequestTag,
    Sale,
    TradeAd,
    TradeOffer,
    TradeRequest,
    Trend,
)
from .utils.exceptions import (
    ConfigurationError,
    CooldownNotExpiredError,
    HTTPStatusError,
    InternalServerError,
    InvalidItemIdError,
    MalformedResponseError,
    NetworkError,
    RateLimitExceededError,
    RequestUnsuccessfulError,
    RoliError,
    RoliVerificationContainsInvalidCharactersError,
    RoliVerificationError,
    RoliVerificationInvalidOrExpiredError,
    RoliVerificationNotSetError,
    TooManyRequestsError,
    UnidentifiedStatusCodeError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "CooldownNotExpiredError",
    "CreateTradeAdParams",
    "Demand",
    "Game",
    "GroupSearchResult",
    "HTTPStatusError",
    "InternalServerError",
    "InvalidItemIdError",
    "InventoryItem",
    "ItemDetails",
    "MalformedResponseError",
    "NetworkError",
    "PlayerProfile",
    "PlayerSearchResult",
    "PriceUpdate",
    "RapUpdate",
    "RateLimitExceededError",
    "RequestTag",
    "RequestUnsuccessfulError",
    "RoliClient",
    "RoliError",
    "RoliVerificationContainsInvalidCharactersError",
    "RoliVerificationError",
    "RoliVerificationInvalidOrExpiredError",
    "RoliVerificationNotSetError",
    "Sale",
    "TooManyRequestsError",
    "TradeAd",
    "TradeOffer",
    "TradeRequest",
    "Trend",
    "UnidentifiedStatusCodeError",
]
