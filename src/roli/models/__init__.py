"""Typed Rolimons response and request models."""

from .deals import Activity, DealsActivityResponse, PriceUpdate, RapUpdate
from .games import Game, GamesListResponse
from .groups import GroupSearchResponse, GroupSearchResult
from .items import AllItemDetailsResponse, Demand, ItemDetails, Trend
from .players import (
    InventoryItem,
    PlayerProfile,
    PlayerSearchResponse,
    PlayerSearchResult,
)
from .sales import RecentSalesResponse, Sale, calculate_sale_price
from .trade_ads import (
    CreateTradeAdParams,
    RecentTradeAdsResponse,
    RequestTag,
    TradeAd,
    TradeOffer,
    TradeRequest,
)

__all__ = [
    "Activity",
    "AllItemDetailsResponse",
    "CreateTradeAdParams",
    "DealsActivityResponse",
    "Demand",
    "Game",
    "GamesListResponse",
    "GroupSearchResponse",
    "GroupSearchResult",
    "InventoryItem",
    "ItemDetails",
    "PlayerProfile",
    "PlayerSearchResponse",
    "PlayerSearchResult",
    "PriceUpdate",
    "RapUpdate",
    "RecentSalesResponse",
    "RecentTradeAdsResponse",
    "RequestTag",
    "Sale",
    "TradeAd",
    "TradeOffer",
    "TradeRequest",
    "Trend",
    "calculate_sale_price",
]
