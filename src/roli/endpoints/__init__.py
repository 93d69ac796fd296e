"""Rolimons endpoint classes for organized API access."""

from .deals import DealsEndpoints
from .games import GamesEndpoints
from .groups import GroupsEndpoints
from .items import ItemsEndpoints
from .market_activity import MarketActivityEndpoints
from .players import PlayersEndpoints
from .trade_ads import TradeAdsEndpoints

__all__ = [
    "DealsEndpoints",
    "GamesEndpoints",
    "GroupsEndpoints",
    "ItemsEndpoints",
    "MarketActivityEndpoints",
    "PlayersEndpoints",
    "TradeAdsEndpoints",
]
