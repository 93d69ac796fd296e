"""Rolimons trade ad models."""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import Field, model_validator

from .base import ResponseEnvelope, RoliModel, unpack_codes

MAX_OFFER_ITEMS = 4
MAX_REQUEST_ENTRIES = 4

_TRADE_AD_FIELDS = ("trade_id", "timestamp", "user_id", "username", "offer", "request")


class RequestTag(StrEnum):
    """Tags that can be requested in place of items."""

    ANY = "any"
    DEMAND = "demand"
    RARES = "rares"
    ROBUX = "robux"
    UPGRADE = "upgrade"
    DOWNGRADE = "downgrade"
    RAP = "rap"
    WISHLIST = "wishlist"
    PROJECTEDS = "projecteds"
    ADDS = "adds"


class TradeOffer(RoliModel):
    """The side of a trade ad the poster gives away."""

    items: list[int] = Field(default_factory=list, description="Offered item ids")
    robux: int | None = Field(None, ge=0, description="Offered robux, if any")


class TradeRequest(RoliModel):
    """The side of a trade ad the poster asks for."""

    items: list[int] = Field(default_factory=list, description="Requested item ids")
    tags: list[RequestTag] = Field(default_factory=list, description="Requested tags")


class TradeAd(RoliModel):
    """A trade ad from the Rolimons trade ads page.

    Wire form: ``[trade_id, timestamp, user_id, username, offer, request]``.
    """

    trade_id: int = Field(..., description="Rolimons trade ad id")
    timestamp: int = Field(..., description="Unix timestamp the ad was posted")
    user_id: int = Field(..., description="Roblox user id of the poster")
    username: str = Field(..., description="Roblox username of the poster")
    offer: TradeOffer
    request: TradeRequest

    @model_validator(mode="before")
    @classmethod
    def _from_codes(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return data
        return unpack_codes(data, _TRADE_AD_FIELDS)


class RecentTradeAdsResponse(ResponseEnvelope):
    """Raw response of ``/tradeadsapi/getrecentads``."""

    trade_ad_count: int
    trade_ads: list[TradeAd]


class CreateTradeAdParams(RoliModel):
    """Details of the trade ad to post.

    Example:
        ```python
        params = CreateTradeAdParams(
            player_id=123456789,
            offer_item_ids=[6803423284, 7212273948],
            request_item_ids=[259425946],
            request_tags=[RequestTag.ANY],
        )
        ```
    """

    player_id: int = Field(..., gt=0, description="Roblox user id of the poster")
    offer_item_ids: list[int] = Field(
        ...,
        min_length=1,
        max_length=MAX_OFFER_ITEMS,
        description="Item ids being offered",
    )
    request_item_ids: list[int] = Field(
        default_factory=list, description="Item ids being requested"
    )
    request_tags: list[RequestTag] = Field(
        default_factory=list, description="Tags such as 'any' or 'projecteds'"
    )

    @model_validator(mode="after")
    def _check_request_side(self) -> CreateTradeAdParams:
        requested = len(self.request_item_ids) + len(self.request_tags)
        if requested == 0:
            raise ValueError("at least one request item id or request tag is required")
        if requested > MAX_REQUEST_ENTRIES:
            raise ValueError(
                f"at most {MAX_REQUEST_ENTRIES} request item ids and tags combined, "
                f"got {requested}"
            )
        return self
