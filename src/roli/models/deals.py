"""Rolimons deals page activity models."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, field_validator

from .base import ResponseEnvelope, RoliModel, code_to_int, unpack_codes

PRICE_UPDATE = 0
RAP_UPDATE = 1

_ACTIVITY_FIELDS = ("timestamp", "activity_type", "item_id", "amount")


class PriceUpdate(RoliModel):
    """A new best price listed for an item."""

    activity_type: Literal[0] = PRICE_UPDATE
    timestamp: int = Field(..., description="Unix timestamp of the update")
    item_id: int = Field(..., ge=0, description="Roblox asset id of the item")
    price: int = Field(..., description="New lowest resale price")


class RapUpdate(RoliModel):
    """A change in an item's recent average price."""

    activity_type: Literal[1] = RAP_UPDATE
    timestamp: int = Field(..., description="Unix timestamp of the update")
    item_id: int = Field(..., ge=0, description="Roblox asset id of the item")
    rap: int = Field(..., description="New recent average price")


Activity = Annotated[PriceUpdate | RapUpdate, Field(discriminator="activity_type")]


def _unpack_activity(codes: Any) -> dict[str, Any]:
    values = unpack_codes(codes, _ACTIVITY_FIELDS)
    values["activity_type"] = code_to_int(values["activity_type"])
    amount_field = "price" if values["activity_type"] == PRICE_UPDATE else "rap"
    values[amount_field] = values.pop("amount")
    return values


class DealsActivityResponse(ResponseEnvelope):
    """Raw response of ``/api/activity2``.

    Each activity is ``[timestamp, activity_type, item_id, amount]``.
    """

    activities: list[Activity]

    @field_validator("activities", mode="before")
    @classmethod
    def _unpack_activities(cls, v: Any) -> Any:
        if not isinstance(v, list):
            return v
        return [_unpack_activity(codes) for codes in v]
