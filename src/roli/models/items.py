"""Rolimons item details models."""

from __future__ import annotations

from enum import IntEnum
from typing import Any

from pydantic import Field, field_validator, model_validator

from .base import ResponseEnvelope, RoliModel, code_to_flag, code_to_int, unpack_codes

# Wire order of an item entry, after the item id taken from the dict key.
_ITEM_FIELDS = (
    "item_id",
    "item_name",
    "acronym",
    "rap",
    "raw_value",
    "value",
    "demand",
    "trend",
    "projected",
    "hyped",
    "rare",
)


class Demand(IntEnum):
    """Demand rating assigned to an item by Rolimons."""

    UNASSIGNED = -1
    TERRIBLE = 0
    LOW = 1
    NORMAL = 2
    HIGH = 3
    AMAZING = 4


class Trend(IntEnum):
    """Price trend assigned to an item by Rolimons."""

    UNASSIGNED = -1
    LOWERING = 0
    UNSTABLE = 1
    STABLE = 2
    RAISING = 3
    FLUCTUATING = 4


class ItemDetails(RoliModel):
    """Details of a limited item, as shown on its Rolimons page.

    Built from the positional item array ``[name, acronym, rap, value,
    default_value, demand, trend, projected, hyped, rare]`` prefixed with
    the item id.
    """

    item_id: int = Field(..., ge=0, description="Roblox asset id of the item")
    item_name: str = Field(..., description="Item name")
    acronym: str | None = Field(None, description="Common acronym, if any")
    rap: int = Field(..., description="Recent average price")
    valued: bool = Field(..., description="Whether Rolimons assigned a value")
    value: int = Field(..., description="Value, or RAP when the item is not valued")
    demand: Demand = Field(Demand.UNASSIGNED, description="Demand rating")
    trend: Trend = Field(Trend.UNASSIGNED, description="Price trend")
    projected: bool = Field(False, description="RAP is artificially inflated")
    hyped: bool = Field(False, description="Item is hyped")
    rare: bool = Field(False, description="Item has few copies")

    @model_validator(mode="before")
    @classmethod
    def _from_codes(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return data

        values = unpack_codes(data, _ITEM_FIELDS)
        values["valued"] = code_to_int(values.pop("raw_value")) != -1
        if values["acronym"] == "":
            values["acronym"] = None
        for name in ("demand", "trend"):
            values[name] = code_to_int(values[name])
        for name in ("projected", "hyped", "rare"):
            values[name] = code_to_flag(values[name])
        return values


class AllItemDetailsResponse(ResponseEnvelope):
    """Raw response of ``/itemapi/itemdetails``."""

    item_count: int
    items: dict[int, ItemDetails]

    @field_validator("items", mode="before")
    @classmethod
    def _attach_item_ids(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return v
        return {
            key: [key, *codes] if isinstance(codes, list) else codes
            for key, codes in v.items()
        }
