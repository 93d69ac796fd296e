"""Rolimons player models."""

from __future__ import annotations

from typing import Any

from pydantic import ConfigDict, Field, field_validator, model_validator

from .base import ResponseEnvelope, RoliModel, unpack_codes


class PlayerSearchResult(RoliModel):
    """A player found through Rolimons player search.

    Only enough to identify the player; the wire array is
    ``[user_id, username]`` with an optional unused third element.
    """

    user_id: int = Field(..., ge=0, description="Roblox user id")
    username: str = Field(..., description="Roblox username")

    @model_validator(mode="before")
    @classmethod
    def _from_codes(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return data
        return unpack_codes(data, ("user_id", "username"), allowed_lengths=(2, 3))


class PlayerSearchResponse(ResponseEnvelope):
    """Raw response of ``/api/playersearch``."""

    result_count: int
    players: list[PlayerSearchResult]


class InventoryItem(RoliModel):
    """All copies of one item a player owns."""

    item_id: int = Field(..., ge=0, description="Roblox asset id of the item")
    uaids: list[int] = Field(default_factory=list, description="Unique asset ids")


class PlayerProfile(RoliModel):
    """Profile of a player from ``/playerapi/player/{player_id}``.

    Holds account flags and the full inventory, with every uaid of each
    item the player owns.
    """

    model_config = ConfigDict(populate_by_name=True)

    player_id: int = Field(..., ge=0, alias="playerId")
    terminated: bool = Field(False, alias="playerTerminated")
    privacy_enabled: bool = Field(False, alias="playerPrivacyEnabled")
    verified: bool = Field(False, alias="playerVerified")
    online: bool = Field(False, alias="isOnline")
    premium: bool = Field(False, alias="premium")
    inventory: list[InventoryItem] = Field(default_factory=list, alias="playerAssets")
    holds: list[int] = Field(
        default_factory=list, description="uaids currently on trade hold"
    )

    @field_validator("inventory", mode="before")
    @classmethod
    def _unpack_inventory(cls, v: Any) -> Any:
        if v is None:
            return []
        if not isinstance(v, dict):
            return v
        return [{"item_id": item_id, "uaids": uaids} for item_id, uaids in v.items()]

    @field_validator("holds", mode="before")
    @classmethod
    def _null_holds(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def item_count(self) -> int:
        """Number of items owned, counting every copy."""
        return sum(len(item.uaids) for item in self.inventory)
