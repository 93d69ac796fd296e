"""Rolimons group search models."""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from .base import ResponseEnvelope, RoliModel, unpack_codes

# [id, name, timestamp, unknown, unknown, member_count, thumbnail_url]
_GROUP_FIELDS = ("id", "name", None, None, None, "member_count", "thumbnail_url")


class GroupSearchResult(RoliModel):
    """A Roblox group found through Rolimons group search."""

    id: int = Field(..., ge=0, description="Roblox group id")
    name: str = Field(..., description="Group name")
    member_count: int = Field(..., ge=0, description="Number of members")
    thumbnail_url: str = Field(..., description="Thumbnail url on the Roblox CDN")

    @model_validator(mode="before")
    @classmethod
    def _from_codes(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return data
        return unpack_codes(data, _GROUP_FIELDS)


class GroupSearchResponse(ResponseEnvelope):
    """Raw response of ``/groupapi/search``."""

    result_count: int
    groups: list[GroupSearchResult]
