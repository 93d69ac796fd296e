"""Rolimons game list models."""

from __future__ import annotations

from typing import Any

from pydantic import Field, field_validator, model_validator

from .base import ResponseEnvelope, RoliModel, unpack_codes


class Game(RoliModel):
    """A Roblox game tracked by Rolimons, without detailed statistics."""

    id: int = Field(..., ge=0, description="Roblox place id")
    name: str = Field(..., description="Game name")
    players_active: int = Field(..., ge=0, description="Players currently in game")
    thumbnail_url: str = Field(..., description="Thumbnail url on the Roblox CDN")

    @model_validator(mode="before")
    @classmethod
    def _from_codes(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return data
        return unpack_codes(data, ("id", "name", "players_active", "thumbnail_url"))


class GamesListResponse(ResponseEnvelope):
    """Raw response of ``/gameapi/gamelist``.

    ``games`` maps the place id to ``[name, players_active, thumbnail_url]``.
    """

    game_count: int
    games: list[Game]

    @field_validator("games", mode="before")
    @classmethod
    def _attach_game_ids(cls, v: Any) -> Any:
        if not isinstance(v, dict):
            return v
        return [
            [game_id, *codes] if isinstance(codes, list) else codes
            for game_id, codes in v.items()
        ]
