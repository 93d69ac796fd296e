"""Game-related Rolimons endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roli.models import Game, GamesListResponse

if TYPE_CHECKING:
    from roli.client import RoliClient

logger = logging.getLogger(__name__)

GAMES_LIST_PATH = "/gameapi/gamelist"


class GamesEndpoints:
    """Handles all game-related endpoints."""

    def __init__(self, client: RoliClient):
        self._client = client

    async def games_list(self) -> list[Game]:
        """Get every game Rolimons tracks.

        This is the only endpoint with game information, so it returns the
        whole list. Like ``all_item_details`` it is heavy: cache the result
        and call it sparingly.

        Returns:
            List of validated Game models
        """
        response = await self._client.request("GET", GAMES_LIST_PATH)
        raw = self._client.decode(GamesListResponse, response)

        logger.debug(
            "Retrieved %d games (reported count %d)", len(raw.games), raw.game_count
        )
        return raw.games
