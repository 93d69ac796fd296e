"""Player-related Rolimons endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from roli.models import PlayerProfile, PlayerSearchResponse, PlayerSearchResult

if TYPE_CHECKING:
    from roli.client import RoliClient

logger = logging.getLogger(__name__)

PLAYER_SEARCH_PATH = "/api/playersearch"
PLAYER_PROFILE_PATH = "/playerapi/player/{player_id}"


class PlayersEndpoints:
    """Handles all player-related endpoints.

    Example:
        ```python
        client = RoliClient()
        results = await client.players.player_search("Linkmon99")
        profile = await client.players.player_profile(results[0].user_id)
        print(profile.item_count)
        ```
    """

    def __init__(self, client: RoliClient):
        """Initialize player endpoints with the Rolimons client.

        Args:
            client: Rolimons client instance for HTTP operations
        """
        self._client = client

    async def player_search(self, username: str) -> list[PlayerSearchResult]:
        """Search for players by username.

        Args:
            username: Full or partial Roblox username

        Returns:
            List of matching players
        """
        response = await self._client.request(
            "GET", PLAYER_SEARCH_PATH, params={"searchstring": username}
        )
        raw = self._client.decode(PlayerSearchResponse, response)

        logger.debug(
            "Player search for %r returned %d results", username, len(raw.players)
        )
        return raw.players

    async def player_profile(self, player_id: int) -> PlayerProfile:
        """Get the profile of a player, including every uaid they own.

        Args:
            player_id: Roblox user id

        Returns:
            Validated PlayerProfile model
        """
        response = await self._client.request(
            "GET", PLAYER_PROFILE_PATH.format(player_id=player_id)
        )
        profile = self._client.decode(PlayerProfile, response)

        logger.debug(
            "Player %d owns %d items (%d distinct)",
            player_id,
            profile.item_count,
            len(profile.inventory),
        )
        return profile
