"""
Identity lookup: maps a free-text gamertag to a platform-qualified Destiny id.
"""

from typing import Optional

from destiny_bot.data_models.players import PlayerLookup
from destiny_bot.utils.logger import setup_logger

logger = setup_logger(__name__)

# Platforms are searched in this order; the first hit wins
SEARCH_PLATFORMS = (True, False)


class IdentityResolver:
    """Resolves gamertags against the game-state service."""
    
    def __init__(self, client):
        self.client = client
    
    async def resolve(self, requester: str, query: Optional[str] = None) -> PlayerLookup:
        """Look up ``query``, or the requester's own name when no query is given.
        
        A miss is reported through ``PlayerLookup.was_found``; it never raises.
        """
        gamertag = (query or '').strip() or requester
        for on_xbox in SEARCH_PLATFORMS:
            destiny_id = await self.client.get_destiny_id(gamertag, on_xbox)
            if destiny_id is not None:
                logger.debug(f"Resolved {gamertag} to {destiny_id}")
                return PlayerLookup(gamertag, destiny_id)
        return PlayerLookup(gamertag)
