from typing import Optional

from destiny_bot.data_models.items import Loadout
from destiny_bot.data_models.players import DestinyId
from destiny_bot.utils.logger import setup_logger

logger = setup_logger(__name__)


class InventoryEnricher:
    """Finds what a player had equipped on their last played character."""
    
    def __init__(self, client):
        self.client = client
    
    async def get_last_loadout(self, destiny_id: DestinyId) -> Optional[Loadout]:
        """Returns the loadout last used by the given player, or None if it could
        not be determined."""
        character = await self.client.get_last_played_character(destiny_id)
        if character is None:
            logger.warning(f"Unable to locate character for {destiny_id}")
            return None
        loadout = await self.client.get_inventory(destiny_id, character.id)
        if loadout is None:
            logger.warning(f"Unable to determine subclass for character {character.id} of {destiny_id}")
            return None
        return loadout
