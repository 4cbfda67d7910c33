import asyncio
from typing import List, Optional

from destiny_bot.data_models.items import ItemStub
from destiny_bot.database.catalog import CatalogConnection
from destiny_bot.utils.logger import setup_logger

logger = setup_logger(__name__)


class XurInventoryService:
    """Lists the names of the items Xur is selling."""

    async def get_item_names(self, client, catalog) -> Optional[List[str]]:
        """Return item names in stock order, or None when Xur is away.

        Items missing from the catalog are left out.
        """
        inventory = await client.get_xur_inventory()
        if not inventory:
            logger.info("Xur is wandering...")
            return None

        async with catalog.session() as connection:
            results = await asyncio.gather(
                *(self._look_up_name(connection, item) for item in inventory),
                return_exceptions=True
            )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        items = [name for name in results if name is not None]
        logger.info("Items:")
        for item in items:
            logger.info(f" - {item}")
        return items

    @staticmethod
    async def _look_up_name(connection: CatalogConnection, item: ItemStub) -> Optional[str]:
        if item.is_armor:
            resolved = await connection.get_armor_piece(item.id)
        else:
            resolved = await connection.get_weapon(item.id)
        return resolved.name if resolved else None
