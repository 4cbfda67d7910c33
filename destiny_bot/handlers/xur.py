from destiny_bot.constants import CommandConstants
from destiny_bot.handlers.base import CommandHandler, RequestContext, TextResponse
from destiny_bot.services.xur import XurInventoryService
from destiny_bot.utils.logger import setup_logger
from destiny_bot.views.xur import render_item_list

logger = setup_logger(__name__)


class XurHandler(CommandHandler):
    """Handles requests for Xur inventory."""
    
    def __init__(self):
        self.inventory_service = XurInventoryService()
    
    async def handle(self, context: RequestContext) -> TextResponse:
        if context.wants_help:
            logger.info(f"@{context.user_name} needs help")
            return TextResponse(CommandConstants.XUR_HELP, private=True)
        
        items = await self.inventory_service.get_item_names(context.client, context.database)
        if items is None:
            return TextResponse(CommandConstants.XUR_UNAVAILABLE)
        return TextResponse(render_item_list(items))
