"""
Base command handler for the Destiny bot.

Handlers receive a typed request context built once per incoming command and
always answer with plain text: help, a private "not found" notice or a
public report.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from destiny_bot.constants import CommandConstants
from destiny_bot.utils.exceptions import BotException
from destiny_bot.utils.logger import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class RequestContext:
    """Everything a handler needs for a single command invocation."""
    user_name: str
    text: str
    client: Any  # game-state service (BungieClient)
    database: Any  # item catalog (ItemCatalog)

    @property
    def wants_help(self) -> bool:
        return self.text.strip().lower() == CommandConstants.HELP_KEYWORD


@dataclass(frozen=True)
class TextResponse:
    """Text reply; private replies are only shown to the requester."""
    text: str
    private: bool = False


class CommandHandler(ABC):
    """Base class for bot commands."""
    
    @abstractmethod
    async def handle(self, context: RequestContext) -> TextResponse:
        """Produce the reply for one request."""
    
    async def respond(self, context: RequestContext) -> TextResponse:
        """Run ``handle`` and turn any fault into a private failure message."""
        try:
            return await self.handle(context)
        except BotException as e:
            logger.error(f"{type(self).__name__} failed for @{context.user_name}: {e}", exc_info=True)
            return TextResponse(e.user_message, private=True)
        except Exception as e:
            logger.error(f"Unexpected error in {type(self).__name__} for @{context.user_name}: {e}", exc_info=True)
            return TextResponse(CommandConstants.GENERIC_FAILURE, private=True)
