"""
Shared aiohttp plumbing for the remote Destiny services.
"""

import asyncio
from typing import Any, Dict, Optional

import aiohttp

from destiny_bot.config import Config
from destiny_bot.utils.exceptions import UpstreamServiceError
from destiny_bot.utils.logger import setup_logger

logger = setup_logger(__name__)


def create_http_session(timeout: Optional[float] = None) -> aiohttp.ClientSession:
    """Build the session shared by every client of the bot."""
    seconds = timeout if timeout is not None else Config.HTTP_TIMEOUT_SECONDS
    return aiohttp.ClientSession(timeout=aiohttp.ClientTimeout(total=seconds))


class JsonHttpClient:
    """Base class for JSON-over-HTTP clients."""

    service_name = 'Remote service'

    def __init__(self, session: aiohttp.ClientSession, base_url: str):
        self.session = session
        self.base_url = base_url.rstrip('/')

    def _headers(self) -> Dict[str, str]:
        return {}

    async def _get_json(self, path: str, params: Optional[Dict[str, str]] = None) -> Optional[Any]:
        """GET ``path`` and decode the JSON body. A 404 answer returns None."""
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug(f"GET {url} {params or ''}")
        try:
            async with self.session.get(url, params=params, headers=self._headers()) as response:
                if response.status == 404:
                    return None
                if response.status >= 400:
                    raise UpstreamServiceError(self.service_name, f"HTTP {response.status} for {url}")
                return await response.json(content_type=None)
        except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as e:
            raise UpstreamServiceError(self.service_name, f"{type(e).__name__}: {e}") from e
