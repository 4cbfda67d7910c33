"""
Bungie.net client for the Destiny game-state API.

Only the handful of endpoints the bot needs are covered. Missing players,
characters and vendors come back as None; transport failures and API error
codes raise UpstreamServiceError.
"""

from typing import Any, Dict, List, Optional

import aiohttp

from destiny_bot.clients.http import JsonHttpClient
from destiny_bot.config import Config
from destiny_bot.data_models.items import ItemStub, Loadout
from destiny_bot.data_models.players import CharacterRef, DestinyId
from destiny_bot.utils.exceptions import UpstreamServiceError

# Bungie platform codes
XBOX_MEMBERSHIP_TYPE = 1
PSN_MEMBERSHIP_TYPE = 2

# API error codes
SUCCESS_CODE = 1
ACCOUNT_NOT_FOUND_CODES = {1601, 1620}

# Inventory bucket hashes
SUBCLASS_BUCKET = 3284755031
WEAPON_BUCKETS = (
    1498876634,  # primary
    2465295065,  # special
    953998645,   # heavy
)
ARMOR_BUCKETS = (
    3448274439,  # helmet
    3551918588,  # gauntlets
    14239492,    # chest
    20886954,    # legs
    1585787867,  # class item
)


class BungieClient(JsonHttpClient):
    """Read-only access to accounts, characters and vendors."""

    service_name = 'Bungie.net'

    def __init__(self, session: aiohttp.ClientSession, api_key: Optional[str] = None,
                 base_url: Optional[str] = None):
        super().__init__(session, base_url or Config.BUNGIE_API_URL)
        self.api_key = api_key or Config.BUNGIE_API_KEY

    def _headers(self) -> Dict[str, str]:
        return {'X-API-Key': self.api_key} if self.api_key else {}

    async def _get_response(self, path: str, params: Optional[Dict[str, str]] = None) -> Optional[Any]:
        """Return the ``Response`` payload of a Bungie envelope."""
        payload = await self._get_json(path, params)
        if payload is None:
            return None
        error_code = payload.get('ErrorCode', SUCCESS_CODE)
        if error_code in ACCOUNT_NOT_FOUND_CODES:
            return None
        if error_code != SUCCESS_CODE:
            raise UpstreamServiceError(
                self.service_name, f"{payload.get('ErrorStatus')} ({error_code}) for {path}"
            )
        return payload.get('Response')

    @staticmethod
    def _membership_type(destiny_id: DestinyId) -> int:
        return XBOX_MEMBERSHIP_TYPE if destiny_id.on_xbox else PSN_MEMBERSHIP_TYPE

    async def get_destiny_id(self, gamertag: str, on_xbox: bool) -> Optional[DestinyId]:
        """Search for ``gamertag`` on one platform."""
        membership_type = XBOX_MEMBERSHIP_TYPE if on_xbox else PSN_MEMBERSHIP_TYPE
        results = await self._get_response(
            f"Destiny/SearchDestinyPlayer/{membership_type}/{gamertag}/"
        )
        if not results:
            return None
        return DestinyId(on_xbox, str(results[0]['membershipId']))

    async def get_last_played_character(self, destiny_id: DestinyId) -> Optional[CharacterRef]:
        """Return the most recently played character of an account."""
        response = await self._get_response(
            f"Destiny/{self._membership_type(destiny_id)}/Account/{destiny_id.token}/Summary/"
        )
        characters = ((response or {}).get('data') or {}).get('characters') or []
        if not characters:
            return None
        last = max(characters, key=lambda c: c['characterBase'].get('dateLastPlayed', ''))
        base = last['characterBase']
        return CharacterRef(id=str(base['characterId']), class_name=base.get('classType'))

    async def get_inventory(self, destiny_id: DestinyId, character_id: str) -> Optional[Loadout]:
        """Return the equipped subclass and item ids of a character."""
        response = await self._get_response(
            f"Destiny/{self._membership_type(destiny_id)}/Account/{destiny_id.token}"
            f"/Character/{character_id}/Inventory/Summary/",
            params={'definitions': 'true'}
        )
        if not response:
            return None
        items = (response.get('data') or {}).get('items') or []
        definitions = (response.get('definitions') or {}).get('items') or {}
        subclass = None
        weapon_ids: List[int] = []
        armor_ids: List[int] = []
        for item in items:
            bucket = item.get('bucketHash')
            item_hash = item['itemHash']
            if bucket == SUBCLASS_BUCKET:
                subclass = (definitions.get(str(item_hash)) or {}).get('itemName')
            elif bucket in WEAPON_BUCKETS:
                weapon_ids.append(item_hash)
            elif bucket in ARMOR_BUCKETS:
                armor_ids.append(item_hash)
        if subclass is None:
            return None
        return Loadout(subclass, tuple(weapon_ids), tuple(armor_ids))

    async def get_xur_inventory(self) -> Optional[List[ItemStub]]:
        """Return Xur's stock, or None while he is away."""
        response = await self._get_response('Destiny/Advisors/Xur/', params={'definitions': 'true'})
        if not response:
            return None
        categories = (response.get('data') or {}).get('saleItemCategories') or []
        definitions = (response.get('definitions') or {}).get('items') or {}
        stock = []
        for category in categories:
            for sale_item in category.get('saleItems', []):
                item_hash = sale_item['item']['itemHash']
                bucket = (definitions.get(str(item_hash)) or {}).get('bucketTypeHash')
                if bucket in ARMOR_BUCKETS:
                    stock.append(ItemStub(item_hash, is_armor=True))
                elif bucket in WEAPON_BUCKETS:
                    stock.append(ItemStub(item_hash, is_armor=False))
        return stock
