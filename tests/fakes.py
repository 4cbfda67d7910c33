"""
In-memory stand-ins for the remote services and the item catalog.
"""

import asyncio
from contextlib import asynccontextmanager

from destiny_bot.data_models.items import (
    Armor, ArmorSlot, Loadout, Rarity, Weapon, WeaponCategory, WeaponType
)
from destiny_bot.data_models.players import CharacterRef, DestinyId, MatchParticipant
from destiny_bot.utils.exceptions import UpstreamServiceError

THORN = Weapon(1, 'Thorn', WeaponType.HAND_CANNON, WeaponCategory.PRIMARY, Rarity.EXOTIC)
HAWKSAW = Weapon(2, 'Hawksaw', WeaponType.SCOUT, WeaponCategory.PRIMARY, Rarity.LEGENDARY)
PARTY_CRASHER = Weapon(3, 'Party Crasher +1', WeaponType.SHOTGUN, WeaponCategory.SPECIAL, Rarity.LEGENDARY)
GJALLARHORN = Weapon(4, 'Gjallarhorn', WeaponType.ROCKET_LAUNCHER, WeaponCategory.HEAVY, Rarity.EXOTIC)
QULLIMS_TERMINUS = Weapon(5, "Qullim's Terminus", WeaponType.MACHINE_GUN, WeaponCategory.HEAVY, Rarity.LEGENDARY)

BONES_OF_EAO = Armor(10, 'Bones of Eao', Rarity.EXOTIC, ArmorSlot.LEGS)
HELM_OF_SAINT_14 = Armor(11, 'Helm of Saint-14', Rarity.EXOTIC, ArmorSlot.HELMET)
KAIROS_HELM = Armor(12, 'Kairos Function Helm', Rarity.LEGENDARY, ArmorSlot.HELMET)

ALL_WEAPONS = [THORN, HAWKSAW, PARTY_CRASHER, GJALLARHORN, QULLIMS_TERMINUS]
ALL_ARMOR = [BONES_OF_EAO, HELM_OF_SAINT_14, KAIROS_HELM]


def participant(token, name, elo=1500, kd=1.0, on_xbox=False):
    return MatchParticipant(DestinyId(on_xbox, token), name, elo, kd)


class FakeGameClient:
    """Game-state service backed by dictionaries."""

    def __init__(self, ids=None, characters=None, inventories=None, xur=None,
                 failing_tokens=(), delays=None):
        self.ids = ids or {}  # (gamertag, on_xbox) -> DestinyId
        self.characters = characters or {}  # token -> CharacterRef
        self.inventories = inventories or {}  # (token, character_id) -> Loadout
        self.xur = xur
        self.failing_tokens = set(failing_tokens)
        self.delays = delays or {}  # token -> seconds
        self.character_calls = []
        self.inventory_calls = []
        self.finished_tokens = []

    async def get_destiny_id(self, gamertag, on_xbox):
        return self.ids.get((gamertag, on_xbox))

    async def get_last_played_character(self, destiny_id):
        self.character_calls.append(destiny_id)
        await asyncio.sleep(self.delays.get(destiny_id.token, 0))
        if destiny_id.token in self.failing_tokens:
            raise UpstreamServiceError('Bungie.net', f"character lookup failed for {destiny_id}")
        return self.characters.get(destiny_id.token)

    async def get_inventory(self, destiny_id, character_id):
        self.inventory_calls.append((destiny_id, character_id))
        loadout = self.inventories.get((destiny_id.token, character_id))
        self.finished_tokens.append(destiny_id.token)
        return loadout

    async def get_xur_inventory(self):
        return self.xur

    def equip(self, token, loadout, character_id='c1'):
        """Give ``token`` a last played character wearing ``loadout``."""
        self.characters[token] = CharacterRef(character_id)
        self.inventories[(token, character_id)] = loadout


class FakeStatsClient:
    def __init__(self, participants=None):
        self.participants = participants or []
        self.calls = []

    async def get_trials_stats(self, destiny_id):
        self.calls.append(destiny_id)
        return list(self.participants)


class FakeCatalogConnection:
    def __init__(self, catalog):
        self.catalog = catalog
        self.closed = False

    async def get_weapon(self, item_id):
        return self.catalog.weapons.get(item_id)

    async def get_armor_piece(self, item_id):
        return self.catalog.armors.get(item_id)

    async def get_weapons(self, item_ids):
        for item_id in item_ids:
            if item_id in self.catalog.weapons:
                yield self.catalog.weapons[item_id]

    async def get_armor_pieces(self, item_ids):
        for item_id in item_ids:
            if item_id in self.catalog.armors:
                yield self.catalog.armors[item_id]


class FakeCatalog:
    """Item catalog that counts how often connections are opened and closed."""

    def __init__(self, weapons=ALL_WEAPONS, armors=ALL_ARMOR):
        self.weapons = {weapon.id: weapon for weapon in weapons}
        self.armors = {armor.id: armor for armor in armors}
        self.opened = 0
        self.released = 0

    @asynccontextmanager
    async def session(self):
        connection = FakeCatalogConnection(self)
        self.opened += 1
        try:
            yield connection
        finally:
            connection.closed = True
            self.released += 1


def loadout(subclass, weapons=(), armors=()):
    return Loadout(subclass, tuple(w.id for w in weapons), tuple(a.id for a in armors))
