"""
Item data models for the Destiny bot.

Immutable records resolved from the local item catalog, plus the stubs and
loadouts returned by the game-state service before catalog resolution.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Rarity(Enum):
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    LEGENDARY = "legendary"
    EXOTIC = "exotic"


class WeaponCategory(Enum):
    PRIMARY = "primary"
    SPECIAL = "special"
    HEAVY = "heavy"


class WeaponType(Enum):
    AUTO = "auto_rifle"
    HAND_CANNON = "hand_cannon"
    PULSE = "pulse_rifle"
    SCOUT = "scout_rifle"
    FUSION = "fusion_rifle"
    SHOTGUN = "shotgun"
    SNIPER = "sniper_rifle"
    SIDEARM = "sidearm"
    MACHINE_GUN = "machine_gun"
    ROCKET_LAUNCHER = "rocket_launcher"
    SWORD = "sword"


class ArmorSlot(Enum):
    HELMET = "helmet"
    GAUNTLETS = "gauntlets"
    CHEST = "chest"
    LEGS = "legs"
    CLASS_ITEM = "class_item"
    ARTIFACT = "artifact"


# Short archetype names used when a weapon is not worth naming individually
WEAPON_TYPE_NICKNAMES = {
    WeaponType.AUTO: "AR",
    WeaponType.HAND_CANNON: "HC",
    WeaponType.PULSE: "Pulse",
    WeaponType.SCOUT: "Scout",
    WeaponType.FUSION: "Fusion",
    WeaponType.SHOTGUN: "Shotty",
    WeaponType.SNIPER: "Sniper",
    WeaponType.SIDEARM: "Sidearm",
    WeaponType.MACHINE_GUN: "MG",
    WeaponType.ROCKET_LAUNCHER: "Rockets",
    WeaponType.SWORD: "Sword",
}


def get_weapon_type_nickname(weapon_type: WeaponType) -> str:
    """Return the short display name for a weapon archetype."""
    return WEAPON_TYPE_NICKNAMES[weapon_type]


class CatalogItem:
    """Shared ordering for catalog records: items sort by name, then id."""

    def _sort_key(self):
        return (self.name, self.id)

    def __lt__(self, other):
        if not isinstance(other, CatalogItem):
            return NotImplemented
        return self._sort_key() < other._sort_key()


@dataclass(frozen=True)
class Weapon(CatalogItem):
    """Weapon record from the item catalog."""
    id: int
    name: str
    type: WeaponType
    category: WeaponCategory
    rarity: Rarity


@dataclass(frozen=True)
class Armor(CatalogItem):
    """Armor record from the item catalog."""
    id: int
    name: str
    rarity: Rarity
    slot: ArmorSlot


@dataclass(frozen=True)
class ItemStub:
    """Vendor stock entry: an item id tagged as armor or weapon."""
    id: int
    is_armor: bool


@dataclass(frozen=True)
class Loadout:
    """Equipped subclass and item ids of a character."""
    subclass: str
    weapon_ids: Tuple[int, ...]
    armor_ids: Tuple[int, ...]
