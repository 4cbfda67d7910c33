"""
Weapon and armor classification for report rows.

Pure functions over resolved catalog items. Accessors never fail: a missing
weapon role degrades to the UNKNOWN_WEAPON slot.
"""

from typing import Iterable, Optional

from destiny_bot.data_models.items import (
    Armor, Rarity, Weapon, WeaponCategory, get_weapon_type_nickname
)
from destiny_bot.data_models.report import UNKNOWN_WEAPON, ResolvedWeapon, UnknownWeapon, WeaponSlot


def select_weapon(weapons: Iterable[Weapon], category: WeaponCategory) -> WeaponSlot:
    """First weapon of the given category, or the unknown slot."""
    for weapon in weapons:
        if weapon.category == category:
            return ResolvedWeapon(weapon)
    return UNKNOWN_WEAPON


def primary(weapons: Iterable[Weapon]) -> WeaponSlot:
    return select_weapon(weapons, WeaponCategory.PRIMARY)


def special(weapons: Iterable[Weapon]) -> WeaponSlot:
    return select_weapon(weapons, WeaponCategory.SPECIAL)


def heavy(weapons: Iterable[Weapon]) -> WeaponSlot:
    return select_weapon(weapons, WeaponCategory.HEAVY)


def weapon_label(slot: WeaponSlot) -> str:
    """Exotics and unknown slots show their name, everything else its archetype."""
    if isinstance(slot, UnknownWeapon):
        return slot.name
    if slot.weapon.rarity == Rarity.EXOTIC:
        return slot.weapon.name
    return get_weapon_type_nickname(slot.weapon.type)


def find_exotic_armor(armors: Iterable[Armor]) -> Optional[Armor]:
    """First exotic piece in list order, or None."""
    for armor in armors:
        if armor.rarity == Rarity.EXOTIC:
            return armor
    return None
