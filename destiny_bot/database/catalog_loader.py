"""
Catalog manifest parsing.

A manifest is a JSON document of the form::

    {
        "weapons": [{"id": 1274330687, "name": "Thorn", "type": "hand_cannon",
                     "category": "primary", "rarity": "exotic"}],
        "armor": [{"id": 2591213943, "name": "Bones of Eao", "rarity": "exotic",
                   "slot": "legs"}]
    }

Enum fields accept either the value (``hand_cannon``) or the member name
(``HAND_CANNON``).
"""

import json
from pathlib import Path
from typing import List, Tuple, Type, TypeVar

from destiny_bot.data_models.items import Armor, ArmorSlot, Rarity, Weapon, WeaponCategory, WeaponType

E = TypeVar('E')


def parse_enum(enum_class: Type[E], raw: str) -> E:
    """Parse an enum by value or by member name, case-insensitively."""
    text = str(raw).strip()
    for member in enum_class:
        if text.lower() == member.value or text.upper() == member.name:
            return member
    raise ValueError(f"Unknown {enum_class.__name__} '{raw}'")


def parse_weapon(entry: dict) -> Weapon:
    return Weapon(
        id=int(entry['id']),
        name=entry['name'],
        type=parse_enum(WeaponType, entry['type']),
        category=parse_enum(WeaponCategory, entry['category']),
        rarity=parse_enum(Rarity, entry['rarity'])
    )


def parse_armor(entry: dict) -> Armor:
    return Armor(
        id=int(entry['id']),
        name=entry['name'],
        rarity=parse_enum(Rarity, entry['rarity']),
        slot=parse_enum(ArmorSlot, entry['slot'])
    )


def parse_manifest(document: dict) -> Tuple[List[Weapon], List[Armor]]:
    """Turn a decoded manifest into catalog records.
    
    Raises:
        ValueError: when an entry is missing a field or carries an unknown enum
    """
    try:
        weapons = [parse_weapon(entry) for entry in document.get('weapons', [])]
        armors = [parse_armor(entry) for entry in document.get('armor', [])]
    except KeyError as e:
        raise ValueError(f"Manifest entry is missing field {e}") from e
    return weapons, armors


def load_manifest(path: Path) -> Tuple[List[Weapon], List[Armor]]:
    with open(path, 'r', encoding='utf-8') as f:
        return parse_manifest(json.load(f))
