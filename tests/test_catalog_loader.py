import asyncio
import json
import os
import tempfile
import unittest
from pathlib import Path

from destiny_bot.data_models.items import ArmorSlot, Rarity, WeaponCategory, WeaponType
from destiny_bot.database.catalog import ItemCatalog
from destiny_bot.database.catalog_loader import load_manifest, parse_enum, parse_manifest

MANIFEST = {
    "weapons": [
        {"id": 1274330687, "name": "Thorn", "type": "hand_cannon", "category": "primary", "rarity": "exotic"},
        {"id": 2, "name": "Hawksaw", "type": "SCOUT", "category": "PRIMARY", "rarity": "Legendary"},
    ],
    "armor": [
        {"id": 10, "name": "Bones of Eao", "rarity": "exotic", "slot": "legs"},
    ],
}


class ManifestParsingTest(unittest.TestCase):
    def test_parses_weapons_and_armor(self):
        weapons, armors = parse_manifest(MANIFEST)

        self.assertEqual([w.name for w in weapons], ['Thorn', 'Hawksaw'])
        self.assertEqual(weapons[0].type, WeaponType.HAND_CANNON)
        self.assertEqual(weapons[1].type, WeaponType.SCOUT)
        self.assertEqual(weapons[1].rarity, Rarity.LEGENDARY)
        self.assertEqual(armors[0].slot, ArmorSlot.LEGS)

    def test_enum_accepts_value_or_name(self):
        self.assertEqual(parse_enum(WeaponCategory, 'heavy'), WeaponCategory.HEAVY)
        self.assertEqual(parse_enum(WeaponCategory, 'HEAVY'), WeaponCategory.HEAVY)
        with self.assertRaises(ValueError):
            parse_enum(WeaponCategory, 'melee')

    def test_missing_field_is_a_value_error(self):
        with self.assertRaises(ValueError):
            parse_manifest({"armor": [{"id": 1, "name": "Nameless"}]})

    def test_missing_sections_are_empty(self):
        self.assertEqual(parse_manifest({}), ([], []))


class ManifestLoadingTest(unittest.TestCase):
    def test_manifest_file_populates_catalog(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            manifest_path = Path(tmpdir) / 'manifest.json'
            manifest_path.write_text(json.dumps(MANIFEST), encoding='utf-8')
            catalog = ItemCatalog(f"sqlite+aiosqlite:///{os.path.join(tmpdir, 'catalog.db')}")

            async def run():
                weapons, armors = load_manifest(manifest_path)
                await catalog.initialize()
                try:
                    stored = await catalog.add_items(weapons, armors)
                    async with catalog.session() as connection:
                        thorn = await connection.get_weapon(1274330687)
                finally:
                    await catalog.dispose()
                return stored, thorn

            stored, thorn = asyncio.run(run())

        self.assertEqual(stored, 3)
        self.assertEqual(thorn.name, 'Thorn')


if __name__ == '__main__':
    unittest.main()
