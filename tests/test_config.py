import unittest
from unittest.mock import patch

from destiny_bot.config import Config


class ConfigTest(unittest.TestCase):
    def test_guild_ids_from_list(self):
        with patch.object(Config, 'DISCORD_GUILD_IDS', '1, 2,,3'):
            self.assertEqual(Config.get_guild_ids(), [1, 2, 3])

    def test_single_guild_fallback(self):
        with patch.object(Config, 'DISCORD_GUILD_IDS', ''), patch.object(Config, 'DISCORD_GUILD_ID', 7):
            self.assertEqual(Config.get_guild_ids(), [7])

    def test_invalid_guild_ids(self):
        with patch.object(Config, 'DISCORD_GUILD_IDS', '1,abc'):
            with self.assertRaises(ValueError):
                Config.get_guild_ids()

    def test_sqlite_url_uses_async_driver(self):
        with patch.object(Config, 'CATALOG_DATABASE_URL', 'sqlite:///catalog.db'):
            self.assertEqual(Config.get_catalog_url(), 'sqlite+aiosqlite:///catalog.db')
        with patch.object(Config, 'CATALOG_DATABASE_URL', 'postgresql+asyncpg://db/catalog'):
            self.assertEqual(Config.get_catalog_url(), 'postgresql+asyncpg://db/catalog')

    def test_validate_requires_tokens(self):
        with patch.object(Config, 'DISCORD_TOKEN', None):
            with self.assertRaises(ValueError):
                Config.validate()
        with patch.object(Config, 'DISCORD_TOKEN', 'token'), patch.object(Config, 'BUNGIE_API_KEY', None):
            with self.assertRaises(ValueError):
                Config.validate()


if __name__ == '__main__':
    unittest.main()
