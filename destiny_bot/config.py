import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    """Bot configuration settings"""
    
    # Discord settings
    DISCORD_TOKEN = os.getenv('DISCORD_TOKEN')
    DISCORD_GUILD_ID = int(os.getenv('DISCORD_GUILD_ID', 0))
    DISCORD_GUILD_IDS = os.getenv('DISCORD_GUILD_IDS', '')  # Comma-separated for multi-guild support
    
    # Bot settings
    COMMAND_PREFIX = os.getenv('COMMAND_PREFIX', '!')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    
    # Upstream services
    BUNGIE_API_KEY = os.getenv('BUNGIE_API_KEY')
    BUNGIE_API_URL = os.getenv('BUNGIE_API_URL', 'https://www.bungie.net/Platform')
    GUARDIAN_GG_URL = os.getenv('GUARDIAN_GG_URL', 'https://api.guardian.gg')
    TRIALS_REPORT_URL = os.getenv('TRIALS_REPORT_URL', 'https://my.destinytrialsreport.com')
    HTTP_TIMEOUT_SECONDS = float(os.getenv('HTTP_TIMEOUT_SECONDS', 10))
    
    # Item catalog (weapons and armor names)
    CATALOG_DATABASE_URL = os.getenv('CATALOG_DATABASE_URL', 'sqlite:///catalog.db')
    
    @classmethod
    def get_guild_ids(cls):
        """Get list of guild IDs for command syncing"""
        if cls.DISCORD_GUILD_IDS:
            try:
                return [int(guild_id.strip()) for guild_id in cls.DISCORD_GUILD_IDS.split(',') if guild_id.strip()]
            except ValueError:
                raise ValueError("DISCORD_GUILD_IDS must be comma-separated integers")
        elif cls.DISCORD_GUILD_ID:
            return [cls.DISCORD_GUILD_ID]
        else:
            # Global sync
            return []
    
    @classmethod
    def get_catalog_url(cls):
        """Catalog URL with the async sqlite driver swapped in"""
        database_url = cls.CATALOG_DATABASE_URL
        if database_url.startswith('sqlite:///'):
            database_url = database_url.replace('sqlite:///', 'sqlite+aiosqlite:///')
        return database_url
    
    @classmethod
    def validate(cls):
        """Validate that required configuration is present"""
        if not cls.DISCORD_TOKEN:
            raise ValueError("DISCORD_TOKEN is required")
        if not cls.BUNGIE_API_KEY:
            raise ValueError("BUNGIE_API_KEY is required")
