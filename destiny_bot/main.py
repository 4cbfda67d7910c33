import asyncio
import logging
import traceback
from typing import Optional

import aiohttp
import discord
from discord.ext import commands
from discord import app_commands

from destiny_bot.clients.bungie import BungieClient
from destiny_bot.clients.guardian_gg import GuardianGgClient
from destiny_bot.clients.http import create_http_session
from destiny_bot.clients.trials_report import TrialsReportClient
from destiny_bot.config import Config
from destiny_bot.database.catalog import ItemCatalog
from destiny_bot.utils.logger import setup_logger

class DestinyBot(commands.Bot):
    def __init__(self):
        intents = discord.Intents.default()
        intents.guilds = True
        
        super().__init__(
            command_prefix=Config.COMMAND_PREFIX,
            intents=intents,
            help_command=None
        )
        
        # Attach app command error handler
        self.tree.on_error = self.on_app_command_error
        
        self.http_session: Optional[aiohttp.ClientSession] = None
        self.bungie_client: Optional[BungieClient] = None
        self.guardian_gg_client: Optional[GuardianGgClient] = None
        self.trials_report_client = TrialsReportClient()
        self.catalog: Optional[ItemCatalog] = None
        self.logger = setup_logger(__name__)
        
    async def setup_hook(self):
        """Called when the bot is starting up"""
        self.logger.info("Setting up Destiny Bot...")
        
        self.http_session = create_http_session()
        self.bungie_client = BungieClient(self.http_session)
        self.guardian_gg_client = GuardianGgClient(self.http_session)
        
        self.catalog = ItemCatalog()
        await self.catalog.initialize()
        
        await self.load_extension('destiny_bot.cogs.destiny')
        self.logger.info("Loaded cog: destiny_bot.cogs.destiny")
        
        await self._sync_commands()
        
        self.logger.info("Destiny Bot setup complete!")
    
    async def _sync_commands(self):
        """Sync slash commands with Discord"""
        try:
            guild_ids = Config.get_guild_ids()
            
            if guild_ids:
                # Guild-specific sync (instant updates, works in specified servers)
                for guild_id in guild_ids:
                    try:
                        guild = discord.Object(id=guild_id)
                        self.tree.copy_global_to(guild=guild)
                        synced = await self.tree.sync(guild=guild)
                        self.logger.info(f"Successfully synced {len(synced)} command(s) to guild {guild_id}")
                    except discord.errors.HTTPException as e:
                        self.logger.error(f"HTTP error syncing to guild {guild_id}. Status: {e.status}, Response: {e.text}", exc_info=True)
            else:
                # Global sync (can take up to 1 hour, works everywhere)
                self.logger.info("Attempting to sync commands globally... (Note: This can take up to an hour to propagate)")
                synced = await self.tree.sync()
                self.logger.info(f"Successfully synced {len(synced)} command(s) globally")
        except Exception as e:
            self.logger.error(f"Failed to sync commands: {e}", exc_info=True)
            # Don't raise - bot should keep answering in already synced guilds
    
    async def on_ready(self):
        """Called when the bot is ready"""
        self.logger.info(f'{self.user} has connected to Discord!')
        self.logger.info(f'Bot is in {len(self.guilds)} guilds')
        
        await self.change_presence(
            activity=discord.Game(name="Destiny | /trials or /xur")
        )
    
    async def on_app_command_error(self, interaction: discord.Interaction, error: app_commands.AppCommandError):
        """Global error handler for slash commands"""
        command_name = interaction.command.name if interaction.command else 'Unknown'
        if isinstance(error, app_commands.CommandOnCooldown):
            error_message = f"❌ Command is on cooldown. Try again in {error.retry_after:.2f} seconds."
        else:
            self.logger.error(f"Error in app command '{command_name}': {error}", exc_info=True)
            error_message = "❌ An unexpected error occurred while processing your command."
        
        try:
            if interaction.response.is_done():
                await interaction.followup.send(error_message, ephemeral=True)
            else:
                await interaction.response.send_message(error_message, ephemeral=True)
        except discord.errors.HTTPException as e:
            self.logger.error(f"Failed to send error response: {e}")
        
    async def close(self):
        """Cleanup when bot is shutting down"""
        self.logger.info("Shutting down Destiny Bot...")
        
        if self.http_session:
            await self.http_session.close()
        if self.catalog:
            await self.catalog.dispose()
            
        await super().close()

async def main():
    """Main entry point"""
    Config.validate()
    
    bot = DestinyBot()
    
    try:
        await bot.start(Config.DISCORD_TOKEN)
    except KeyboardInterrupt:
        await bot.close()
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        traceback.print_exc()
    finally:
        await bot.close()

if __name__ == "__main__":
    asyncio.run(main())
