"""
Destiny slash commands.

Wires /trials and /xur to their command handlers. Replies are deferred while
the upstream services are queried; private replies replace the deferred
message with an ephemeral one.
"""

import discord
from discord import app_commands
from discord.ext import commands
from typing import Optional

from destiny_bot.handlers import CommandHandler, RequestContext, TextResponse, TrialsHandler, XurHandler
from destiny_bot.utils.logger import setup_logger

logger = setup_logger(__name__)


class DestinyCog(commands.Cog):
    """Trials of Osiris and Xur commands."""
    
    def __init__(self, bot):
        self.bot = bot
        self.trials_handler = TrialsHandler(bot.guardian_gg_client, bot.trials_report_client)
        self.xur_handler = XurHandler()
    
    def _build_context(self, interaction: discord.Interaction, text: Optional[str]) -> RequestContext:
        return RequestContext(
            user_name=interaction.user.display_name,
            text=text or '',
            client=self.bot.bungie_client,
            database=self.bot.catalog
        )
    
    async def _run(self, interaction: discord.Interaction, handler: CommandHandler, text: Optional[str]):
        # Defer immediately to secure interaction within 3-second window
        await interaction.response.defer(thinking=True)
        response = await handler.respond(self._build_context(interaction, text))
        await self._send(interaction, response)
    
    @staticmethod
    async def _send(interaction: discord.Interaction, response: TextResponse):
        if response.private:
            await interaction.delete_original_response()
            await interaction.followup.send(response.text, ephemeral=True)
        else:
            await interaction.followup.send(response.text)
    
    @app_commands.command(name="trials", description="Inspect a player's last Trials of Osiris fireteam")
    @app_commands.describe(gamertag="Gamertag to look up (defaults to you), or 'help'")
    @app_commands.checks.cooldown(rate=1, per=10.0, key=lambda i: i.user.id)
    async def trials(self, interaction: discord.Interaction, gamertag: Optional[str] = None):
        """Show the last Trials fireteam of a player with stats and equipment."""
        await self._run(interaction, self.trials_handler, gamertag)
    
    @app_commands.command(name="xur", description="Inspect Xur's inventory")
    @app_commands.describe(option="Type 'help' for usage")
    async def xur(self, interaction: discord.Interaction, option: Optional[str] = None):
        """List what Xur is selling this weekend."""
        await self._run(interaction, self.xur_handler, option)

async def setup(bot):
    await bot.add_cog(DestinyCog(bot))
