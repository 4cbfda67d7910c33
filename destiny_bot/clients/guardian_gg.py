"""
guardian.gg client for Trials of Osiris statistics.
"""

from typing import List, Optional

import aiohttp

from destiny_bot.clients.http import JsonHttpClient
from destiny_bot.config import Config
from destiny_bot.data_models.players import DestinyId, MatchParticipant


class GuardianGgClient(JsonHttpClient):
    """Fetches the last Trials fireteam of a player along with their ratings."""

    service_name = 'guardian.gg'

    def __init__(self, session: aiohttp.ClientSession, base_url: Optional[str] = None):
        super().__init__(session, base_url or Config.GUARDIAN_GG_URL)

    async def get_trials_stats(self, destiny_id: DestinyId) -> List[MatchParticipant]:
        """Return the members of the player's last Trials fireteam.

        Fireteam members share the requester's platform. An unknown player
        yields an empty list.
        """
        entries = await self._get_json(f"fireteam/14/{destiny_id.token}")
        participants = []
        for entry in entries or []:
            participants.append(MatchParticipant(
                destiny_id=DestinyId(destiny_id.on_xbox, str(entry['membershipId'])),
                name=entry['name'],
                elo=int(round(float(entry.get('elo', 0)))),
                kd=self._ratio(entry)
            ))
        return participants

    @staticmethod
    def _ratio(entry: dict) -> float:
        if 'kd' in entry:
            return round(float(entry['kd']), 2)
        kills = entry.get('kills', 0)
        deaths = entry.get('deaths', 0)
        return round(kills / deaths, 2) if deaths else float(kills)
