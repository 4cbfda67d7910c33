"""
Trials report aggregation.

Resolves the requested player, pulls their last fireteam from the stats
service, then enriches every fireteam member with the equipment of their last
played character. Members are enriched concurrently; rows keep the order in
which the stats service listed the members.
"""

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from destiny_bot.constants import TableConstants
from destiny_bot.data_models.players import MatchParticipant, PlayerLookup
from destiny_bot.data_models.report import TrialsRow
from destiny_bot.database.catalog import CatalogConnection
from destiny_bot.services.identity import IdentityResolver
from destiny_bot.services.inventory import InventoryEnricher
from destiny_bot.utils.logger import setup_logger

logger = setup_logger(__name__)


class ReportStatus(Enum):
    READY = "ready"
    PLAYER_NOT_FOUND = "player_not_found"
    NO_DATA = "no_data"


@dataclass(frozen=True)
class TrialsReport:
    """Outcome of a report request."""
    status: ReportStatus
    player: PlayerLookup
    rows: Tuple[TrialsRow, ...] = field(default_factory=tuple)

    @property
    def on_xbox(self) -> bool:
        return bool(self.player.id and self.player.id.on_xbox)


class TrialsReportService:
    """Builds Trials reports from the stats service, game-state service and catalog."""

    def __init__(self, stats_client):
        self.stats_client = stats_client

    async def build_report(self, client, catalog, requester: str, query: Optional[str] = None) -> TrialsReport:
        """Run the whole pipeline for one request.

        Args:
            client: Game-state service used for identity and inventory lookups
            catalog: Item catalog; one connection is held for the whole fan-out
            requester: Name of the user asking, used when ``query`` is empty
            query: Gamertag to inspect

        Returns:
            A report whose status tells apart an unknown player, a player
            without Trials data and a ready table. Upstream faults propagate
            once every member enrichment has finished.
        """
        player = await IdentityResolver(client).resolve(requester, query)
        if not player.was_found:
            logger.warning(f'Could not identify gamertag "{player.gamertag}".')
            return TrialsReport(ReportStatus.PLAYER_NOT_FOUND, player)
        logger.info(f"Found id {player.id} for {player.gamertag} (Xbox: {player.id.on_xbox})")

        participants = await self.stats_client.get_trials_stats(player.id)
        if not participants:
            logger.warning("No Trials data found")
            return TrialsReport(ReportStatus.NO_DATA, player)

        enricher = InventoryEnricher(client)
        async with catalog.session() as connection:
            results = await asyncio.gather(
                *(self._build_row(enricher, connection, participant) for participant in participants),
                return_exceptions=True
            )

        failures = [result for result in results if isinstance(result, BaseException)]
        if failures:
            logger.error(f"{len(failures)} of {len(results)} fireteam members could not be enriched")
            raise failures[0]

        for row in results:
            logger.info(row)
        return TrialsReport(ReportStatus.READY, player, tuple(results))

    async def _build_row(self, enricher: InventoryEnricher, connection: CatalogConnection,
                         participant: MatchParticipant) -> TrialsRow:
        """Enrich a single member. A missing loadout yields a bare row."""
        loadout = await enricher.get_last_loadout(participant.destiny_id)
        if loadout is None:
            return TrialsRow(participant, TableConstants.UNKNOWN_SUBCLASS)
        weapons: List = [weapon async for weapon in connection.get_weapons(loadout.weapon_ids)]
        armors: List = [armor async for armor in connection.get_armor_pieces(loadout.armor_ids)]
        return TrialsRow(
            participant,
            loadout.subclass or TableConstants.UNKNOWN_SUBCLASS,
            tuple(sorted(weapons)),
            tuple(sorted(armors))
        )
