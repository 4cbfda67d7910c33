"""
Trials report data models.

A report row composes the stats-service participant with the equipment found
on their last played character.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from destiny_bot.constants import TableConstants
from destiny_bot.data_models.items import Armor, Weapon
from destiny_bot.data_models.players import MatchParticipant


@dataclass(frozen=True)
class ResolvedWeapon:
    """Weapon slot filled by a catalog record."""
    weapon: Weapon

    @property
    def name(self) -> str:
        return self.weapon.name


@dataclass(frozen=True)
class UnknownWeapon:
    """Weapon slot that could not be filled."""
    name: str = 'Unknown'


WeaponSlot = Union[ResolvedWeapon, UnknownWeapon]

UNKNOWN_WEAPON = UnknownWeapon()


@dataclass(frozen=True)
class TrialsRow:
    """Fully enriched report row for one fireteam member."""
    participant: MatchParticipant
    subclass: str = TableConstants.UNKNOWN_SUBCLASS
    weapons: Tuple[Weapon, ...] = ()
    armors: Tuple[Armor, ...] = ()

    @property
    def name(self) -> str:
        return self.participant.name

    def __str__(self):
        return f"{self.participant.name}[{self.participant.elo}, {self.participant.kd}, {self.subclass}]"
