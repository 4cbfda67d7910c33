"""
Player data models: platform-qualified identities and match participants.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DestinyId:
    """Platform-qualified player id. Both fields take part in equality."""
    on_xbox: bool
    token: str

    def __str__(self):
        return f"{'xbl' if self.on_xbox else 'psn'}:{self.token}"


@dataclass(frozen=True)
class PlayerLookup:
    """Outcome of an identity lookup.

    ``gamertag`` is the handle actually searched for, so a failed lookup can
    still be echoed back to the requester.
    """
    gamertag: str
    id: Optional[DestinyId] = None

    @property
    def was_found(self) -> bool:
        return self.id is not None


@dataclass(frozen=True)
class CharacterRef:
    """Reference to a single character on a Destiny account."""
    id: str
    class_name: Optional[str] = None


@dataclass(frozen=True)
class MatchParticipant:
    """One member of the last Trials fireteam, as reported by the stats service."""
    destiny_id: DestinyId
    name: str
    elo: int
    kd: float
