"""
Player model for the Soccer Rotation Planner application.

This module contains the Player dataclass which represents an individual
roster entry, the Roster that holds the configured squad, and the Attendance
record that tracks who showed up for today's game.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Player:
    """
    Represents a single player on the club roster.

    Attributes:
        id: Unique positive identifier
        name: Display name
        rank: Skill rank from 1 to 5 (higher = stronger)
    """
    id: int
    name: str
    rank: int

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"id": self.id, "name": self.name, "rank": self.rank}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Player':
        """Create from dictionary for JSON deserialization."""
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            rank=data.get("rank"),
        )


@dataclass(frozen=True)
class Roster:
    """Ordered, immutable collection of the club's players."""
    players: Tuple[Player, ...] = ()

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)

    def get(self, player_id: int) -> Optional[Player]:
        """Get player by id, or None when unknown."""
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def to_json(self) -> List[Dict[str, Any]]:
        return [player.to_dict() for player in self.players]


@dataclass
class Attendance:
    """
    Caller-owned record of which players are present.

    Players missing from the record are treated as absent.
    """
    present: Dict[int, bool] = field(default_factory=dict)

    def is_present(self, player_id: int) -> bool:
        return self.present.get(player_id, False)

    def mark(self, player_id: int, present: bool) -> None:
        self.present[player_id] = bool(present)

    def toggle(self, player_id: int) -> bool:
        """Flip a player's attendance and return the new value."""
        value = not self.is_present(player_id)
        self.present[player_id] = value
        return value

    def present_players(self, roster: Roster) -> List[Player]:
        """Return the present players in roster order."""
        return [player for player in roster if self.is_present(player.id)]

    @classmethod
    def all_absent(cls, roster: Roster) -> 'Attendance':
        return cls(present={player.id: False for player in roster})
