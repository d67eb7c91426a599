"""
Schedule models for the Soccer Rotation Planner application.

A Slot is one rotation period with the players assigned to the field; a
Schedule is the ordered list of slots produced by one scheduling run.
"""
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Tuple

from .player import Player


@dataclass(frozen=True)
class Slot:
    """
    Players on the field for one rotation period.

    Attributes:
        index: Position of the slot in the game (0-based)
        players: On-field players in selection order
    """
    index: int
    players: Tuple[Player, ...]

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)

    @property
    def player_ids(self) -> List[int]:
        return [player.id for player in self.players]

    def contains(self, player_id: int) -> bool:
        return any(player.id == player_id for player in self.players)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "index": self.index,
            "players": [player.to_dict() for player in self.players],
        }


@dataclass(frozen=True)
class Schedule:
    """
    Result of one scheduling run.

    Attributes:
        slots: Slots in time order
        present_players: Players that were present when the schedule was built
        total_game_minutes: Game length the schedule covers
        rotation_minutes: Length of each slot
        competitive_balance: Balance knob the schedule was built with
    """
    slots: Tuple[Slot, ...]
    present_players: Tuple[Player, ...]
    total_game_minutes: int
    rotation_minutes: int
    competitive_balance: int

    def __len__(self) -> int:
        return len(self.slots)

    def slot_window(self, index: int) -> Tuple[int, int]:
        """Return the ``(start, end)`` minutes covered by slot ``index``."""
        start = index * self.rotation_minutes
        end = min((index + 1) * self.rotation_minutes, self.total_game_minutes)
        return start, end
