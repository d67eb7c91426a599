"""
RotationState model for the Soccer Rotation Planner application.

This module contains the RotationState dataclass which holds everything a
coach has set up for today's game: roster, attendance, the balance knob and
the most recently generated schedule.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .game_config import GameConfig
from .player import Attendance, Roster
from .schedule import Schedule
from ..utils import DEFAULT_COMPETITIVE_BALANCE


@dataclass
class RotationState:
    """
    Represents the state of a rotation planning session.

    Attributes:
        roster: Configured players (immutable)
        attendance: Who is present today (mutable, owned by the session)
        competitive_balance: 0 = fair play, 100 = competitive
        config: Game length and slot parameters
        schedule: Last generated schedule, if any
    """
    roster: Roster = field(default_factory=Roster)
    attendance: Attendance = field(default_factory=Attendance)
    competitive_balance: int = DEFAULT_COMPETITIVE_BALANCE
    config: GameConfig = field(default_factory=GameConfig)
    schedule: Optional[Schedule] = None

    @classmethod
    def for_roster(cls, roster: Roster, config: Optional[GameConfig] = None) -> "RotationState":
        """Create a fresh state with every roster player marked absent."""
        return cls(
            roster=roster,
            attendance=Attendance.all_absent(roster),
            config=config or GameConfig(),
        )

    def to_json(self) -> Dict[str, Any]:
        """
        Convert RotationState to a JSON-serializable dictionary.

        The schedule itself is not included; only whether one exists.
        """
        return {
            "players": [
                {**player.to_dict(), "present": self.attendance.is_present(player.id)}
                for player in self.roster
            ],
            "competitive_balance": self.competitive_balance,
            "config": self.config.to_dict(),
            "has_schedule": self.schedule is not None,
        }
