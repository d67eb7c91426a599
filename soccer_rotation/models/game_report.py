"""Dataclasses representing play time reports for the rotation planner."""

from dataclasses import dataclass, field
from typing import Dict, List

from .player import Player


@dataclass(frozen=True)
class Interval:
    """Half-open ``[start, end)`` range of game minutes."""

    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start >= self.end:
            raise ValueError(f"Interval start {self.start} must be before end {self.end}")

    @property
    def duration(self) -> int:
        return self.end - self.start

    def extended_to(self, end: int) -> "Interval":
        """Return a copy of this interval ending at ``end``."""
        return Interval(self.start, end)

    def to_list(self) -> List[int]:
        return [self.start, self.end]


@dataclass
class PlayerReport:
    """Play time breakdown for a single player.

    The player's identity is kept in ``player``; everything else is derived
    from the schedule.
    """

    player: Player
    total_play_time: int = 0
    field_times: List[Interval] = field(default_factory=list)
    sideline_times: List[Interval] = field(default_factory=list)

    @property
    def sideline_time(self) -> int:
        return sum(interval.duration for interval in self.sideline_times)


@dataclass(frozen=True)
class SubstitutionPair:
    """A player coming on and the player they replace."""

    player_in: Player
    player_out: Player


@dataclass
class PlayerTimeSummary:
    """Fairness information for a single player."""

    player: Player
    play_minutes: int
    sideline_minutes: int
    slots_played: int
    target_minutes: float
    delta_minutes: float
    fairness: str


@dataclass
class PlayTimeSummary:
    """Snapshot of the playing time distribution for a schedule."""

    present_count: int
    total_game_minutes: int
    rotation_minutes: int
    competitive_balance: int
    target_minutes_per_player: float
    players: List[PlayerTimeSummary] = field(default_factory=list)
    average_minutes: float = 0.0
    median_minutes: float = 0.0
    min_minutes: int = 0
    max_minutes: int = 0
    fairness_counts: Dict[str, int] = field(default_factory=dict)

    @property
    def spread_minutes(self) -> int:
        return self.max_minutes - self.min_minutes
