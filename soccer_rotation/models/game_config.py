"""Game configuration for the Soccer Rotation Planner."""

from dataclasses import dataclass, asdict
from typing import Any, Dict

from ..utils import (
    TOTAL_GAME_MINUTES, ROTATION_MINUTES, PLAYERS_NEEDED,
    MIN_PLAYERS_PRESENT, MAX_PLAY_TIME_DIFFERENCE
)


@dataclass(frozen=True)
class GameConfig:
    """
    Fixed parameters of a single game.

    Attributes:
        total_game_minutes: Regulation length of the game
        rotation_minutes: Length of one rotation slot
        players_needed: Players on the field at the same time
        min_players_present: Fewest present players a schedule can be built for
        max_play_time_difference: Allowed spread in slots played before the
            fairness cap kicks in

    Raises:
        ValueError: If the values do not describe a playable game
    """
    total_game_minutes: int = TOTAL_GAME_MINUTES
    rotation_minutes: int = ROTATION_MINUTES
    players_needed: int = PLAYERS_NEEDED
    min_players_present: int = MIN_PLAYERS_PRESENT
    max_play_time_difference: int = MAX_PLAY_TIME_DIFFERENCE

    def __post_init__(self) -> None:
        if self.total_game_minutes <= 0:
            raise ValueError("Game length must be positive")
        if self.rotation_minutes <= 0:
            raise ValueError("Rotation length must be positive")
        if self.total_game_minutes % self.rotation_minutes:
            raise ValueError(
                f"Game length {self.total_game_minutes} is not a whole number "
                f"of {self.rotation_minutes}-minute rotations"
            )
        if self.players_needed < 1:
            raise ValueError("At least one player must be on the field")
        if self.min_players_present < 1:
            raise ValueError("Minimum attendance must be at least one player")
        if self.max_play_time_difference < 0:
            raise ValueError("Play time difference cannot be negative")

    @property
    def slot_count(self) -> int:
        return self.total_game_minutes // self.rotation_minutes

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["slot_count"] = self.slot_count
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        defaults = cls()
        return cls(
            total_game_minutes=int(data.get("total_game_minutes", defaults.total_game_minutes)),
            rotation_minutes=int(data.get("rotation_minutes", defaults.rotation_minutes)),
            players_needed=int(data.get("players_needed", defaults.players_needed)),
            min_players_present=int(data.get("min_players_present", defaults.min_players_present)),
            max_play_time_difference=int(
                data.get("max_play_time_difference", defaults.max_play_time_difference)
            ),
        )
