"""Rotation scheduler: fills every slot of a game using the slot selector."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from ..models import GameConfig, Player, Slot
from ..utils import (
    DEFAULT_COMPETITIVE_BALANCE, MAX_COMPETITIVE_BALANCE, MIN_COMPETITIVE_BALANCE
)
from .errors import InsufficientPlayersError
from .slot_selector import SlotSelector

logger = logging.getLogger(__name__)


def validate_competitive_balance(value: object) -> int:
    """Return ``value`` as a balance setting or raise ``ValueError``."""
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("Competitive balance must be a whole number")
    if not MIN_COMPETITIVE_BALANCE <= value <= MAX_COMPETITIVE_BALANCE:
        raise ValueError(
            f"Competitive balance must be between {MIN_COMPETITIVE_BALANCE} "
            f"and {MAX_COMPETITIVE_BALANCE}"
        )
    return value


class RotationScheduler:
    """Service for building the slot-by-slot rotation of a game."""

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        selector: Optional[SlotSelector] = None,
    ) -> None:
        self.config = config or GameConfig()
        self.selector = selector or SlotSelector(
            players_needed=self.config.players_needed,
            max_play_time_difference=self.config.max_play_time_difference,
        )

    def generate(
        self,
        present_players: Sequence[Player],
        total_game_minutes: Optional[int] = None,
        rotation_minutes: Optional[int] = None,
        competitive_balance: int = DEFAULT_COMPETITIVE_BALANCE,
    ) -> List[Slot]:
        """
        Build the rotation schedule for one game.

        Args:
            present_players: Players available for this game
            total_game_minutes: Game length; defaults to the configured value
            rotation_minutes: Slot length; defaults to the configured value
            competitive_balance: 0 (fair play) to 100 (competitive)

        Returns:
            Slots in time order

        Raises:
            InsufficientPlayersError: If fewer than the minimum players are present
            ValueError: If the balance or timing values are invalid
        """
        if len(present_players) < self.config.min_players_present:
            raise InsufficientPlayersError(
                len(present_players), self.config.min_players_present
            )
        competitive_balance = validate_competitive_balance(competitive_balance)

        total = self.config.total_game_minutes if total_game_minutes is None else total_game_minutes
        rotation = self.config.rotation_minutes if rotation_minutes is None else rotation_minutes
        if total <= 0 or rotation <= 0 or total % rotation:
            raise ValueError(
                f"Game length {total} is not a whole number of {rotation}-minute rotations"
            )
        slot_count = total // rotation

        play_counts: Dict[int, int] = {player.id: 0 for player in present_players}
        slots: List[Slot] = []

        for index in range(slot_count):
            selected = self.selector.select(
                present_players, play_counts, index, slot_count, competitive_balance
            )
            slots.append(Slot(index=index, players=tuple(selected)))
            for player in selected:
                play_counts[player.id] += 1

        logger.info(
            "Generated %d slots for %d present players (balance %d)",
            slot_count, len(present_players), competitive_balance,
        )
        return slots
