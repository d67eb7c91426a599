"""Substitutions between consecutive rotation slots."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from ..models import Slot, SubstitutionPair

logger = logging.getLogger(__name__)


class SubstitutionService:
    """Work out who comes on and who comes off between two slots."""

    @staticmethod
    def diff(current_slot: Slot, previous_slot: Optional[Slot]) -> List[SubstitutionPair]:
        """
        Compare two adjacent slots.

        Players coming on are paired with players going off in the order
        each appears in its slot. Unmatched players are dropped.

        Args:
            current_slot: The later slot
            previous_slot: The slot just before it, if any

        Returns:
            Substitution pairs; empty when there is no previous slot
        """
        if previous_slot is None or len(previous_slot) == 0:
            return []

        players_in = [p for p in current_slot if not previous_slot.contains(p.id)]
        players_out = [p for p in previous_slot if not current_slot.contains(p.id)]

        if len(players_in) != len(players_out):
            logger.debug(
                "Unbalanced substitution between slots %d and %d: %d in, %d out",
                previous_slot.index, current_slot.index, len(players_in), len(players_out),
            )

        return [
            SubstitutionPair(player_in=player_in, player_out=player_out)
            for player_in, player_out in zip(players_in, players_out)
        ]

    def substitutions_for(self, slots: Sequence[Slot], index: int) -> List[SubstitutionPair]:
        """Return the substitutions made at the start of slot ``index``."""
        if index < 0 or index >= len(slots):
            raise IndexError(f"Slot {index} is outside the schedule (0-{len(slots) - 1})")
        previous = slots[index - 1] if index > 0 else None
        return self.diff(slots[index], previous)
