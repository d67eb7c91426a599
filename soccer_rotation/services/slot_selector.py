"""Slot selection: choosing who plays in a single rotation period."""

from __future__ import annotations

import logging
from typing import Dict, List, Sequence

from ..models import Player
from ..utils import (
    MAX_COMPETITIVE_BALANCE, MAX_PLAY_TIME_DIFFERENCE, MAX_RANK, PLAYERS_NEEDED
)

logger = logging.getLogger(__name__)

# The two highest-scoring players are always accepted, even above the cap.
FORCED_INCLUSION_COUNT = 2


class SlotSelector:
    """
    Pick the on-field players for one slot.

    Each player is scored by blending a fairness term (fewer slots played
    scores higher) with a skill term (higher rank scores higher). The
    competitive balance knob sets the blend: 0 is pure fairness, 100 is pure
    rank. Players are then accepted greedily in score order, skipping anyone
    more than ``max_play_time_difference`` slots ahead of the least-played
    player, and the slot is backfilled from the best remaining scores if the
    cap left it short.
    """

    def __init__(
        self,
        players_needed: int = PLAYERS_NEEDED,
        max_play_time_difference: int = MAX_PLAY_TIME_DIFFERENCE,
    ) -> None:
        self.players_needed = players_needed
        self.max_play_time_difference = max_play_time_difference

    @staticmethod
    def score(play_count: int, rank: int, competitive_balance: int) -> float:
        """Return the selection priority for a player (higher plays first)."""
        fair_weight = (MAX_COMPETITIVE_BALANCE - competitive_balance) / MAX_COMPETITIVE_BALANCE
        rank_weight = competitive_balance / MAX_COMPETITIVE_BALANCE
        return fair_weight * (1 / (play_count + 1)) + rank_weight * (rank / MAX_RANK)

    @staticmethod
    def is_key_moment(slot_index: int, slot_count: int) -> bool:
        """Whether the slot opens, closes or sits at the middle of the game.

        Reported for logging only; selection does not depend on it.
        """
        return (
            slot_index == 0
            or slot_index == slot_count - 1
            or slot_index == slot_count // 2
        )

    def rank_candidates(
        self,
        players: Sequence[Player],
        play_counts: Dict[int, int],
        competitive_balance: int,
    ) -> List[Player]:
        """Sort players by descending score, ties broken by ascending id."""
        return sorted(
            players,
            key=lambda player: (
                -self.score(play_counts[player.id], player.rank, competitive_balance),
                player.id,
            ),
        )

    def select(
        self,
        players: Sequence[Player],
        play_counts: Dict[int, int],
        slot_index: int,
        slot_count: int,
        competitive_balance: int,
    ) -> List[Player]:
        """
        Choose the players for one slot.

        Args:
            players: Present players
            play_counts: Slots played so far, keyed by player id
            slot_index: Index of the slot being filled
            slot_count: Number of slots in the game
            competitive_balance: 0 (fair play) to 100 (competitive)

        Returns:
            Selected players in acceptance order
        """
        if not players:
            return []

        players_needed = min(self.players_needed, len(players))
        candidates = self.rank_candidates(players, play_counts, competitive_balance)
        min_play_time = min(play_counts[player.id] for player in players)

        selected: List[Player] = []
        for player in candidates:
            within_cap = (
                play_counts[player.id] - min_play_time <= self.max_play_time_difference
            )
            if within_cap or len(selected) < FORCED_INCLUSION_COUNT:
                selected.append(player)
            if len(selected) == players_needed:
                break

        if len(selected) < players_needed:
            chosen_ids = {player.id for player in selected}
            remaining = [player for player in candidates if player.id not in chosen_ids]
            # players_needed is capped at len(players), so remaining always covers the gap
            assert len(remaining) >= players_needed - len(selected)
            selected.extend(remaining[: players_needed - len(selected)])

        logger.debug(
            "Slot %d/%d (key moment: %s): selected %s",
            slot_index + 1,
            slot_count,
            self.is_key_moment(slot_index, slot_count),
            [player.id for player in selected],
        )
        return selected
