"""Play time report builder for the Soccer Rotation Planner."""

from __future__ import annotations

from typing import Dict, List, Sequence

from ..models import Interval, Player, PlayerReport, Slot


class PlayTimeReportBuilder:
    """
    Turn a finished schedule into per-player field and sideline intervals.

    Field intervals are merged while a player stays on across consecutive
    slots. Sideline intervals are merged when the previous sideline interval
    ends exactly where the new one starts.
    """

    def build(
        self,
        slots: Sequence[Slot],
        present_players: Sequence[Player],
        total_game_minutes: int,
        rotation_minutes: int,
    ) -> List[PlayerReport]:
        """
        Build the play time report.

        Args:
            slots: Schedule slots in time order
            present_players: Players present for the game
            total_game_minutes: Length of the game
            rotation_minutes: Length of each slot

        Returns:
            One report per present player, most play time first. Players with
            equal play time keep their order from ``present_players``.

        Raises:
            ValueError: If a slot starts after the game ends or contains a
                player who is not present
        """
        reports: Dict[int, PlayerReport] = {
            player.id: PlayerReport(player=player) for player in present_players
        }

        for index, slot in enumerate(slots):
            start = index * rotation_minutes
            end = min((index + 1) * rotation_minutes, total_game_minutes)
            if start >= total_game_minutes:
                raise ValueError(
                    f"Slot {index} starts at minute {start}, after the "
                    f"{total_game_minutes}-minute game has ended"
                )

            for player in slot:
                report = reports.get(player.id)
                if report is None:
                    raise ValueError(
                        f"Slot {index} contains player {player.id} who is not present"
                    )
                report.total_play_time += end - start
                if index == 0 or not slots[index - 1].contains(player.id):
                    report.field_times.append(Interval(start, end))
                else:
                    report.field_times[-1] = report.field_times[-1].extended_to(end)

            for player in present_players:
                if slot.contains(player.id):
                    continue
                sideline = reports[player.id].sideline_times
                if not sideline or sideline[-1].end != start:
                    sideline.append(Interval(start, end))
                else:
                    sideline[-1] = sideline[-1].extended_to(end)

        # sorted() is stable, so ties stay in attendance order
        return sorted(
            (reports[player.id] for player in present_players),
            key=lambda report: report.total_play_time,
            reverse=True,
        )
