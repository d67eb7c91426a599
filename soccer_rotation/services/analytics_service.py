"""Analytics helpers for the Soccer Rotation Planner."""

from __future__ import annotations

import csv
import io
import statistics
from collections import Counter
from typing import List, Optional, Protocol, Sequence

from ..models import PlayerReport, PlayerTimeSummary, PlayTimeSummary, Schedule
from ..utils import format_interval


class ExportServiceInterface(Protocol):
    """Interface for data export - supports ISP."""

    def export_to_csv(self, reports: Sequence[PlayerReport], total_game_minutes: int) -> str:
        """Export report to CSV format."""
        ...


FAIRNESS_ORDER = {"under": 0, "ok": 1, "over": 2}


class GameReportExporter:
    """Concrete implementation of export service - follows SRP."""

    def export_to_csv(self, reports: Sequence[PlayerReport], total_game_minutes: int) -> str:
        """Export the per-player play time report to CSV format."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(
            ["Name", "Rank", "Play Minutes", "Sideline Minutes", "Field Time", "Sideline Time"]
        )
        for report in reports:
            writer.writerow(
                [
                    report.player.name,
                    report.player.rank,
                    report.total_play_time,
                    report.sideline_time,
                    "; ".join(
                        format_interval(i.start, i.end, total_game_minutes)
                        for i in report.field_times
                    ),
                    "; ".join(
                        format_interval(i.start, i.end, total_game_minutes)
                        for i in report.sideline_times
                    ),
                ]
            )
        csv_text = buffer.getvalue()
        buffer.close()
        return csv_text


class AnalyticsService:
    """
    Summarize how evenly a schedule spreads playing time.

    Uses dependency injection to follow DIP - depends on abstractions, not concretions.
    """

    def __init__(self, export_service: Optional[ExportServiceInterface] = None) -> None:
        self.export_service = export_service or GameReportExporter()

    def summarize(self, reports: Sequence[PlayerReport], schedule: Schedule) -> PlayTimeSummary:
        """Build a :class:`PlayTimeSummary` for a generated schedule.

        The target for each player is an even share of all on-field minutes.
        A player is ``under`` or ``over`` once they are a full rotation away
        from that target.
        """
        present_count = len(reports)
        totals = [report.total_play_time for report in reports]
        target = sum(totals) / present_count if present_count else 0.0
        threshold = schedule.rotation_minutes

        summaries: List[PlayerTimeSummary] = []
        for report in reports:
            slots_played = sum(1 for slot in schedule.slots if slot.contains(report.player.id))
            delta = report.total_play_time - target
            summaries.append(
                PlayerTimeSummary(
                    player=report.player,
                    play_minutes=report.total_play_time,
                    sideline_minutes=report.sideline_time,
                    slots_played=slots_played,
                    target_minutes=target,
                    delta_minutes=delta,
                    fairness=self._classify_fairness(delta, threshold),
                )
            )

        summaries.sort(
            key=lambda item: (
                FAIRNESS_ORDER.get(item.fairness, 1),
                item.delta_minutes,
                item.player.name,
            )
        )
        fairness_counter = Counter(summary.fairness for summary in summaries)

        return PlayTimeSummary(
            present_count=present_count,
            total_game_minutes=schedule.total_game_minutes,
            rotation_minutes=schedule.rotation_minutes,
            competitive_balance=schedule.competitive_balance,
            target_minutes_per_player=target,
            players=summaries,
            average_minutes=statistics.mean(totals) if totals else 0.0,
            median_minutes=statistics.median(totals) if totals else 0.0,
            min_minutes=min(totals) if totals else 0,
            max_minutes=max(totals) if totals else 0,
            fairness_counts={
                "under": fairness_counter.get("under", 0),
                "ok": fairness_counter.get("ok", 0),
                "over": fairness_counter.get("over", 0),
            },
        )

    def generate_report_csv(self, reports: Sequence[PlayerReport], schedule: Schedule) -> str:
        """Return a CSV document with summary rows followed by the player table.

        Raises:
            ValueError: If there are no players to include in the report.
        """
        if not reports:
            raise ValueError("Cannot export a report without any players")

        summary = self.summarize(reports, schedule)
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(["Player Game Report"])
        writer.writerow(["Players Present", summary.present_count])
        writer.writerow(["Game Minutes", summary.total_game_minutes])
        writer.writerow(["Rotation Minutes", summary.rotation_minutes])
        writer.writerow(["Competitive Balance", summary.competitive_balance])
        writer.writerow(["Target Minutes Per Player", round(summary.target_minutes_per_player, 2)])
        writer.writerow(["Average Minutes", round(summary.average_minutes, 2)])
        writer.writerow(["Median Minutes", round(summary.median_minutes, 2)])
        writer.writerow(["Minimum Minutes", summary.min_minutes])
        writer.writerow(["Maximum Minutes", summary.max_minutes])
        writer.writerow(["Players Under Target", summary.fairness_counts["under"]])
        writer.writerow(["Players On Target", summary.fairness_counts["ok"]])
        writer.writerow(["Players Over Target", summary.fairness_counts["over"]])
        writer.writerow([])
        header = buffer.getvalue()
        buffer.close()

        return header + self.export_service.export_to_csv(reports, schedule.total_game_minutes)

    @staticmethod
    def _classify_fairness(delta_minutes: float, threshold: int) -> str:
        if delta_minutes <= -threshold:
            return "under"
        if delta_minutes >= threshold:
            return "over"
        return "ok"
