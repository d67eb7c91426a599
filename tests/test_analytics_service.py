"""Tests for analytics reporting."""

import csv
import io

import pytest

from soccer_rotation.models import Player, Schedule
from soccer_rotation.services import (
    AnalyticsService, GameReportExporter, PlayTimeReportBuilder, RotationScheduler
)


def build(ranks, balance):
    players = [Player(id=i, name=f"P{i}", rank=rank) for i, rank in enumerate(ranks, start=1)]
    slots = RotationScheduler().generate(players, competitive_balance=balance)
    schedule = Schedule(
        slots=tuple(slots),
        present_players=tuple(players),
        total_game_minutes=40,
        rotation_minutes=5,
        competitive_balance=balance,
    )
    reports = PlayTimeReportBuilder().build(slots, players, 40, 5)
    return reports, schedule


def test_summarize_even_split():
    reports, schedule = build([5, 5, 5, 4, 4, 4], 0)

    summary = AnalyticsService().summarize(reports, schedule)

    assert summary.present_count == 6
    assert summary.target_minutes_per_player == pytest.approx(160 / 6)
    assert summary.min_minutes == 25
    assert summary.max_minutes == 30
    assert summary.spread_minutes == 5
    assert summary.median_minutes == 25
    assert summary.average_minutes == pytest.approx(160 / 6)
    assert summary.fairness_counts == {"under": 0, "ok": 6, "over": 0}
    assert [item.player.id for item in summary.players] == [3, 4, 5, 6, 1, 2]

    players = {item.player.id: item for item in summary.players}
    assert players[1].slots_played == 6
    assert players[3].slots_played == 5
    assert players[3].sideline_minutes == 15


def test_summarize_competitive_split():
    reports, schedule = build([5, 5, 5, 4, 4, 4, 1, 1], 100)

    summary = AnalyticsService().summarize(reports, schedule)

    assert summary.target_minutes_per_player == 20
    assert summary.fairness_counts == {"under": 6, "ok": 0, "over": 2}
    players = {item.player.id: item for item in summary.players}
    assert players[1].fairness == "over"
    assert players[1].delta_minutes == 20
    assert players[7].fairness == "under"
    assert players[7].delta_minutes == -10
    assert summary.players[0].player.id in (7, 8)


def test_generate_report_csv_contains_summary_and_player_rows():
    reports, schedule = build([5, 5, 4, 1], 50)

    csv_text = AnalyticsService().generate_report_csv(reports, schedule)
    rows = list(csv.reader(io.StringIO(csv_text)))

    assert rows[0] == ["Player Game Report"]
    assert ["Players Present", "4"] in rows
    assert ["Players On Target", "4"] in rows
    header = ["Name", "Rank", "Play Minutes", "Sideline Minutes", "Field Time", "Sideline Time"]
    assert header in rows
    assert ["P1", "5", "40", "0", "Q1 - 0:00 - End", ""] in rows


def test_generate_report_csv_requires_players():
    _, schedule = build([5, 5, 4, 1], 50)

    with pytest.raises(ValueError):
        AnalyticsService().generate_report_csv([], schedule)


def test_exporter_joins_intervals():
    reports, _ = build([5, 5, 5, 4, 4, 4, 1, 1], 0)

    rows = list(csv.reader(io.StringIO(GameReportExporter().export_to_csv(reports, 40))))

    first = next(row for row in rows if row[0] == "P1")
    assert first[4] == (
        "Q1 - 0:00 - Q1 - 5:00; Q2 - 0:00 - Q2 - 5:00; "
        "Q3 - 0:00 - Q3 - 5:00; Q4 - 0:00 - Q4 - 5:00"
    )
    assert first[5].endswith("Q4 - 5:00 - End")
