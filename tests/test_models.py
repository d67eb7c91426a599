"""
Unit tests for the rotation planner data models.

Tests serialization and validation of Player, Attendance, GameConfig,
Interval, Schedule and RotationState.
"""
import unittest

from soccer_rotation.models import (
    Attendance, GameConfig, Interval, Player, PlayerReport, Roster, RotationState,
    Schedule, Slot
)


class TestPlayerModel(unittest.TestCase):
    """Test cases for Player, Roster and Attendance."""

    def setUp(self) -> None:
        self.players = (
            Player(id=1, name="Luca", rank=5),
            Player(id=2, name="Alana", rank=1),
            Player(id=3, name="Trax", rank=4),
        )
        self.roster = Roster(players=self.players)

    def test_player_round_trip(self) -> None:
        data = self.players[0].to_dict()
        self.assertEqual(data, {"id": 1, "name": "Luca", "rank": 5})
        self.assertEqual(Player.from_dict(data), self.players[0])

    def test_player_is_immutable(self) -> None:
        with self.assertRaises(AttributeError):
            self.players[0].rank = 3

    def test_attendance_defaults_to_absent(self) -> None:
        attendance = Attendance.all_absent(self.roster)
        self.assertFalse(attendance.is_present(1))
        self.assertFalse(Attendance().is_present(1))
        self.assertEqual(attendance.present_players(self.roster), [])

    def test_present_players_follow_roster_order(self) -> None:
        attendance = Attendance()
        attendance.mark(3, True)
        attendance.toggle(1)

        self.assertEqual([p.id for p in attendance.present_players(self.roster)], [1, 3])


class TestGameConfig(unittest.TestCase):
    """Test cases for GameConfig validation."""

    def test_defaults(self) -> None:
        config = GameConfig()
        self.assertEqual(config.total_game_minutes, 40)
        self.assertEqual(config.rotation_minutes, 5)
        self.assertEqual(config.players_needed, 4)
        self.assertEqual(config.slot_count, 8)

    def test_invalid_values(self) -> None:
        with self.assertRaises(ValueError):
            GameConfig(total_game_minutes=42)
        with self.assertRaises(ValueError):
            GameConfig(rotation_minutes=0)
        with self.assertRaises(ValueError):
            GameConfig(players_needed=0)
        with self.assertRaises(ValueError):
            GameConfig(max_play_time_difference=-1)

    def test_dict_round_trip(self) -> None:
        config = GameConfig(total_game_minutes=60, rotation_minutes=10)
        data = config.to_dict()
        self.assertEqual(data["slot_count"], 6)
        self.assertEqual(GameConfig.from_dict(data), config)
        self.assertEqual(GameConfig.from_dict({}), GameConfig())


class TestReportModels(unittest.TestCase):
    """Test cases for intervals, slots and schedules."""

    def test_interval(self) -> None:
        interval = Interval(5, 15)
        self.assertEqual(interval.duration, 10)
        self.assertEqual(interval.extended_to(20), Interval(5, 20))
        self.assertEqual(interval.to_list(), [5, 15])
        with self.assertRaises(ValueError):
            Interval(10, 10)

    def test_player_report_sideline_time(self) -> None:
        report = PlayerReport(
            player=Player(id=1, name="Luca", rank=5),
            total_play_time=25,
            field_times=[Interval(0, 25)],
            sideline_times=[Interval(25, 30), Interval(35, 40)],
        )
        self.assertEqual(report.sideline_time, 10)

    def test_slot_and_schedule(self) -> None:
        luca = Player(id=1, name="Luca", rank=5)
        slot = Slot(index=0, players=(luca,))
        schedule = Schedule(
            slots=(slot,), present_players=(luca,), total_game_minutes=12,
            rotation_minutes=5, competitive_balance=50,
        )

        self.assertTrue(slot.contains(1))
        self.assertFalse(slot.contains(2))
        self.assertEqual(slot.player_ids, [1])
        self.assertEqual(slot.to_dict(), {"index": 0, "players": [luca.to_dict()]})
        self.assertEqual(schedule.slot_window(0), (0, 5))
        self.assertEqual(schedule.slot_window(2), (10, 12))

    def test_rotation_state_json(self) -> None:
        roster = Roster(players=(Player(id=1, name="Luca", rank=5), Player(id=2, name="Ana", rank=2)))
        state = RotationState.for_roster(roster)
        state.attendance.mark(2, True)

        data = state.to_json()

        self.assertEqual(data["players"][1], {"id": 2, "name": "Ana", "rank": 2, "present": True})
        self.assertFalse(data["players"][0]["present"])
        self.assertEqual(data["competitive_balance"], 50)
        self.assertFalse(data["has_schedule"])
        self.assertEqual(data["config"]["slot_count"], 8)


if __name__ == "__main__":
    unittest.main()
