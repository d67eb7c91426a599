"""
Models package for the Soccer Rotation Planner.

This package contains the core data models used throughout the application.
"""
from .player import Player, Roster, Attendance
from .game_config import GameConfig
from .schedule import Slot, Schedule
from .game_report import (
    Interval, PlayerReport, SubstitutionPair, PlayerTimeSummary, PlayTimeSummary
)
from .rotation_state import RotationState

__all__ = [
    "Player", "Roster", "Attendance", "GameConfig", "Slot", "Schedule",
    "Interval", "PlayerReport", "SubstitutionPair", "PlayerTimeSummary",
    "PlayTimeSummary", "RotationState"
]
