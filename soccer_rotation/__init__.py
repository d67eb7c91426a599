"""
Soccer Rotation Planner

Builds a rotation schedule for a youth soccer game, balancing equal playing
time against fielding the strongest players, and reports each player's
field and sideline time.

This package provides a Flask web interface for coaches to plan a game.
"""
from .models import Player, Roster, Attendance, GameConfig, RotationState
from .services import (
    RotationScheduler, PlayTimeReportBuilder, SubstitutionService, RotationService,
    InsufficientPlayersError, NoScheduleError
)
from .ui import create_app, run_web_app
from .utils import format_minute, APP_TITLE

__version__ = "1.0.0"
__author__ = "Soccer Coach Development Team"

__all__ = [
    "Player", "Roster", "Attendance", "GameConfig", "RotationState",
    "RotationScheduler", "PlayTimeReportBuilder", "SubstitutionService",
    "RotationService", "InsufficientPlayersError", "NoScheduleError",
    "create_app", "run_web_app", "format_minute", "APP_TITLE"
]
