"""
Utilities package for the Soccer Rotation Planner.

This package contains utility functions and constants used throughout the application.
"""
from .time_utils import format_minute, format_interval, fmt_slot_heading
from .constants import (
    APP_TITLE, TOTAL_GAME_MINUTES, ROTATION_MINUTES, QUARTER_MINUTES,
    PLAYERS_NEEDED, MIN_PLAYERS_PRESENT, MAX_PLAY_TIME_DIFFERENCE,
    MIN_RANK, MAX_RANK, MIN_COMPETITIVE_BALANCE, MAX_COMPETITIVE_BALANCE,
    DEFAULT_COMPETITIVE_BALANCE, DEFAULT_ROSTER
)

__all__ = [
    "format_minute", "format_interval", "fmt_slot_heading", "APP_TITLE",
    "TOTAL_GAME_MINUTES", "ROTATION_MINUTES", "QUARTER_MINUTES",
    "PLAYERS_NEEDED", "MIN_PLAYERS_PRESENT", "MAX_PLAY_TIME_DIFFERENCE",
    "MIN_RANK", "MAX_RANK", "MIN_COMPETITIVE_BALANCE", "MAX_COMPETITIVE_BALANCE",
    "DEFAULT_COMPETITIVE_BALANCE", "DEFAULT_ROSTER"
]
