"""
Constants for the Soccer Rotation Planner application.

This module contains configuration constants used throughout the application.
"""

# Application metadata
APP_TITLE = "Soccer Team Rotation"

# Game timing defaults
TOTAL_GAME_MINUTES = 40
ROTATION_MINUTES = 5
QUARTER_MINUTES = 10

# Field size configuration
PLAYERS_NEEDED = 4
MIN_PLAYERS_PRESENT = 3

# One rotation's worth of minutes
MAX_PLAY_TIME_DIFFERENCE = 1

# Skill ranks (higher = stronger)
MIN_RANK = 1
MAX_RANK = 5

# Competitive balance slider: 0 = fair play, 100 = competitive
MIN_COMPETITIVE_BALANCE = 0
MAX_COMPETITIVE_BALANCE = 100
DEFAULT_COMPETITIVE_BALANCE = 50

# Default club roster used when no roster file is configured
DEFAULT_ROSTER = [
    {"id": 1, "name": "Luca", "rank": 5},
    {"id": 2, "name": "Johnathan", "rank": 5},
    {"id": 3, "name": "Arjun", "rank": 5},
    {"id": 4, "name": "Trax", "rank": 4},
    {"id": 5, "name": "Deevam", "rank": 4},
    {"id": 6, "name": "Siddharth", "rank": 4},
    {"id": 7, "name": "Nishtha", "rank": 1},
    {"id": 8, "name": "Alana", "rank": 1},
]
