"""
Utility functions for the Soccer Rotation Planner application.

This module contains the minute label helpers used by the schedule and
report views.
"""
from .constants import QUARTER_MINUTES, TOTAL_GAME_MINUTES


def format_minute(minute: int, total_game_minutes: int = TOTAL_GAME_MINUTES) -> str:
    """
    Format a minute offset from kickoff as a quarter label.

    Args:
        minute: Minutes since the start of the game
        total_game_minutes: Length of the game; this minute is labelled "End"

    Returns:
        Label such as ``"Q2 - 5:00"``

    Raises:
        ValueError: If the minute lies outside the game

    Example:
        >>> format_minute(15)
        'Q2 - 5:00'
        >>> format_minute(40)
        'End'
    """
    if minute < 0 or minute > total_game_minutes:
        raise ValueError(
            f"Minute {minute} is outside the game (0-{total_game_minutes})"
        )
    if minute == total_game_minutes:
        return "End"
    quarter = minute // QUARTER_MINUTES + 1
    minute_in_quarter = minute % QUARTER_MINUTES
    return f"Q{quarter} - {minute_in_quarter}:00"


def format_interval(start: int, end: int, total_game_minutes: int = TOTAL_GAME_MINUTES) -> str:
    """Format a ``[start, end)`` minute range as ``"<start label> - <end label>"``."""
    return (
        f"{format_minute(start, total_game_minutes)} - "
        f"{format_minute(end, total_game_minutes)}"
    )


def fmt_slot_heading(start: int, end: int) -> str:
    """
    Format the heading shown above a rotation slot.

    Example:
        >>> fmt_slot_heading(15, 20)
        'Quarter 2 (5-10 min)'
    """
    quarter = start // QUARTER_MINUTES + 1
    offset = start % QUARTER_MINUTES
    return f"Quarter {quarter} ({offset}-{offset + (end - start)} min)"
