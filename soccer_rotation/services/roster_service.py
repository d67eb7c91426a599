"""
Roster service for the Soccer Rotation Planner application.

This module provides validation and loading of the club roster, which is
configured once and then treated as immutable.
"""
import json
import os
from typing import Any, Dict, Iterable, List, Optional, Sequence

from ..models import Player, Roster
from ..utils import DEFAULT_ROSTER, MAX_RANK, MIN_RANK
from .errors import RosterValidationError


class RosterValidator:
    """Checks roster entries and reports every problem found."""

    def validate_player(self, player: Player) -> List[str]:
        """
        Validate a single player and return list of validation errors.

        Args:
            player: Player instance to validate

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if isinstance(player.id, bool) or not isinstance(player.id, int) or player.id < 1:
            errors.append(f"Player id {player.id!r} must be a positive whole number")

        if not isinstance(player.name, str) or not player.name.strip():
            errors.append(f"Player {player.id!r} must have a name")

        if isinstance(player.rank, bool) or not isinstance(player.rank, int):
            errors.append(f"Rank for player {player.id!r} must be a whole number")
        elif not MIN_RANK <= player.rank <= MAX_RANK:
            errors.append(
                f"Rank for player {player.id!r} must be between {MIN_RANK} and {MAX_RANK}"
            )

        return errors

    def validate(self, players: Sequence[Player]) -> List[str]:
        """Validate a full roster, including id uniqueness."""
        errors: List[str] = []
        seen = set()
        for player in players:
            errors.extend(self.validate_player(player))
            if player.id in seen:
                errors.append(f"Duplicate player id {player.id!r}")
            seen.add(player.id)
        return errors


class RosterService:
    """
    Service for building the roster from configuration data.

    Rosters come either from a JSON file (a list of ``{"id", "name",
    "rank"}`` objects, or an object with a ``"players"`` list) or from the
    built-in default roster.
    """

    def __init__(self, validator: Optional[RosterValidator] = None):
        self.validator = validator or RosterValidator()

    def build_roster(self, entries: Iterable[Dict[str, Any]]) -> Roster:
        """
        Create a validated roster from dictionaries.

        Raises:
            RosterValidationError: If any entry is invalid
        """
        players = [Player.from_dict(entry) for entry in entries]
        errors = self.validator.validate(players)
        if errors:
            raise RosterValidationError(f"Roster validation failed: {'; '.join(errors)}")
        return Roster(players=tuple(players))

    def default_roster(self) -> Roster:
        return self.build_roster(DEFAULT_ROSTER)

    def load_from_file(self, file_path: str) -> Roster:
        """
        Load the roster from a JSON file.

        Args:
            file_path: Path to the JSON file to load

        Returns:
            Validated Roster

        Raises:
            FileNotFoundError: If file doesn't exist
            json.JSONDecodeError: If file contains invalid JSON
            RosterValidationError: If the roster data is invalid
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"Roster file not found: {file_path}")

        with open(file_path, "r", encoding="utf-8") as f:
            data = json.load(f)

        if isinstance(data, dict):
            data = data.get("players", [])
        if not isinstance(data, list) or not all(isinstance(e, dict) for e in data):
            raise RosterValidationError("Roster file must contain a list of players")
        return self.build_roster(data)
