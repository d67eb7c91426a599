"""Rotation session service: attendance, scheduling and reports for one game."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models import Player, PlayerReport, RotationState, Schedule, SubstitutionPair
from .errors import InsufficientPlayersError, NoScheduleError
from .report_builder import PlayTimeReportBuilder
from .rotation_scheduler import RotationScheduler, validate_competitive_balance
from .substitution_service import SubstitutionService

logger = logging.getLogger(__name__)


class RotationService:
    """
    Coordinates a coach's planning session.

    The session state is passed in explicitly; the service keeps no state of
    its own beyond its collaborators.
    """

    def __init__(
        self,
        state: RotationState,
        scheduler: Optional[RotationScheduler] = None,
        report_builder: Optional[PlayTimeReportBuilder] = None,
        substitution_service: Optional[SubstitutionService] = None,
    ) -> None:
        self.state = state
        self.scheduler = scheduler or RotationScheduler(state.config)
        self.report_builder = report_builder or PlayTimeReportBuilder()
        self.substitution_service = substitution_service or SubstitutionService()

    # ---------- Attendance and settings ---------- #

    def _require_player(self, player_id: int) -> Player:
        player = self.state.roster.get(player_id)
        if player is None:
            raise KeyError(player_id)
        return player

    def toggle_attendance(self, player_id: int) -> bool:
        """Flip a player's attendance and return the new value."""
        self._require_player(player_id)
        return self.state.attendance.toggle(player_id)

    def set_attendance(self, player_id: int, present: bool) -> None:
        self._require_player(player_id)
        self.state.attendance.mark(player_id, present)

    def present_players(self) -> List[Player]:
        return self.state.attendance.present_players(self.state.roster)

    def set_competitive_balance(self, value: int) -> None:
        """
        Update the competitive balance knob.

        Raises:
            ValueError: If the value is not an int in [0, 100]
        """
        self.state.competitive_balance = validate_competitive_balance(value)

    # ---------- Schedule and report ---------- #

    def generate_schedule(self) -> Schedule:
        """
        Generate and store a new schedule for the present players.

        Raises:
            InsufficientPlayersError: If too few players are present. Any
                previously generated schedule is kept.
        """
        present = self.present_players()
        config = self.state.config
        balance = self.state.competitive_balance
        try:
            slots = self.scheduler.generate(
                present,
                config.total_game_minutes,
                config.rotation_minutes,
                competitive_balance=balance,
            )
        except InsufficientPlayersError as e:
            logger.warning("Schedule not generated: %s", e)
            raise

        schedule = Schedule(
            slots=tuple(slots),
            present_players=tuple(present),
            total_game_minutes=config.total_game_minutes,
            rotation_minutes=config.rotation_minutes,
            competitive_balance=balance,
        )
        self.state.schedule = schedule
        return schedule

    def require_schedule(self) -> Schedule:
        """Return the current schedule or raise :class:`NoScheduleError`."""
        if self.state.schedule is None:
            logger.warning("Report requested before a schedule was generated")
            raise NoScheduleError()
        return self.state.schedule

    def generate_report(self) -> List[PlayerReport]:
        """
        Build the play time report for the current schedule.

        The report covers the players who were present when the schedule was
        generated, even if attendance has changed since.

        Raises:
            NoScheduleError: If no schedule has been generated yet
        """
        schedule = self.require_schedule()
        return self.report_builder.build(
            schedule.slots,
            schedule.present_players,
            schedule.total_game_minutes,
            schedule.rotation_minutes,
        )

    def substitutions(self, index: int) -> List[SubstitutionPair]:
        """
        Substitutions made at the start of slot ``index``.

        Raises:
            NoScheduleError: If no schedule has been generated yet
            IndexError: If the slot does not exist
        """
        schedule = self.require_schedule()
        return self.substitution_service.substitutions_for(schedule.slots, index)
