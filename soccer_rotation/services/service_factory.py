"""
Service Factory for dependency injection following SOLID principles.

This module provides a factory for creating properly configured service instances
with their dependencies injected, following the Dependency Inversion Principle.
"""
from typing import Optional

from ..models import GameConfig, RotationState
from .analytics_service import AnalyticsService, GameReportExporter
from .report_builder import PlayTimeReportBuilder
from .roster_service import RosterService
from .rotation_scheduler import RotationScheduler
from .rotation_service import RotationService
from .slot_selector import SlotSelector
from .substitution_service import SubstitutionService


class ServiceFactory:
    """
    Factory for creating service instances with proper dependency injection.

    Stateless collaborators (report builder, substitution service, exporter,
    roster service) are created once and shared.
    """

    def __init__(self):
        """Initialize factory with default configurations."""
        self._report_builder: Optional[PlayTimeReportBuilder] = None
        self._substitution_service: Optional[SubstitutionService] = None
        self._export_service: Optional[GameReportExporter] = None
        self._roster_service: Optional[RosterService] = None

    def create_scheduler(self, config: GameConfig) -> RotationScheduler:
        """
        Create a RotationScheduler whose selector matches the game config.

        Args:
            config: Game parameters

        Returns:
            Configured RotationScheduler instance
        """
        selector = SlotSelector(
            players_needed=config.players_needed,
            max_play_time_difference=config.max_play_time_difference,
        )
        return RotationScheduler(config=config, selector=selector)

    def create_rotation_service(self, state: RotationState) -> RotationService:
        """
        Create RotationService with injected dependencies.

        Args:
            state: Session state to manage

        Returns:
            Configured RotationService instance
        """
        return RotationService(
            state=state,
            scheduler=self.create_scheduler(state.config),
            report_builder=self._get_report_builder(),
            substitution_service=self._get_substitution_service(),
        )

    def create_analytics_service(self) -> AnalyticsService:
        return AnalyticsService(export_service=self._get_export_service())

    def create_complete_service_suite(self, state: RotationState) -> dict:
        """
        Create a complete suite of services with proper dependencies.

        Args:
            state: Session state for the services

        Returns:
            Dictionary containing all configured services
        """
        return {
            'rotation': self.create_rotation_service(state),
            'analytics': self.create_analytics_service(),
        }

    def get_roster_service(self) -> RosterService:
        """Get singleton roster service."""
        if self._roster_service is None:
            self._roster_service = RosterService()
        return self._roster_service

    def _get_report_builder(self) -> PlayTimeReportBuilder:
        """Get singleton report builder."""
        if self._report_builder is None:
            self._report_builder = PlayTimeReportBuilder()
        return self._report_builder

    def _get_substitution_service(self) -> SubstitutionService:
        """Get singleton substitution service."""
        if self._substitution_service is None:
            self._substitution_service = SubstitutionService()
        return self._substitution_service

    def _get_export_service(self) -> GameReportExporter:
        """Get singleton export service."""
        if self._export_service is None:
            self._export_service = GameReportExporter()
        return self._export_service
