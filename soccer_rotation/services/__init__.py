"""
Services package for the Soccer Rotation Planner.

This package contains service classes that handle business logic.
Includes factory for proper dependency injection following SOLID principles.
"""
from .errors import (
    RotationPlannerError, InsufficientPlayersError, NoScheduleError,
    RosterValidationError
)
from .slot_selector import SlotSelector
from .rotation_scheduler import RotationScheduler
from .report_builder import PlayTimeReportBuilder
from .substitution_service import SubstitutionService
from .analytics_service import AnalyticsService, GameReportExporter
from .roster_service import RosterService, RosterValidator
from .rotation_service import RotationService
from .service_factory import ServiceFactory

__all__ = [
    "RotationPlannerError", "InsufficientPlayersError", "NoScheduleError",
    "RosterValidationError", "SlotSelector", "RotationScheduler",
    "PlayTimeReportBuilder", "SubstitutionService", "AnalyticsService",
    "GameReportExporter", "RosterService", "RosterValidator",
    "RotationService", "ServiceFactory"
]
