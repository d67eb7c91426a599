"""Exceptions raised by the rotation planner services."""


class RotationPlannerError(Exception):
    """Base class for recoverable, user-correctable planner errors."""
    pass


class InsufficientPlayersError(RotationPlannerError):
    """Raised when too few players are present to build a schedule."""

    def __init__(self, present_count: int, required: int):
        self.present_count = present_count
        self.required = required
        super().__init__(
            f"There must be at least {required} players present "
            f"({present_count} marked present)."
        )


class NoScheduleError(RotationPlannerError):
    """Raised when a report is requested before a schedule was generated."""

    def __init__(self, message: str = "Please generate a rotation schedule first."):
        super().__init__(message)


class RosterValidationError(RotationPlannerError):
    """Custom exception for roster validation errors."""
    pass
