"""
Domain layer for the live workout session engine.

This package contains pure domain models that are independent of
infrastructure concerns (storage, catalog services, UI).
"""

from domain.models import (
    ExerciseTemplate,
    LastPerformance,
    LogEntry,
    SuggestionReason,
    SuggestionResult,
    TimerPhase,
    TimerState,
    WorkoutRecord,
)

__all__ = [
    "ExerciseTemplate",
    "LastPerformance",
    "LogEntry",
    "SuggestionReason",
    "SuggestionResult",
    "TimerPhase",
    "TimerState",
    "WorkoutRecord",
]
