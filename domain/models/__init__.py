"""
Domain models for the live workout session engine.

These models are independent of storage, UI and catalog concerns:
- ExerciseTemplate: one planned exercise with optional suggested parameters
- LogEntry: one completed set in the session logbook
- TimerState: snapshot of the rest timer
- SuggestionResult: a ranked substitution candidate
- WorkoutRecord: an aggregated per-exercise result ready for persistence

Usage:
    >>> from domain.models import ExerciseTemplate, LogEntry

    >>> bench = ExerciseTemplate(id="ex_chest_1", name="Bench Press", sets=3)
    >>> entry = LogEntry(exercise_index=0, exercise_name=bench.name, set_number=1, reps=8, weight=60)
"""

from domain.models.exercise_template import (
    DEFAULT_SETS,
    MUSCLE_GROUP_KEY_PREFIX,
    NAME_KEY_PREFIX,
    ExerciseTemplate,
)
from domain.models.log_entry import LogEntry, generate_entry_id
from domain.models.suggestion import SuggestionReason, SuggestionResult
from domain.models.timer_state import TimerPhase, TimerState
from domain.models.workout_record import LastPerformance, WorkoutRecord

__all__ = [
    # Main entities
    "ExerciseTemplate",
    "LogEntry",
    "TimerState",
    "SuggestionResult",
    "WorkoutRecord",
    "LastPerformance",
    # Enums
    "TimerPhase",
    "SuggestionReason",
    # Helpers and constants
    "generate_entry_id",
    "DEFAULT_SETS",
    "NAME_KEY_PREFIX",
    "MUSCLE_GROUP_KEY_PREFIX",
]
