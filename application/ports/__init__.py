"""
Collaborator Interfaces (Ports) for the live workout session engine.

This package defines abstract interfaces that decouple the session engine
from the exercise library, performance history and storage. Implementations
are provided in the infrastructure layer and as in-memory fakes in tests.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the engine needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import ExerciseCatalog, WorkoutRecordRepository

    class FinishWorkoutUseCase:
        def __init__(self, record_repo: WorkoutRecordRepository):
            self._record_repo = record_repo
"""

# Exercise library
from application.ports.exercise_catalog import ExerciseCatalog

# Last-performance lookup
from application.ports.performance_history import PerformanceHistory

# Workout record persistence
from application.ports.workout_record_repository import WorkoutRecordRepository

__all__ = [
    "ExerciseCatalog",
    "PerformanceHistory",
    "WorkoutRecordRepository",
]
