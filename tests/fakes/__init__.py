"""
Fake Collaborator Implementations for Testing.

This package provides in-memory fake implementations of the application
ports for fast, isolated testing. No database or event loop required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports reset() for test isolation
- Failure modes for persistence error paths

Usage:
    from tests.fakes import FakeExerciseCatalog, FakeWorkoutRecordRepository

    catalog = FakeExerciseCatalog()
    record_repo = FakeWorkoutRecordRepository()
    record_repo.fail_with("network down")
"""

from tests.fakes.exercise_catalog import FakeExerciseCatalog
from tests.fakes.performance_history import FakePerformanceHistory
from tests.fakes.ticker import ManualTicker
from tests.fakes.workout_record_repository import FakeWorkoutRecordRepository

__all__ = [
    "FakeExerciseCatalog",
    "FakePerformanceHistory",
    "FakeWorkoutRecordRepository",
    "ManualTicker",
]
