"""
Shared fixtures for the session engine tests.
"""

import pytest

from domain.models import ExerciseTemplate
from live_workout.settings import Settings, get_settings
from tests.fakes import (
    FakeExerciseCatalog,
    FakePerformanceHistory,
    FakeWorkoutRecordRepository,
    ManualTicker,
)


# =============================================================================
# Settings
# =============================================================================


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """get_settings() is cached; keep tests isolated from each other."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with defaults only, no .env lookup."""
    return Settings(environment="test", _env_file=None)


# =============================================================================
# Templates
# =============================================================================


@pytest.fixture
def bench() -> ExerciseTemplate:
    return ExerciseTemplate(
        id="ex_chest_1",
        name="Barbell Bench Press",
        muscle_group="Chest",
        movement_pattern="Push",
        equipment="Barbell",
        sets=3,
        reps=8,
        rest_time=120,
    )


@pytest.fixture
def squat() -> ExerciseTemplate:
    return ExerciseTemplate(
        id="ex_legs_2",
        name="Barbell Squat",
        muscle_group="Legs",
        movement_pattern="Squat",
        equipment="Barbell",
        sets=2,
    )


@pytest.fixture
def plan(bench, squat):
    return [bench, squat]


# =============================================================================
# Fakes
# =============================================================================


@pytest.fixture
def catalog() -> FakeExerciseCatalog:
    return FakeExerciseCatalog()


@pytest.fixture
def history() -> FakePerformanceHistory:
    return FakePerformanceHistory()


@pytest.fixture
def record_repo() -> FakeWorkoutRecordRepository:
    return FakeWorkoutRecordRepository()


@pytest.fixture
def ticker() -> ManualTicker:
    return ManualTicker()
