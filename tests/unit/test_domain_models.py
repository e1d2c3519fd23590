"""
Unit tests for domain models.

Tests for:
- ExerciseTemplate defaults and identity
- LogEntry immutability and floors
- TimerState phase
- SuggestionReason scores
- WorkoutRecord storage shape and LastPerformance parsing
"""

import pytest
from pydantic import ValidationError

from domain.models import (
    DEFAULT_SETS,
    ExerciseTemplate,
    LastPerformance,
    LogEntry,
    SuggestionReason,
    TimerPhase,
    TimerState,
    WorkoutRecord,
)


# =============================================================================
# ExerciseTemplate Tests
# =============================================================================


@pytest.mark.unit
class TestExerciseTemplate:
    """Tests for the ExerciseTemplate value object."""

    def test_total_sets_default(self):
        template = ExerciseTemplate(id="x", name="Squat")
        assert template.total_sets == DEFAULT_SETS

    def test_total_sets_explicit(self):
        assert ExerciseTemplate(id="x", name="Squat", sets=5).total_sets == 5

    def test_effective_rest_time(self):
        assert ExerciseTemplate(id="x", name="Squat").effective_rest_time(90) == 90
        assert ExerciseTemplate(id="x", name="Squat", rest_time=0).effective_rest_time(90) == 0

    def test_identity_key_uses_name_key(self):
        template = ExerciseTemplate(id="x", name="Squat", name_key="exercises.Back Squat")
        assert template.identity_key == "exercises.back squat"

    def test_identity_key_from_name(self):
        assert ExerciseTemplate(id="x", name="Squat").identity_key == "exercises.squat"

    def test_with_sets_returns_copy(self):
        template = ExerciseTemplate(id="x", name="Squat", sets=3)
        bigger = template.with_sets(4)

        assert bigger.sets == 4
        assert template.sets == 3

    def test_is_frozen(self):
        template = ExerciseTemplate(id="x", name="Squat")
        with pytest.raises(ValidationError):
            template.name = "Other"

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError):
            ExerciseTemplate(id="x", name="")

    def test_str(self):
        template = ExerciseTemplate(id="x", name="Squat", muscle_group="Legs", sets=4)
        assert str(template) == "Squat (Legs) 4 sets"


# =============================================================================
# LogEntry Tests
# =============================================================================


@pytest.mark.unit
class TestLogEntry:
    """Tests for LogEntry."""

    def test_ids_are_unique(self):
        a = LogEntry(exercise_index=0, exercise_name="Squat", set_number=1)
        b = LogEntry(exercise_index=0, exercise_name="Squat", set_number=1)
        assert a.id != b.id

    def test_matches(self):
        entry = LogEntry(exercise_index=1, exercise_name="Squat", set_number=2)

        assert entry.matches("Squat", 1, 2)
        assert not entry.matches("Squat", 0, 2)
        assert not entry.matches("Bench", 1, 2)

    def test_with_reps_floors(self):
        entry = LogEntry(exercise_index=0, exercise_name="Squat", set_number=1, reps=5)

        assert entry.with_reps(-2).reps == 0
        assert entry.reps == 5

    def test_with_reps_coerces_to_int(self):
        entry = LogEntry(exercise_index=0, exercise_name="Squat", set_number=1, reps=5)

        updated = entry.with_reps(7.9)

        assert updated.reps == 7
        assert isinstance(updated.reps, int)

    def test_with_weight_coerces_to_float(self):
        entry = LogEntry(exercise_index=0, exercise_name="Squat", set_number=1)

        updated = entry.with_weight(100)

        assert updated.weight == 100.0
        assert isinstance(updated.weight, float)

    def test_with_weight_keeps_id(self):
        entry = LogEntry(exercise_index=0, exercise_name="Squat", set_number=1, weight=100)
        assert entry.with_weight(110).id == entry.id

    def test_set_number_must_be_positive(self):
        with pytest.raises(ValidationError):
            LogEntry(exercise_index=0, exercise_name="Squat", set_number=0)


# =============================================================================
# TimerState Tests
# =============================================================================


@pytest.mark.unit
class TestTimerState:
    """Phase derived from fields."""

    def test_idle(self):
        assert TimerState().phase == TimerPhase.IDLE

    def test_running(self):
        assert TimerState(time_left=10, is_running=True, duration=10).phase == TimerPhase.RUNNING

    def test_paused(self):
        assert TimerState(time_left=4, is_running=False, duration=10).phase == TimerPhase.PAUSED


# =============================================================================
# Suggestion / Record Tests
# =============================================================================


@pytest.mark.unit
class TestSuggestionReason:

    @pytest.mark.parametrize(
        "reason,score",
        [
            (SuggestionReason.SAME_MUSCLE_GROUP_AND_PATTERN, 100),
            (SuggestionReason.SAME_MUSCLE_GROUP, 80),
            (SuggestionReason.SAME_MOVEMENT_PATTERN, 60),
            (SuggestionReason.SAME_EQUIPMENT, 40),
        ],
    )
    def test_scores(self, reason, score):
        assert reason.score == score

    def test_label(self):
        assert SuggestionReason.SAME_EQUIPMENT.label == "Same equipment"


@pytest.mark.unit
class TestWorkoutRecord:

    def test_storage_dict_keys(self):
        record = WorkoutRecord(
            date="2024-05-01T09:30:00.000Z",
            muscle_group="Chest",
            exercise="Bench",
            sets=3,
            reps=8,
            weight=60.456,
        )

        assert record.to_storage_dict() == {
            "date": "2024-05-01T09:30:00.000Z",
            "muscleGroup": "Chest",
            "exercise": "Bench",
            "sets": 3,
            "reps": 8,
            "weight": 60.46,
        }

    def test_zero_sets_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutRecord(date="d", exercise="Bench", sets=0, reps=0, weight=0)


@pytest.mark.unit
class TestLastPerformance:

    def test_from_record(self):
        performance = LastPerformance.from_record({"reps": 8, "weight": 60})
        assert performance == LastPerformance(reps=8, weight=60.0)

    def test_from_missing_record(self):
        assert LastPerformance.from_record(None) is None
        assert LastPerformance.from_record({}) is None
        assert LastPerformance.from_record({"reps": None, "weight": None}) is None

    def test_partial_record(self):
        assert LastPerformance.from_record({"weight": 40}).reps == 0
