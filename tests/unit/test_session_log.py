"""
Unit tests for SessionLog.

Tests for:
- Current exercise view derived from the log and the navigator pointer
- Navigation round trips never lose logged sets
- Set-completed event rules for the rest timer
- Upsert, uncomplete, adjust and add-set behavior
"""

import pytest

from application.exceptions import SessionValidationError
from domain.models import ExerciseTemplate
from live_workout.navigator import ExerciseNavigator
from live_workout.session_log import SessionLog


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def navigator(plan) -> ExerciseNavigator:
    return ExerciseNavigator(plan)


@pytest.fixture
def rest_events():
    return []


@pytest.fixture
def log(navigator: ExerciseNavigator, rest_events) -> SessionLog:
    return SessionLog(navigator, default_rest_seconds=90, on_set_completed=rest_events.append)


# =============================================================================
# Derived View Tests
# =============================================================================


@pytest.mark.unit
class TestCurrentExerciseView:
    """Views computed from the log."""

    def test_empty_log(self, log: SessionLog):
        assert log.current_exercise_log == []
        assert log.can_finish_exercise is False
        assert log.can_finish_workout is False
        assert log.completed_sets_count == 0

    def test_completed_set_shows_in_view(self, log: SessionLog):
        entry = log.complete_set(1, 8, 60)

        assert log.current_exercise_log == [entry]
        assert entry.exercise_name == "Barbell Bench Press"
        assert entry.exercise_index == 0
        assert entry.completed is True
        assert log.can_finish_exercise is True

    def test_view_follows_pointer(self, log: SessionLog, navigator: ExerciseNavigator):
        log.complete_set(1, 8, 60)
        navigator.next_exercise()

        assert log.current_exercise_log == []
        assert log.current_exercise_template.name == "Barbell Squat"

    def test_navigation_round_trip_keeps_sets(self, log: SessionLog, navigator: ExerciseNavigator):
        """Sets logged on one exercise survive next/previous."""
        log.complete_set(1, 10, 50)
        log.complete_set(2, 10, 50)
        navigator.next_exercise()
        log.complete_set(1, 5, 100)
        navigator.previous_exercise()

        assert [e.set_number for e in log.current_exercise_log] == [1, 2]
        assert log.completed_sets_count == 3

    def test_can_finish_workout_only_on_last_exercise(self, log: SessionLog, navigator: ExerciseNavigator):
        log.complete_set(1, 8, 60)
        assert log.can_finish_workout is False

        navigator.next_exercise()
        assert log.can_finish_workout is False

        log.complete_set(1, 5, 100)
        assert log.can_finish_workout is True

    def test_entry_for_set(self, log: SessionLog):
        log.complete_set(2, 6, 70)

        assert log.entry_for_set(2).reps == 6
        assert log.entry_for_set(1) is None

    def test_same_exercise_twice_in_plan_has_separate_views(self, bench: ExerciseTemplate):
        navigator = ExerciseNavigator([bench, bench])
        log = SessionLog(navigator)

        log.complete_set(1, 8, 60)
        navigator.next_exercise()

        assert log.current_exercise_log == []


# =============================================================================
# Rest Event Tests
# =============================================================================


@pytest.mark.unit
class TestSetCompletedEvent:
    """When the rest timer is asked to start."""

    def test_non_final_set_fires_with_template_rest(self, log: SessionLog, rest_events):
        log.complete_set(1, 8, 60)
        assert rest_events == [120]

    def test_final_set_does_not_fire(self, log: SessionLog, rest_events):
        log.complete_set(3, 8, 60)
        assert rest_events == []

    def test_default_rest_used_when_template_has_none(
        self, log: SessionLog, navigator: ExerciseNavigator, rest_events
    ):
        navigator.next_exercise()
        log.complete_set(1, 5, 100)

        assert rest_events == [90]

    def test_uncomplete_adjust_and_add_set_never_fire(self, log: SessionLog, rest_events):
        log.complete_set(1, 8, 60)
        rest_events.clear()

        log.un_complete_set(1)
        log.adjust_reps(1, 1)
        log.adjust_weight(1, 2.5)
        log.add_set()

        assert rest_events == []

    def test_last_set_after_add_set(self, log: SessionLog, rest_events):
        """Set 3 is no longer final once a fourth set is added."""
        log.add_set()
        log.complete_set(3, 8, 60)
        log.complete_set(4, 8, 60)

        assert rest_events == [120]


# =============================================================================
# Set Operation Tests
# =============================================================================


@pytest.mark.unit
class TestSetOperations:
    """complete / uncomplete / adjust / add."""

    def test_complete_same_set_twice_updates_in_place(self, log: SessionLog):
        first = log.complete_set(1, 8, 60)
        log.complete_set(2, 8, 60)
        second = log.complete_set(1, 10, 65)

        assert second.id == first.id
        assert log.completed_sets_count == 2
        assert log.entries[0].reps == 10
        assert log.entries[0].weight == 65

    def test_negative_values_are_floored(self, log: SessionLog):
        entry = log.complete_set(1, -3, -10)

        assert entry.reps == 0
        assert entry.weight == 0

    def test_invalid_set_number_raises(self, log: SessionLog):
        with pytest.raises(SessionValidationError):
            log.complete_set(0, 8, 60)

    def test_complete_on_empty_plan_returns_none(self):
        log = SessionLog(ExerciseNavigator([]))
        assert log.complete_set(1, 8, 60) is None

    def test_un_complete_removes_only_that_set(self, log: SessionLog):
        log.complete_set(1, 8, 60)
        log.complete_set(2, 8, 60)

        assert log.un_complete_set(1) == 1
        assert [e.set_number for e in log.current_exercise_log] == [2]

    def test_un_complete_missing_set_is_noop(self, log: SessionLog):
        assert log.un_complete_set(3) == 0

    def test_adjust_reps_relative_and_absolute(self, log: SessionLog):
        log.complete_set(1, 8, 60)

        assert log.adjust_reps(1, 2).reps == 10
        assert log.adjust_reps(1, 5, is_absolute=True).reps == 5

    def test_adjust_reps_floors_at_zero(self, log: SessionLog):
        log.complete_set(1, 2, 60)
        assert log.adjust_reps(1, -5).reps == 0

    def test_adjust_reps_fractional_value_stays_int(self, log: SessionLog):
        log.complete_set(1, 8, 60)

        entry = log.adjust_reps(1, 2.5, is_absolute=True)

        assert entry.reps == 2
        assert isinstance(entry.reps, int)
        assert isinstance(log.entries[0].reps, int)

    def test_adjust_weight(self, log: SessionLog):
        log.complete_set(1, 8, 60)

        assert log.adjust_weight(1, 2.5).weight == 62.5
        assert log.adjust_weight(1, -100).weight == 0
        assert log.adjust_weight(1, 40, is_absolute=True).weight == 40

    def test_adjust_unlogged_set_returns_none(self, log: SessionLog):
        assert log.adjust_reps(1, 1) is None
        assert log.adjust_weight(1, 1) is None
        assert log.entries == []

    def test_add_set_changes_plan_only(self, log: SessionLog, navigator: ExerciseNavigator):
        assert log.add_set() == 4
        assert navigator.current_template.total_sets == 4
        assert log.entries == []

    def test_add_set_on_default_sets(self, log: SessionLog, navigator: ExerciseNavigator):
        navigator.update_current(navigator.current_template.model_copy(update={"sets": None}))
        assert log.add_set() == 4
