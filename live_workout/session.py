"""
Live workout session facade.

LiveWorkoutSession is what a screen talks to while the user is mid-workout.
It composes the navigator, the session log and the rest timer, and reaches
the exercise catalog, performance history and record storage only through
collaborators injected at construction.

Completing a non-final set starts the rest timer with the exercise's
effective rest time and then notifies the UI sink, both synchronously.

Usage:
    >>> session = LiveWorkoutSession(
    ...     [bench, squat],
    ...     catalog=catalog,
    ...     history=history,
    ...     record_repo=record_repo,
    ...     on_set_completed=show_rest_sheet,
    ... )
    >>> session.complete_set(1, reps=8, weight=60)
    >>> session.next_exercise()
    >>> result = session.finish()
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Iterable, List, Optional

from application.exceptions import SessionError, SessionValidationError
from application.ports import ExerciseCatalog, PerformanceHistory, WorkoutRecordRepository
from application.use_cases.finish_workout import FinishWorkoutResult, FinishWorkoutUseCase
from application.use_cases.load_last_performance import LoadLastPerformanceUseCase
from application.use_cases.suggest_substitutes import (
    SuggestSubstitutesResult,
    SuggestSubstitutesUseCase,
)
from domain.converters import normalize_catalog_records
from domain.models import ExerciseTemplate, LastPerformance, LogEntry, TimerState
from live_workout.navigator import ExerciseNavigator
from live_workout.rest_timer import RestTimer, Ticker
from live_workout.session_log import SessionLog
from live_workout.settings import Settings, get_settings

logger = logging.getLogger(__name__)


@dataclass
class OperationResult:
    """Outcome of a session operation."""

    success: bool
    data: Any = None
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "OperationResult":
        return cls(success=True, data=data)

    @classmethod
    def failed(cls, error: SessionError) -> "OperationResult":
        return cls(success=False, error=error.message, error_code=error.code)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class LiveWorkoutSession:
    """
    One active workout: plan, logbook, rest timer and collaborators.

    Args:
        exercises: The initial workout plan
        catalog: Exercise library, used for substitution suggestions
        history: Performance history, used to seed default inputs
        record_repo: Storage for the aggregated records on finish
        settings: Engine settings (defaults to get_settings())
        template_id: Template the session was started from, if any
        user_id: Owner of the session (None for the local user)
        on_set_completed: UI sink receiving the effective rest time
        on_rest_complete: Called when a rest countdown finishes naturally
        alert: Haptic/alert side effect for finished rest periods
        ticker: Tick source for the rest timer (None = manual ticks)
        clock: Returns the current time; used for the session start time
    """

    def __init__(
        self,
        exercises: Iterable[ExerciseTemplate],
        *,
        catalog: Optional[ExerciseCatalog] = None,
        history: Optional[PerformanceHistory] = None,
        record_repo: Optional[WorkoutRecordRepository] = None,
        settings: Optional[Settings] = None,
        template_id: Optional[str] = None,
        user_id: Optional[str] = None,
        on_set_completed: Optional[Callable[[int], None]] = None,
        on_rest_complete: Optional[Callable[[], None]] = None,
        alert: Optional[Callable[[], None]] = None,
        ticker: Optional[Ticker] = None,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self._settings = settings or get_settings()
        self._catalog = catalog
        self._history = history
        self._record_repo = record_repo
        self._template_id = template_id
        self._user_id = user_id
        self._on_set_completed = on_set_completed
        self._clock = clock

        self._navigator = ExerciseNavigator(exercises)
        self._timer = RestTimer(
            on_rest_complete,
            ticker=ticker,
            alert=alert,
            vibration_enabled=self._settings.vibration_enabled,
        )
        self._log = SessionLog(
            self._navigator,
            default_rest_seconds=self._settings.default_rest_seconds,
            on_set_completed=self._handle_set_completed,
        )

        self._workout_start_time = clock()
        self._last_performance: Dict[str, Optional[LastPerformance]] = {}
        self._finished = False

        logger.info(
            "Live workout started with %d exercises (template=%s)",
            len(self._navigator),
            template_id,
        )

    @classmethod
    def from_records(
        cls,
        records: Iterable[Dict[str, Any]],
        **kwargs: Any,
    ) -> "LiveWorkoutSession":
        """Start a session from raw template/catalog records."""
        return cls(normalize_catalog_records(records), **kwargs)

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    @property
    def navigator(self) -> ExerciseNavigator:
        return self._navigator

    @property
    def log(self) -> SessionLog:
        return self._log

    @property
    def timer(self) -> RestTimer:
        return self._timer

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def current_exercise_template(self) -> Optional[ExerciseTemplate]:
        return self._log.current_exercise_template

    @property
    def current_exercise_log(self) -> List[LogEntry]:
        return self._log.current_exercise_log

    @property
    def can_finish_exercise(self) -> bool:
        return self._log.can_finish_exercise

    @property
    def can_finish_workout(self) -> bool:
        return self._log.can_finish_workout

    @property
    def timer_state(self) -> TimerState:
        return self._timer.state

    @property
    def last_performance(self) -> Optional[LastPerformance]:
        """Seeded reps/weight for the current exercise, once loaded."""
        template = self.current_exercise_template
        if template is None:
            return None
        return self._last_performance.get(template.name)

    # ------------------------------------------------------------------
    # Metadata
    # ------------------------------------------------------------------

    @property
    def workout_start_time(self) -> datetime:
        return self._workout_start_time

    @property
    def template_id(self) -> Optional[str]:
        return self._template_id

    @property
    def user_id(self) -> Optional[str]:
        return self._user_id

    @property
    def current_exercise_index(self) -> int:
        return self._navigator.pointer

    @property
    def total_exercises(self) -> int:
        return len(self._navigator)

    @property
    def completed_sets_count(self) -> int:
        return self._log.completed_sets_count

    @property
    def plan(self) -> List[ExerciseTemplate]:
        return self._navigator.plan

    @property
    def entries(self) -> List[LogEntry]:
        return self._log.entries

    @property
    def is_finished(self) -> bool:
        return self._finished

    def duration_minutes(self, now: Optional[datetime] = None) -> int:
        """Whole minutes elapsed since the session started."""
        elapsed = (now or self._clock()) - self._workout_start_time
        return max(0, int(elapsed.total_seconds() // 60))

    # ------------------------------------------------------------------
    # Set management
    # ------------------------------------------------------------------

    def complete_set(self, set_index: int, reps: int, weight: float) -> OperationResult:
        """Log a set of the current exercise; may start the rest timer."""
        try:
            entry = self._log.complete_set(set_index, reps, weight)
        except SessionValidationError as e:
            logger.warning(e.message)
            return OperationResult.failed(e)
        if entry is None:
            return self._no_current_exercise("complete a set")
        return OperationResult.ok(entry)

    def un_complete_set(self, set_index: int) -> OperationResult:
        if self.current_exercise_template is None:
            return self._no_current_exercise("uncomplete a set")
        return OperationResult.ok(self._log.un_complete_set(set_index))

    def adjust_reps(self, set_index: int, delta: int, is_absolute: bool = False) -> OperationResult:
        if self.current_exercise_template is None:
            return self._no_current_exercise("adjust reps")
        return OperationResult.ok(self._log.adjust_reps(set_index, delta, is_absolute))

    def adjust_weight(
        self, set_index: int, delta: float, is_absolute: bool = False
    ) -> OperationResult:
        if self.current_exercise_template is None:
            return self._no_current_exercise("adjust weight")
        return OperationResult.ok(self._log.adjust_weight(set_index, delta, is_absolute))

    def add_set(self) -> OperationResult:
        total = self._log.add_set()
        if total is None:
            return self._no_current_exercise("add a set")
        return OperationResult.ok(total)

    # ------------------------------------------------------------------
    # Exercise navigation
    # ------------------------------------------------------------------

    def next_exercise(self) -> int:
        return self._navigator.next_exercise()

    def previous_exercise(self) -> int:
        return self._navigator.previous_exercise()

    def skip_exercise(self) -> int:
        return self._navigator.skip_exercise()

    def replace_current_exercise(self, template: ExerciseTemplate) -> OperationResult:
        """
        Swap the current exercise for another.

        Sets already logged under the old exercise stay in the log but no
        longer show in the current exercise view.
        """
        try:
            replaced = self._navigator.replace_current(template)
        except SessionValidationError as e:
            logger.warning(e.message)
            return OperationResult.failed(e)
        return OperationResult.ok(replaced)

    def add_exercise(self, template: ExerciseTemplate) -> OperationResult:
        return OperationResult.ok(self._navigator.add_exercise(template))

    def remove_current_exercise(self) -> OperationResult:
        """
        Remove the current exercise from the plan.

        Returns:
            OperationResult whose data is True when the plan is now empty
        """
        try:
            now_empty = self._navigator.remove_current()
        except SessionValidationError as e:
            logger.warning(e.message)
            return OperationResult.failed(e)
        return OperationResult.ok(now_empty)

    # ------------------------------------------------------------------
    # Collaborator-backed operations
    # ------------------------------------------------------------------

    def open_current_exercise(self) -> OperationResult:
        """
        Load the last performance of the current exercise.

        History is queried once per exercise per session; later calls return
        the cached value.

        Returns:
            OperationResult whose data is a LastPerformance or None
        """
        template = self.current_exercise_template
        if template is None:
            return self._no_current_exercise("open an exercise")
        if template.name in self._last_performance:
            return OperationResult.ok(self._last_performance[template.name])
        if self._history is None:
            return OperationResult.ok(None)

        result = LoadLastPerformanceUseCase(self._history).execute(template.name, self._user_id)
        if not result.success:
            return OperationResult(
                success=False, error=result.error, error_code=result.error_code
            )

        self._last_performance[template.name] = result.performance
        return OperationResult.ok(result.performance)

    def suggest_replacements(self, limit: Optional[int] = None) -> SuggestSubstitutesResult:
        """Rank substitutes for the current exercise."""
        template = self.current_exercise_template
        if template is None or self._catalog is None:
            reason = "no current exercise" if template is None else "no exercise catalog"
            error = SessionValidationError(f"Cannot suggest replacements: {reason}")
            return SuggestSubstitutesResult(
                success=False, error=error.message, error_code=error.code
            )

        use_case = SuggestSubstitutesUseCase(self._catalog)
        return use_case.execute(
            template,
            limit=limit if limit is not None else self._settings.suggestion_limit,
            user_id=self._user_id,
        )

    def finish(self) -> FinishWorkoutResult:
        """
        Aggregate the log and save it as one batch.

        The rest timer is torn down whether or not the save succeeds.
        """
        self._timer.close()
        if self._record_repo is None:
            error = SessionValidationError("Cannot finish workout: no record storage")
            return FinishWorkoutResult(
                success=False, error=error.message, error_code=error.code
            )

        result = FinishWorkoutUseCase(self._record_repo).execute(
            self._log.entries,
            self._navigator.plan,
            self._workout_start_time,
            user_id=self._user_id,
        )
        if result.success:
            self._finished = True
            logger.info(
                "Live workout finished after %d minutes with %d records",
                self.duration_minutes(),
                len(result.records),
            )
        return result

    def close(self) -> None:
        """Tear down the session's rest timer tick."""
        self._timer.close()

    def __enter__(self) -> "LiveWorkoutSession":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _handle_set_completed(self, rest_seconds: int) -> None:
        self._timer.start(rest_seconds)
        if self._on_set_completed is not None:
            self._on_set_completed(rest_seconds)

    def _no_current_exercise(self, action: str) -> OperationResult:
        error = SessionValidationError(f"Cannot {action}: no current exercise")
        logger.warning(error.message)
        return OperationResult.failed(error)
