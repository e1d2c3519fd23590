"""
Session log: the logbook of completed sets.

One list of LogEntry is the only record of what the user did. Everything the
UI shows about the current exercise is computed from that list and the
navigator's pointer; nothing is stored per exercise, so moving between
exercises can never lose history.

Rest timer rules enforced here:
- the set-completed event fires only from complete_set()
- uncompleting, adjusting and adding sets never fire it
- completing the exercise's last set does not fire it
"""

import logging
from typing import Callable, List, Optional

from application.exceptions import SessionValidationError
from domain.models import ExerciseTemplate, LogEntry
from live_workout.navigator import ExerciseNavigator

logger = logging.getLogger(__name__)


DEFAULT_REST_SECONDS = 90

SetCompletedCallback = Callable[[int], None]


class SessionLog:
    """
    Append-only log of completed sets with derived per-exercise views.

    Args:
        navigator: Owner of the plan and the current-exercise pointer
        default_rest_seconds: Rest used when the template suggests none
        on_set_completed: Receives the effective rest time in seconds
            whenever a non-final set is completed
    """

    def __init__(
        self,
        navigator: ExerciseNavigator,
        *,
        default_rest_seconds: int = DEFAULT_REST_SECONDS,
        on_set_completed: Optional[SetCompletedCallback] = None,
    ):
        self._navigator = navigator
        self._default_rest_seconds = default_rest_seconds
        self._on_set_completed = on_set_completed
        self._entries: List[LogEntry] = []

    # ------------------------------------------------------------------
    # Derived reads
    # ------------------------------------------------------------------

    @property
    def entries(self) -> List[LogEntry]:
        """The whole log, in logging order."""
        return list(self._entries)

    @property
    def current_exercise_template(self) -> Optional[ExerciseTemplate]:
        return self._navigator.current_template

    @property
    def current_exercise_log(self) -> List[LogEntry]:
        """Entries logged for the current exercise at the current position."""
        template = self.current_exercise_template
        if template is None:
            return []
        pointer = self._navigator.pointer
        return [
            entry
            for entry in self._entries
            if entry.exercise_name == template.name and entry.exercise_index == pointer
        ]

    @property
    def can_finish_exercise(self) -> bool:
        return len(self.current_exercise_log) > 0

    @property
    def can_finish_workout(self) -> bool:
        return (
            not self._navigator.is_empty
            and self._navigator.pointer == self._navigator.last_index
            and self.can_finish_exercise
        )

    @property
    def completed_sets_count(self) -> int:
        return len(self._entries)

    def entry_for_set(self, set_index: int) -> Optional[LogEntry]:
        """The current exercise's entry for a set number, if logged."""
        for entry in self.current_exercise_log:
            if entry.set_number == set_index:
                return entry
        return None

    # ------------------------------------------------------------------
    # Set operations
    # ------------------------------------------------------------------

    def complete_set(self, set_index: int, reps: int, weight: float) -> Optional[LogEntry]:
        """
        Log a set of the current exercise as completed.

        Completing a set that is already logged updates that entry in place
        instead of appending a duplicate.

        Args:
            set_index: 1-based set number
            reps: Reps performed (negative values are floored at 0)
            weight: Weight used (negative values are floored at 0)

        Returns:
            The logged entry, or None if there is no current exercise

        Raises:
            SessionValidationError: If set_index is not a positive set number
        """
        template = self.current_exercise_template
        if template is None:
            logger.debug("complete_set(%s) ignored: no current exercise", set_index)
            return None
        _require_set_number(set_index)

        pointer = self._navigator.pointer
        reps = max(0, int(reps))
        weight = max(0.0, float(weight))

        entry: Optional[LogEntry] = None
        updated: List[LogEntry] = []
        for existing in self._entries:
            if entry is None and existing.matches(template.name, pointer, set_index):
                entry = existing.model_copy(
                    update={"reps": reps, "weight": weight, "completed": True}
                )
                updated.append(entry)
            else:
                updated.append(existing)

        if entry is None:
            entry = LogEntry(
                exercise_index=pointer,
                exercise_name=template.name,
                set_number=set_index,
                reps=reps,
                weight=weight,
                completed=True,
            )
            updated.append(entry)

        self._entries = updated
        logger.debug("Completed %s", entry)

        is_last_set = set_index == template.total_sets
        if not is_last_set and self._on_set_completed is not None:
            self._on_set_completed(template.effective_rest_time(self._default_rest_seconds))

        return entry

    def un_complete_set(self, set_index: int) -> int:
        """
        Remove a set of the current exercise from the log.

        Returns:
            Number of entries removed (0 if none matched)
        """
        template = self.current_exercise_template
        if template is None:
            return 0

        pointer = self._navigator.pointer
        kept = [e for e in self._entries if not e.matches(template.name, pointer, set_index)]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        if removed:
            logger.debug("Uncompleted %s set %d", template.name, set_index)
        return removed

    def adjust_reps(
        self, set_index: int, delta: int, is_absolute: bool = False
    ) -> Optional[LogEntry]:
        """
        Change the reps of a logged set.

        Args:
            set_index: 1-based set number
            delta: Amount to add, or the new value when is_absolute
            is_absolute: Set instead of add

        Returns:
            The updated entry, or None if the set is not logged
        """
        return self._adjust(
            set_index,
            lambda entry: entry.with_reps(delta if is_absolute else entry.reps + delta),
        )

    def adjust_weight(
        self, set_index: int, delta: float, is_absolute: bool = False
    ) -> Optional[LogEntry]:
        """
        Change the weight of a logged set.

        Args:
            set_index: 1-based set number
            delta: Amount to add, or the new value when is_absolute
            is_absolute: Set instead of add

        Returns:
            The updated entry, or None if the set is not logged
        """
        return self._adjust(
            set_index,
            lambda entry: entry.with_weight(delta if is_absolute else entry.weight + delta),
        )

    def add_set(self) -> Optional[int]:
        """
        Suggest one more set for the current exercise.

        Only the plan changes; the log is untouched.

        Returns:
            The new suggested set count, or None if there is no current exercise
        """
        template = self.current_exercise_template
        if template is None:
            return None
        total = template.total_sets + 1
        self._navigator.update_current(template.with_sets(total))
        return total

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _adjust(
        self, set_index: int, change: Callable[[LogEntry], LogEntry]
    ) -> Optional[LogEntry]:
        template = self.current_exercise_template
        if template is None:
            return None

        pointer = self._navigator.pointer
        changed: Optional[LogEntry] = None
        updated: List[LogEntry] = []
        for entry in self._entries:
            if entry.matches(template.name, pointer, set_index):
                entry = change(entry)
                changed = entry
            updated.append(entry)

        self._entries = updated
        return changed


def _require_set_number(set_index: int) -> None:
    if set_index < 1:
        raise SessionValidationError(f"Set number must be 1 or greater, got {set_index}")
