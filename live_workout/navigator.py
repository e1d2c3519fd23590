"""
Exercise navigator: the workout plan and the pointer into it.

The navigator owns the ordered, mutable list of ExerciseTemplate for the
session and the index of the exercise currently on screen. Moving the pointer
never touches the session log; the log derives its current view from the
pointer instead.
"""

import logging
from typing import Iterable, List, Optional

from application.exceptions import SessionValidationError
from domain.models import ExerciseTemplate

logger = logging.getLogger(__name__)


class ExerciseNavigator:
    """
    Ordered workout plan with a clamped pointer.

    The pointer stays within [0, len(plan) - 1]; on an empty plan it is 0 and
    there is no current exercise.

    Usage:
        >>> nav = ExerciseNavigator([bench, squat])
        >>> nav.next_exercise()
        >>> nav.current_template.name
        'Squat'
    """

    def __init__(self, plan: Optional[Iterable[ExerciseTemplate]] = None):
        self._plan: List[ExerciseTemplate] = list(plan or [])
        self._pointer = 0

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    @property
    def plan(self) -> List[ExerciseTemplate]:
        """A copy of the current plan."""
        return list(self._plan)

    @property
    def pointer(self) -> int:
        return self._pointer

    @property
    def is_empty(self) -> bool:
        return not self._plan

    @property
    def last_index(self) -> int:
        """Index of the last exercise, or -1 on an empty plan."""
        return len(self._plan) - 1

    @property
    def current_template(self) -> Optional[ExerciseTemplate]:
        if self.is_empty:
            return None
        return self._plan[self._pointer]

    def __len__(self) -> int:
        return len(self._plan)

    def template_at(self, index: int) -> Optional[ExerciseTemplate]:
        if 0 <= index < len(self._plan):
            return self._plan[index]
        return None

    # ------------------------------------------------------------------
    # Pointer movement
    # ------------------------------------------------------------------

    def next_exercise(self) -> int:
        """Move to the next exercise, stopping at the last one."""
        self._pointer = self._clamp(self._pointer + 1)
        return self._pointer

    def previous_exercise(self) -> int:
        """Move to the previous exercise, stopping at the first one."""
        self._pointer = self._clamp(self._pointer - 1)
        return self._pointer

    def skip_exercise(self) -> int:
        return self.next_exercise()

    def go_to(self, index: int) -> int:
        """Jump to an exercise, clamped into the plan."""
        self._pointer = self._clamp(index)
        return self._pointer

    # ------------------------------------------------------------------
    # Plan mutation
    # ------------------------------------------------------------------

    def replace_current(self, template: ExerciseTemplate) -> ExerciseTemplate:
        """
        Overwrite the exercise at the pointer in place.

        Returns:
            The template that was replaced

        Raises:
            SessionValidationError: If the plan is empty
        """
        previous = self._require_current("replace an exercise")
        self._plan[self._pointer] = template
        logger.info(
            "Replaced exercise %d: %s -> %s", self._pointer, previous.name, template.name
        )
        return previous

    def update_current(self, template: ExerciseTemplate) -> None:
        """Store an edited copy of the current exercise (e.g. one more set)."""
        self._require_current("update an exercise")
        self._plan[self._pointer] = template

    def add_exercise(self, template: ExerciseTemplate) -> int:
        """
        Append an exercise to the plan. The pointer does not move.

        Returns:
            Index of the new exercise
        """
        self._plan.append(template)
        logger.info("Added exercise %s at position %d", template.name, len(self._plan) - 1)
        return len(self._plan) - 1

    def remove_current(self) -> bool:
        """
        Delete the exercise at the pointer.

        The pointer keeps its value, which now addresses the exercise that
        followed the removed one, unless the removed exercise was last.

        Returns:
            True if the plan is now empty

        Raises:
            SessionValidationError: If the plan is already empty
        """
        removed = self._require_current("remove an exercise")
        del self._plan[self._pointer]
        self._pointer = self._clamp(self._pointer)
        logger.info("Removed exercise %s, %d remaining", removed.name, len(self._plan))
        return self.is_empty

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _clamp(self, index: int) -> int:
        return max(0, min(index, self.last_index))

    def _require_current(self, action: str) -> ExerciseTemplate:
        current = self.current_template
        if current is None:
            raise SessionValidationError(f"Cannot {action}: the workout plan is empty")
        return current
