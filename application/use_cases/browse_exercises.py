"""
BrowseExercises Use Case.

Catalog lookups used while adding or swapping exercises mid-workout: free
text search, listing by muscle group, and fetching one exercise by ID. Every
record is normalized to ExerciseTemplate before it leaves this module.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from application.exceptions import ExerciseNotFoundError, PersistenceError, SessionError
from application.ports import ExerciseCatalog
from domain.converters import normalize_catalog_record, normalize_catalog_records
from domain.models import ExerciseTemplate

logger = logging.getLogger(__name__)


@dataclass
class ExerciseListResult:
    """Result of a catalog listing."""

    success: bool
    exercises: List[ExerciseTemplate] = field(default_factory=list)
    error: Optional[str] = None
    error_code: Optional[str] = None


@dataclass
class GetExerciseResult:
    """Result of a single catalog lookup."""

    success: bool
    exercise: Optional[ExerciseTemplate] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class BrowseExercisesUseCase:
    """
    Use case for browsing the exercise library.

    Usage:
        >>> use_case = BrowseExercisesUseCase(catalog=catalog)
        >>> use_case.search("bench").exercises
        >>> use_case.by_muscle_group("Back").exercises
        >>> use_case.get("ex_chest_1").exercise
    """

    def __init__(self, catalog: ExerciseCatalog) -> None:
        self._catalog = catalog

    def search(self, query: str) -> ExerciseListResult:
        """
        Search the library.

        A blank query returns an empty list without querying the catalog.
        """
        if not query or not query.strip():
            return ExerciseListResult(success=True)
        return self._list(lambda: self._catalog.search_exercises(query.strip()), "search exercises")

    def by_muscle_group(self, muscle_group: str) -> ExerciseListResult:
        """List exercises for a muscle group."""
        return self._list(
            lambda: self._catalog.get_exercises_by_muscle_group(muscle_group),
            "load exercises",
        )

    def get(self, exercise_id: str) -> GetExerciseResult:
        """
        Fetch one exercise by catalog ID.

        Returns:
            GetExerciseResult; a missing or unusable record is a not_found error
        """
        try:
            record = self._catalog.get_exercise_by_id(exercise_id)
            exercise = normalize_catalog_record(record) if record else None
            if exercise is None:
                raise ExerciseNotFoundError(f"Exercise not found: {exercise_id}")
        except SessionError as e:
            logger.warning(e.message)
            return GetExerciseResult(success=False, error=e.message, error_code=e.code)
        except Exception as e:
            logger.exception(f"Exercise lookup failed for {exercise_id}: {e}")
            error = PersistenceError(str(e) or "Failed to load exercise")
            return GetExerciseResult(success=False, error=error.message, error_code=error.code)

        return GetExerciseResult(success=True, exercise=exercise)

    def _list(
        self,
        fetch: Callable[[], Optional[List[Dict[str, Any]]]],
        action: str,
    ) -> ExerciseListResult:
        try:
            records = fetch()
        except Exception as e:
            logger.exception(f"Failed to {action}: {e}")
            error = PersistenceError(str(e) or f"Failed to {action}")
            return ExerciseListResult(success=False, error=error.message, error_code=error.code)

        if records is None:
            error = PersistenceError(f"Failed to {action}")
            return ExerciseListResult(success=False, error=error.message, error_code=error.code)

        return ExerciseListResult(success=True, exercises=normalize_catalog_records(records))
