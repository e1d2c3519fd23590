"""
SuggestSubstitutes Use Case.

Loads the exercise library, normalizes it and ranks replacement candidates
for the exercise the user wants to swap out.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from application.exceptions import PersistenceError
from application.ports import ExerciseCatalog
from domain.converters import normalize_catalog_records
from domain.models import ExerciseTemplate, SuggestionResult
from live_workout.suggestions import DEFAULT_SUGGESTION_LIMIT, suggest

logger = logging.getLogger(__name__)


@dataclass
class SuggestSubstitutesResult:
    """Result of the SuggestSubstitutes use case execution."""

    success: bool
    suggestions: List[SuggestionResult] = field(default_factory=list)
    error: Optional[str] = None
    error_code: Optional[str] = None


class SuggestSubstitutesUseCase:
    """
    Use case for smart exercise swaps.

    Usage:
        >>> use_case = SuggestSubstitutesUseCase(catalog=catalog)
        >>> result = use_case.execute(current=bench_press, limit=5)
        >>> [s.candidate.name for s in result.suggestions]
    """

    def __init__(self, catalog: ExerciseCatalog) -> None:
        """
        Args:
            catalog: Exercise library provider
        """
        self._catalog = catalog

    def execute(
        self,
        current: ExerciseTemplate,
        limit: int = DEFAULT_SUGGESTION_LIMIT,
        user_id: Optional[str] = None,
    ) -> SuggestSubstitutesResult:
        """
        Rank substitutes for an exercise.

        Args:
            current: Exercise being replaced
            limit: Maximum number of suggestions
            user_id: Include this user's custom exercises

        Returns:
            SuggestSubstitutesResult with ranked suggestions
        """
        try:
            records = self._catalog.get_all_exercises(user_id)
        except Exception as e:
            logger.exception(f"Loading exercise catalog failed: {e}")
            error = PersistenceError(str(e) or "Failed to load exercises")
            return SuggestSubstitutesResult(
                success=False, error=error.message, error_code=error.code
            )

        if records is None:
            error = PersistenceError("Failed to load exercises")
            return SuggestSubstitutesResult(
                success=False, error=error.message, error_code=error.code
            )

        candidates = normalize_catalog_records(records)
        suggestions = suggest(current, candidates, limit)
        logger.info(
            f"Suggested {len(suggestions)} substitutes for {current.name} "
            f"from {len(candidates)} candidates"
        )
        return SuggestSubstitutesResult(success=True, suggestions=suggestions)
