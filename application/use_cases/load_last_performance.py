"""
LoadLastPerformance Use Case.

Looks up how an exercise was last performed so the session can pre-fill the
reps and weight inputs.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from application.exceptions import PersistenceError
from application.ports import PerformanceHistory
from domain.models import LastPerformance

logger = logging.getLogger(__name__)


@dataclass
class LoadLastPerformanceResult:
    """Result of the LoadLastPerformance use case execution."""

    success: bool
    performance: Optional[LastPerformance] = None
    error: Optional[str] = None
    error_code: Optional[str] = None


class LoadLastPerformanceUseCase:
    """
    Use case for seeding default reps/weight from history.

    An exercise that was never performed is a success with no performance.
    """

    def __init__(self, history: PerformanceHistory) -> None:
        self._history = history

    def execute(self, exercise_name: str, user_id: Optional[str] = None) -> LoadLastPerformanceResult:
        if not exercise_name:
            return LoadLastPerformanceResult(success=True)

        try:
            record = self._history.get_last_performance(exercise_name, user_id)
        except Exception as e:
            logger.exception(f"Load last performance failed for {exercise_name}: {e}")
            error = PersistenceError(str(e) or "Failed to load last performance")
            return LoadLastPerformanceResult(
                success=False, error=error.message, error_code=error.code
            )

        return LoadLastPerformanceResult(
            success=True,
            performance=LastPerformance.from_record(record),
        )
