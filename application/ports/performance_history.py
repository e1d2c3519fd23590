"""
Performance History Interface (Port).

This module defines the abstract interface for looking up how an exercise was
last performed. The session uses it to seed default reps and weight the first
time the user opens an exercise.
"""
from typing import Protocol, Optional, Dict, Any


class PerformanceHistory(Protocol):
    """
    Abstract interface for exercise performance history.
    """

    def get_last_performance(
        self,
        exercise_name: str,
        user_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Get the most recent record for an exercise.

        Args:
            exercise_name: Exercise name as persisted in workout records
            user_id: User ID (None for the local/anonymous user)

        Returns:
            Dict with at least "reps" and "weight", or None if never performed

        Raises:
            Exception: If the lookup fails; a failure is not "never performed"
        """
        ...
