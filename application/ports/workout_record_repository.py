"""
Workout Record Repository Interface (Port).

This module defines the abstract interface for persisting aggregated workout
records at the end of a session.
"""
from typing import Protocol, Optional, List, Dict, Any


class WorkoutRecordRepository(Protocol):
    """
    Abstract interface for workout record persistence.

    Atomicity of a batch is the implementation's responsibility: callers
    hand over the whole batch once and report the reply as-is.
    """

    def save_batch(
        self,
        records: List[Dict[str, Any]],
        user_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """
        Save a batch of workout records in one operation.

        Args:
            records: Records in storage shape
                (date, muscleGroup, exercise, sets, reps, weight)
            user_id: User ID (None for the local/anonymous user)

        Returns:
            Dict with "success" (bool) and, on failure, "error" (str)
        """
        ...
