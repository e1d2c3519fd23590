"""
Supabase Performance History Implementation.

Implements the PerformanceHistory protocol by reading the most recent row
for an exercise from the workout records table.
"""
from typing import Optional, Dict, Any
import logging

from supabase import Client

from infrastructure.db.workout_record_repository import DEFAULT_TABLE

logger = logging.getLogger(__name__)


class SupabasePerformanceHistory:
    """
    Supabase implementation of PerformanceHistory.
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        self._client = client
        self._table = table

    def get_last_performance(
        self,
        exercise_name: str,
        user_id: Optional[str] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Get the latest reps/weight for an exercise.

        Returns:
            The latest row, or None if never performed

        Raises:
            Exception: If the query fails
        """
        try:
            query = self._client.table(self._table) \
                .select("date, exercise, reps, weight") \
                .eq("exercise", exercise_name)
            if user_id:
                query = query.eq("user_id", user_id)
            result = query.order("date", desc=True).limit(1).execute()
        except Exception as e:
            logger.error(f"Error fetching last performance for {exercise_name}: {e}")
            raise

        if result.data:
            return result.data[0]
        return None
