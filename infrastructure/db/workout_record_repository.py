"""
Supabase Workout Record Repository Implementation.

Implements the WorkoutRecordRepository protocol. A finished session is stored
as one row per exercise in the workout records table, inserted in a single
request so the batch lands together or not at all.
"""
from typing import Optional, List, Dict, Any
import logging

from supabase import Client

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "workouts"


def record_to_row(record: Dict[str, Any], user_id: Optional[str] = None) -> Dict[str, Any]:
    """Map a storage-shaped record (camelCase) to a table row."""
    row = {
        "date": record.get("date"),
        "muscle_group": record.get("muscleGroup", ""),
        "exercise": record.get("exercise"),
        "sets": record.get("sets"),
        "reps": record.get("reps"),
        "weight": record.get("weight"),
    }
    if user_id:
        row["user_id"] = user_id
    return row


class SupabaseWorkoutRecordRepository:
    """
    Supabase implementation of WorkoutRecordRepository.
    """

    def __init__(self, client: Client, table: str = DEFAULT_TABLE):
        """
        Initialize with Supabase client.

        Args:
            client: Supabase client instance (injected)
            table: Workout records table name
        """
        self._client = client
        self._table = table

    def save_batch(
        self,
        records: List[Dict[str, Any]],
        user_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        if not records:
            logger.info("Empty workout record batch, nothing to insert")
            return {"success": True, "saved": 0}

        rows = [record_to_row(r, user_id) for r in records]
        try:
            result = self._client.table(self._table).insert(rows).execute()
        except Exception as e:
            error_msg = str(e)
            logger.error(f"Failed to save workout records: {e}")
            if "PGRST" in error_msg or "row-level security" in error_msg.lower():
                logger.error("RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY for server-side writes")
            return {"success": False, "error": error_msg or "Failed to save workout records"}

        saved = len(result.data or [])
        logger.info(f"Saved {saved} workout records for user {user_id}")
        return {"success": True, "saved": saved}
