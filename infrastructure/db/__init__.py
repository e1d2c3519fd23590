"""
Infrastructure Database Layer.

Supabase-backed implementations of the workout record ports defined in
application.ports.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabasePerformanceHistory,
        SupabaseWorkoutRecordRepository,
    )

    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    record_repo = SupabaseWorkoutRecordRepository(client)
    history = SupabasePerformanceHistory(client)
"""

from infrastructure.db.performance_history import SupabasePerformanceHistory
from infrastructure.db.workout_record_repository import (
    SupabaseWorkoutRecordRepository,
    record_to_row,
)

__all__ = [
    # Session persistence
    "SupabaseWorkoutRecordRepository",
    "record_to_row",

    # Default reps/weight lookup
    "SupabasePerformanceHistory",
]
