"""
Infrastructure Layer for the live workout session engine.

Concrete implementations of the application ports:
- catalog/: YAML exercise library
- db/: Supabase workout record storage
"""

from infrastructure.catalog import YamlExerciseCatalog
from infrastructure.db import (
    SupabasePerformanceHistory,
    SupabaseWorkoutRecordRepository,
)

__all__ = [
    "YamlExerciseCatalog",
    "SupabasePerformanceHistory",
    "SupabaseWorkoutRecordRepository",
]
