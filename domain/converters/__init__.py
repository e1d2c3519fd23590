"""
Domain converters for transforming external records to canonical models.

- normalize_catalog_record: raw catalog / template record -> ExerciseTemplate
- normalize_catalog_records: batch variant that drops records without identity

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import normalize_catalog_record
    >>> template = normalize_catalog_record(
    ...     {"id": "ex_chest_1", "nameKey": "exercises.Bench Press", "muscle_group": "Chest"}
    ... )
    >>> template.name
    'Bench Press'
"""

from domain.converters.catalog_records import (
    normalize_catalog_record,
    normalize_catalog_records,
    resolve_exercise_name,
    resolve_muscle_group,
)

__all__ = [
    "normalize_catalog_record",
    "normalize_catalog_records",
    "resolve_exercise_name",
    "resolve_muscle_group",
]
