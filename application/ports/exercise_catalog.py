"""
Exercise Catalog Interface (Port).

This module defines the abstract interface for reading the exercise library.
Records come back in whatever shape the provider stores them; the session
engine normalizes them with domain.converters before use.
"""
from typing import Protocol, Optional, List, Dict, Any


class ExerciseCatalog(Protocol):
    """
    Abstract interface for querying the exercise library.

    Records may carry either raw names (`name`, `muscle_group`) or translation
    key references (`nameKey`, `muscleGroupKey`), plus `movement_pattern`,
    `equipment` and `tags`.
    """

    def get_all_exercises(self, user_id: Optional[str] = None) -> List[Dict[str, Any]]:
        """
        Get every exercise visible to the user.

        Args:
            user_id: User ID; when given, the user's custom exercises are included

        Returns:
            List of raw exercise records in catalog order
        """
        ...

    def search_exercises(self, query: str) -> List[Dict[str, Any]]:
        """
        Search exercises by name, muscle group or equipment.

        Args:
            query: Free-text search query

        Returns:
            List of matching raw exercise records
        """
        ...

    def get_exercises_by_muscle_group(self, muscle_group: str) -> List[Dict[str, Any]]:
        """
        Get exercises that target a muscle group.

        Args:
            muscle_group: Muscle group name (e.g. "Chest")

        Returns:
            List of raw exercise records
        """
        ...

    def get_exercise_by_id(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        """
        Get one exercise by its catalog ID.

        Args:
            exercise_id: Catalog identifier (e.g. "ex_chest_1")

        Returns:
            Raw exercise record or None if not found
        """
        ...
