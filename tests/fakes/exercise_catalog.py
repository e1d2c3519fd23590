"""
Fake ExerciseCatalog for testing.

In-memory implementation of the ExerciseCatalog protocol. Pre-populated with
a small library covering every suggestion tier.
"""
from typing import Optional, List, Dict, Any


class FakeExerciseCatalog:
    """
    In-memory fake implementation of ExerciseCatalog for testing.

    Set `error` to make every call raise it, simulating a provider outage.
    """

    def __init__(self, exercises: Optional[List[Dict[str, Any]]] = None):
        """
        Initialize with optional custom exercise list.

        Args:
            exercises: Custom exercise list, or None for default test data
        """
        self._exercises = list(exercises) if exercises is not None else self._default_exercises()
        self._custom: Dict[Optional[str], List[Dict[str, Any]]] = {}
        self.error: Optional[Exception] = None
        self.calls: List[str] = []

    def _default_exercises(self) -> List[Dict[str, Any]]:
        """Return default test exercises."""
        return [
            {"id": "ex_chest_1", "name": "Barbell Bench Press", "muscle_group": "Chest",
             "movement_pattern": "Push", "equipment": "Barbell"},
            {"id": "ex_chest_2", "name": "Incline Dumbbell Press", "muscle_group": "Chest",
             "movement_pattern": "Push", "equipment": "Dumbbell"},
            {"id": "ex_chest_3", "name": "Cable Fly", "muscle_group": "Chest",
             "movement_pattern": "Fly", "equipment": "Cable"},
            {"id": "ex_shoulders_1", "name": "Overhead Press", "muscle_group": "Shoulders",
             "movement_pattern": "Push", "equipment": "Barbell"},
            {"id": "ex_back_1", "name": "Barbell Row", "muscle_group": "Back",
             "movement_pattern": "Pull", "equipment": "Barbell"},
            {"id": "ex_legs_1", "name": "Leg Press", "muscle_group": "Legs",
             "movement_pattern": "Squat", "equipment": "Machine"},
        ]

    # =========================================================================
    # Test Helpers
    # =========================================================================

    def seed(self, exercises: List[Dict[str, Any]]) -> None:
        """Replace the library with the given records."""
        self._exercises = list(exercises)

    def add_custom(self, record: Dict[str, Any], user_id: Optional[str] = None) -> None:
        self._custom.setdefault(user_id, []).append(record)

    def reset(self) -> None:
        """Restore default data and clear failure mode and call history."""
        self._exercises = self._default_exercises()
        self._custom = {}
        self.error = None
        self.calls = []

    def _record(self, call: str) -> None:
        self.calls.append(call)
        if self.error is not None:
            raise self.error

    # =========================================================================
    # Protocol Methods
    # =========================================================================

    def get_all_exercises(self, user_id: Optional[str] = None) -> List[Dict[str, Any]]:
        self._record("get_all_exercises")
        return list(self._custom.get(user_id, [])) + list(self._exercises)

    def search_exercises(self, query: str) -> List[Dict[str, Any]]:
        self._record("search_exercises")
        needle = query.lower()
        return [e for e in self._exercises if needle in str(e.get("name", "")).lower()]

    def get_exercises_by_muscle_group(self, muscle_group: str) -> List[Dict[str, Any]]:
        self._record("get_exercises_by_muscle_group")
        return [
            e for e in self._exercises
            if str(e.get("muscle_group", "")).lower() == muscle_group.lower()
        ]

    def get_exercise_by_id(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        self._record("get_exercise_by_id")
        for exercise in self._exercises:
            if exercise.get("id") == exercise_id:
                return exercise
        return None
