"""
YAML-backed exercise catalog.

Implements the ExerciseCatalog protocol over the bundled exercise library
(shared/dictionaries/exercise_library.yaml) plus per-user custom exercises
kept in memory. Custom exercises are listed before library ones.
"""
import copy
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

logger = logging.getLogger(__name__)

ROOT = Path(__file__).resolve().parents[2]
DEFAULT_LIBRARY_PATH = ROOT / "shared" / "dictionaries" / "exercise_library.yaml"

SEARCH_FIELDS = ("name", "muscle_group", "equipment", "movement_pattern")


def load_library(path: Union[str, Path] = DEFAULT_LIBRARY_PATH) -> List[Dict[str, Any]]:
    """
    Read exercise records from a YAML file.

    Args:
        path: YAML file containing a list of exercise mappings

    Returns:
        List of exercise records

    Raises:
        ValueError: If the file does not contain a list
    """
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8"))
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Exercise library {path} must contain a list of exercises")
    return [item for item in data if isinstance(item, dict)]


class YamlExerciseCatalog:
    """
    ExerciseCatalog implementation reading a YAML library file.

    Usage:
        >>> catalog = YamlExerciseCatalog()
        >>> catalog.get_exercises_by_muscle_group("Chest")[0]["name"]
        'Barbell Bench Press'
    """

    def __init__(
        self,
        path: Union[str, Path] = DEFAULT_LIBRARY_PATH,
        library: Optional[List[Dict[str, Any]]] = None,
    ):
        """
        Args:
            path: YAML library file (ignored when `library` is given)
            library: Pre-loaded records, mainly for tests
        """
        self._library = list(library) if library is not None else load_library(path)
        self._custom: Dict[Optional[str], List[Dict[str, Any]]] = defaultdict(list)
        logger.debug("Loaded %d exercises into catalog", len(self._library))

    def add_custom_exercise(self, record: Dict[str, Any], user_id: Optional[str] = None) -> None:
        """Register a user-created exercise."""
        self._custom[user_id].append({**record, "isCustom": True})

    def get_all_exercises(self, user_id: Optional[str] = None) -> List[Dict[str, Any]]:
        return copy.deepcopy(self._custom.get(user_id, []) + self._library)

    def search_exercises(self, query: str) -> List[Dict[str, Any]]:
        needle = query.strip().lower()
        if not needle:
            return []
        return copy.deepcopy([
            ex for ex in self._library
            if any(needle in str(ex.get(f) or "").lower() for f in SEARCH_FIELDS)
        ])

    def get_exercises_by_muscle_group(self, muscle_group: str) -> List[Dict[str, Any]]:
        wanted = muscle_group.strip().lower()
        return copy.deepcopy([
            ex for ex in self._library
            if str(ex.get("muscle_group") or "").lower() == wanted
        ])

    def get_exercise_by_id(self, exercise_id: str) -> Optional[Dict[str, Any]]:
        for records in list(self._custom.values()) + [self._library]:
            for ex in records:
                if ex.get("id") == exercise_id:
                    return copy.deepcopy(ex)
        return None
