"""
ExerciseTemplate value object for planned exercises.

An ExerciseTemplate is the canonical shape every catalog record, template
entry or substitution candidate is converted into before the session engine
sees it. Suggested parameters (sets, reps, weight, rest time) stay optional;
defaults are applied when they are read, never written back as zeros.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# Number of sets assumed when a template does not suggest one
DEFAULT_SETS = 3

NAME_KEY_PREFIX = "exercises."
MUSCLE_GROUP_KEY_PREFIX = "muscleGroups."


class ExerciseTemplate(BaseModel):
    """
    Value object representing one exercise in a workout plan.

    Examples:
        >>> bench = ExerciseTemplate(id="ex_chest_1", name="Bench Press", sets=4)
        >>> bench.total_sets
        4

        >>> ExerciseTemplate(id="ex_back_1", name="Pull-ups").total_sets
        3
    """

    # Identity
    id: str = Field(..., min_length=1, description="Catalog identifier")
    name: str = Field(..., min_length=1, description="Canonical display name")
    name_key: Optional[str] = Field(
        default=None,
        description="Translation key for the name (e.g. 'exercises.Bench Press')",
    )
    muscle_group: str = Field(default="", description="Muscle group (e.g. 'Chest')")
    muscle_group_key: Optional[str] = Field(
        default=None, description="Translation key for the muscle group"
    )
    movement_pattern: str = Field(default="", description="Movement pattern (e.g. 'Push')")
    equipment: str = Field(default="", description="Equipment (e.g. 'Barbell')")
    tags: List[str] = Field(default_factory=list)

    # Suggested parameters
    sets: Optional[int] = Field(default=None, ge=1, description="Suggested number of sets")
    reps: Optional[int] = Field(default=None, ge=0, description="Suggested reps per set")
    weight: Optional[float] = Field(default=None, ge=0, description="Suggested weight (kg)")
    rest_time: Optional[int] = Field(
        default=None, ge=0, description="Suggested rest between sets in seconds"
    )

    @property
    def total_sets(self) -> int:
        """Suggested set count with the default applied."""
        return self.sets if self.sets is not None else DEFAULT_SETS

    @property
    def identity_key(self) -> str:
        """
        Key used to decide whether two templates describe the same exercise.

        Returns:
            The name key (or name) case-folded.
        """
        return (self.name_key or f"{NAME_KEY_PREFIX}{self.name}").casefold()

    def effective_rest_time(self, default_rest_seconds: int) -> int:
        """Suggested rest time, falling back to the session default."""
        if self.rest_time is not None:
            return self.rest_time
        return default_rest_seconds

    def with_sets(self, sets: int) -> "ExerciseTemplate":
        """Return a copy with a different suggested set count."""
        return self.model_copy(update={"sets": sets})

    def __str__(self) -> str:
        parts = [self.name]
        if self.muscle_group:
            parts.append(f"({self.muscle_group})")
        parts.append(f"{self.total_sets} sets")
        return " ".join(parts)

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "examples": [
                {
                    "id": "ex_chest_1",
                    "name": "Barbell Bench Press",
                    "muscle_group": "Chest",
                    "movement_pattern": "Push",
                    "equipment": "Barbell",
                    "sets": 3,
                    "reps": 8,
                    "rest_time": 120,
                },
            ]
        },
    }
