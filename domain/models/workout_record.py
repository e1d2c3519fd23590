"""
Persisted workout summary records.

Each WorkoutRecord summarizes every completed set of one exercise in a
finished session. It is the only shape handed to the persistence layer.
"""

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator


class WorkoutRecord(BaseModel):
    """
    One exercise's aggregated result for a session.

    Examples:
        >>> record = WorkoutRecord(
        ...     date="2024-05-01T09:30:00.000Z",
        ...     muscle_group="Chest",
        ...     exercise="Bench Press",
        ...     sets=3,
        ...     reps=8,
        ...     weight=60.0,
        ... )
        >>> record.to_storage_dict()["muscleGroup"]
        'Chest'
    """

    date: str = Field(..., description="Session start time, ISO-8601")
    muscle_group: str = ""
    exercise: str = Field(..., min_length=1)
    sets: int = Field(..., ge=1)
    reps: int = Field(..., ge=0)
    weight: float = Field(..., ge=0)

    @field_validator("weight")
    @classmethod
    def validate_weight(cls, v: float) -> float:
        """Keep two decimal places."""
        return round(v, 2)

    def to_storage_dict(self) -> Dict[str, Any]:
        """Serialize to the storage wire shape."""
        return {
            "date": self.date,
            "muscleGroup": self.muscle_group,
            "exercise": self.exercise,
            "sets": self.sets,
            "reps": self.reps,
            "weight": self.weight,
        }

    model_config = {"frozen": True}


class LastPerformance(BaseModel):
    """Most recent reps/weight recorded for an exercise, used to seed inputs."""

    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0.0, ge=0)

    @classmethod
    def from_record(cls, record: Optional[Dict[str, Any]]) -> Optional["LastPerformance"]:
        """Build from a history record, or None when there is no usable data."""
        if not record:
            return None
        reps = record.get("reps")
        weight = record.get("weight")
        if reps is None and weight is None:
            return None
        return cls(reps=max(0, int(reps or 0)), weight=max(0.0, float(weight or 0)))

    model_config = {"frozen": True}
