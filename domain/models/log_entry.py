"""
LogEntry value object for the session logbook.

A LogEntry records one completed set. Entries are frozen: adjusting reps or
weight replaces the entry in the log with an updated copy.
"""

import uuid

from pydantic import BaseModel, Field


def generate_entry_id() -> str:
    """Generate a unique log entry identifier."""
    return uuid.uuid4().hex


class LogEntry(BaseModel):
    """
    A single set recorded during a live workout.

    (exercise_index, set_number) identifies "the same set"; exercise_name is
    a snapshot of the exercise identity at logging time.
    """

    id: str = Field(default_factory=generate_entry_id)
    exercise_index: int = Field(..., ge=0, description="Plan position when logged")
    exercise_name: str = Field(..., description="Exercise name snapshot")
    set_number: int = Field(..., ge=1)
    reps: int = Field(default=0, ge=0)
    weight: float = Field(default=0.0, ge=0)
    completed: bool = True

    def matches(self, exercise_name: str, exercise_index: int, set_number: int) -> bool:
        """Check whether this entry is the given set of the given exercise slot."""
        return (
            self.exercise_name == exercise_name
            and self.exercise_index == exercise_index
            and self.set_number == set_number
        )

    def with_reps(self, reps: int) -> "LogEntry":
        return self.model_copy(update={"reps": max(0, int(reps))})

    def with_weight(self, weight: float) -> "LogEntry":
        return self.model_copy(update={"weight": max(0.0, float(weight))})

    def __str__(self) -> str:
        return f"{self.exercise_name} set {self.set_number}: {self.reps} x {self.weight}"

    model_config = {"frozen": True}
