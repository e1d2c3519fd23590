"""
Substitution suggestion models.
"""

from enum import Enum

from pydantic import BaseModel

from domain.models.exercise_template import ExerciseTemplate


class SuggestionReason(str, Enum):
    """Why a candidate was suggested, in decreasing order of specificity."""

    SAME_MUSCLE_GROUP_AND_PATTERN = "same_muscle_group_and_movement_pattern"
    SAME_MUSCLE_GROUP = "same_muscle_group"
    SAME_MOVEMENT_PATTERN = "same_movement_pattern"
    SAME_EQUIPMENT = "same_equipment"

    @property
    def score(self) -> int:
        return _REASON_SCORES[self]

    @property
    def label(self) -> str:
        """Human-readable reason."""
        return _REASON_LABELS[self]


_REASON_SCORES = {
    SuggestionReason.SAME_MUSCLE_GROUP_AND_PATTERN: 100,
    SuggestionReason.SAME_MUSCLE_GROUP: 80,
    SuggestionReason.SAME_MOVEMENT_PATTERN: 60,
    SuggestionReason.SAME_EQUIPMENT: 40,
}

_REASON_LABELS = {
    SuggestionReason.SAME_MUSCLE_GROUP_AND_PATTERN: "Same muscle group and movement pattern",
    SuggestionReason.SAME_MUSCLE_GROUP: "Same muscle group",
    SuggestionReason.SAME_MOVEMENT_PATTERN: "Same movement pattern",
    SuggestionReason.SAME_EQUIPMENT: "Same equipment",
}


class SuggestionResult(BaseModel):
    """A ranked substitution candidate."""

    candidate: ExerciseTemplate
    reason: SuggestionReason

    @property
    def similarity_score(self) -> int:
        return self.reason.score

    model_config = {"frozen": True}
