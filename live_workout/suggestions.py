"""
Suggestion engine for exercise substitution.

Ranks replacement candidates for the current exercise from a catalog of
already-normalized templates. Candidates are taken tier by tier, each tier
only filling the slots the previous ones left:

    100  same muscle group and same movement pattern
     80  same muscle group
     60  same movement pattern
     40  same equipment

Within a tier candidates keep catalog order. No exercise identity appears
twice and the current exercise is never suggested.
"""

from typing import Callable, Iterable, List, Set, Tuple

from domain.models import ExerciseTemplate, SuggestionReason, SuggestionResult


DEFAULT_SUGGESTION_LIMIT = 5

UNKNOWN_EXERCISE_NAME = "Unknown Exercise"


def _same(a: str, b: str) -> bool:
    """Case-insensitive equality of two non-blank attribute values."""
    return bool(a) and bool(b) and a.strip().casefold() == b.strip().casefold()


def _same_muscle_and_pattern(current: ExerciseTemplate, other: ExerciseTemplate) -> bool:
    return _same(current.muscle_group, other.muscle_group) and _same(
        current.movement_pattern, other.movement_pattern
    )


def _same_muscle(current: ExerciseTemplate, other: ExerciseTemplate) -> bool:
    return _same(current.muscle_group, other.muscle_group)


def _same_pattern(current: ExerciseTemplate, other: ExerciseTemplate) -> bool:
    return _same(current.movement_pattern, other.movement_pattern)


def _same_equipment(current: ExerciseTemplate, other: ExerciseTemplate) -> bool:
    return _same(current.equipment, other.equipment)


TIERS: Tuple[Tuple[SuggestionReason, Callable[[ExerciseTemplate, ExerciseTemplate], bool]], ...] = (
    (SuggestionReason.SAME_MUSCLE_GROUP_AND_PATTERN, _same_muscle_and_pattern),
    (SuggestionReason.SAME_MUSCLE_GROUP, _same_muscle),
    (SuggestionReason.SAME_MOVEMENT_PATTERN, _same_pattern),
    (SuggestionReason.SAME_EQUIPMENT, _same_equipment),
)


def is_valid_candidate(template: ExerciseTemplate) -> bool:
    """A candidate needs an id and a real display name."""
    name = template.name.strip()
    return bool(template.id.strip()) and bool(name) and name != UNKNOWN_EXERCISE_NAME


def is_same_exercise(a: ExerciseTemplate, b: ExerciseTemplate) -> bool:
    return a.id == b.id or a.identity_key == b.identity_key


def suggest(
    current: ExerciseTemplate,
    catalog: Iterable[ExerciseTemplate],
    limit: int = DEFAULT_SUGGESTION_LIMIT,
) -> List[SuggestionResult]:
    """
    Rank substitution candidates for an exercise.

    Args:
        current: Exercise being replaced
        catalog: Normalized candidate templates, in catalog order
        limit: Maximum number of suggestions

    Returns:
        Suggestions sorted by score (highest first), at most `limit` long
    """
    if limit <= 0:
        return []

    pool = [
        candidate
        for candidate in catalog
        if is_valid_candidate(candidate) and not is_same_exercise(candidate, current)
    ]

    results: List[SuggestionResult] = []
    chosen_ids: Set[str] = set()
    chosen_keys: Set[str] = set()

    for reason, matches in TIERS:
        if len(results) >= limit:
            break
        for candidate in pool:
            if len(results) >= limit:
                break
            if candidate.id in chosen_ids or candidate.identity_key in chosen_keys:
                continue
            if not matches(current, candidate):
                continue
            results.append(SuggestionResult(candidate=candidate, reason=reason))
            chosen_ids.add(candidate.id)
            chosen_keys.add(candidate.identity_key)

    # sorted() is stable, so catalog order survives within a tier
    return sorted(results, key=lambda r: r.similarity_score, reverse=True)[:limit]
