"""
Converter: heterogeneous catalog records to domain ExerciseTemplate.

Catalog providers, saved templates and older workout plans describe exercises
with overlapping optional fields: a translation key (`nameKey`) or a raw name
(`name`, or the legacy `exercise` field), and a muscle group given either as
`muscleGroupKey` or as a raw `muscle_group` / `muscleGroup` string. This
module is the only place that inspects those fields; everything downstream
works with ExerciseTemplate.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from domain.models import MUSCLE_GROUP_KEY_PREFIX, NAME_KEY_PREFIX, ExerciseTemplate

logger = logging.getLogger(__name__)


def _text(value: Any) -> str:
    """Coerce an optional scalar to a stripped string."""
    if value is None:
        return ""
    return str(value).strip()


def _first(record: Dict[str, Any], *keys: str) -> str:
    """Return the first non-blank value among the given keys."""
    for key in keys:
        value = _text(record.get(key))
        if value:
            return value
    return ""


def _strip_prefix(value: str, prefix: str) -> str:
    if value.startswith(prefix):
        return value[len(prefix):].strip()
    return value


def _parse_positive_int(value: Any) -> Optional[int]:
    """
    Parse a suggested count. Zero, negatives and garbage mean "not specified".
    """
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(float(value))
    except (TypeError, ValueError):
        return None
    return parsed if parsed > 0 else None


def _parse_non_negative_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = int(float(value))
    except (TypeError, ValueError):
        return None
    return parsed if parsed >= 0 else None


def _parse_weight(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        parsed = float(value)
    except (TypeError, ValueError):
        return None
    return parsed if parsed >= 0 else None


def _parse_tags(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [t.strip() for t in value.split(",") if t.strip()]
    return [str(t).strip() for t in value if str(t).strip()]


def resolve_exercise_name(record: Dict[str, Any]) -> str:
    """
    Resolve the display name of a catalog record.

    Precedence: `nameKey` without its `exercises.` prefix, then `name`, then
    the legacy `exercise` field. A `name` that is itself a translation key is
    unwrapped the same way.

    Args:
        record: Raw catalog record

    Returns:
        The resolved name, or an empty string if none can be resolved
    """
    name_key = _text(record.get("nameKey") or record.get("name_key"))
    if name_key:
        resolved = _strip_prefix(name_key, NAME_KEY_PREFIX)
        if resolved:
            return resolved
    return _strip_prefix(_first(record, "name", "exercise"), NAME_KEY_PREFIX)


def resolve_muscle_group(record: Dict[str, Any]) -> str:
    """Resolve the muscle group from a keyed reference or a raw string."""
    group_key = _text(record.get("muscleGroupKey") or record.get("muscle_group_key"))
    if group_key:
        resolved = _strip_prefix(group_key, MUSCLE_GROUP_KEY_PREFIX)
        if resolved:
            return resolved
    return _strip_prefix(_first(record, "muscle_group", "muscleGroup"), MUSCLE_GROUP_KEY_PREFIX)


def normalize_catalog_record(record: Dict[str, Any]) -> Optional[ExerciseTemplate]:
    """
    Convert one raw catalog record to an ExerciseTemplate.

    Args:
        record: Catalog record in any of the supported shapes

    Returns:
        ExerciseTemplate, or None if the record has no id or no resolvable name
    """
    if not isinstance(record, dict):
        return None

    exercise_id = _text(record.get("id"))
    name = resolve_exercise_name(record)
    if not exercise_id or not name:
        logger.debug("Rejecting catalog record without identity: %r", record)
        return None

    muscle_group = resolve_muscle_group(record)
    name_key = _text(record.get("nameKey") or record.get("name_key")) or f"{NAME_KEY_PREFIX}{name}"
    muscle_group_key = _text(record.get("muscleGroupKey") or record.get("muscle_group_key"))
    if not muscle_group_key and muscle_group:
        muscle_group_key = f"{MUSCLE_GROUP_KEY_PREFIX}{muscle_group}"

    try:
        return ExerciseTemplate(
            id=exercise_id,
            name=name,
            name_key=name_key,
            muscle_group=muscle_group,
            muscle_group_key=muscle_group_key or None,
            movement_pattern=_first(record, "movement_pattern", "movementPattern"),
            equipment=_first(record, "equipment"),
            tags=_parse_tags(record.get("tags")),
            sets=_parse_positive_int(record.get("sets")),
            reps=_parse_non_negative_int(record.get("reps")),
            weight=_parse_weight(record.get("weight")),
            rest_time=_parse_non_negative_int(
                record.get("rest_time", record.get("restTime"))
            ),
        )
    except ValidationError as e:
        logger.debug("Rejecting invalid catalog record %s: %s", exercise_id, e)
        return None


def normalize_catalog_records(records: Iterable[Dict[str, Any]]) -> List[ExerciseTemplate]:
    """
    Convert a batch of catalog records, dropping the ones without identity.

    Args:
        records: Raw catalog records

    Returns:
        Normalized templates in catalog order
    """
    templates: List[ExerciseTemplate] = []
    for record in records or []:
        template = normalize_catalog_record(record)
        if template is not None:
            templates.append(template)
    return templates
