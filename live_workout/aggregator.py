"""
Session aggregator: raw set log to persisted workout records.

Each exercise performed in a session becomes one WorkoutRecord:
- sets:   number of completed entries
- reps:   mean reps, rounded half-up to an integer
- weight: mean weight, rounded half-up to 2 decimal places
- date:   session start time, ISO-8601 UTC

Entries are grouped by exercise identity, not by plan position, so an
exercise that appears twice in the plan is merged into one record. Groups
without a completed entry are dropped.
"""

import logging
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, List, Optional, Sequence

from domain.models import ExerciseTemplate, LogEntry, WorkoutRecord

logger = logging.getLogger(__name__)


def round_half_up(value: float, places: int = 0) -> Decimal:
    """
    Round away from zero on ties, unlike the built-in round().

    Examples:
        >>> round_half_up(4.5)
        Decimal('5')
        >>> round_half_up(186.66666, 2)
        Decimal('186.67')
    """
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def format_session_date(moment: datetime) -> str:
    """
    Format a timestamp as ISO-8601 UTC with millisecond precision.

    Naive datetimes are taken to be local time.
    """
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _mean(values: Sequence[float]) -> float:
    if not values:
        return 0.0
    return sum(values) / len(values)


class SessionAggregator:
    """
    Summarizes a finished session's log into WorkoutRecord objects.

    Usage:
        >>> records = SessionAggregator().finish(log, plan, started_at)
        >>> [r.to_storage_dict() for r in records]
    """

    def finish(
        self,
        log: Iterable[LogEntry],
        plan: Sequence[ExerciseTemplate],
        session_start_time: datetime,
    ) -> List[WorkoutRecord]:
        """
        Aggregate the log into one record per exercise.

        Args:
            log: Every entry of the session log (read, never modified)
            plan: The plan as it stood when the session finished
            session_start_time: When the session started

        Returns:
            Records in the order their exercise was first logged
        """
        date = format_session_date(session_start_time)

        groups: Dict[str, List[LogEntry]] = {}
        for entry in log:
            groups.setdefault(entry.exercise_name, []).append(entry)

        records: List[WorkoutRecord] = []
        for exercise_name, entries in groups.items():
            completed = [e for e in entries if e.completed]
            if not completed:
                logger.debug("Dropping %s: no completed sets", exercise_name)
                continue

            reps = round_half_up(_mean([e.reps for e in completed]))
            weight = round_half_up(_mean([e.weight for e in completed]), 2)

            records.append(
                WorkoutRecord(
                    date=date,
                    muscle_group=self._muscle_group_for(exercise_name, completed[0], plan),
                    exercise=exercise_name,
                    sets=len(completed),
                    reps=int(reps),
                    weight=float(weight),
                )
            )

        logger.info(
            "Aggregated %d log entries into %d records",
            sum(len(g) for g in groups.values()),
            len(records),
        )
        return records

    @staticmethod
    def _muscle_group_for(
        exercise_name: str,
        first_entry: LogEntry,
        plan: Sequence[ExerciseTemplate],
    ) -> str:
        """
        Muscle group of an exercise group.

        Prefers the template at the plan position the exercise was logged at;
        if that slot has since been replaced or removed, any template with the
        same name is used.
        """
        template: Optional[ExerciseTemplate] = None
        if 0 <= first_entry.exercise_index < len(plan):
            template = plan[first_entry.exercise_index]
        if template is None or template.name != exercise_name:
            template = next((t for t in plan if t.name == exercise_name), None)
        return template.muscle_group if template is not None else ""
