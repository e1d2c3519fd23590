"""
FinishWorkout Use Case.

Turns a finished session's log into WorkoutRecord objects and hands them to
the record repository as a single batch.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from application.exceptions import PersistenceError
from application.ports import WorkoutRecordRepository
from domain.models import ExerciseTemplate, LogEntry, WorkoutRecord
from live_workout.aggregator import SessionAggregator

logger = logging.getLogger(__name__)


@dataclass
class FinishWorkoutResult:
    """Result of the FinishWorkout use case execution."""

    success: bool
    records: List[WorkoutRecord] = field(default_factory=list)
    error: Optional[str] = None
    error_code: Optional[str] = None


class FinishWorkoutUseCase:
    """
    Use case for persisting a finished session.

    Orchestrates the following workflow:
    1. Aggregate the session log into one record per exercise
    2. Save all records with one repository call
    3. Report the repository's reply as-is

    No retries are attempted; a failed save is returned to the caller once.

    Usage:
        >>> use_case = FinishWorkoutUseCase(record_repo=record_repo)
        >>> result = use_case.execute(
        ...     log=session.entries,
        ...     plan=session.plan,
        ...     session_start_time=session.workout_start_time,
        ...     user_id="user-123",
        ... )
        >>> if not result.success:
        ...     print(result.error)
    """

    def __init__(
        self,
        record_repo: WorkoutRecordRepository,
        aggregator: Optional[SessionAggregator] = None,
    ) -> None:
        """
        Initialize the use case with required dependencies.

        Args:
            record_repo: Repository for persisting workout records
            aggregator: Log aggregator (a default one is created if omitted)
        """
        self._record_repo = record_repo
        self._aggregator = aggregator or SessionAggregator()

    def execute(
        self,
        log: Iterable[LogEntry],
        plan: Sequence[ExerciseTemplate],
        session_start_time: datetime,
        user_id: Optional[str] = None,
    ) -> FinishWorkoutResult:
        """
        Execute the finish workout workflow.

        Args:
            log: Every entry of the session log
            plan: The workout plan at finish time
            session_start_time: When the session started
            user_id: Owner of the records (None for the local user)

        Returns:
            FinishWorkoutResult with the records that were saved
        """
        records = self._aggregator.finish(log, plan, session_start_time)

        try:
            reply = self._record_repo.save_batch(
                [record.to_storage_dict() for record in records],
                user_id=user_id,
            )
        except Exception as e:
            logger.exception(f"Saving workout records failed: {e}")
            error = PersistenceError(str(e) or "Failed to save workout records")
            return FinishWorkoutResult(
                success=False,
                records=records,
                error=error.message,
                error_code=error.code,
            )

        if not reply or not reply.get("success"):
            message = (reply or {}).get("error") or "Failed to save workout records"
            logger.error(f"Record repository rejected batch of {len(records)}: {message}")
            error = PersistenceError(message)
            return FinishWorkoutResult(
                success=False,
                records=records,
                error=error.message,
                error_code=error.code,
            )

        logger.info(f"Saved {len(records)} workout records")
        return FinishWorkoutResult(success=True, records=records)
