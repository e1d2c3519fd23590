"""
Collaborator providers for the live workout session.

Builds the concrete catalog, history, record storage and ticker from
Settings so callers can start a fully wired session in one call. Every
provider returns a Protocol type; tests pass fakes to LiveWorkoutSession
directly instead.

Architecture:
- Settings and the Supabase client are cached per-process (lru_cache)
- Catalog and repository providers create new instances per call

Usage:
    from live_workout.deps import create_session

    session = create_session(exercises, user_id="user-123")
"""

import logging
from functools import lru_cache
from typing import Any, Iterable, Optional

from supabase import Client, create_client

from application.ports import ExerciseCatalog, PerformanceHistory, WorkoutRecordRepository
from domain.models import ExerciseTemplate
from infrastructure import (
    SupabasePerformanceHistory,
    SupabaseWorkoutRecordRepository,
    YamlExerciseCatalog,
)
from live_workout.rest_timer import AsyncioTicker, Ticker
from live_workout.session import LiveWorkoutSession
from live_workout.settings import Settings, get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = get_settings()
    if not settings.has_supabase:
        logger.info("Supabase not configured; workout records will not be stored")
        return None
    return create_client(settings.supabase_url, settings.supabase_key)


# =============================================================================
# Collaborator Providers
# =============================================================================


def get_exercise_catalog(settings: Optional[Settings] = None) -> ExerciseCatalog:
    settings = settings or get_settings()
    return YamlExerciseCatalog(settings.exercise_library_path)


def get_performance_history(settings: Optional[Settings] = None) -> Optional[PerformanceHistory]:
    settings = settings or get_settings()
    client = get_supabase_client()
    if client is None:
        return None
    return SupabasePerformanceHistory(client, table=settings.workout_records_table)


def get_record_repo(settings: Optional[Settings] = None) -> Optional[WorkoutRecordRepository]:
    settings = settings or get_settings()
    client = get_supabase_client()
    if client is None:
        return None
    return SupabaseWorkoutRecordRepository(client, table=settings.workout_records_table)


def get_ticker(settings: Optional[Settings] = None) -> Ticker:
    """Ticker for a real countdown; start() needs a running event loop."""
    settings = settings or get_settings()
    return AsyncioTicker(interval=settings.tick_interval_seconds)


# =============================================================================
# Session Factory
# =============================================================================


def create_session(
    exercises: Iterable[ExerciseTemplate],
    *,
    settings: Optional[Settings] = None,
    **kwargs: Any,
) -> LiveWorkoutSession:
    """
    Start a session wired to the configured collaborators.

    Keyword arguments override individual collaborators (catalog, history,
    record_repo, ticker) or pass through to LiveWorkoutSession.
    """
    settings = settings or get_settings()
    kwargs.setdefault("catalog", get_exercise_catalog(settings))
    kwargs.setdefault("history", get_performance_history(settings))
    kwargs.setdefault("record_repo", get_record_repo(settings))
    kwargs.setdefault("ticker", get_ticker(settings))
    return LiveWorkoutSession(exercises, settings=settings, **kwargs)
