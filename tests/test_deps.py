"""
Tests for live_workout/deps.py providers.
"""
from unittest.mock import MagicMock

import pytest

from infrastructure import (
    SupabasePerformanceHistory,
    SupabaseWorkoutRecordRepository,
    YamlExerciseCatalog,
)
from live_workout import deps
from live_workout.rest_timer import AsyncioTicker
from tests.fakes import FakeWorkoutRecordRepository

pytestmark = pytest.mark.unit


@pytest.fixture(autouse=True)
def clear_client_cache():
    deps.get_supabase_client.cache_clear()
    yield
    deps.get_supabase_client.cache_clear()


@pytest.fixture
def no_supabase(monkeypatch):
    for var in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY", "SUPABASE_ANON_KEY"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(deps, "get_settings", lambda: deps.Settings(_env_file=None))


class TestProviders:

    def test_catalog_from_settings(self, settings):
        assert isinstance(deps.get_exercise_catalog(settings), YamlExerciseCatalog)

    def test_ticker_uses_interval(self, settings):
        settings = settings.model_copy(update={"tick_interval_seconds": 0.5})
        ticker = deps.get_ticker(settings)

        assert isinstance(ticker, AsyncioTicker)
        assert ticker._interval == 0.5

    def test_no_supabase_means_no_storage(self, no_supabase, settings):
        assert deps.get_supabase_client() is None
        assert deps.get_record_repo(settings) is None
        assert deps.get_performance_history(settings) is None

    def test_repositories_use_configured_table(self, monkeypatch, settings):
        client = MagicMock()
        monkeypatch.setattr(deps, "get_supabase_client", lambda: client)
        settings = settings.model_copy(update={"workout_records_table": "lifts"})

        repo = deps.get_record_repo(settings)
        history = deps.get_performance_history(settings)

        assert isinstance(repo, SupabaseWorkoutRecordRepository)
        assert isinstance(history, SupabasePerformanceHistory)
        assert repo._table == "lifts"

    def test_create_session_accepts_overrides(self, no_supabase, settings, plan, ticker):
        record_repo = FakeWorkoutRecordRepository()

        session = deps.create_session(plan, settings=settings, record_repo=record_repo, ticker=ticker)
        session.complete_set(1, 8, 60)

        assert session.finish().success is True
        assert len(record_repo.batches) == 1
