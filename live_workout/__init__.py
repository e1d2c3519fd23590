"""
Live workout session engine.

Components, leaf-first:
- rest_timer: RestTimer countdown state machine and its tick sources
- navigator: ExerciseNavigator, the plan and the current-exercise pointer
- session_log: SessionLog, the logbook of completed sets and its derived views
- suggestions: suggest(), tiered substitution ranking
- aggregator: SessionAggregator, log to persisted WorkoutRecord objects

The LiveWorkoutSession facade that wires them to collaborators lives in
live_workout.session and is imported from there.
"""

from live_workout.aggregator import SessionAggregator
from live_workout.navigator import ExerciseNavigator
from live_workout.rest_timer import AsyncioTicker, RestTimer, Ticker
from live_workout.session_log import SessionLog
from live_workout.suggestions import suggest

__all__ = [
    "AsyncioTicker",
    "ExerciseNavigator",
    "RestTimer",
    "SessionAggregator",
    "SessionLog",
    "Ticker",
    "suggest",
]
