"""
Application Use Cases for the live workout session engine.

This package contains application-level use cases that coordinate the session
engine with its collaborators (exercise catalog, performance history, record
storage).

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and collaborator ports
- Dependencies are injected via constructors for testability
- Use cases return result objects instead of raising

Usage:
    from application.use_cases import (
        FinishWorkoutUseCase,
        SuggestSubstitutesUseCase,
        BrowseExercisesUseCase,
        LoadLastPerformanceUseCase,
    )

    # Persist a finished session
    finish = FinishWorkoutUseCase(record_repo=record_repo)
    result = finish.execute(
        log=entries,
        plan=plan,
        session_start_time=started_at,
        user_id="user-123",
    )

    # Rank swap candidates
    swap = SuggestSubstitutesUseCase(catalog=catalog)
    result = swap.execute(current=bench_press, limit=5)
"""

from application.use_cases.browse_exercises import (
    BrowseExercisesUseCase,
    ExerciseListResult,
    GetExerciseResult,
)
from application.use_cases.finish_workout import (
    FinishWorkoutResult,
    FinishWorkoutUseCase,
)
from application.use_cases.load_last_performance import (
    LoadLastPerformanceResult,
    LoadLastPerformanceUseCase,
)
from application.use_cases.suggest_substitutes import (
    SuggestSubstitutesResult,
    SuggestSubstitutesUseCase,
)

__all__ = [
    # FinishWorkout
    "FinishWorkoutUseCase",
    "FinishWorkoutResult",
    # SuggestSubstitutes
    "SuggestSubstitutesUseCase",
    "SuggestSubstitutesResult",
    # BrowseExercises
    "BrowseExercisesUseCase",
    "ExerciseListResult",
    "GetExerciseResult",
    # LoadLastPerformance
    "LoadLastPerformanceUseCase",
    "LoadLastPerformanceResult",
]
