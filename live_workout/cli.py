"""
Command line tools for the session engine.

    python -m live_workout suggest ex_chest_1 --limit 3
    python -m live_workout search "bench"
    python -m live_workout aggregate session.json --start 2024-05-01T09:30:00Z

`aggregate` reads either a list of log entries or an object with "log" and
"plan" keys and prints the storage records that finishing the session would
save.
"""
import argparse
import json
import logging
import sys
from datetime import datetime
from typing import Any, List, Optional, Sequence, Tuple

from pydantic import ValidationError

from application.use_cases import BrowseExercisesUseCase, SuggestSubstitutesUseCase
from domain.converters import normalize_catalog_records
from domain.models import ExerciseTemplate, LogEntry
from infrastructure.catalog import YamlExerciseCatalog
from live_workout.aggregator import SessionAggregator
from live_workout.settings import get_settings


class CommandError(Exception):
    """A command failed; the message is shown to the user."""


def parse_start_time(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting a trailing 'Z'."""
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid ISO-8601 timestamp: {value}")


def load_session_file(path: str) -> Tuple[List[LogEntry], List[ExerciseTemplate]]:
    with open(path, "r") as f:
        data = json.load(f)

    if isinstance(data, list):
        raw_log, raw_plan = data, []
    elif isinstance(data, dict):
        raw_log, raw_plan = data.get("log") or [], data.get("plan") or []
    else:
        raise CommandError("Session file must contain a list of entries or an object")

    try:
        log = [LogEntry.model_validate(item) for item in raw_log]
    except ValidationError as e:
        raise CommandError(f"Invalid log entry: {e}")
    return log, normalize_catalog_records(raw_plan)


def cmd_suggest(args: argparse.Namespace) -> Any:
    settings = get_settings()
    catalog = YamlExerciseCatalog(settings.exercise_library_path)

    found = BrowseExercisesUseCase(catalog).get(args.exercise_id)
    if not found.success:
        raise CommandError(found.error)

    limit = args.limit if args.limit is not None else settings.suggestion_limit
    result = SuggestSubstitutesUseCase(catalog).execute(found.exercise, limit=limit)
    if not result.success:
        raise CommandError(result.error)

    return [
        {
            "id": s.candidate.id,
            "name": s.candidate.name,
            "muscle_group": s.candidate.muscle_group,
            "movement_pattern": s.candidate.movement_pattern,
            "equipment": s.candidate.equipment,
            "reason": s.reason.value,
            "score": s.similarity_score,
        }
        for s in result.suggestions
    ]


def cmd_search(args: argparse.Namespace) -> Any:
    catalog = YamlExerciseCatalog(get_settings().exercise_library_path)
    result = BrowseExercisesUseCase(catalog).search(args.query)
    if not result.success:
        raise CommandError(result.error)
    return [ex.model_dump(exclude_none=True) for ex in result.exercises]


def cmd_aggregate(args: argparse.Namespace) -> Any:
    log, plan = load_session_file(args.log)
    records = SessionAggregator().finish(log, plan, args.start)
    return [r.to_storage_dict() for r in records]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="live_workout",
        description="Live workout session engine tools",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    suggest = sub.add_parser("suggest", help="Rank substitutes for a library exercise")
    suggest.add_argument("exercise_id", help="Exercise library ID (e.g. ex_chest_1)")
    suggest.add_argument("--limit", type=int, help="Maximum number of suggestions")
    suggest.set_defaults(func=cmd_suggest)

    search = sub.add_parser("search", help="Search the exercise library")
    search.add_argument("query", help="Text to match against name, muscle group, equipment")
    search.set_defaults(func=cmd_search)

    aggregate = sub.add_parser("aggregate", help="Aggregate a session log into records")
    aggregate.add_argument("log", help="Session JSON file path")
    aggregate.add_argument(
        "--start",
        required=True,
        type=parse_start_time,
        help="Session start time, ISO-8601",
    )
    aggregate.set_defaults(func=cmd_aggregate)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        output = args.func(args)
        print(json.dumps(output, indent=2))

    except FileNotFoundError as e:
        print(f"Error: File not found: {e.filename}", file=sys.stderr)
        sys.exit(1)
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON: {e}", file=sys.stderr)
        sys.exit(1)
    except CommandError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
