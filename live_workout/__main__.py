"""
Entry point for running the CLI with `python -m live_workout`.
"""
from live_workout.cli import main

if __name__ == "__main__":
    main()
