"""
Rest timer state snapshot.
"""

from enum import Enum

from pydantic import BaseModel, Field


class TimerPhase(str, Enum):
    """States of the rest timer state machine."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class TimerState(BaseModel):
    """
    Observable state of the rest timer.

    `duration` is the last requested duration and survives pause and skip;
    only reset() clears it.
    """

    time_left: int = Field(default=0, ge=0, description="Seconds remaining")
    is_running: bool = False
    duration: int = Field(default=0, ge=0, description="Last requested duration in seconds")

    @property
    def phase(self) -> TimerPhase:
        if self.is_running:
            return TimerPhase.RUNNING
        if self.time_left > 0:
            return TimerPhase.PAUSED
        return TimerPhase.IDLE

    model_config = {"frozen": True}
