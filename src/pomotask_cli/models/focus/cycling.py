"""Pomodoro cycle configuration and progress tracking."""

from dataclasses import dataclass
from typing import Literal

Phase = Literal["focus", "short_break"]

FOCUS_MESSAGE = "Pomodoro started. Focus!"
BREAK_ANNOUNCEMENT = "Take a short break."
BREAK_MESSAGE = "Short break. Relax!"


@dataclass
class PomodoroConfig:
    """Configuration for Pomodoro cycling."""

    focus_duration: int = 10  # seconds
    short_break: int = 10  # seconds


@dataclass
class CycleState:
    """Progress through a run of Pomodoro cycles."""

    sessions_planned: int = 0
    sessions_completed: int = 0
    current_phase: Phase = "focus"
    interrupted: bool = False

    @property
    def remaining(self) -> int:
        return max(0, self.sessions_planned - self.sessions_completed)

    @property
    def finished(self) -> bool:
        return self.interrupted or self.remaining == 0

    def get_duration(self, config: PomodoroConfig) -> int:
        """Get duration in seconds for the current phase."""
        if self.current_phase == "focus":
            return config.focus_duration
        return config.short_break

    def advance(self) -> None:
        """Move to the next phase, counting a session after its break."""
        if self.current_phase == "focus":
            self.current_phase = "short_break"
        else:
            self.current_phase = "focus"
            self.sessions_completed += 1
