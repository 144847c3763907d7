"""Focus mode - Pomodoro timer and cycle tracking."""

from .cycling import CycleState, PomodoroConfig
from .timer import Timer, format_remaining

__all__ = ["CycleState", "PomodoroConfig", "Timer", "format_remaining"]
