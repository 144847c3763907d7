"""PomoTask CLI - task list and Pomodoro focus timer for the terminal."""

__version__ = "0.1.0"
