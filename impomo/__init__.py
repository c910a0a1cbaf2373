"""Pomodoro timer with a to-do list, timed task sessions and daily statistics."""

__version__ = "0.1.0"