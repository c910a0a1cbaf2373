"""Task types used by the to-do list and the task-based pomodoro."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Task:
    """A named item that can be marked as completed."""

    name: str
    completed: bool = False

    def set_status(self, status: bool) -> None:
        self.completed = bool(status)

    def edit_name(self, new_name: str) -> None:
        """Rename the task; a task whose name is a single blank becomes "Task"."""
        if self.name == " ":
            self.name = "Task"
        else:
            self.name = new_name


@dataclass(eq=False)
class PomodoroTask(Task):
    """A task with a working time in minutes."""

    duration: int = 0

    def __init__(self, name: str, duration: int = 0) -> None:
        super().__init__(name)
        self.duration = duration

    def edit_duration(self, new_duration: int) -> None:
        """Set the duration, clamping negative values to zero."""
        self.duration = max(new_duration, 0)


def create_task(task_type: str, name: str, duration: int = 0) -> Task:
    """Build a task of the named kind: "Pomodoro" or "Basic"."""
    if task_type == "Pomodoro":
        return PomodoroTask(name, duration)
    if task_type == "Basic":
        return Task(name)
    raise ValueError(f"unknown task type: {task_type!r}")