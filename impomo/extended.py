"""The task-based pomodoro: each task on the list is timed in turn."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

from impomo.notifications import Notifications
from impomo.pomodorolist import ALL_TASKS_FINISHED, PomodoroList
from impomo.statistics import Statistics
from impomo.timer import Timer

STATE_PATH = "ExtendedPomodoroSessionState.json"
NO_TASKS = "No tasks on the list"
DEFAULT_MINUTES = 25

PathLike = Union[str, Path]


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


class ExtendedPomodoro:
    """Runs a timer for each task of a :class:`PomodoroList`, one after another."""

    def __init__(
        self,
        task_list: PomodoroList,
        stats: Optional[Statistics] = None,
        notifications: Optional[Notifications] = None,
        *,
        state_path: PathLike = STATE_PATH,
    ) -> None:
        self.task_list = task_list
        task_list.parent = self
        self.stats = stats
        self.notifications = notifications
        self.state_path = state_path

        self._current = 0
        self.tasks_finished = 0
        self.was_started = False

        self.timer = Timer(subscriber=self)
        tasks = task_list.tasks
        if tasks:
            self.timer.set_time(tasks[0].duration * 60)
            self.current_task_label = "Current task: " + tasks[0].name
        else:
            self.current_task_label = NO_TASKS
        self.remaining_time = self.timer.remaining_time
        self.timer.add_started_listener(self._on_started)

    def _on_started(self) -> None:
        self.was_started = True

    @property
    def current(self) -> int:
        """Index of the task being worked on."""
        return self._current

    @current.setter
    def current(self, value: int) -> None:
        self._current = value
        self.save_session_state()

    def start(self) -> None:
        self.timer.start()

    def pause(self) -> None:
        self.timer.pause()

    def reset(self) -> None:
        self.timer.reset()

    def next_phase(self) -> None:
        """Mark the current task done and move to the next, or finish the list."""
        tasks = self.task_list.tasks
        if len(tasks) == self.tasks_finished:
            return

        self.task_list.edit_task_status(tasks[self._current], True)

        if self._current < len(tasks) - 1:
            self._current += 1
            task = tasks[self._current]
            self.timer.set_time(task.duration * 60)
            self.current_task_label = "Current task: " + task.name
            self.start()
        else:
            self.was_started = False
            self.timer.set_time(0)
            self.current_task_label = ALL_TASKS_FINISHED
            self.pause()
        self.tasks_finished += 1
        self.save_session_state()

    def update(self) -> None:
        """Called by the timer when the current task's time runs out."""
        task = self.task_list.tasks[self._current]
        if self.stats is not None:
            self.stats.add_impomo_data(task.duration)
        if not task.completed and self.notifications is not None:
            self.notifications.play_sound()
        self.next_phase()

    def update_time(self, time: int) -> None:
        """Called by the timer on every second of the countdown."""
        self.remaining_time = time
        self.save_session_state()

    def update_current_task_label(self) -> None:
        tasks = self.task_list.tasks
        if tasks:
            self.current_task_label = "Current task: " + tasks[self._current].name
        else:
            self.current_task_label = NO_TASKS

    def clear_all_tasks(self) -> None:
        """Remove every task and stop the session."""
        for task in reversed(self.task_list.tasks):
            self.task_list.remove_task(task)
        self._current = 0
        self.tasks_finished = 0
        self.was_started = False
        self.pause()
        self.timer.set_time(0)
        self.current_task_label = NO_TASKS

    def save_session_state(self) -> None:
        document = {
            "current": self._current,
            "tasksFinished": self.tasks_finished,
            "savedTime": self.remaining_time,
        }
        try:
            Path(self.state_path).write_text(
                json.dumps(document, indent=4) + "\n", encoding="utf-8"
            )
        except OSError:
            return

    def load_session_state(self) -> None:
        """Restore progress; a missing file starts from the first task."""
        try:
            raw = Path(self.state_path).read_bytes()
        except OSError:
            self._current = 0
            self.tasks_finished = 0
            tasks = self.task_list.tasks
            minutes = tasks[0].duration if tasks else DEFAULT_MINUTES
            self.remaining_time = minutes * 60
            return

        try:
            document = json.loads(raw)
        except (ValueError, UnicodeDecodeError):
            return
        if not isinstance(document, dict):
            return

        self._current = _as_int(document.get("current"), 0)
        self.tasks_finished = _as_int(document.get("tasksFinished"), 0)
        self.remaining_time = _as_int(document.get("savedTime"), DEFAULT_MINUTES * 60)

    def load_from_database(self) -> None:
        """Reload the task list and put the timer back where the session left off."""
        self.task_list.load()
        tasks = self.task_list.tasks
        if not tasks:
            self.clear_all_tasks()
        elif tasks[-1].completed:
            self._current = len(tasks) - 1
            self.timer.set_time(0)
            self.current_task_label = ALL_TASKS_FINISHED
        else:
            self.timer.set_time(tasks[self._current].duration * 60)
            self.timer.remaining_time = self.remaining_time
            self.update_current_task_label()