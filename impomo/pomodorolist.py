"""The task list behind the task-based pomodoro, persisted in SQLite."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Optional, Union

from impomo.tasks import PomodoroTask, Task

if TYPE_CHECKING:
    from impomo.extended import ExtendedPomodoro

DEFAULT_PATH = "pomodoroTasks.db"
ALL_TASKS_FINISHED = "All tasks finished"

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS pomodoroTasks (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        isCompleted INTEGER NOT NULL,
        duration INTEGER NOT NULL
    )
"""


class PomodoroList:
    """An ordered list of timed tasks worked through by an :class:`ExtendedPomodoro`.

    Every change is written to the database. When a session is attached as
    ``parent``, edits that would disturb the running task are refused.
    """

    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self._tasks: list[PomodoroTask] = []
        self.parent: Optional[ExtendedPomodoro] = None
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(_CREATE_TABLE)

    def __enter__(self) -> "PomodoroList":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[PomodoroTask]:
        return iter(list(self._tasks))

    @property
    def tasks(self) -> list[PomodoroTask]:
        """A copy of the tasks in their current order."""
        return list(self._tasks)

    @property
    def _current(self) -> int:
        return self.parent.current if self.parent is not None else 0

    @property
    def _started(self) -> bool:
        return self.parent.was_started if self.parent is not None else False

    def _index(self, task: Task) -> int:
        for index, item in enumerate(self._tasks):
            if item is task:
                return index
        return -1

    def _retime_current(self) -> None:
        parent = self.parent
        if parent is not None:
            parent.timer.set_time(self._tasks[parent.current].duration * 60)

    def _editable(self, index: int) -> bool:
        current = self._current
        return index > current or (not self._started and index == current)

    def add_task(self, task: Task) -> None:
        """Append a task; if every earlier task is done it becomes the current one."""
        if not isinstance(task, PomodoroTask):
            raise TypeError("a pomodoro list holds only PomodoroTask items")
        parent = self.parent
        if parent is not None and len(self._tasks) == parent.tasks_finished:
            parent.timer.set_time(task.duration * 60)
            parent.current = parent.tasks_finished
        self._tasks.append(task)
        if parent is not None:
            parent.update_current_task_label()
        self.save()

    def remove_task(self, task: Task) -> None:
        index = self._index(task)
        if index >= 0:
            del self._tasks[index]
        self.save()

    def edit_task_name(self, task: Task, new_name: str) -> None:
        task.edit_name(new_name)
        if self.parent is not None:
            self.parent.update_current_task_label()
        self.save()

    def edit_task_status(self, task: Task, status: bool) -> None:
        task.set_status(status)
        self.save()

    def edit_task_duration(self, task: Task, new_duration: int) -> None:
        if not isinstance(task, PomodoroTask):
            raise TypeError("only a PomodoroTask has a duration")
        task.edit_duration(new_duration)
        self.save()

    def reorder_tasks(self, from_index: int, to_index: int) -> None:
        """Move the task at ``from_index`` to ``to_index``; bad indexes are ignored."""
        size = len(self._tasks)
        if not (0 <= from_index < size and 0 <= to_index < size):
            return
        task = self._tasks.pop(from_index)
        self._tasks.insert(to_index, task)
        if self.parent is not None:
            self.parent.update_current_task_label()
        self.save()

    def change_duration(self, task: PomodoroTask, new_duration: int) -> bool:
        """Change a task's duration unless it is running or already behind; report success."""
        index = self._index(task)
        if index < 0 or not self._editable(index):
            return False
        self.edit_task_duration(task, new_duration)
        if index == self._current and self.parent is not None:
            self.parent.timer.set_time(task.duration * 60)
        return True

    def delete_task(self, task: PomodoroTask) -> bool:
        """Delete a pending task that is not running; report whether it was deleted."""
        index = self._index(task)
        if index < 0 or task.completed or not self._editable(index):
            return False
        self.remove_task(task)

        parent = self.parent
        if parent is None:
            return True
        if not self._tasks:
            parent.clear_all_tasks()
        elif self._tasks[-1].completed:
            parent.current = len(self._tasks) - 1
            parent.timer.set_time(0)
            parent.current_task_label = ALL_TASKS_FINISHED
        else:
            if not parent.was_started:
                self._retime_current()
            parent.update_current_task_label()
        return True

    def move_up(self, task: PomodoroTask) -> bool:
        """Swap a pending task with the one before it; report whether it moved."""
        index = self._index(task)
        current = self._current
        if self._started:
            allowed = index > 0 and index - 1 > current
        else:
            allowed = index >= 0 and index - 1 >= current
        if not allowed:
            return False
        self.reorder_tasks(index, index - 1)
        if current in (index, index - 1):
            self._retime_current()
        return True

    def move_down(self, task: PomodoroTask) -> bool:
        """Swap a pending task with the one after it; report whether it moved."""
        index = self._index(task)
        current = self._current
        last = len(self._tasks) - 1
        if self._started:
            allowed = 0 <= index < last and index > current
        else:
            allowed = 0 <= index < last and index >= current
        if not allowed:
            return False
        self.reorder_tasks(index, index + 1)
        if current in (index, index + 1):
            self._retime_current()
        return True

    def save(self) -> None:
        """Replace the stored tasks with the current list."""
        with self._conn:
            self._conn.execute("DELETE FROM pomodoroTasks")
            self._conn.executemany(
                "INSERT INTO pomodoroTasks (name, isCompleted, duration) VALUES (?, ?, ?)",
                [
                    (task.name, 1 if task.completed else 0, task.duration)
                    for task in self._tasks
                ],
            )

    def load(self) -> None:
        """Replace the current list with the stored tasks."""
        rows = self._conn.execute(
            "SELECT name, isCompleted, duration FROM pomodoroTasks ORDER BY id"
        ).fetchall()
        self._tasks = []
        for name, completed, duration in rows:
            task = PomodoroTask(str(name), int(duration))
            if int(completed) == 1:
                task.set_status(True)
            self._tasks.append(task)

    def close(self) -> None:
        self._conn.close()