"""A plain to-do list persisted in SQLite."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Iterator, Union

from impomo.tasks import Task

DEFAULT_PATH = "tasks.db"

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS tasks (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        name TEXT NOT NULL,
        isCompleted INTEGER NOT NULL
    )
"""


class ToDoList:
    """An ordered list of tasks; every change is written to the database."""

    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self._tasks: list[Task] = []
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(_CREATE_TABLE)

    def __enter__(self) -> "ToDoList":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __len__(self) -> int:
        return len(self._tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(list(self._tasks))

    @property
    def tasks(self) -> list[Task]:
        """A copy of the tasks in their current order."""
        return list(self._tasks)

    def _index(self, task: Task) -> int:
        for index, item in enumerate(self._tasks):
            if item is task:
                return index
        return -1

    def add_task(self, task: Task) -> None:
        self._tasks.append(task)
        self.save()

    def remove_task(self, task: Task) -> None:
        index = self._index(task)
        if index >= 0:
            del self._tasks[index]
        self.save()

    def edit_task_name(self, task: Task, new_name: str) -> None:
        task.edit_name(new_name)
        self.save()

    def edit_task_status(self, task: Task, status: bool) -> None:
        task.set_status(status)
        self.save()

    def reorder_tasks(self, from_index: int, to_index: int) -> None:
        """Move the task at ``from_index`` to ``to_index``; bad indexes are ignored."""
        size = len(self._tasks)
        if not (0 <= from_index < size and 0 <= to_index < size):
            return
        task = self._tasks.pop(from_index)
        self._tasks.insert(to_index, task)
        self.save()

    def move_up(self, task: Task) -> None:
        index = self._index(task)
        if index > 0:
            self.reorder_tasks(index, index - 1)

    def move_down(self, task: Task) -> None:
        index = self._index(task)
        if index < len(self._tasks) - 1:
            self.reorder_tasks(index, index + 1)

    def save(self) -> None:
        """Replace the stored tasks with the current list."""
        with self._conn:
            self._conn.execute("DELETE FROM tasks")
            self._conn.executemany(
                "INSERT INTO tasks (name, isCompleted) VALUES (?, ?)",
                [(task.name, 1 if task.completed else 0) for task in self._tasks],
            )

    def load(self) -> None:
        """Replace the current list with the stored tasks."""
        rows = self._conn.execute(
            "SELECT name, isCompleted FROM tasks ORDER BY id"
        ).fetchall()
        self._tasks = []
        for name, completed in rows:
            task = Task(str(name))
            if int(completed) == 1:
                task.set_status(True)
            self._tasks.append(task)

    def close(self) -> None:
        self._conn.close()