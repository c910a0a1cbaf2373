"""Daily work-time statistics kept in SQLite."""

from __future__ import annotations

import datetime
import sqlite3
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_PATH = "statistics.db"

_CREATE_TABLE = """
    CREATE TABLE IF NOT EXISTS dailyStats (
        date TEXT PRIMARY KEY,
        impomoTime INTEGER DEFAULT 0,
        pomodoroTime INTEGER DEFAULT 0,
        impomoTasks INTEGER DEFAULT 0
    )
"""

_ADD_IMPOMO = """
    INSERT INTO dailyStats (date, impomoTime, impomoTasks)
    VALUES (:date, :time, 1)
    ON CONFLICT(date) DO UPDATE SET
        impomoTime = impomoTime + :time,
        impomoTasks = impomoTasks + 1
"""

_ADD_POMODORO = """
    INSERT INTO dailyStats (date, pomodoroTime)
    VALUES (:date, :time)
    ON CONFLICT(date) DO UPDATE SET
        pomodoroTime = pomodoroTime + :time
"""

DateLike = Union[str, datetime.date]


def format_date(day: datetime.date) -> str:
    """Format a date as dd-MM-yyyy, the key used in the statistics table."""
    return day.strftime("%d-%m-%Y")


def _key(date: Optional[DateLike]) -> str:
    if date is None:
        return format_date(datetime.date.today())
    if isinstance(date, str):
        return date
    return format_date(date)


@dataclass(frozen=True)
class DailyReport:
    """Totals recorded for one day."""

    date: str
    impomo_time: int
    pomodoro_time: int
    tasks: int

    def render(self) -> str:
        return "\n".join(
            [
                f"Statistics for {self.date}",
                f"Classic Pomodoro time: {self.pomodoro_time} min",
                f"ImPomo work time: {self.impomo_time} min",
                f"Completed ImPomo tasks: {self.tasks}",
            ]
        )


class Statistics:
    """Per-day totals of task-based and classic pomodoro work."""

    def __init__(self, path: Union[str, Path] = DEFAULT_PATH) -> None:
        self._conn = sqlite3.connect(str(path))
        with self._conn:
            self._conn.execute(_CREATE_TABLE)

    def __enter__(self) -> "Statistics":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def add_impomo_data(self, time_spent: int, day: Optional[DateLike] = None) -> None:
        """Record one finished task of ``time_spent`` minutes (today by default)."""
        with self._conn:
            self._conn.execute(_ADD_IMPOMO, {"date": _key(day), "time": time_spent})

    def add_classic_pomodoro_data(self, time_spent: int, day: Optional[DateLike] = None) -> None:
        """Record ``time_spent`` minutes of classic work (today by default)."""
        with self._conn:
            self._conn.execute(_ADD_POMODORO, {"date": _key(day), "time": time_spent})

    def _column(self, column: str, date: DateLike) -> int:
        row = self._conn.execute(
            f"SELECT {column} FROM dailyStats WHERE date = ?", (_key(date),)
        ).fetchone()
        return int(row[0]) if row is not None and row[0] is not None else 0

    def daily_time_impomo(self, date: DateLike) -> int:
        return self._column("impomoTime", date)

    def daily_time_pomodoro(self, date: DateLike) -> int:
        return self._column("pomodoroTime", date)

    def daily_tasks_number(self, date: DateLike) -> int:
        return self._column("impomoTasks", date)

    def report(self, day: DateLike) -> DailyReport:
        key = _key(day)
        return DailyReport(
            date=key,
            impomo_time=self.daily_time_impomo(key),
            pomodoro_time=self.daily_time_pomodoro(key),
            tasks=self.daily_tasks_number(key),
        )

    def close(self) -> None:
        self._conn.close()