"""The application: wires the lists, timers, statistics and settings together."""

from __future__ import annotations

import argparse
import datetime
import sys
import time
from pathlib import Path
from typing import Callable, Optional, Sequence, Union

from impomo import classic as classic_module
from impomo import extended as extended_module
from impomo import pomodorolist as pomodorolist_module
from impomo import settings as settings_module
from impomo import statistics as statistics_module
from impomo import todolist as todolist_module
from impomo.classic import ClassicPomodoro
from impomo.extended import ExtendedPomodoro
from impomo.notifications import SOUND_FILES, Notifications, ring_bell
from impomo.pomodorolist import PomodoroList
from impomo.settings import AppSettings
from impomo.statistics import DailyReport, Statistics
from impomo.tasks import PomodoroTask, Task, create_task
from impomo.themes import ELEMENTS, Theme, style_for
from impomo.timer import Timer

MAX_TASKS = 20
DEFAULT_TASK_MINUTES = 25

WORK_RANGE = (1, 120)
SHORT_BREAK_RANGE = (1, 60)
LONG_BREAK_RANGE = (1, 90)
CYCLES_RANGE = (1, 15)
WORK_BLOCKS_RANGE = (1, 15)

PathLike = Union[str, Path]
DateLike = Union[str, datetime.date]


def _check_range(name: str, value: int, bounds: tuple[int, int]) -> None:
    low, high = bounds
    if not low <= value <= high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")


class App:
    """All the application's parts, stored under one data directory."""

    def __init__(
        self,
        data_dir: PathLike = ".",
        player: Callable[[str], None] = ring_bell,
    ) -> None:
        base = Path(data_dir)
        self.settings_path = base / settings_module.DEFAULT_PATH

        self.settings = AppSettings()
        self.settings.load(self.settings_path)
        self.notifications = Notifications(self.settings, player)
        self.statistics = Statistics(base / statistics_module.DEFAULT_PATH)

        self.todo_list = todolist_module.ToDoList(base / todolist_module.DEFAULT_PATH)
        self.todo_list.load()

        self.pomodoro_list = PomodoroList(base / pomodorolist_module.DEFAULT_PATH)
        self.extended = ExtendedPomodoro(
            self.pomodoro_list,
            self.statistics,
            self.notifications,
            state_path=base / extended_module.STATE_PATH,
        )
        self.extended.load_session_state()
        self.extended.load_from_database()

        self.classic = ClassicPomodoro(
            self.statistics,
            self.notifications,
            settings_path=base / classic_module.SETTINGS_PATH,
            state_path=base / classic_module.STATE_PATH,
        )
        self.classic.load_settings()
        self.classic.load_session_state()

    def __enter__(self) -> "App":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @property
    def styles(self) -> dict[str, str]:
        """Style sheet of every interface element for the current theme."""
        try:
            theme = Theme(self.settings.theme)
        except ValueError:
            return {}
        return {element: style_for(theme, element) for element in ELEMENTS}

    def add_todo_task(self) -> Optional[Task]:
        """Append an empty to-do task; returns None when the list is full."""
        if len(self.todo_list) >= MAX_TASKS:
            return None
        task = create_task("Basic", "")
        self.todo_list.add_task(task)
        return task

    def add_pomodoro_task(self) -> Optional[PomodoroTask]:
        """Append an empty timed task; returns None when the list is full."""
        if len(self.pomodoro_list) >= MAX_TASKS:
            return None
        task = create_task("Pomodoro", "", DEFAULT_TASK_MINUTES)
        assert isinstance(task, PomodoroTask)
        self.pomodoro_list.add_task(task)
        return task

    def configure_classic(
        self, work: int, short_break: int, long_break: int, cycles: int, work_blocks: int
    ) -> None:
        """Apply and store new classic pomodoro settings."""
        _check_range("work", work, WORK_RANGE)
        _check_range("short_break", short_break, SHORT_BREAK_RANGE)
        _check_range("long_break", long_break, LONG_BREAK_RANGE)
        _check_range("cycles", cycles, CYCLES_RANGE)
        _check_range("work_blocks", work_blocks, WORK_BLOCKS_RANGE)
        self.classic.change_properties(work, short_break, long_break, cycles, work_blocks)
        self.classic.save_settings()

    def set_theme(self, theme: Union[str, Theme]) -> None:
        try:
            resolved = Theme(theme)
        except ValueError:
            raise ValueError(f"unknown theme: {theme!r}") from None
        self.settings.theme = resolved.value
        self.settings.save(self.settings_path)

    def set_sound(self, sound: str) -> None:
        """Choose the alert sound, play it once and store the choice."""
        if sound not in SOUND_FILES:
            raise ValueError(f"unknown sound: {sound!r}")
        self.settings.sound = sound
        self.notifications.play_sound()
        self.settings.save(self.settings_path)

    def set_sound_enabled(self, enabled: bool) -> None:
        self.settings.sound_status = bool(enabled)
        self.settings.save(self.settings_path)

    def report(self, day: DateLike) -> DailyReport:
        return self.statistics.report(day)

    def close(self) -> None:
        self.todo_list.close()
        self.pomodoro_list.close()
        self.statistics.close()


def _parse_day(text: str) -> datetime.date:
    for parse in (
        datetime.date.fromisoformat,
        lambda value: datetime.datetime.strptime(value, "%d-%m-%Y").date(),
    ):
        try:
            return parse(text)
        except ValueError:
            continue
    raise argparse.ArgumentTypeError(f"not a date: {text!r}")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="impomo", description="Pomodoro timer and task lists.")
    parser.add_argument("--data-dir", default=".", help="directory holding the data files")
    commands = parser.add_subparsers(dest="command", required=True)

    report = commands.add_parser("report", help="show the statistics of a day")
    report.add_argument("day", nargs="?", type=_parse_day, default=None)

    todo = commands.add_parser("todo", help="the to-do list")
    todo_actions = todo.add_subparsers(dest="action")
    todo_actions.add_parser("list")
    todo_add = todo_actions.add_parser("add")
    todo_add.add_argument("name")
    todo_done = todo_actions.add_parser("done")
    todo_done.add_argument("index", type=int)
    todo_remove = todo_actions.add_parser("remove")
    todo_remove.add_argument("index", type=int)

    tasks = commands.add_parser("tasks", help="the timed task list")
    task_actions = tasks.add_subparsers(dest="action")
    task_actions.add_parser("list")
    task_add = task_actions.add_parser("add")
    task_add.add_argument("name")
    task_add.add_argument("minutes", nargs="?", type=int, default=DEFAULT_TASK_MINUTES)
    task_actions.add_parser("clear")

    classic = commands.add_parser("classic", help="the classic pomodoro")
    classic_actions = classic.add_subparsers(dest="action")
    classic_actions.add_parser("status")
    configure = classic_actions.add_parser("configure")
    for name in ("work", "short_break", "long_break", "cycles", "work_blocks"):
        configure.add_argument(name, type=int)
    classic_actions.add_parser("reset")

    theme = commands.add_parser("theme", help="choose the colour theme")
    theme.add_argument("theme", choices=[item.value for item in Theme])

    sound = commands.add_parser("sound", help="choose the alert sound")
    sound.add_argument("sound", choices=sorted(SOUND_FILES))
    commands.add_parser("mute", help="turn sound alerts off")
    commands.add_parser("unmute", help="turn sound alerts on")

    run = commands.add_parser("run", help="run a countdown in the terminal")
    run.add_argument("mode", choices=["classic", "tasks"])
    return parser


def _print_todo(app: App) -> None:
    for number, task in enumerate(app.todo_list, start=1):
        mark = "x" if task.completed else " "
        print(f"{number}. [{mark}] {task.name}")


def _print_tasks(app: App) -> None:
    for number, task in enumerate(app.pomodoro_list, start=1):
        mark = "x" if task.completed else " "
        print(f"{number}. [{mark}] {task.name} ({task.duration} min)")
    print(app.extended.current_task_label)


def _pick(items: list, index: int) -> object:
    if not 1 <= index <= len(items):
        raise IndexError(f"no item number {index}")
    return items[index - 1]


def _run(timer: Timer, describe: Callable[[], str]) -> int:
    timer.start()
    if not timer.is_running:
        print("Nothing to run.")
        return 1
    try:
        while timer.is_running:
            sys.stdout.write(f"\r{describe()}  {timer.label}   ")
            sys.stdout.flush()
            time.sleep(1)
            timer.tick()
    except KeyboardInterrupt:
        timer.pause()
    print()
    print(describe())
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = _build_parser().parse_args(argv)
    with App(args.data_dir) as app:
        try:
            return _dispatch(app, args)
        except (ValueError, IndexError) as error:
            print(f"impomo: {error}", file=sys.stderr)
            return 1


def _dispatch(app: App, args: argparse.Namespace) -> int:
    command = args.command
    if command == "report":
        day = args.day if args.day is not None else datetime.date.today()
        print(app.report(day).render())
    elif command == "todo":
        if args.action == "add":
            task = app.add_todo_task()
            if task is None:
                raise ValueError(f"the to-do list holds at most {MAX_TASKS} tasks")
            app.todo_list.edit_task_name(task, args.name)
        elif args.action == "done":
            app.todo_list.edit_task_status(_pick(app.todo_list.tasks, args.index), True)
        elif args.action == "remove":
            app.todo_list.remove_task(_pick(app.todo_list.tasks, args.index))
        _print_todo(app)
    elif command == "tasks":
        if args.action == "add":
            task = app.add_pomodoro_task()
            if task is None:
                raise ValueError(f"the task list holds at most {MAX_TASKS} tasks")
            app.pomodoro_list.edit_task_name(task, args.name)
            app.pomodoro_list.change_duration(task, args.minutes)
        elif args.action == "clear":
            app.extended.clear_all_tasks()
        _print_tasks(app)
    elif command == "classic":
        if args.action == "configure":
            app.configure_classic(
                args.work, args.short_break, args.long_break, args.cycles, args.work_blocks
            )
        elif args.action == "reset":
            app.classic.reset_pomodoro()
        print(app.classic.phase_label)
        print(app.classic.timer.label)
    elif command == "theme":
        app.set_theme(args.theme)
        print(f"Theme: {app.settings.theme}")
    elif command == "sound":
        app.set_sound(args.sound)
        print(f"Sound: {app.settings.sound}")
    elif command in ("mute", "unmute"):
        app.set_sound_enabled(command == "unmute")
        print("Sound notifications " + ("on" if app.settings.sound_status else "off"))
    elif command == "run":
        if args.mode == "classic":
            return _run(app.classic.timer, lambda: app.classic.phase_label)
        return _run(app.extended.timer, lambda: app.extended.current_task_label)
    return 0


if __name__ == "__main__":
    sys.exit(main())