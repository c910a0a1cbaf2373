"""The classic pomodoro: work blocks, short breaks and long breaks in cycles."""

from __future__ import annotations

import json
import time
from enum import Enum
from pathlib import Path
from typing import Any, Callable, Optional, Union

from impomo.notifications import Notifications
from impomo.statistics import Statistics
from impomo.timer import Timer

SETTINGS_PATH = "ClassicPomodoroSettings.json"
STATE_PATH = "ClassicPomodoroSessionState.json"
SESSION_FINISHED = "Session finished"
FINISHED_LABEL_SECONDS = 3.0

PathLike = Union[str, Path]


class Phase(str, Enum):
    WORK = "Work"
    SHORT_BREAK = "Short break"
    LONG_BREAK = "Long break"


def _as_int(value: Any, default: int) -> int:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


def _as_phase(value: Any) -> Phase:
    try:
        return Phase(value)
    except ValueError:
        return Phase.WORK


def _read_object(path: PathLike) -> Optional[dict]:
    """Return the JSON object in ``path``, {} for a non-object, None if unreadable."""
    raw = Path(path).read_bytes()
    try:
        document = json.loads(raw)
    except (ValueError, UnicodeDecodeError):
        return {}
    return document if isinstance(document, dict) else {}


def _write_object(path: PathLike, document: dict) -> None:
    try:
        Path(path).write_text(json.dumps(document, indent=4) + "\n", encoding="utf-8")
    except OSError:
        return


class ClassicPomodoro:
    """Drives a timer through work and break phases, recording work time."""

    def __init__(
        self,
        stats: Optional[Statistics] = None,
        notifications: Optional[Notifications] = None,
        *,
        settings_path: PathLike = SETTINGS_PATH,
        state_path: PathLike = STATE_PATH,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.stats = stats
        self.notifications = notifications
        self.settings_path = settings_path
        self.state_path = state_path
        self._clock = clock

        self.work_duration = 25
        self.short_break_duration = 5
        self.long_break_duration = 10
        self.cycles = 4
        self.work_blocks_in_cycle = 4

        self.current_work_block = 0
        self.current_cycle = 0
        self.current_phase = Phase.WORK

        self.timer = Timer(subscriber=self)
        self.timer.set_time(self.work_duration * 60)
        self.remaining_time = self.timer.remaining_time

        self._label = "Current phase: " + self.current_phase.value
        self._finished_at: Optional[float] = None

    @property
    def phase_label(self) -> str:
        """The text shown above the timer."""
        if self._finished_at is not None:
            if self._clock() - self._finished_at < FINISHED_LABEL_SECONDS:
                return SESSION_FINISHED
            return "Current phase: " + Phase.WORK.value
        return self._label

    def _show_phase(self) -> None:
        self._finished_at = None
        self._label = "Current phase: " + self.current_phase.value

    def start(self) -> None:
        self.timer.start()

    def pause(self) -> None:
        self.timer.pause()

    def reset(self) -> None:
        self.timer.reset()

    def _record_work(self) -> None:
        if self.stats is not None:
            self.stats.add_classic_pomodoro_data(self.work_duration)

    def _enter(self, phase: Phase, minutes: int) -> None:
        self.current_phase = phase
        self._show_phase()
        self.timer.set_time(minutes * 60)
        self.timer.start()

    def next_phase(self) -> None:
        """Advance to the following phase, or finish the session after the last cycle."""
        if self.current_cycle < self.cycles:
            last_block = self.work_blocks_in_cycle - 1
            if self.current_phase is Phase.WORK and self.current_work_block < last_block:
                self._record_work()
                self.current_work_block += 1
                self._enter(Phase.SHORT_BREAK, self.short_break_duration)
            elif self.current_phase is Phase.WORK and self.current_work_block == last_block:
                self._record_work()
                self._enter(Phase.LONG_BREAK, self.long_break_duration)
                self.current_cycle += 1
                self.current_work_block = 0
            elif self.current_phase in (Phase.SHORT_BREAK, Phase.LONG_BREAK):
                self._enter(Phase.WORK, self.work_duration)
        else:
            self._finished_at = self._clock()
            self.timer.set_time(self.work_duration * 60)
            self.current_phase = Phase.WORK
            self.current_work_block = 0
            self.current_cycle = 0
        self.save_session_state()

    def update(self) -> None:
        """Called by the timer when a countdown ends."""
        self.next_phase()
        if self.notifications is not None:
            self.notifications.play_sound()

    def update_time(self, time: int) -> None:
        """Called by the timer on every second of the countdown."""
        self.remaining_time = time
        self.save_session_state()

    def change_properties(
        self, work: int, short_break: int, long_break: int, cycles: int, work_blocks: int
    ) -> None:
        """Apply new durations; counts below the current progress are ignored."""
        self.work_duration = work
        self.short_break_duration = short_break
        self.long_break_duration = long_break

        minutes = {
            Phase.WORK: work,
            Phase.SHORT_BREAK: short_break,
            Phase.LONG_BREAK: long_break,
        }[self.current_phase]
        self.timer.set_time(minutes * 60)

        if cycles >= self.current_cycle + 1:
            self.cycles = cycles
        if work_blocks >= self.current_work_block + 1:
            self.work_blocks_in_cycle = work_blocks

    def reset_pomodoro(self) -> None:
        """Stop and return to the first work block of the first cycle."""
        self.pause()
        self.current_cycle = 0
        self.current_work_block = 0
        self.current_phase = Phase.WORK
        self._show_phase()
        self.timer.set_time(self.work_duration * 60)

    def save_session_state(self) -> None:
        _write_object(
            self.state_path,
            {
                "currentWorkBlock": self.current_work_block,
                "currentCycle": self.current_cycle,
                "currentPhase": self.current_phase.value,
                "savedTime": self.remaining_time,
            },
        )

    def load_session_state(self) -> None:
        """Restore progress; a missing file starts a fresh session."""
        try:
            document = _read_object(self.state_path)
        except OSError:
            self.current_work_block = 0
            self.current_cycle = 0
            self.current_phase = Phase.WORK
            self.remaining_time = self.work_duration * 60
            self.timer.set_time(self.remaining_time)
            self._show_phase()
            return
        if not document:
            return

        self.current_work_block = _as_int(document.get("currentWorkBlock"), 0)
        self.current_cycle = _as_int(document.get("currentCycle"), 0)
        self.current_phase = _as_phase(document.get("currentPhase", Phase.WORK.value))
        self.remaining_time = _as_int(document.get("savedTime"), self.work_duration * 60)
        self.timer.set_time(self.remaining_time)
        self._show_phase()

    def save_settings(self) -> None:
        _write_object(
            self.settings_path,
            {
                "workDuration": self.work_duration,
                "shortBreakDuration": self.short_break_duration,
                "longBreakDuration": self.long_break_duration,
                "cycles": self.cycles,
                "workBlocksInCycle": self.work_blocks_in_cycle,
            },
        )

    def load_settings(self) -> None:
        """Read durations and counts; a missing file applies the standard set."""
        try:
            document = _read_object(self.settings_path)
        except OSError:
            self.change_properties(25, 5, 15, 4, 4)
            return
        if not document:
            return
        self.change_properties(
            _as_int(document.get("workDuration"), 25),
            _as_int(document.get("shortBreakDuration"), 5),
            _as_int(document.get("longBreakDuration"), 15),
            _as_int(document.get("cycles"), 4),
            _as_int(document.get("workBlocksInCycle"), 4),
        )