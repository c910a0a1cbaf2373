import datetime
import json

import pytest

from impomo.classic import ClassicPomodoro, Phase
from impomo.notifications import Notifications
from impomo.settings import AppSettings
from impomo.statistics import Statistics


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


@pytest.fixture
def stats(tmp_path):
    with Statistics(tmp_path / "statistics.db") as statistics:
        yield statistics


@pytest.fixture
def played():
    return []


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def pom(tmp_path, stats, played, clock):
    notifications = Notifications(AppSettings(), player=played.append)
    return ClassicPomodoro(
        stats,
        notifications,
        settings_path=tmp_path / "settings.json",
        state_path=tmp_path / "state.json",
        clock=clock,
    )


def test_defaults(pom):
    assert pom.work_duration == 25
    assert pom.short_break_duration == 5
    assert pom.long_break_duration == 10
    assert pom.cycles == 4
    assert pom.work_blocks_in_cycle == 4
    assert pom.current_phase is Phase.WORK
    assert pom.timer.remaining_time == 25 * 60
    assert pom.phase_label == "Current phase: Work"


def test_work_to_short_break(pom, stats):
    pom.next_phase()
    assert pom.current_phase is Phase.SHORT_BREAK
    assert pom.current_work_block == 1
    assert pom.timer.remaining_time == pom.short_break_duration * 60
    assert pom.timer.is_running
    assert pom.phase_label == "Current phase: Short break"
    assert stats.daily_time_pomodoro(datetime.date.today()) == pom.work_duration


def test_break_returns_to_work(pom):
    pom.next_phase()
    pom.next_phase()
    assert pom.current_phase is Phase.WORK
    assert pom.timer.remaining_time == pom.work_duration * 60


def test_last_block_gives_long_break(pom):
    pom.change_properties(25, 5, 10, 4, 1)
    pom.next_phase()
    assert pom.current_phase is Phase.LONG_BREAK
    assert pom.current_cycle == 1
    assert pom.current_work_block == 0
    assert pom.timer.remaining_time == pom.long_break_duration * 60


def test_session_finishes_after_all_cycles(pom, clock):
    pom.change_properties(25, 5, 10, 1, 2)
    pom.next_phase()  # short break
    pom.next_phase()  # work
    pom.next_phase()  # long break, cycle done
    assert pom.current_cycle == 1
    pom.next_phase()
    assert pom.phase_label == "Session finished"
    assert pom.current_phase is Phase.WORK
    assert pom.current_cycle == 0
    assert pom.current_work_block == 0
    assert pom.timer.remaining_time == pom.work_duration * 60
    clock.now += 3.0
    assert pom.phase_label == "Current phase: Work"


def test_change_properties_sets_timer_for_phase(pom):
    pom.next_phase()
    pom.change_properties(30, 7, 12, 4, 4)
    assert pom.timer.remaining_time == 7 * 60
    assert pom.work_duration == 30


def test_change_properties_keeps_counts_above_progress(pom):
    pom.change_properties(25, 5, 10, 4, 1)
    pom.next_phase()
    pom.next_phase()
    assert pom.current_cycle == 1
    pom.change_properties(25, 5, 10, 1, 1)
    assert pom.cycles == 4
    pom.change_properties(25, 5, 10, 2, 1)
    assert pom.cycles == 2


def test_session_state_round_trip(pom, tmp_path):
    pom.next_phase()
    pom.update_time(123)
    other = ClassicPomodoro(state_path=tmp_path / "state.json")
    other.load_session_state()
    assert other.current_phase is Phase.SHORT_BREAK
    assert other.current_work_block == 1
    assert other.remaining_time == 123
    assert other.timer.remaining_time == 123
    assert other.phase_label == "Current phase: Short break"


def test_update_time_writes_saved_time(pom, tmp_path):
    pom.update_time(42)
    assert pom.remaining_time == 42
    document = json.loads((tmp_path / "state.json").read_text())
    assert document["savedTime"] == 42
    assert document["currentPhase"] == "Work"
    other = ClassicPomodoro(state_path=tmp_path / "state.json")
    other.load_session_state()
    assert other.remaining_time == 42
    assert other.current_phase is Phase.WORK


def test_load_session_state_missing_file(tmp_path):
    pom = ClassicPomodoro(state_path=tmp_path / "missing.json")
    pom.current_cycle = 2
    pom.load_session_state()
    assert pom.current_cycle == 0
    assert pom.current_phase is Phase.WORK
    assert pom.timer.remaining_time == pom.work_duration * 60


def test_load_session_state_invalid_json_keeps_state(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("not json")
    pom = ClassicPomodoro(state_path=path)
    pom.current_cycle = 2
    pom.load_session_state()
    assert pom.current_cycle == 2


def test_settings_round_trip(pom, tmp_path):
    pom.change_properties(50, 8, 20, 3, 2)
    pom.save_settings()
    other = ClassicPomodoro(settings_path=tmp_path / "settings.json")
    other.load_settings()
    assert (
        other.work_duration,
        other.short_break_duration,
        other.long_break_duration,
        other.cycles,
        other.work_blocks_in_cycle,
    ) == (50, 8, 20, 3, 2)


def test_load_settings_missing_file_uses_standard_set(tmp_path):
    pom = ClassicPomodoro(settings_path=tmp_path / "missing.json")
    pom.load_settings()
    assert pom.long_break_duration == 15
    assert pom.work_duration == 25


def test_update_advances_and_plays_sound(pom, played):
    pom.update()
    assert pom.current_phase is Phase.SHORT_BREAK
    assert played == ["Alarm02.wav"]


def test_timer_end_triggers_next_phase(pom):
    pom.timer.set_time(1)
    pom.start()
    pom.timer.tick()
    assert pom.remaining_time == 0
    pom.timer.tick()
    assert pom.current_phase is Phase.SHORT_BREAK


def test_reset_pomodoro(pom):
    pom.next_phase()
    pom.reset_pomodoro()
    assert pom.current_phase is Phase.WORK
    assert pom.current_work_block == 0
    assert not pom.timer.is_running
    assert pom.timer.remaining_time == pom.work_duration * 60
    assert pom.phase_label == "Current phase: Work"