import datetime
import json

import pytest

from impomo.extended import ExtendedPomodoro
from impomo.notifications import Notifications
from impomo.pomodorolist import PomodoroList
from impomo.settings import AppSettings
from impomo.statistics import Statistics
from impomo.tasks import PomodoroTask


@pytest.fixture
def task_list(tmp_path):
    with PomodoroList(tmp_path / "pomodoro.db") as tl:
        yield tl


@pytest.fixture
def stats(tmp_path):
    with Statistics(tmp_path / "stats.db") as s:
        yield s


@pytest.fixture
def played():
    return []


@pytest.fixture
def make_session(task_list, stats, played, tmp_path):
    def build():
        notifications = Notifications(AppSettings(), player=played.append)
        return ExtendedPomodoro(
            task_list, stats, notifications, state_path=tmp_path / "state.json"
        )

    return build


def test_empty_list_label(make_session):
    session = make_session()
    assert session.current_task_label == "No tasks on the list"
    session.start()
    assert session.was_started is False


def test_constructor_uses_first_task(task_list, make_session):
    task_list.add_task(PomodoroTask("focus", 20))
    session = make_session()
    assert session.current_task_label == "Current task: focus"
    assert session.timer.remaining_time == 20 * 60
    assert task_list.parent is session


def test_start_marks_session_started(task_list, make_session):
    task_list.add_task(PomodoroTask("focus", 20))
    session = make_session()
    session.start()
    assert session.was_started is True
    assert session.timer.is_running is True


def test_update_records_stats_plays_sound_and_advances(task_list, make_session, stats, played):
    a, b = PomodoroTask("a", 20), PomodoroTask("b", 15)
    task_list.add_task(a)
    task_list.add_task(b)
    session = make_session()
    session.update()
    assert stats.daily_time_impomo(datetime.date.today()) == 20
    assert stats.daily_tasks_number(datetime.date.today()) == 1
    assert played == ["Alarm02.wav"]
    assert a.completed is True
    assert session.current == 1
    assert session.current_task_label == "Current task: b"
    assert session.timer.remaining_time == 15 * 60
    assert session.timer.is_running is True


def test_timer_ticks_drive_next_task(task_list, make_session):
    task_list.add_task(PomodoroTask("a", 1))
    task_list.add_task(PomodoroTask("b", 2))
    session = make_session()
    session.start()
    for _ in range(61):
        session.timer.tick()
    assert session.current == 1
    assert session.tasks_finished == 1


def test_finishing_last_task(task_list, make_session):
    task = PomodoroTask("only", 10)
    task_list.add_task(task)
    session = make_session()
    session.start()
    session.next_phase()
    assert session.current_task_label == "All tasks finished"
    assert session.timer.remaining_time == 0
    assert session.was_started is False
    assert session.timer.is_running is False
    session.next_phase()
    assert session.tasks_finished == 1


def test_adding_after_all_finished_makes_new_task_current(task_list, make_session):
    task_list.add_task(PomodoroTask("a", 10))
    session = make_session()
    session.next_phase()
    task_list.add_task(PomodoroTask("b", 5))
    assert session.current == 1
    assert session.current_task_label == "Current task: b"
    assert session.timer.remaining_time == 5 * 60


def test_session_state_round_trip(task_list, make_session, tmp_path):
    task_list.add_task(PomodoroTask("a", 10))
    task_list.add_task(PomodoroTask("b", 5))
    session = make_session()
    session.next_phase()
    session.update_time(123)

    saved = json.loads((tmp_path / "state.json").read_text())
    assert saved == {"current": 1, "tasksFinished": 1, "savedTime": 123}

    restored = make_session()
    restored.load_session_state()
    assert restored.current == 1
    assert restored.tasks_finished == 1
    assert restored.remaining_time == 123


def test_load_session_state_without_file(task_list, make_session):
    task_list.add_task(PomodoroTask("a", 10))
    session = make_session()
    session.load_session_state()
    assert session.current == 0
    assert session.tasks_finished == 0
    assert session.remaining_time == 10 * 60


def test_load_session_state_ignores_non_object(make_session, tmp_path):
    (tmp_path / "state.json").write_text("[1, 2]")
    session = make_session()
    session.tasks_finished = 7
    session.load_session_state()
    assert session.tasks_finished == 7


def test_clear_all_tasks(task_list, make_session):
    task_list.add_task(PomodoroTask("a", 10))
    task_list.add_task(PomodoroTask("b", 5))
    session = make_session()
    session.start()
    session.clear_all_tasks()
    assert len(task_list) == 0
    assert session.current_task_label == "No tasks on the list"
    assert session.timer.is_running is False
    assert session.was_started is False
    task_list.load()
    assert task_list.tasks == []


def test_load_from_database_all_finished(task_list, make_session):
    task_list.add_task(PomodoroTask("a", 10))
    task_list.add_task(PomodoroTask("b", 5))
    session = make_session()
    session.next_phase()
    session.next_phase()
    session.load_from_database()
    assert session.current == 1
    assert session.current_task_label == "All tasks finished"
    assert session.timer.remaining_time == 0


def test_load_from_database_restores_remaining_time(task_list, make_session):
    task_list.add_task(PomodoroTask("a", 10))
    task_list.add_task(PomodoroTask("b", 5))
    session = make_session()
    session.next_phase()
    session.update_time(42)
    session.load_from_database()
    assert session.timer.start_time == 5 * 60
    assert session.timer.remaining_time == 42
    assert session.current_task_label == "Current task: b"


def test_load_from_database_empty(make_session):
    session = make_session()
    session.load_from_database()
    assert session.current_task_label == "No tasks on the list"
    assert session.timer.remaining_time == 0