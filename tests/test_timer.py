from impomo.timer import Timer, TimerObserver, format_time


class Recorder:
    def __init__(self):
        self.times = []
        self.finished = 0

    def update(self):
        self.finished += 1

    def update_time(self, time):
        self.times.append(time)


def test_format_time_zero():
    assert format_time(0) == "00:00"


def test_format_time_minutes_and_seconds():
    assert format_time(61) == "01:01"
    assert format_time(1500) == "25:00"


def test_observer_receives_countdown_and_finish():
    recorder = Recorder()
    assert isinstance(recorder, TimerObserver)
    timer = Timer(recorder)
    timer.set_time(1)
    timer.start()
    timer.tick()
    timer.tick()
    assert recorder.times == [0]
    assert recorder.finished == 1


def test_set_time_sets_both_values():
    timer = Timer()
    timer.set_time(90)
    assert (timer.start_time, timer.remaining_time) == (90, 90)
    assert timer.label == format_time(90)


def test_start_without_time_does_nothing():
    timer = Timer()
    calls = []
    timer.add_started_listener(lambda: calls.append(1))
    timer.start()
    assert timer.is_running is False
    assert calls == []


def test_start_notifies_each_time():
    timer = Timer()
    timer.set_time(10)
    calls = []
    timer.add_started_listener(lambda: calls.append(1))
    timer.start()
    timer.start()
    assert timer.is_running is True
    assert len(calls) == 2


def test_tick_counts_down_and_reports():
    recorder = Recorder()
    timer = Timer(recorder)
    timer.set_time(3)
    timer.start()
    timer.tick()
    timer.tick()
    assert timer.remaining_time == 1
    assert recorder.times == [2, 1]
    assert recorder.finished == 0


def test_tick_at_zero_finishes():
    recorder = Recorder()
    timer = Timer(recorder)
    timer.set_time(1)
    timer.start()
    timer.tick()
    timer.tick()
    assert recorder.finished == 1
    assert timer.is_running is False


def test_tick_ignored_when_paused():
    recorder = Recorder()
    timer = Timer(recorder)
    timer.set_time(5)
    timer.start()
    timer.pause()
    timer.tick()
    assert timer.remaining_time == 5
    assert recorder.times == []


def test_reset_restores_start_time():
    timer = Timer()
    timer.set_time(5)
    timer.start()
    timer.tick()
    timer.reset()
    assert timer.remaining_time == 5
    assert timer.is_running is False


def test_tick_without_subscriber():
    timer = Timer()
    timer.set_time(2)
    timer.start()
    timer.tick()
    assert timer.remaining_time == 1