import threading
import time

from dockterm.i18n.english import english_set
from dockterm.tasks import Task, TaskManager

WAIT = 5.0


def _wait_for_task(manager):
    deadline = time.monotonic() + WAIT
    while manager.current_task is None and time.monotonic() < deadline:
        time.sleep(0.005)
    return manager.current_task


def test_new_task_runs_function():
    manager = TaskManager()
    ran = threading.Event()
    manager.new_task(lambda cancelled: ran.set())
    assert ran.wait(WAIT)
    manager.close()


def test_new_task_stops_previous_task_first():
    manager = TaskManager()
    events = []
    first_started = threading.Event()
    second_started = threading.Event()

    def first(cancelled):
        first_started.set()
        cancelled.wait()
        events.append("first stopped")

    def second(cancelled):
        events.append("second started")
        second_started.set()
        cancelled.wait()

    manager.new_task(first)
    assert first_started.wait(WAIT)
    first_task = _wait_for_task(manager)
    assert first_task.stopped is False
    manager.new_task(second)
    assert second_started.wait(WAIT)
    assert first_task.stopped is True
    assert first_task.cancelled.is_set()
    assert first_task.finished.is_set()
    assert manager.current_task is not first_task
    assert events == ["first stopped", "second started"]
    manager.close()


def test_close_stops_running_task():
    manager = TaskManager()
    started = threading.Event()
    done = threading.Event()

    def work(cancelled):
        started.set()
        cancelled.wait()
        done.set()

    manager.new_task(work)
    assert started.wait(WAIT)
    manager.close()
    assert done.is_set()
    assert manager.current_task.stopped is True


def test_task_stop_is_idempotent():
    task = Task(lambda cancelled: cancelled.wait())
    task.start()
    task.stop()
    task.stop()
    assert task.stopped is True
    assert task.cancelled.is_set()
    assert task.finished.is_set()


def test_close_reports_unkillable_task(capsys):
    manager = TaskManager(tr=english_set())
    manager.close_timeout = 0.1
    release = threading.Event()
    started = threading.Event()

    def stubborn(cancelled):
        started.set()
        release.wait()

    manager.new_task(stubborn)
    assert started.wait(WAIT)
    manager.close()
    release.set()
    out = capsys.readouterr().out
    assert english_set().cannot_kill_child_error in out


def test_ticker_task_repeats_until_closed():
    manager = TaskManager()
    calls = []
    enough = threading.Event()

    def tick(cancelled, notify):
        calls.append(1)
        if len(calls) >= 3:
            enough.set()

    manager.new_ticker_task(0.01, None, tick)
    assert enough.wait(WAIT)
    task = _wait_for_task(manager)
    manager.close()
    assert task.stopped is True
    assert task.cancelled.is_set()
    assert task.finished.is_set()
    count = len(calls)
    time.sleep(0.05)
    assert len(calls) == count
    assert count >= 3


def test_ticker_task_calls_before_first():
    manager = TaskManager()
    order = []
    called = threading.Event()

    def tick(cancelled, notify):
        order.append("tick")
        called.set()

    manager.new_ticker_task(10, lambda cancelled: order.append("before"), tick)
    assert called.wait(WAIT)
    manager.close()
    assert order[:2] == ["before", "tick"]


def test_ticker_task_ends_when_notified():
    manager = TaskManager()
    calls = []
    called = threading.Event()

    def tick(cancelled, notify):
        calls.append(1)
        notify.set()
        called.set()

    manager.new_ticker_task(0.01, None, tick)
    assert called.wait(WAIT)
    task = _wait_for_task(manager)
    assert task.finished.wait(WAIT)
    assert len(calls) == 1
    assert not task.cancelled.is_set()