"""Background tasks that replace one another, one at a time."""

from __future__ import annotations

import logging
import threading
from datetime import timedelta
from typing import Callable, Optional, Union

from dockterm.i18n.english import TranslationSet, english_set

_default_log = logging.getLogger(__name__)

TaskFunc = Callable[[threading.Event], None]
TickerFunc = Callable[[threading.Event, threading.Event], None]


class Task:
    """A function running on its own thread, stoppable through its cancel event."""

    def __init__(self, f: TaskFunc, log=None) -> None:
        self.f = f
        self.log = log or _default_log
        self.cancelled = threading.Event()
        self.finished = threading.Event()
        self.stopped = False
        self._stop_lock = threading.Lock()

    def _run(self) -> None:
        try:
            self.f(self.cancelled)
        finally:
            self.log.info("returned from function, closing notifyStopped")
            self.finished.set()

    def start(self) -> None:
        """Run the function on a new daemon thread."""
        threading.Thread(target=self._run, daemon=True).start()

    def stop(self) -> None:
        """Signal cancellation and block until the function has returned."""
        with self._stop_lock:
            if self.stopped:
                return
            self.cancelled.set()
            self.log.info("closed stop channel, waiting for notifyStopped message")
            self.finished.wait()
            self.log.info("received notifystopped message")
            self.stopped = True


class TaskManager:
    """Runs at most one task at a time; a new task stops the one before it."""

    close_timeout: float = 3.0

    def __init__(self, log=None, tr: Optional[TranslationSet] = None) -> None:
        self.log = log or _default_log
        self.tr = tr if tr is not None else english_set()
        self.current_task: Optional[Task] = None
        self._waiting_lock = threading.Lock()
        self._task_id_lock = threading.Lock()
        self._new_task_id = 0

    def close(self) -> None:
        """Stop the current task, warning if it does not stop in time."""
        task = self.current_task
        if task is None:
            return
        done = threading.Event()

        def _stop() -> None:
            task.stop()
            done.set()

        threading.Thread(target=_stop, daemon=True).start()
        if not done.wait(self.close_timeout):
            print(self.tr.cannot_kill_child_error)

    def new_task(self, f: TaskFunc) -> None:
        """Schedule ``f`` to run once the current task has stopped.

        ``f`` receives an event that is set when it should return. If another
        task is scheduled while this one waits its turn, this one is dropped.
        """
        threading.Thread(target=self._switch_to, args=(f,), daemon=True).start()

    def _switch_to(self, f: TaskFunc) -> None:
        with self._task_id_lock:
            self._new_task_id += 1
            task_id = self._new_task_id

        with self._waiting_lock:
            with self._task_id_lock:
                if task_id < self._new_task_id:
                    return

            if self.current_task is not None:
                self.log.info("asking task to stop")
                self.current_task.stop()
                self.log.info("task stopped")

            task = Task(f, self.log)
            self.current_task = task
            task.start()

    def new_ticker_task(
        self,
        duration: Union[float, timedelta],
        before: Optional[TaskFunc],
        f: TickerFunc,
    ) -> None:
        """Schedule a task calling ``f`` now and then once per ``duration``.

        ``before`` runs first, if given. ``f`` receives the cancel event and a
        second event it may set to end the repetition.
        """
        interval = (
            duration.total_seconds() if isinstance(duration, timedelta) else float(duration)
        )
        notify_stopped = threading.Event()

        def _ticker(cancelled: threading.Event) -> None:
            if before is not None:
                before(cancelled)
            f(cancelled, notify_stopped)
            while True:
                if notify_stopped.is_set():
                    self.log.info("exiting ticker task due to notifyStopped channel")
                    return
                if cancelled.wait(interval):
                    self.log.info("exiting ticker task due to stopped channel")
                    return
                if notify_stopped.is_set():
                    self.log.info("exiting ticker task due to notifyStopped channel")
                    return
                self.log.info("running ticker task again")
                f(cancelled, notify_stopped)

        self.new_task(_ticker)