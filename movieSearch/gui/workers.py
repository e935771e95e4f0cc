"""
workers
~~~~~~~
`TaskScope` runs callables on a private `QThreadPool` and hands results
back to the thread that owns the scope (the GUI thread) over queued
signals. One scope per page; `cancel()` on teardown drops whatever is
still queued and silences callbacks of jobs already running.
"""
from __future__ import annotations
import itertools
from typing import Any, Callable, Dict, Optional, Tuple

from PySide6.QtCore import QCoreApplication, QObject, QRunnable, QThreadPool, Qt, Signal, Slot

from movieSearch.utils import log_debug

OnSuccess = Callable[[Any], None]
OnFailure = Callable[[BaseException], None]


class _TaskSignals(QObject):
    succeeded = Signal(int, object)
    failed    = Signal(int, object)


class _Task(QRunnable):
    def __init__(self, task_id: int, fn: Callable[[], Any], signals: _TaskSignals):
        super().__init__()
        self.setAutoDelete(True)
        self._task_id = task_id
        self._fn = fn
        self._signals = signals

    def run(self) -> None:
        try:
            result = self._fn()
        except Exception as exc:
            self._signals.failed.emit(self._task_id, exc)
        else:
            self._signals.succeeded.emit(self._task_id, result)


class TaskScope(QObject):
    def __init__(self, parent: QObject | None = None, name: str = "tasks"):
        super().__init__(parent)
        self.name = name
        self._pool = QThreadPool(self)
        self._signals = _TaskSignals(self)
        self._signals.succeeded.connect(self._on_succeeded, Qt.QueuedConnection)
        self._signals.failed.connect(self._on_failed, Qt.QueuedConnection)
        self._ids = itertools.count(1)
        self._pending: Dict[int, Tuple[OnSuccess, Optional[OnFailure]]] = {}
        self._cancelled = False

    # ------------------------------------------------------------------ api
    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def pending(self) -> int:
        return len(self._pending)

    def submit(
        self,
        fn: Callable[[], Any],
        on_success: OnSuccess,
        on_failure: OnFailure | None = None,
    ) -> int | None:
        """Queue *fn*; exactly one of the callbacks later runs on this thread."""
        if self._cancelled:
            log_debug(f"{self.name}: submit after cancel ignored")
            return None
        task_id = next(self._ids)
        self._pending[task_id] = (on_success, on_failure)
        self._pool.start(_Task(task_id, fn, self._signals))
        return task_id

    def cancel(self) -> None:
        if self._cancelled:
            return
        self._cancelled = True
        dropped = len(self._pending)
        self._pending.clear()
        self._pool.clear()
        if dropped:
            log_debug(f"{self.name}: cancelled with {dropped} task(s) outstanding")

    def wait_for_done(self, timeout_ms: int = -1) -> bool:
        """Block until the pool is idle, then deliver the queued results."""
        done = self._pool.waitForDone(timeout_ms)
        QCoreApplication.sendPostedEvents()
        QCoreApplication.processEvents()
        return done

    # ----------------------------------------------------------------- slots
    @Slot(int, object)
    def _on_succeeded(self, task_id: int, result: Any) -> None:
        callbacks = self._pending.pop(task_id, None)
        if callbacks is None or self._cancelled:
            return
        callbacks[0](result)

    @Slot(int, object)
    def _on_failed(self, task_id: int, exc: BaseException) -> None:
        callbacks = self._pending.pop(task_id, None)
        if callbacks is None or self._cancelled:
            return
        on_failure = callbacks[1]
        if on_failure is None:
            log_debug(f"{self.name}: task {task_id} failed: {exc!r}")
        else:
            on_failure(exc)
