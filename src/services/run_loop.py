"""
RunLoop - Single-threaded FIFO task queue drained on the Qt event loop.

Map event handlers are not run from inside the widget's callback. They are
queued here and run together on the next pass of the Qt event loop, in the
order their events arrived. Work queued while a flush is running joins
that flush.
"""

from collections import deque
from dataclasses import dataclass
from typing import Any, Callable, Deque, Optional

from PyQt5.QtCore import QObject, QTimer, pyqtSignal

from ..events.logging import get_logger

logger = get_logger("run_loop")


@dataclass
class _Task:
    owner: Any
    fn: Callable[[Any], Any]
    args: Any


class RunLoop(QObject):
    """
    Explicit owner-scoped task queue.

    Signals:
        flushed(int): number of tasks run by a flush
        task_failed(object, object): (task owner, exception)
    """

    flushed = pyqtSignal(int)
    task_failed = pyqtSignal(object, object)

    def __init__(self, parent: Optional[QObject] = None, auto_flush: bool = True):
        """
        Initialize the run loop.

        Args:
            parent: Qt parent object
            auto_flush: Post a flush to the Qt event loop when work is queued.
                When False, the owner calls flush() itself.
        """
        super().__init__(parent)
        self._queue: Deque[_Task] = deque()
        self._auto_flush = auto_flush
        self._flushing = False
        self._flush_posted = False

    @property
    def is_flushing(self) -> bool:
        return self._flushing

    def pending_count(self, owner: Any = None) -> int:
        """Number of queued tasks, optionally only those for owner."""
        if owner is None:
            return len(self._queue)
        return sum(1 for task in self._queue if task.owner is owner)

    def schedule(self, owner: Any, fn: Callable[[Any], Any], args: Any) -> None:
        """Queue fn(args) to run after the current call stack unwinds."""
        self._queue.append(_Task(owner, fn, args))

        if self._auto_flush and not self._flushing and not self._flush_posted:
            self._flush_posted = True
            QTimer.singleShot(0, self.flush)

    def cancel(self, owner: Any) -> int:
        """Drop every queued task belonging to owner."""
        kept = deque(task for task in self._queue if task.owner is not owner)
        dropped = len(self._queue) - len(kept)
        self._queue = kept

        if dropped:
            logger.debug(f"Cancelled {dropped} pending task(s) for {owner!r}")
        return dropped

    def flush(self) -> int:
        """
        Run queued tasks in FIFO order until the queue is empty.

        A task that raises is logged and reported through task_failed;
        the remaining tasks still run.

        Returns:
            Number of tasks run
        """
        self._flush_posted = False
        if self._flushing:
            return 0

        self._flushing = True
        count = 0
        try:
            while self._queue:
                task = self._queue.popleft()
                count += 1
                try:
                    task.fn(task.args)
                except Exception as e:
                    logger.error(f"Scheduled task for {task.owner!r} failed: {e}", exc_info=True)
                    self.task_failed.emit(task.owner, e)
        finally:
            self._flushing = False

        if count:
            self.flushed.emit(count)
        return count
