"""Outstanding-branch accounting and the move result stream.

Search branches run as independent tasks. Each launch is reported to a
:class:`BranchCounter` as a positive delta and each finished branch as
``-1``. A monitor thread sums the deltas and closes the
:class:`MoveStream` when the total returns to zero.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import Generic, Iterator, TypeVar

log = logging.getLogger("movegen.search")

T = TypeVar("T")

_CLOSED = object()


class MoveStream(Generic[T]):
    """Unbounded, thread-safe stream closed exactly once."""

    def __init__(self):
        self._queue: queue.Queue = queue.Queue()
        self._closed = threading.Event()

    def send(self, item: T) -> None:
        self._queue.put(item)

    def close(self) -> None:
        if not self._closed.is_set():
            self._closed.set()
            self._queue.put(_CLOSED)

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def __iter__(self) -> Iterator[T]:
        while True:
            item = self._queue.get()
            if item is _CLOSED:
                return
            yield item


class BranchCounter:
    """Net launches minus completions, watched by a monitor thread."""

    def __init__(self, stream: MoveStream):
        self._deltas: queue.Queue[int] = queue.Queue()
        self._stream = stream
        self.launched_total = 0
        self._monitor = threading.Thread(
            target=self._watch, name="movegen-monitor", daemon=True,
        )

    def start(self) -> None:
        """Start the monitor. Launch at least one branch before calling."""
        self._monitor.start()

    def launched(self, n: int = 1) -> None:
        self._deltas.put(n)

    def finished(self) -> None:
        self._deltas.put(-1)

    def join(self, timeout: float | None = None) -> None:
        self._monitor.join(timeout)

    def _watch(self) -> None:
        outstanding = 0
        while True:
            delta = self._deltas.get()
            if delta > 0:
                self.launched_total += delta
            outstanding += delta
            if outstanding == 0:
                log.debug("All %d branches finished", self.launched_total)
                self._stream.close()
                return
