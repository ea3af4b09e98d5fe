"""Filesystem notification sources.

Key classes:
- ChannelEventSource: Queue-fed source that debounces what producers put in.
- WatchdogEventSource: Feeds the channel from a watchdog Observer.
- _ForwardingHandler: Translates watchdog events into WatchEvent objects.
"""

from __future__ import annotations

import logging
import queue
import time
from collections.abc import Callable, Iterator
from pathlib import Path

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .debounce import DEFAULT_DEBOUNCE_SECONDS, Debouncer
from .events import EventKind, WatchEvent

logger = logging.getLogger(__name__)

_STOP = object()

# Poll interval used to notice a dead observer while no events arrive.
_IDLE_POLL_SECONDS = 1.0

_WATCHDOG_KINDS = {
    "modified": EventKind.WRITE,
    "created": EventKind.CREATE,
    "deleted": EventKind.REMOVE,
    "moved": EventKind.RENAME,
}


class ChannelEventSource:
    """Single-producer, single-consumer event channel with debouncing.

    Producers call ``put`` from any thread; the consumer iterates ``events``.

    Attributes:
        debouncer: Aggregation stage between the queue and the consumer.
    """

    def __init__(
        self,
        debounce: float = DEFAULT_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.debouncer = Debouncer(debounce)
        self._clock = clock
        self._queue: queue.Queue = queue.Queue()
        self._abandoned = False
        self.directory: Path | None = None

    def start(self, directory: Path) -> None:
        self.directory = Path(directory)

    def stop(self) -> None:
        # A stream that was closed early needs no stop marker; a leftover one
        # would end the next stream before it starts.
        if self._abandoned:
            self._abandoned = False
            return
        self._queue.put(_STOP)

    def put(self, event: WatchEvent) -> None:
        self._queue.put(event)

    def _poll(self) -> None:
        """Hook run whenever the channel wakes up without an event."""

    def events(self) -> Iterator[WatchEvent]:
        """Yield debounced events until ``stop`` is called.

        Events still pending when the source stops are released before the
        iterator ends.
        """
        stopped = False
        try:
            while True:
                deadline = self.debouncer.next_deadline()
                if deadline is None:
                    timeout = _IDLE_POLL_SECONDS
                else:
                    timeout = min(max(deadline - self._clock(), 0.0), _IDLE_POLL_SECONDS)
                try:
                    item = self._queue.get(timeout=timeout)
                except queue.Empty:
                    self._poll()
                    item = None
                stopped = self._collect(item)
                if stopped:
                    yield from self.debouncer.flush()
                    return
                yield from self.debouncer.ready(self._clock())
        finally:
            self._abandoned = not stopped

    def _collect(self, item) -> bool:
        """Feed ``item`` and everything already queued behind it to the debouncer.

        Returns:
            True if the stop marker was reached.
        """
        while item is not None:
            if item is _STOP:
                return True
            self.debouncer.add(item)
            try:
                item = self._queue.get_nowait()
            except queue.Empty:
                item = None
        return False


class _ForwardingHandler(FileSystemEventHandler):
    def __init__(self, source: ChannelEventSource, clock: Callable[[], float]):
        super().__init__()
        self.source = source
        self.clock = clock

    def on_any_event(self, event: FileSystemEvent):
        if event.is_directory:
            return
        kind = _WATCHDOG_KINDS.get(event.event_type)
        if kind is None:
            return
        now = self.clock()
        self.source.put(WatchEvent(kind, _as_path(event.src_path), timestamp=now))
        if kind is EventKind.RENAME:
            # Editors save atomically by renaming a temporary file onto the
            # target; inotify reports only the move, so treat it as a write.
            dest = _as_path(getattr(event, "dest_path", "") or "")
            directory = self.source.directory
            if dest.suffix != ".md":
                return
            if directory is None or dest.parent.resolve() == directory.resolve():
                self.source.put(WatchEvent(EventKind.WRITE, dest, timestamp=now))


def _as_path(value: str | bytes) -> Path:
    if isinstance(value, bytes):
        value = value.decode()
    return Path(value)


class WatchdogEventSource(ChannelEventSource):
    """Event source backed by a watchdog Observer on one directory.

    The directory is watched non-recursively. If the observer thread dies an
    error event is emitted and a fresh observer is scheduled.
    """

    def __init__(
        self,
        debounce: float = DEFAULT_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__(debounce=debounce, clock=clock)
        self._observer: Observer | None = None
        self._stopping = False

    def start(self, directory: Path) -> None:
        super().start(directory)
        self._stopping = False
        self._start_observer()

    def _start_observer(self) -> None:
        handler = _ForwardingHandler(self, self._clock)
        observer = Observer()
        observer.schedule(handler, str(self.directory), recursive=False)
        observer.daemon = True
        observer.start()
        self._observer = observer

    def stop(self) -> None:
        self._stopping = True
        if self._observer:
            self._observer.stop()
            if self._observer.is_alive():
                self._observer.join()
            self._observer = None
        super().stop()

    def _poll(self) -> None:
        observer = self._observer
        if self._stopping or observer is None or observer.is_alive():
            return
        self.put(WatchEvent.failure(f"file watcher for {self.directory} stopped unexpectedly"))
        self._observer = None
        try:
            self._start_observer()
        except OSError as exc:
            self.put(WatchEvent.failure(f"cannot restart file watcher: {exc}"))
