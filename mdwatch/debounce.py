"""Debouncing of filesystem change notifications.

Editors often emit several write notifications for one save. The Debouncer
keeps the latest event per path and only releases it once the path has been
quiet for the configured window.
"""

from __future__ import annotations

from pathlib import Path

from .events import WatchEvent

DEFAULT_DEBOUNCE_SECONDS = 1.0


class Debouncer:
    """Collapses bursts of events for the same path.

    Attributes:
        window: Quiet period in seconds before an event is released.
    """

    def __init__(self, window: float = DEFAULT_DEBOUNCE_SECONDS):
        if window < 0:
            raise ValueError("debounce window must not be negative")
        self.window = window
        # Insertion order of this dict is the release order.
        self._pending: dict[Path | None, tuple[WatchEvent, float]] = {}
        self._passthrough: list[WatchEvent] = []

    def __len__(self) -> int:
        return len(self._pending) + len(self._passthrough)

    def add(self, event: WatchEvent) -> None:
        """Record an event, replacing any pending event for the same path."""
        if event.path is None:
            self._passthrough.append(event)
            return
        self._pending.pop(event.path, None)
        self._pending[event.path] = (event, event.timestamp + self.window)

    def next_deadline(self) -> float | None:
        """Earliest time a pending event becomes ready, if any."""
        if self._passthrough:
            return float("-inf")
        if not self._pending:
            return None
        return min(deadline for _, deadline in self._pending.values())

    def ready(self, now: float) -> list[WatchEvent]:
        """Pop events whose quiet period has elapsed.

        Args:
            now: Current monotonic time.

        Returns:
            Released events in arrival order.
        """
        released = self._passthrough
        self._passthrough = []
        for path, (event, deadline) in list(self._pending.items()):
            if deadline <= now:
                del self._pending[path]
                released.append(event)
        return released

    def flush(self) -> list[WatchEvent]:
        """Pop every pending event regardless of its deadline."""
        released = self._passthrough + [event for event, _ in self._pending.values()]
        self._passthrough = []
        self._pending.clear()
        return released
