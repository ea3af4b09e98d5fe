"""Protocol definitions for mdwatch.

The watch loop only depends on these interfaces, so it can be driven by the
real watchdog observer or by a synthetic event producer in tests.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterator
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from .events import WatchEvent


@runtime_checkable
class EventSource(Protocol):
    """Protocol for subscribing to change events for a directory."""

    @abstractmethod
    def start(self, directory: Path) -> None:
        """Begin observing a directory (non-recursively).

        Args:
            directory: Directory to watch.
        """
        ...

    @abstractmethod
    def stop(self) -> None:
        """Stop observing; ends the iterator returned by ``events``."""
        ...

    @abstractmethod
    def events(self) -> Iterator[WatchEvent]:
        """Yield debounced events until the source is stopped.

        Returns:
            Iterator of WatchEvent objects, one per logical change.
        """
        ...
