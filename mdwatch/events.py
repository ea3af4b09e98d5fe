"""Event and request types for the watch pipeline.

Key classes:
- EventKind: Kinds of filesystem change the watcher reports.
- WatchEvent: A single change notification.
- ConversionRequest: Input/output pair derived from a write event.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

OUTPUT_SUFFIX = ".html"


class EventKind(str, Enum):
    """Kinds of filesystem change notifications."""

    CREATE = "create"
    WRITE = "write"
    REMOVE = "remove"
    RENAME = "rename"
    ERROR = "error"


@dataclass(frozen=True)
class WatchEvent:
    """A filesystem change notification.

    Attributes:
        kind: What happened.
        path: Affected path; ``None`` for error events.
        error: Description of a transport failure for error events.
        timestamp: Monotonic time the change was observed.
    """

    kind: EventKind
    path: Path | None = None
    error: str | None = None
    timestamp: float = field(default_factory=time.monotonic)

    @classmethod
    def write(cls, path: Path | str, timestamp: float | None = None) -> WatchEvent:
        if timestamp is None:
            return cls(EventKind.WRITE, Path(path))
        return cls(EventKind.WRITE, Path(path), timestamp=timestamp)

    @classmethod
    def failure(cls, message: str) -> WatchEvent:
        return cls(EventKind.ERROR, error=message)


@dataclass(frozen=True)
class ConversionRequest:
    """One Markdown file to convert and where its HTML goes.

    Attributes:
        input_path: Markdown source.
        output_path: Destination HTML file.
        template_path: Optional template to wrap the HTML in.
    """

    input_path: Path
    output_path: Path
    template_path: Path | None = None

    @classmethod
    def for_input(
        cls,
        input_path: Path,
        output_dir: Path,
        template_path: Path | None = None,
    ) -> ConversionRequest:
        """Build a request whose output is ``{output_dir}/{stem}.html``.

        Subdirectories of the input are not reproduced.
        """
        output_path = output_dir / f"{input_path.stem}{OUTPUT_SUFFIX}"
        return cls(input_path=input_path, output_path=output_path, template_path=template_path)
